"""
Provider adapters. Each one turns a prompt into raw model text.
"""

from typing import Dict, List, Protocol

import httpx
import openai
from google.genai import errors as genai_errors

from .gemini import GeminiClient
from .openai_client import OpenAIClient


class TextGenerator(Protocol):
    name: str
    default_model: str
    suggested_models: List[Dict[str, str]]

    def generate(self, prompt: str, model: str, api_key: str) -> str:
        """Return raw model text. Credentials are passed on every call."""
        ...


# SDK failures (network, auth, quota) the handler reports as a 502
TRANSPORT_ERRORS = (openai.OpenAIError, genai_errors.APIError, httpx.HTTPError)


def default_providers() -> Dict[str, TextGenerator]:
    """Provider registry keyed by the request's provider tag. First entry is the default."""
    return {
        "openai": OpenAIClient(),
        "gemini": GeminiClient(),
    }
