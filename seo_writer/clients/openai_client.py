import logging
from typing import Optional
from openai import OpenAI

from .. import config

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7


class OpenAIClient:
    """Chat-completion text generation for OpenAI and OpenAI-compatible APIs."""

    name = "openai"
    suggested_models = [
        {"value": "gpt-4.1-mini", "label": "gpt-4.1-mini (fast/cheap)"},
        {"value": "gpt-4o-mini", "label": "gpt-4o-mini (multimodal)"},
    ]

    def __init__(self, default_model: Optional[str] = None, base_url: Optional[str] = None):
        self.default_model = default_model or config.OPENAI_DEFAULT_MODEL
        self.base_url = base_url or config.OPENAI_BASE_URL

    def generate(self, prompt: str, model: str, api_key: str) -> str:
        """Send ``prompt`` as a single user message and return the first choice's content."""
        model = model or self.default_model
        logger.info(f"Calling OpenAI API (Model: {model})")

        client = OpenAI(api_key=api_key, base_url=self.base_url)
        completion = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=TEMPERATURE,
        )

        if not completion.choices:
            logger.warning(f"OpenAI returned no choices (Model: {model})")
            return "{}"
        content = completion.choices[0].message.content
        return content if content is not None else "{}"
