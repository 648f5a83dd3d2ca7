import logging
from typing import Any, Optional
from google import genai

from .. import config

logger = logging.getLogger(__name__)


class GeminiClient:
    """Text generation through the Google GenAI SDK (API key auth).

    A new ``genai.Client`` is built for every call so a caller's key is
    never kept between requests.
    """

    name = "gemini"
    suggested_models = [
        {"value": "gemini-2.5-flash", "label": "gemini-2.5-flash (fast)"},
        {"value": "gemini-2.5-pro", "label": "gemini-2.5-pro (strong)"},
    ]

    def __init__(self, default_model: Optional[str] = None):
        self.default_model = default_model or config.GEMINI_DEFAULT_MODEL

    def generate(self, prompt: str, model: str, api_key: str) -> str:
        """Generate raw text for ``prompt``. SDK errors propagate unchanged."""
        model = model or self.default_model
        logger.info(f"Calling Gemini API (Model: {model})")

        client = genai.Client(api_key=api_key)
        response = client.models.generate_content(
            model=model,
            contents=prompt,
        )

        text = getattr(response, "text", None)
        if not text:
            text = self._candidate_text(response)
        if not text:
            logger.warning(f"Gemini returned no text (Model: {model})")
            return "{}"
        return text

    @staticmethod
    def _candidate_text(response: Any) -> Optional[str]:
        """Join the text parts of the first candidate."""
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return None
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        return "".join(part.text for part in parts if getattr(part, "text", None))
