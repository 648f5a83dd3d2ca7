"""
Errors raised while generating a page, each carrying the HTTP status the API answers with.
"""

from typing import Any, Dict


class GenerationError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidRequestError(GenerationError):
    """Client-side problem, detected before any provider call."""

    status_code = 400


class MissingCredentialError(InvalidRequestError):
    def __init__(self):
        super().__init__("Missing API key. Paste your API key in the page first.")


class UnknownProviderError(InvalidRequestError):
    def __init__(self):
        super().__init__("Unknown provider")


class UpstreamContentError(GenerationError):
    """The provider answered, but the answer lacks the required fields."""

    status_code = 502

    def __init__(self, raw: Any = None,
                 message: str = "Model did not return valid JSON fields. Try again or switch model/provider."):
        super().__init__(message)
        self.raw = raw

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "raw": self.raw}


class UpstreamTransportError(GenerationError):
    """The provider call itself failed (network, auth, quota)."""

    status_code = 502

    def __init__(self):
        super().__init__("Provider request failed. Check your API key and model, or try again later.")
