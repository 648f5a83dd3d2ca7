"""
Utility functions for the SEO Page Writer project.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


class ParseRecoveryExhausted(ValueError):
    """Raised when neither the full text nor its brace slice is valid JSON."""


def safe_json_parse(text: str) -> Any:
    """
    Parse model output as JSON, recovering from prose or code fences that
    some models wrap around the object.

    Strategy:
    - parse the whole text
    - otherwise parse the slice from the first '{' to the last '}'
    - no braces at all → empty dict

    Examples:
        '{"metaTitle": "X"}'                           → {'metaTitle': 'X'}
        'Here is your JSON: {"metaTitle":"X"} Thanks!' → {'metaTitle': 'X'}
        'no json here'                                 → {}

    The slice is a heuristic, not a JSON repair: a '}' inside a string
    followed by prose containing '{' can still produce a bad slice.

    Args:
        text: Raw text returned by the provider.

    Returns:
        The decoded value (usually a dict).

    Raises:
        ParseRecoveryExhausted: if the brace slice is not valid JSON either.
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        pass

    text = text or ""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1:
        logger.warning("Model output contains no JSON object")
        return {}

    try:
        return json.loads(text[start:end + 1])
    except ValueError as e:
        raise ParseRecoveryExhausted(f"Could not recover JSON from model output: {e}") from e
