"""
Landing-page generation: prompt → provider → JSON recovery → validation → score.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from .clients import TRANSPORT_ERRORS, TextGenerator, default_providers
from .errors import (
    MissingCredentialError,
    UnknownProviderError,
    UpstreamContentError,
    UpstreamTransportError,
)
from .main_schemas import GenerationRequest
from .seo_system import SEOPromptBuilder, build_h1, score_seo
from .utils import ParseRecoveryExhausted, safe_json_parse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("metaTitle", "metaDescription", "html", "schemaJsonLd")


def generate_seo_content(request: GenerationRequest,
                         providers: Optional[Mapping[str, TextGenerator]] = None,
                         prompt_builder: Optional[SEOPromptBuilder] = None) -> Dict[str, Any]:
    """
    Generate the SEO bundle for one request.

    Args:
        request: Business context, provider tag and credential
        providers: Adapter registry keyed by provider tag (defaults to the built-in one)
        prompt_builder: Prompt builder override

    Returns:
        The model's fields (schemaJsonLd as a string) plus ``seoScore``

    Raises:
        MissingCredentialError, UnknownProviderError: 400, before any provider call
        UpstreamContentError: 502, model output lacks the required fields
        UpstreamTransportError: 502, the provider call failed
    """
    if not request.api_key:
        raise MissingCredentialError()

    providers = default_providers() if providers is None else providers
    prompt_builder = prompt_builder or SEOPromptBuilder()

    context = prompt_builder.build_context(request)
    prompt = prompt_builder.build_page_prompt(context)

    adapter = providers.get(request.provider)
    if adapter is None:
        logger.warning(f"Rejected unknown provider: {request.provider!r}")
        raise UnknownProviderError()

    model = request.model or adapter.default_model
    try:
        text = adapter.generate(prompt, model, request.api_key)
    except TRANSPORT_ERRORS as e:
        logger.error(f"Provider call failed ({request.provider}, {model}): {type(e).__name__}")
        raise UpstreamTransportError() from e

    try:
        parsed = safe_json_parse(text)
    except ParseRecoveryExhausted as e:
        logger.warning(f"Unparseable output from {request.provider} ({model}): {e}")
        raise UpstreamContentError(raw=None) from e

    missing = [f for f in REQUIRED_FIELDS if not isinstance(parsed, dict) or not parsed.get(f)]
    if missing:
        logger.warning(f"Model output missing fields {missing} ({request.provider}, {model})")
        raise UpstreamContentError(raw=parsed)

    if not isinstance(parsed["schemaJsonLd"], str):
        parsed["schemaJsonLd"] = json.dumps(parsed["schemaJsonLd"], indent=2, ensure_ascii=False)

    seo_score = score_seo(
        str(parsed["metaTitle"]),
        str(parsed["metaDescription"]),
        build_h1(request.service, request.city),
    )
    logger.info(
        f"✅ Page generated with {request.provider} ({model}). "
        f"Title: {seo_score.title_length} chars, description: {seo_score.description_length} chars"
    )

    return {**parsed, "seoScore": seo_score.model_dump(by_alias=True)}
