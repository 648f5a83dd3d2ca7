"""
SEO System for the SEO Page Writer.

This module provides:
- Secondary keyword normalization
- The landing-page prompt sent to the model
- Length checks on the generated meta fields
"""

import logging
from typing import List

from .main_schemas import GenerationRequest, PromptContext, SeoChecks, SeoScore

logger = logging.getLogger(__name__)

# Accepted ranges are wider than the targets the prompt asks for (50-60 / 140-160)
TITLE_LENGTH_RANGE = (30, 60)
DESCRIPTION_LENGTH_RANGE = (120, 160)
H1_MAX_LENGTH = 70


def split_keywords(raw: str) -> List[str]:
    """Split a comma-delimited keyword string, trimming and dropping empty entries."""
    return [kw.strip() for kw in str(raw).split(",") if kw.strip()]


class SEOPromptBuilder:
    """Builds the prompt for a local-business landing page."""

    def build_context(self, request: GenerationRequest) -> PromptContext:
        return PromptContext(
            business_name=request.business_name,
            service=request.service,
            city=request.city,
            target_audience=request.target_audience,
            primary_keyword=request.primary_keyword,
            secondary=split_keywords(request.secondary_keywords),
            tone=request.tone,
            cta=request.cta,
        )

    def build_page_prompt(self, context: PromptContext) -> str:
        """
        Build the JSON-only instruction prompt for a landing page.

        Args:
            context: Normalized business context

        Returns:
            Prompt string
        """
        secondary = ", ".join(context.secondary)

        prompt = f"""
You are an SEO copywriter.

Return ONLY valid JSON. No markdown. No backticks. No explanation.
Return JSON with exactly these keys:
metaTitle, metaDescription, html, schemaJsonLd

Rules:
- metaTitle: 50–60 characters
- metaDescription: 140–160 characters
- html: clean HTML only (no markdown), include H1, multiple H2 sections, an FAQ section with 3 H3 Q&As, and a CTA section
- schemaJsonLd: JSON-LD FAQPage schema matching the FAQ

Business: {context.business_name}
Service: {context.service}
City: {context.city}
Audience: {context.target_audience}
Primary keyword: {context.primary_keyword}
Secondary keywords: {secondary}
Tone: {context.tone}
CTA: {context.cta}
"""
        return prompt.strip()


def build_h1(service: str, city: str) -> str:
    return f"{service} in {city}"


def score_seo(meta_title: str, meta_description: str, h1: str) -> SeoScore:
    """Length checks for the meta title, meta description and H1."""
    title_length = len(meta_title)
    description_length = len(meta_description)

    checks = SeoChecks(
        title_ok=TITLE_LENGTH_RANGE[0] <= title_length <= TITLE_LENGTH_RANGE[1],
        desc_ok=DESCRIPTION_LENGTH_RANGE[0] <= description_length <= DESCRIPTION_LENGTH_RANGE[1],
        h1_ok=0 < len(h1) <= H1_MAX_LENGTH,
    )
    return SeoScore(
        title_length=title_length,
        description_length=description_length,
        checks=checks,
    )
