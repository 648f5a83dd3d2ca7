"""SEO Page Writer: landing-page copy, meta tags and FAQ schema from OpenAI or Gemini."""

__version__ = "1.0.0"
