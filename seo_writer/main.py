"""
SEO Page Writer - command line entry point.
Serves the HTTP API or runs a single generation from a JSON request file.
"""

import os
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from . import config
from .clients import default_providers
from .errors import GenerationError
from .generator import generate_seo_content
from .main_schemas import GenerationRequest

# Set up logging
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# Environment fallback for the CLI only; the API always takes the key from the request
API_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


def run_server(port: Optional[int] = None):
    """Run the API with uvicorn."""
    import uvicorn

    port = port or config.PORT
    logger.info(f"🚀 Starting SEO Page Writer API on {config.HOST}:{port}")
    uvicorn.run("seo_writer.app:app", host=config.HOST, port=port, log_level=config.LOG_LEVEL.lower())


def load_request(path: str) -> GenerationRequest:
    """Read a request JSON file, filling the API key from the environment when absent."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    request = GenerationRequest.model_validate(data)
    if not request.api_key:
        env_name = API_KEY_ENV.get(request.provider)
        if env_name and os.environ.get(env_name):
            request.api_key = os.environ[env_name]
    return request


def save_outputs(result: Dict, output_dir: str) -> Dict[str, str]:
    """Write the page HTML and FAQ schema next to each other."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    html_path = out / "seo-page.html"
    schema_path = out / "schema.jsonld"
    html_path.write_text(result["html"], encoding='utf-8')
    schema_path.write_text(result["schemaJsonLd"], encoding='utf-8')
    logger.info(f"💾 Saved {html_path} and {schema_path}")
    return {"html": str(html_path), "schema": str(schema_path)}


def run_generation(request_path: str, output_dir: Optional[str] = None) -> int:
    """Generate one page and print the result JSON. Returns the process exit code."""
    try:
        request = load_request(request_path)
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"❌ Could not read request file {request_path}: {e}")
        return 2

    try:
        result = generate_seo_content(request, providers=default_providers())
    except GenerationError as e:
        logger.error(f"❌ Generation failed ({e.status_code}): {e.message}")
        print(json.dumps(e.to_dict(), indent=2, ensure_ascii=False))
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    if output_dir:
        save_outputs(result, output_dir)
    return 0


def show_models():
    for tag, adapter in default_providers().items():
        print(f"{tag} (default: {adapter.default_model})")
        for option in adapter.suggested_models:
            print(f"  {option['label']}")


def show_help():
    """Display usage information."""
    help_text = """
SEO Page Writer - Usage Guide

Commands:
  python main.py                              Serve the API (default)
  python main.py serve [PORT]                 Serve the API on PORT (default: $PORT or 8000)
  python main.py generate REQUEST.json [DIR]  Generate one page; optionally save seo-page.html and schema.jsonld to DIR
  python main.py models                       List suggested models per provider
  python main.py help                         Show this help message

Request file (camelCase keys, same as POST /api/generate):
  {"provider": "openai", "model": "", "businessName": "Example Repair Co.",
   "service": "Phone Screen Repair", "city": "Sampletown, CA",
   "targetAudience": "busy students", "primaryKeyword": "phone screen repair sampletown",
   "secondaryKeywords": "same-day screen repair, cracked screen fix",
   "tone": "friendly, clear, professional", "cta": "Get a free quote"}

Environment Variables (Optional):
  HOST, PORT, LOG_LEVEL, ALLOWED_ORIGINS
  OPENAI_BASE_URL           Base URL for OpenAI-compatible APIs
  OPENAI_DEFAULT_MODEL      Default: gpt-4.1-mini
  GEMINI_DEFAULT_MODEL      Default: gemini-2.5-flash
  OPENAI_API_KEY / GEMINI_API_KEY   Used by 'generate' when the request file has no apiKey
"""
    print(help_text)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    command = argv[0].lower() if argv else "serve"

    if command in ["help", "-h", "--help"]:
        show_help()
    elif command == "serve":
        try:
            port = int(argv[1]) if len(argv) > 1 else None
        except ValueError:
            logger.error(f"Invalid port: {argv[1]}")
            show_help()
            return 2
        run_server(port)
    elif command == "generate":
        if len(argv) < 2:
            show_help()
            return 2
        return run_generation(argv[1], argv[2] if len(argv) > 2 else None)
    elif command == "models":
        show_models()
    else:
        logger.error(f"Unknown command: {command}")
        show_help()
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
