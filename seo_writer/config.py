"""Environment configuration. Values are read once at import time."""

import os
from dotenv import load_dotenv

load_dotenv()

# --- SERVER ---
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
ALLOWED_ORIGINS = [o.strip() for o in os.environ.get("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

# --- PROVIDERS ---
# Optional gateway for OpenAI-compatible APIs
OPENAI_BASE_URL = os.environ.get("OPENAI_BASE_URL") or None
OPENAI_DEFAULT_MODEL = os.environ.get("OPENAI_DEFAULT_MODEL", "gpt-4.1-mini")
GEMINI_DEFAULT_MODEL = os.environ.get("GEMINI_DEFAULT_MODEL", "gemini-2.5-flash")
