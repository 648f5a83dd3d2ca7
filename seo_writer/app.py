"""
HTTP API for the SEO Page Writer.

POST /api/generate  business context → meta title, description, HTML, FAQ schema, score
GET  /api/models    suggested models per provider
GET  /health        liveness
"""

import logging
from typing import Dict

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .clients import TextGenerator, default_providers
from .errors import GenerationError
from .generator import generate_seo_content
from .main_schemas import ErrorResponse, GenerationRequest

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Page Writer API",
    version="1.0.0",
    description="Local landing-page copy, meta tags and FAQ schema from an LLM provider",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

_providers = default_providers()


def get_providers() -> Dict[str, TextGenerator]:
    return _providers


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError):
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = ", ".join(".".join(str(p) for p in err["loc"][1:]) or "body" for err in exc.errors())
    logger.warning(f"Rejected request body: {fields}")
    return JSONResponse({"error": f"Invalid request fields: {fields}"}, status_code=400)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/models")
def list_models(providers: Dict[str, TextGenerator] = Depends(get_providers)):
    return {
        tag: {"default": adapter.default_model, "models": adapter.suggested_models}
        for tag, adapter in providers.items()
    }


# Plain def: the blocking SDK call runs in the worker thread pool
@app.post(
    "/api/generate",
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def generate(body: GenerationRequest, providers: Dict[str, TextGenerator] = Depends(get_providers)):
    return generate_seo_content(body, providers=providers)
