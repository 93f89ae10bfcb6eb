"""FastAPI application exposing phonemization and simplified rendering.

WHY: The web page (and any other client) needs an HTTP API to convert
Italian text to IPA and to the simplified rendering without loading
espeak-ng in every process. FastAPI provides request validation and
automatic OpenAPI documentation.

HOW: A single FastAPI app exposes four endpoints. One process-wide
EspeakPhonemizer serves every request; its lazy single-flight
initialization means the first request pays the start-up cost and
concurrent first requests share it.

RULES:
- Error responses use the ErrorResponse schema
- Engine failures map to 502 with the engine's "[Error: ...]" text
- Blank text is not an error: it yields empty outputs
- The phonemizer is a module-level singleton (replaceable in tests)
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, HTTPException

from dizionario_ipa import __version__
from dizionario_ipa.config import SERVER_HOST, SERVER_PORT, configure_logging
from dizionario_ipa.core.raddoppiamento import post_process_italian_ipa
from dizionario_ipa.engine.espeak import EspeakPhonemizer
from dizionario_ipa.formatters import RENDERERS
from dizionario_ipa.pipeline import build_simplified_output, build_simplified_output_html
from dizionario_ipa.server.models import (
    ErrorResponse,
    FormatInfo,
    FormatListResponse,
    HealthResponse,
    PhonemizeRequest,
    PhonemizeResponse,
    SimplifyRequest,
    SimplifyResponse,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App and engine setup
# ---------------------------------------------------------------------------

phonemizer = EspeakPhonemizer()

app = FastAPI(
    title="Dizionario IPA API",
    description=(
        "Convert Italian text to IPA (espeak-ng + raddoppiamento "
        "fonosintattico) and to a simplified spelling that highlights open "
        "vowels, voiced sibilants and doubled consonants."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


async def _phonemize_or_502(text: str) -> str:
    ipa = await phonemizer.phonemize(text)
    if ipa.startswith("[Error:"):
        logger.error("Phonemization failed: %s", ipa)
        raise HTTPException(status_code=502, detail=ipa)
    return ipa


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.post(
    "/phonemize",
    response_model=PhonemizeResponse,
    tags=["ipa"],
    summary="Convert text to IPA",
    responses={502: {"model": ErrorResponse, "description": "espeak-ng failed"}},
)
async def phonemize_text(request: PhonemizeRequest) -> PhonemizeResponse:
    text = request.text.strip()
    ipa = await _phonemize_or_502(text)
    return PhonemizeResponse(text=text, ipa=ipa)


@app.post(
    "/simplify",
    response_model=SimplifyResponse,
    tags=["ipa"],
    summary="Build the simplified rendering",
    description=(
        "Overlay open/closed e and o, voiced/voiceless s and z, and doubled "
        "word-initial consonants onto the original spelling. Supply `ipa` to "
        "skip espeak-ng."
    ),
    responses={502: {"model": ErrorResponse, "description": "espeak-ng failed"}},
)
async def simplify_text(request: SimplifyRequest) -> SimplifyResponse:
    text = request.text.strip()
    if request.ipa is None:
        ipa = await _phonemize_or_502(text)
    elif request.raddoppiamento:
        ipa = post_process_italian_ipa(text, request.ipa)
    else:
        ipa = request.ipa

    return SimplifyResponse(
        text=text,
        ipa=ipa,
        simplified=build_simplified_output(text, ipa),
        simplified_html=build_simplified_output_html(text, ipa),
    )


@app.get(
    "/formats",
    response_model=FormatListResponse,
    tags=["meta"],
    summary="List renderers",
)
async def list_formats() -> FormatListResponse:
    formats = []
    for key, renderer_cls in RENDERERS.items():
        renderer = renderer_cls()
        formats.append(FormatInfo(key=key, name=renderer.name, media_type=renderer.media_type))
    return FormatListResponse(formats=formats)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["meta"],
    summary="Health check",
)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, engine=phonemizer.state.value)


def main() -> None:
    """Run the API with uvicorn (``python -m dizionario_ipa --serve``)."""
    configure_logging("INFO")
    logger.info("Starting Dizionario IPA API on %s:%d", SERVER_HOST, SERVER_PORT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
