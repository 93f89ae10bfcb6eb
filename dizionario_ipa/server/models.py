"""Pydantic request/response models for the HTTP API.

WHY: Request bodies are validated before they reach the pipeline, and
the same models document the API in /docs.

HOW: Each endpoint pair (request + response) has its own model. All
models include Field descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Blank text is valid input and yields empty outputs
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class PhonemizeRequest(BaseModel):
    """Text to convert to IPA."""

    text: str = Field(description="Italian text, possibly multi-line.")


class SimplifyRequest(BaseModel):
    """Text (and optionally its IPA) to render as simplified output.

    RULES:
    - When ipa is omitted, the server generates it with espeak-ng
    - raddoppiamento applies only to IPA supplied by the client; generated
      IPA is always post-processed
    """

    text: str = Field(description="Italian text, possibly multi-line.")
    ipa: Optional[str] = Field(
        default=None,
        description="Precomputed IPA, one token per word. Generated when omitted.",
    )
    raddoppiamento: bool = Field(
        default=True,
        description="Apply raddoppiamento fonosintattico to supplied IPA.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "Andiamo a casa",
                "ipa": "anˈdjaːmo a ˈkaːsa",
                "raddoppiamento": True,
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class PhonemizeResponse(BaseModel):
    text: str = Field(description="The input text, trimmed.")
    ipa: str = Field(description="Post-processed IPA transcription.")


class SimplifyResponse(BaseModel):
    """Simplified renderings of one text.

    RULES:
    - simplified is plain text; simplified_html is an escaped fragment
    """

    text: str = Field(description="The input text, trimmed.")
    ipa: str = Field(description="IPA the renderings were built from.")
    simplified: str = Field(description="Simplified output as plain text.")
    simplified_html: str = Field(description="Simplified output as an HTML fragment.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "persone scelte",
                "ipa": "pɛrˈsoːne ˈʃɛlte",
                "simplified": "pɛrsone scɛlte",
                "simplified_html": (
                    'p<span class="ipa-emphasis">ɛ</span>r'
                    '<span class="ipa-emphasis">s</span>...'
                ),
            }
        ]
    }}


class FormatInfo(BaseModel):
    """Description of an available renderer."""

    key: str = Field(description="Renderer identifier.")
    name: str = Field(description="Human-readable renderer name.")
    media_type: str = Field(description="MIME type of the rendered output.")


class FormatListResponse(BaseModel):
    formats: List[FormatInfo] = Field(description="Available renderers.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response.

    engine reports the espeak-ng state without triggering initialization.
    """

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
    engine: str = Field(description="espeak-ng engine state.", json_schema_extra={"example": "ready"})
