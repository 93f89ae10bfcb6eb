"""Public entry points: post-processing, simplified output, full transcription.

WHY: Callers (CLI, HTTP API, other programs) should not need to know
which core module builds segments or which renderer escapes HTML. This
module is the small, stable surface of the package.

HOW: Thin functions compose the core builders with the registered
renderers. ``transcribe`` runs the IPA engine first and then both
simplified renderings over the same (text, IPA) pair.

RULES:
- build_simplified_output / build_simplified_output_html are multi-line aware
- apply_raddoppiamento_fonosintattico is the single-line contract
- None of these raise on misaligned input
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from dizionario_ipa.core.raddoppiamento import (
    apply_raddoppiamento_fonosintattico,
    post_process_italian_ipa,
)
from dizionario_ipa.core.simplifier import build_segments
from dizionario_ipa.engine.espeak import EspeakPhonemizer, get_default_phonemizer
from dizionario_ipa.formatters.html import HtmlRenderer, escape_html
from dizionario_ipa.formatters.plain_text import PlainTextRenderer

__all__ = [
    "TranscriptionResult",
    "apply_raddoppiamento_fonosintattico",
    "build_simplified_output",
    "build_simplified_output_html",
    "post_process_italian_ipa",
    "transcribe",
]


def build_simplified_output(
    original_text: str,
    ipa_text: str,
    on_diagnostic: Callable[[str], None] | None = None,
) -> str:
    """Simplified hybrid rendering as plain text."""
    return PlainTextRenderer().render(build_segments(original_text, ipa_text, on_diagnostic))


def build_simplified_output_html(
    original_text: str,
    ipa_text: str,
    on_diagnostic: Callable[[str], None] | None = None,
) -> str:
    """Simplified hybrid rendering as an escaped HTML fragment."""
    return HtmlRenderer().render(build_segments(original_text, ipa_text, on_diagnostic))


@dataclass
class TranscriptionResult:
    """Everything the UI shows for one input text."""

    text: str
    ipa: str
    simplified: str
    simplified_html: str

    @property
    def failed(self) -> bool:
        """True when the engine returned its error sentinel."""
        return self.ipa.startswith("[Error:")


async def transcribe(text: str, phonemizer: Optional[EspeakPhonemizer] = None) -> TranscriptionResult:
    """Phonemize ``text`` and build both simplified renderings.

    RULES:
    - Uses the process-wide phonemizer unless one is passed in
    - On engine failure the simplified outputs fall back to the original text
    """
    engine = phonemizer or get_default_phonemizer()
    ipa = await engine.phonemize(text)
    result = TranscriptionResult(text=text, ipa=ipa, simplified="", simplified_html="")
    source = text.strip()
    if result.failed:
        result.simplified = source
        result.simplified_html = escape_html(source)
        return result
    result.simplified = build_simplified_output(source, ipa)
    result.simplified_html = build_simplified_output_html(source, ipa)
    return result
