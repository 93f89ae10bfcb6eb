"""IPA generation engine package, the only I/O boundary of the converter.

WHY: Everything else in the package is pure text processing. espeak-ng
is loaded lazily, is slow to start and is not reentrant, so it lives
behind one async class that owns those concerns.

HOW: EspeakPhonemizer wraps phonemizer's EspeakBackend with single-flight
initialization, a timeout, serialized calls and error-string fallback.

RULES:
- All espeak-ng access goes through EspeakPhonemizer
- The boundary never raises to its caller
"""

from dizionario_ipa.engine.espeak import (
    EngineState,
    EspeakPhonemizer,
    get_default_phonemizer,
    phonemize,
)

__all__ = ["EngineState", "EspeakPhonemizer", "get_default_phonemizer", "phonemize"]
