"""Shared fixtures for the Dizionario IPA test suite.

WHY: The espeak-ng engine is a native library that is slow to load and
not installed on every machine. Tests exercise the async boundary with a
deterministic stand-in engine instead, so they run anywhere and fast.

HOW: FakeEngine maps input lines to canned IPA and records every call.
The phonemizer fixtures build EspeakPhonemizer instances around it via
the engine_factory hook.

RULES:
- No fixture ever loads espeak-ng
- Canned IPA follows espeak-ng's shape: stress marks, ː, tie bars, one
  token per word
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

import pytest

from dizionario_ipa.engine.espeak import EspeakPhonemizer

CANNED_IPA: Dict[str, str] = {
    "Andiamo a casa": "anˈdjaːmo a ˈkaːsa",
    "Il cane": "il ˈkaːne",
    "La città nuova": "la t͡ʃitˈta ˈnwɔːva",
    "persone scelte": "pɛrˈsoːne ˈʃɛlte",
    "casa": "ˈkaːza",
    "Ciao": "ˈt͡ʃaːo",
}


class FakeEngine:
    """Deterministic IpaEngine: looks lines up in a mapping.

    Unknown lines come back as "?" per word so the word count still lines up.
    """

    def __init__(self, mapping: Optional[Dict[str, str]] = None) -> None:
        self.mapping = dict(CANNED_IPA if mapping is None else mapping)
        self.calls: List[List[str]] = []
        self._guard = threading.Lock()

    def transcribe(self, lines: List[str]) -> List[str]:
        with self._guard:
            self.calls.append(list(lines))
        return [self.mapping.get(line, " ".join("?" for _ in line.split())) for line in lines]


class CountingFactory:
    """Engine factory that counts how many engines it built."""

    def __init__(self, engine: Optional[FakeEngine] = None) -> None:
        self.engine = engine or FakeEngine()
        self.count = 0

    def __call__(self) -> FakeEngine:
        self.count += 1
        return self.engine


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def factory(fake_engine) -> CountingFactory:
    return CountingFactory(fake_engine)


@pytest.fixture
def fake_phonemizer(factory) -> EspeakPhonemizer:
    """A phonemizer backed by FakeEngine with the default post-processing."""
    return EspeakPhonemizer(engine_factory=factory, init_timeout_s=5)


@pytest.fixture
def make_phonemizer():
    """Build (phonemizer, factory) pairs with a custom mapping or options."""

    def _make(mapping: Optional[Dict[str, str]] = None, **kwargs):
        factory = CountingFactory(FakeEngine(mapping))
        kwargs.setdefault("init_timeout_s", 5)
        return EspeakPhonemizer(engine_factory=factory, **kwargs), factory

    return _make


@pytest.fixture
def failing_phonemizer() -> EspeakPhonemizer:
    """A phonemizer whose engine can never be created."""

    def _boom():
        raise OSError("libespeak-ng.so: cannot open shared object file")

    return EspeakPhonemizer(engine_factory=_boom, init_timeout_s=5)
