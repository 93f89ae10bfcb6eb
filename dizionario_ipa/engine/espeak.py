"""Async boundary around the espeak-ng IPA generator.

WHY: IPA generation is the only expensive, stateful, failure-prone step
of the pipeline. Loading espeak-ng takes a while, the library is not
reentrant, and a crash inside it must never reach the caller as an
exception: the UI and the API treat the result as plain text.

HOW: EspeakPhonemizer owns one engine instance. The engine is created
lazily by a single initialization task that every concurrent caller
awaits (through asyncio.shield, so one cancelled caller does not cancel
the others), bounded by PHONEMIZER_INIT_TIMEOUT_S. Transcription calls
run in a worker thread and are serialized with an asyncio.Lock. The raw
output is normalized and post-processed (raddoppiamento fonosintattico).

RULES:
- phonemize() never raises: blank input → "", failure → "[Error: ...]"
- Initialization happens at most once at a time; on failure the state
  goes to FAILED and the next call starts over from scratch
- State machine: UNINITIALIZED → INITIALIZING → READY | FAILED
- One transcription at a time per instance (espeak-ng is not reentrant)
- The engine factory is injectable so tests never load espeak-ng
"""

from __future__ import annotations

import asyncio
import enum
import functools
import logging
import re
from collections.abc import Callable
from typing import List, Optional, Protocol

from phonemizer.backend import EspeakBackend
from phonemizer.backend.espeak.wrapper import EspeakWrapper
from phonemizer.separator import Separator

from dizionario_ipa.config import (
    ERROR_TEMPLATE,
    ESPEAK_LIBRARY,
    ESPEAK_VOICE,
    PHONEMIZER_INIT_TIMEOUT_S,
)
from dizionario_ipa.core.raddoppiamento import post_process_italian_ipa
from dizionario_ipa.core.tokenizer import split_lines

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"_+")
_SPACES_RE = re.compile(r" +")


class EngineState(str, enum.Enum):
    """Lifecycle of the espeak-ng engine behind a phonemizer."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class PhonemizerInitError(RuntimeError):
    """Raised inside the boundary when the engine cannot be created."""


class PhonemizerTimeoutError(TimeoutError):
    """Raised inside the boundary when engine creation exceeds the timeout."""


class IpaEngine(Protocol):
    """Anything that turns a list of text lines into a list of IPA lines."""

    def transcribe(self, lines: List[str]) -> List[str]:
        ...


class EspeakEngine:
    """espeak-ng via the phonemizer library, configured for Italian IPA.

    RULES:
    - Stress marks are kept (ˈ ˌ), affricates carry a tie bar (t͡ʃ)
    - Words are separated by one space, phones are not separated
    - Language-switch flags like "(en)" are removed from the output
    """

    def __init__(self, voice: str = ESPEAK_VOICE, library: Optional[str] = ESPEAK_LIBRARY) -> None:
        if library:
            EspeakWrapper.set_library(library)
        self._backend = EspeakBackend(
            voice,
            with_stress=True,
            tie=True,
            preserve_punctuation=False,
            language_switch="remove-flags",
        )
        self._separator = Separator(phone="", syllable="", word=" ")

    def transcribe(self, lines: List[str]) -> List[str]:
        return self._backend.phonemize(lines, separator=self._separator, strip=True, njobs=1)


def normalize_ipa(raw: str) -> str:
    """Drop phoneme separators, collapse spaces and trim every line."""
    lines = []
    for line in split_lines(raw):
        line = _SEPARATOR_RE.sub("", line)
        lines.append(_SPACES_RE.sub(" ", line).strip())
    return "\n".join(lines)


class EspeakPhonemizer:
    """Italian text → IPA with lazy, single-flight engine initialization.

    Use as:
        phonemizer = EspeakPhonemizer()
        ipa = await phonemizer.phonemize("Andiamo a casa")
    """

    def __init__(
        self,
        voice: Optional[str] = None,
        library: Optional[str] = None,
        init_timeout_s: Optional[float] = None,
        engine_factory: Callable[[], IpaEngine] | None = None,
        post_process: bool = True,
    ) -> None:
        self._factory = engine_factory or functools.partial(
            EspeakEngine, voice or ESPEAK_VOICE, library or ESPEAK_LIBRARY,
        )
        self._timeout_s = init_timeout_s if init_timeout_s is not None else PHONEMIZER_INIT_TIMEOUT_S
        self._post_process = post_process
        self._engine: Optional[IpaEngine] = None
        self._state = EngineState.UNINITIALIZED
        self._init_task: Optional[asyncio.Future] = None
        self._lock: Optional[asyncio.Lock] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def state(self) -> EngineState:
        return self._state

    def _bind_loop(self) -> None:
        """Re-create loop-bound primitives when called from a new event loop.

        The CLI and the API's background runner each use asyncio.run(), so
        one instance can outlive the loop it was first used on. A pending
        initialization from a previous loop can never finish here.
        """
        loop = asyncio.get_running_loop()
        if loop is self._loop:
            return
        self._loop = loop
        self._lock = asyncio.Lock()
        if self._init_task is not None:
            self._init_task = None
            if self._engine is None:
                self._state = EngineState.UNINITIALIZED

    async def initialize(self) -> IpaEngine:
        """Return the engine, creating it on first use.

        Raises:
            PhonemizerTimeoutError: creation took longer than the timeout.
            PhonemizerInitError: the factory raised.
        """
        self._bind_loop()
        if self._engine is not None:
            return self._engine
        if self._init_task is None:
            self._state = EngineState.INITIALIZING
            self._init_task = asyncio.ensure_future(self._create_engine())
        return await asyncio.shield(self._init_task)

    async def _create_engine(self) -> IpaEngine:
        logger.info("Initializing espeak-ng engine (timeout %.1fs)", self._timeout_s)
        try:
            engine = await asyncio.wait_for(asyncio.to_thread(self._factory), timeout=self._timeout_s)
        except asyncio.TimeoutError as exc:
            self._mark_failed()
            raise PhonemizerTimeoutError(
                "espeak-ng initialization timed out after {:.1f}s".format(self._timeout_s)
            ) from exc
        except asyncio.CancelledError:
            self._mark_failed()
            raise
        except Exception as exc:
            self._mark_failed()
            raise PhonemizerInitError("espeak-ng initialization failed: {}".format(exc)) from exc

        self._engine = engine
        self._state = EngineState.READY
        self._init_task = None
        logger.info("espeak-ng engine ready")
        return engine

    def _mark_failed(self) -> None:
        self._init_task = None
        self._state = EngineState.FAILED

    def reset(self) -> None:
        """Forget the engine so the next call initializes again."""
        self._engine = None
        self._init_task = None
        self._state = EngineState.UNINITIALIZED

    @staticmethod
    def _transcribe(engine: IpaEngine, text: str) -> str:
        lines = split_lines(text)
        spoken = [line for line in lines if line.strip()]
        results = iter(engine.transcribe(spoken)) if spoken else iter(())
        return "\n".join(next(results, "") if line.strip() else "" for line in lines)

    async def phonemize(self, text: str) -> str:
        """Convert Italian text to post-processed IPA.

        Args:
            text: Italian text, possibly multi-line.

        Returns:
            IPA, one line per input line; "" for blank input;
            "[Error: <message>]" when anything inside the boundary fails.
        """
        cleaned = text.strip()
        if not cleaned:
            return ""

        try:
            engine = await self.initialize()
            async with self._lock:
                raw = await asyncio.to_thread(self._transcribe, engine, cleaned)
            ipa = normalize_ipa(raw)
            if self._post_process:
                ipa = post_process_italian_ipa(cleaned, ipa)
            return ipa
        except Exception as exc:
            logger.exception("eSpeak phonemization failed")
            return ERROR_TEMPLATE.format(str(exc) or type(exc).__name__)


_default_phonemizer: Optional[EspeakPhonemizer] = None


def get_default_phonemizer() -> EspeakPhonemizer:
    """Process-wide phonemizer built from config defaults."""
    global _default_phonemizer
    if _default_phonemizer is None:
        _default_phonemizer = EspeakPhonemizer()
    return _default_phonemizer


async def phonemize(text: str) -> str:
    """Convert Italian text to IPA with the process-wide phonemizer."""
    return await get_default_phonemizer().phonemize(text)
