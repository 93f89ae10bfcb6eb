"""Configuration constants and .env loading.

WHY: The espeak-ng voice and library path, the init timeout, the HTML
emphasis class and the server address differ between machines; they
are read once at import from the environment (or a .env file).

HOW: python-dotenv fills os.environ first; each constant falls back to a
default.

RULES:
- The espeak-ng voice defaults to "it" (this package only handles Italian)
- ESPEAK_LIBRARY is optional; when unset the system libespeak-ng is used
- The engine initialization timeout defaults to 15 seconds
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# IPA engine
# ---------------------------------------------------------------------------

ESPEAK_VOICE = os.getenv("ESPEAK_VOICE", "it")
ESPEAK_LIBRARY = os.getenv("ESPEAK_LIBRARY", "").strip() or None
"""Path to libespeak-ng, for platforms where phonemizer cannot find it."""

PHONEMIZER_INIT_TIMEOUT_S = float(os.getenv("PHONEMIZER_INIT_TIMEOUT_S", "15"))

ERROR_TEMPLATE = "[Error: {}]"
"""Sentinel returned by the engine boundary instead of raising."""

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

EMPHASIS_CLASS = os.getenv("EMPHASIS_CLASS", "ipa-emphasis")

# ---------------------------------------------------------------------------
# Logging and server
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point (CLI or server).

    WHY: Library modules only create loggers; handlers and levels belong
    to whoever runs the process.

    RULES:
    - Unknown level names fall back to WARNING
    - Called once per process from cli.main() or server.app.main()
    """
    name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
    )
