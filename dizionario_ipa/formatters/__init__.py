"""Segment renderer registry: pluggable output hub.

WHY: `--format` on the command line and `/formats` on the API both name
renderers by key, so the mapping from key to class lives in one place.

HOW: RENDERERS holds classes; callers build one per use, e.g.
``RENDERERS["html"](css_class="hl")``.

RULES:
- Keys double as CLI choices and API identifiers
- Importing this module must not touch espeak-ng
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dizionario_ipa.formatters.html import HtmlRenderer
from dizionario_ipa.formatters.plain_text import PlainTextRenderer

if TYPE_CHECKING:
    from dizionario_ipa.formatters.base import BaseRenderer

RENDERERS: dict[str, type[BaseRenderer]] = {
    "plain_text": PlainTextRenderer,
    "html": HtmlRenderer,
}
