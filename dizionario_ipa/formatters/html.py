"""HTML fragment renderer with emphasis markup.

WHY: The web page highlights every letter that came from the IPA, so
learners can see at a glance which vowels are open and which consonants
are doubled. User text ends up inside the page, so everything must be
escaped before any markup is added.

HOW: Each segment's text is escaped (& < > " '), then emphasized
segments are wrapped in ``<span class="ipa-emphasis">``. Non-emphasized
segments are emitted as escaped text with no wrapper.

RULES:
- Escaping happens on every segment, emphasized or not
- Output is a fragment: no <html>, no <body>, no trailing newline
- The CSS class defaults to config.EMPHASIS_CLASS
"""

from __future__ import annotations

from typing import Iterable, Optional

from dizionario_ipa.config import EMPHASIS_CLASS
from dizionario_ipa.core.ir import Segment
from dizionario_ipa.formatters.base import BaseRenderer

_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_html(value: str) -> str:
    return value.translate(_ESCAPES)


class HtmlRenderer(BaseRenderer):
    """Renderer that produces an escaped HTML fragment."""

    def __init__(self, css_class: Optional[str] = None) -> None:
        self._css_class = css_class or EMPHASIS_CLASS

    @property
    def name(self) -> str:
        return "HTML"

    @property
    def media_type(self) -> str:
        return "text/html"

    def render_segment(self, segment: Segment) -> str:
        escaped = escape_html(segment.text)
        if not segment.emphasized:
            return escaped
        return '<span class="{}">{}</span>'.format(escape_html(self._css_class), escaped)

    def render(self, segments: Iterable[Segment]) -> str:
        return "".join(self.render_segment(segment) for segment in segments)
