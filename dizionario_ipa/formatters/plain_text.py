"""Plain text renderer.

WHY: Terminals, clipboards and tests want the simplified output as a
bare string. This is the simplest renderer and the baseline proof that
the pluggable pattern works.

HOW: Concatenates segment texts verbatim; emphasis is dropped.
"""

from __future__ import annotations

from typing import Iterable

from dizionario_ipa.core.ir import Segment
from dizionario_ipa.formatters.base import BaseRenderer


class PlainTextRenderer(BaseRenderer):
    """Renderer that joins segment texts with no markup."""

    @property
    def name(self) -> str:
        return "Plain Text"

    @property
    def media_type(self) -> str:
        return "text/plain"

    def render(self, segments: Iterable[Segment]) -> str:
        return "".join(segment.text for segment in segments)
