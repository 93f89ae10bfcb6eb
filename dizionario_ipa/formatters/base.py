"""Abstract base renderer for simplified-output segments.

WHY: Every output consumes the same list of Segments but serializes it
differently. This base class enforces a consistent interface so the CLI
and the API layers can work with any renderer generically.

HOW: BaseRenderer is an ABC with three requirements: a ``name``
property, a ``media_type`` property and a ``render()`` method.

RULES:
- Subclasses MUST implement ``name``, ``media_type`` and ``render()``
- ``render()`` is stateless and preserves segment order
- Renderers never drop or reorder text; they only wrap or escape it
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from dizionario_ipa.core.ir import Segment


class BaseRenderer(ABC):
    """Abstract base for all segment renderers.

    To add a new output:
    1. Create a new file in formatters/
    2. Subclass BaseRenderer
    3. Implement name, media_type and render()
    4. Register in RENDERERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable renderer name, e.g. 'HTML'."""

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type of the rendered string, e.g. 'text/html'."""

    @abstractmethod
    def render(self, segments: Iterable[Segment]) -> str:
        """Serialize segments, in order, into one string."""
