"""Intermediate representation dataclasses for aligned text and IPA.

WHY: The original spelling and the IPA transcription are tokenized
independently. The rule engine and the simplified builder both need the
two sequences as comparable word lists, and the renderers need a single
output form that does not care where a piece of text came from.

HOW: Four frozen dataclasses:
  Word: one orthographic word with its character span in the line
  IpaWord: one whitespace-delimited IPA token
  WordPair: a Word aligned by position with an IpaWord
  Segment: one piece of output text, emphasized or not

RULES:
- All IR objects are immutable once produced
- Word spans are [start, end) character offsets into the source line
- Segments concatenate losslessly: joining their texts reproduces every
  non-word character of the original verbatim
"""

from __future__ import annotations

from dataclasses import dataclass

_STRESS_MARKS = "ˈˌ"


@dataclass(frozen=True)
class Word:
    """A maximal run of letters/digits from the original text.

    RULES:
    - text may contain internal apostrophes ("dall'incontro")
    - start / end: character offsets into the line the word came from
    """

    text: str
    start: int
    end: int

    @property
    def is_numeric(self) -> bool:
        """True for digit-only words ("4", "2024")."""
        return bool(self.text) and all(ch.isnumeric() for ch in self.text)


@dataclass(frozen=True)
class IpaWord:
    """A whitespace-delimited token from an IPA string.

    May carry a leading stress run (ˈ, ˌ), length marks (ː) and tie-barred
    affricates (t͡ʃ, d͡ʒ, t͡s, d͡z).
    """

    text: str

    @property
    def stress(self) -> str:
        """The leading stress-mark run, possibly empty."""
        return self.text[: len(self.text) - len(self.body)]

    @property
    def body(self) -> str:
        """The token with its leading stress marks removed."""
        return self.text.lstrip(_STRESS_MARKS)


@dataclass(frozen=True)
class WordPair:
    """A Word aligned by position with the IpaWord at the same index."""

    word: Word
    ipa: IpaWord


@dataclass(frozen=True)
class Segment:
    """One piece of rendered output.

    RULES:
    - emphasized=True marks text that came from the IPA (vowel quality,
      sibilant voicing, doubled onset)
    - emphasized=False marks text copied from the original spelling
    """

    text: str
    emphasized: bool = False
