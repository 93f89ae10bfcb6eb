"""Word tokenization and line alignment for original text and IPA.

WHY: eSpeak returns one IPA token per word, separated by spaces, but
the original text carries punctuation, apostrophes, digits and line
breaks. Both the raddoppiamento engine and the simplified builder need
the two sides as comparable word sequences, and the simplified builder
also needs each word's position so it can copy everything in between.

HOW: Words are matched with a Unicode letter/number pattern that lets a
single apostrophe (ASCII or typographic) join two runs, so contractions
stay one token. IPA is split on whitespace runs. Multi-line input is
aligned line by line when both sides have the same number of lines.

RULES:
- "dall'incontro" is one Word; "l' acqua" is two
- Underscores are not word characters
- Empty IPA tokens are discarded
- Line alignment only happens when the line counts agree; otherwise the
  whole text is treated as a single line
"""

from __future__ import annotations

import re
from typing import List, Tuple

from dizionario_ipa.core.ir import IpaWord, Word, WordPair

# [^\W_] is "any Unicode letter or digit", i.e. \w without the underscore.
WORD_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")

_LINE_BREAK_RE = re.compile(r"\r?\n")


def tokenize_words(text: str) -> List[Word]:
    """Split original text into Words with their character spans."""
    return [Word(m.group(0), m.start(), m.end()) for m in WORD_RE.finditer(text)]


def tokenize_ipa(ipa: str) -> List[IpaWord]:
    """Split an IPA string on whitespace runs, dropping empty tokens."""
    return [IpaWord(token) for token in ipa.split()]


def split_lines(text: str) -> List[str]:
    """Split on LF or CRLF line breaks."""
    return _LINE_BREAK_RE.split(text)


def align_lines(original_text: str, ipa_text: str) -> List[Tuple[str, str]]:
    """Pair original and IPA lines for per-line processing.

    RULES:
    - Only when a line break is present and both sides split into the same
      number of lines are the lines paired one to one
    - Any other shape returns the whole input as a single pair
    """
    if "\n" in original_text or "\n" in ipa_text:
        original_lines = split_lines(original_text)
        ipa_lines = split_lines(ipa_text)
        if len(original_lines) == len(ipa_lines):
            return list(zip(original_lines, ipa_lines))
    return [(original_text, ipa_text)]


def pair_words(words: List[Word], ipa_words: List[IpaWord]) -> List[WordPair]:
    """Pair words by position, up to the shorter of the two sequences."""
    return [WordPair(word, ipa) for word, ipa in zip(words, ipa_words)]
