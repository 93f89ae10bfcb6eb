"""Simplified hybrid rendering: IPA detail overlaid on the original spelling.

WHY: Full IPA is hard to read for learners, but plain spelling hides the
three things Italian spelling does not show: open vs closed e/o, voiced
vs voiceless s/z, and consonants doubled across word boundaries. The
simplified output keeps every letter of the original and swaps in only
those details, marked as emphasized so the UI can highlight them.

HOW: The line is tokenized into Words with spans; everything between
words is copied verbatim. Each Word is paired by position with an IPA
word and rebuilt letter by letter: e/o letters consume the next [eɛ]/[oɔ]
from the IPA, s/z letters consume the next token of a pre-scanned
sibilant stream. Finally, a doubled onset in the IPA is overlaid when the
spelling can carry it.

RULES:
- Numeric words pass through unmodified (digits are not phonemized reliably)
- Words beyond the IPA word count pass through unmodified
- An exhausted IPA stream leaves the original letter, not emphasized
- Sibilant replacements follow the case of the original letter
- Affricates t͡s/d͡z stand for the letter z; a following ː doubles the token
- A doubled onset is only shown when the spelling is compatible; it is
  prepended before a vowel-initial word and replaces the first letter
  segment otherwise
- Line breaks are emitted as dedicated "\\n" segments
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import List

from dizionario_ipa.core.ir import Segment, Word
from dizionario_ipa.core.lexicon import VOWELS
from dizionario_ipa.core.phonology import (
    LENGTH_MARK,
    geminate_unit,
    geminated_onset,
    is_spelling_compatible,
    scan_units,
)
from dizionario_ipa.core.tokenizer import align_lines, pair_words, tokenize_ipa, tokenize_words

logger = logging.getLogger(__name__)

_E_RE = re.compile(r"[eɛ]")
_O_RE = re.compile(r"[oɔ]")

# Orthographic letter each sibilant IPA unit stands for.
_SIBILANTS = {
    "t͡s": "z",
    "d͡z": "z",
    "s": "s",
    "z": "z",
}


def extract_sibilant_tokens(ipa_word: str) -> List[str]:
    """Scan an IPA word for s/z sounds, left to right.

    RULES:
    - Affricates are matched before bare s/z, so t͡s is one token
    - A unit followed by ː yields two tokens (carrozzina → z, z)
    """
    tokens: List[str] = []
    for index, unit in scan_units(ipa_word):
        letter = _SIBILANTS.get(unit)
        if letter is None:
            continue
        tokens.append(letter)
        if ipa_word.startswith(LENGTH_MARK, index + len(unit)):
            tokens.append(letter)
    return tokens


def _apply_case(token: str, template: str) -> str:
    return token.upper() if template.isupper() else token


def replace_letters(word: str, ipa_word: str) -> List[Segment]:
    """Rebuild ``word`` one character per segment, substituting e/o/s/z."""
    e_tokens = iter(_E_RE.findall(ipa_word))
    o_tokens = iter(_O_RE.findall(ipa_word))
    sibilants = iter(extract_sibilant_tokens(ipa_word))

    segments: List[Segment] = []
    for char in word:
        lower = char.lower()
        if lower == "e":
            stream = e_tokens
        elif lower == "o":
            stream = o_tokens
        elif lower in ("s", "z"):
            stream = sibilants
        else:
            segments.append(Segment(char))
            continue

        replacement = next(stream, None)
        if replacement is None:
            segments.append(Segment(char))
        elif lower in ("s", "z"):
            segments.append(Segment(_apply_case(replacement, char), emphasized=True))
        else:
            segments.append(Segment(replacement, emphasized=True))
    return segments


def overlay_gemination(segments: List[Segment], word: str, ipa_word: str) -> List[Segment]:
    """Put the doubled onset from the IPA in front of the rebuilt word."""
    unit = geminated_onset(ipa_word)
    if unit is None or not is_spelling_compatible(word, unit):
        return segments

    doubled = Segment(geminate_unit(unit), emphasized=True)
    if word[:1].lower() in VOWELS:
        return [doubled] + segments
    return [doubled] + segments[1:]


def simplify_word(word: Word, ipa_word: str) -> List[Segment]:
    if word.is_numeric:
        return [Segment(word.text)]
    segments = replace_letters(word.text, ipa_word)
    return overlay_gemination(segments, word.text, ipa_word)


def _build_line(
    line: str,
    ipa_line: str,
    on_diagnostic: Callable[[str], None] | None,
) -> List[Segment]:
    words = tokenize_words(line)
    ipa_words = tokenize_ipa(ipa_line)

    if not words or not ipa_words:
        return [Segment(line)] if line else []

    pairs = pair_words(words, ipa_words)
    if len(words) != len(ipa_words):
        message = (
            "Word count mismatch between original and IPA text ({} vs {}). "
            "Only the first {} words are simplified.".format(len(words), len(ipa_words), len(pairs))
        )
        logger.warning(message)
        if on_diagnostic:
            on_diagnostic(message)

    segments: List[Segment] = []
    last = 0
    for index, word in enumerate(words):
        if word.start > last:
            segments.append(Segment(line[last:word.start]))
        if index < len(pairs):
            segments.extend(simplify_word(word, pairs[index].ipa.text))
        else:
            segments.append(Segment(word.text))
        last = word.end
    if last < len(line):
        segments.append(Segment(line[last:]))
    return segments


def build_segments(
    original_text: str,
    ipa_text: str,
    on_diagnostic: Callable[[str], None] | None = None,
) -> List[Segment]:
    """Build the simplified rendering of ``original_text`` as segments.

    Args:
        original_text: Italian text, possibly multi-line.
        ipa_text: IPA for the same text (one line per original line when
            line-by-line alignment is wanted).
        on_diagnostic: Optional callback receiving alignment warnings.

    Returns:
        Ordered segments whose concatenation is the simplified text.
    """
    segments: List[Segment] = []
    for index, (line, ipa_line) in enumerate(align_lines(original_text, ipa_text)):
        if index:
            segments.append(Segment("\n"))
        segments.extend(_build_line(line, ipa_line, on_diagnostic))
    return segments
