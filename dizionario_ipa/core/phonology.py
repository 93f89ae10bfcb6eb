"""IPA inventory and onset scanning shared by both pipelines.

WHY: The raddoppiamento engine and the simplified builder both have to
answer "which consonant starts this IPA word, is it doubled, and how is
it spelled". Two slightly different answers would make the simplified
output disagree with the IPA it was built from, so the inventory and
the consonant → spelling table live here, once.

HOW: An explicit cursor scanner walks an IPA string and yields
index-tagged units, matching the tie-barred affricates before any single
codepoint so t͡ʃ is never read as t. Onset helpers strip the leading
stress run and look at the first one or two units.

RULES:
- Affricates (t͡ʃ d͡ʒ t͡s d͡z) are atomic: scanned, doubled and compared whole
- Only units present in CONSONANT_SPELLINGS are geminable
- Vowel-initial words are compatible with any doubled onset (the double
  consonant comes from the previous word and consumes no letters)
- A unit missing from the table is never compatible
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from dizionario_ipa.core.lexicon import VOWELS

STRESS_MARKS = "ˈˌ"
LENGTH_MARK = "ː"
TIE_BAR = "͡"

AFFRICATES: Tuple[str, ...] = ("t͡ʃ", "d͡ʒ", "t͡s", "d͡z")

CONSONANT_SPELLINGS: Dict[str, Tuple[str, ...]] = {
    "p": ("p",),
    "b": ("b",),
    "t": ("t",),
    "d": ("d",),
    "k": ("c", "k", "q"),
    "ɡ": ("g",),
    "g": ("g",),
    "f": ("f",),
    "v": ("v",),
    "s": ("s",),
    "z": ("z",),
    "ʃ": ("sc", "sci"),
    "ʒ": ("g",),
    "m": ("m",),
    "n": ("n",),
    "ɲ": ("gn",),
    "l": ("l",),
    "ʎ": ("gl",),
    "r": ("r",),
    "t͡ʃ": ("c", "ci", "ce"),
    "d͡ʒ": ("g", "gi", "ge"),
    "t͡s": ("z",),
    "d͡z": ("z",),
}
"""Geminable Italian consonants and the spellings a word may start with."""


def split_stress(ipa_word: str) -> Tuple[str, str]:
    """Split an IPA word into (leading stress marks, rest)."""
    body = ipa_word.lstrip(STRESS_MARKS)
    return ipa_word[: len(ipa_word) - len(body)], body


def scan_units(ipa: str, start: int = 0) -> Iterator[Tuple[int, str]]:
    """Yield (index, unit) pairs, affricates first, then single codepoints."""
    index = start
    while index < len(ipa):
        unit = _unit_at(ipa, index)
        yield index, unit
        index += len(unit)


def _unit_at(ipa: str, index: int) -> str:
    for affricate in AFFRICATES:
        if ipa.startswith(affricate, index):
            return affricate
    return ipa[index]


def is_consonant(unit: str) -> bool:
    return unit in CONSONANT_SPELLINGS


def first_consonant(ipa_word: str) -> Optional[str]:
    """The geminable consonant/affricate opening ``ipa_word``, if any."""
    _, body = split_stress(ipa_word)
    if not body:
        return None
    unit = _unit_at(body, 0)
    return unit if is_consonant(unit) else None


def geminated_onset(ipa_word: str) -> Optional[str]:
    """The onset unit when it is already doubled (``kk``) or long (``kː``)."""
    unit = first_consonant(ipa_word)
    if unit is None:
        return None
    _, body = split_stress(ipa_word)
    rest = body[len(unit):]
    if rest.startswith(unit) or rest.startswith(LENGTH_MARK):
        return unit
    return None


def geminate_unit(unit: str) -> str:
    """Double a consonant unit; affricates are repeated whole (t͡ʃt͡ʃ)."""
    return unit + unit


def is_spelling_compatible(word: str, unit: str) -> bool:
    """Check that ``word`` can be spelled with ``unit`` as its onset.

    RULES:
    - Vowel-initial words → always True
    - Otherwise the lowercased word must start with one of the unit's spellings
    - Units without a spelling entry → False
    """
    lower = word.lower()
    if lower and lower[0] in VOWELS:
        return True
    spellings = CONSONANT_SPELLINGS.get(unit)
    if not spellings:
        return False
    return lower.startswith(spellings)
