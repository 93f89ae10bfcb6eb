"""Raddoppiamento fonosintattico over word-aligned IPA.

WHY: eSpeak transcribes each word in isolation, so "a casa" comes out
as [a ˈkaːsa] although standard Italian pronounces [a ˈkkaːsa]: certain
preceding words double the initial consonant of the next word. This
module rewrites the IPA so it matches the spoken sentence.

HOW: Original text and IPA are tokenized into words; when the counts
agree they are paired by position. For every word after the first, the
previous word is classified (idiom override, cogeminant, or vowel-final
before a pregeminant). When a trigger fires, the first consonant unit
of the current IPA word is doubled right after its stress marks.

RULES:
- Word-count mismatch → IPA returned unchanged, diagnostic emitted
- The first word never geminates (no predecessor)
- "Ave Maria" and "Spirito Santo" always geminate
- Candidacy does not guarantee mutation: vowel onsets and units outside
  the consonant table are left alone
- Output words are joined with single spaces (single-line contract);
  post_process_italian_ipa handles multi-line text
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import List, Optional

from dizionario_ipa.core.lexicon import clean_word, ends_in_vowel, is_cogeminant, is_pregeminant
from dizionario_ipa.core.phonology import first_consonant, geminate_unit, split_stress
from dizionario_ipa.core.tokenizer import align_lines, tokenize_ipa, tokenize_words

logger = logging.getLogger(__name__)

IDIOMS = frozenset({("ave", "maria"), ("spirito", "santo")})

MISMATCH_MESSAGE = "Word count mismatch between original and IPA text ({} vs {}). Raddoppiamento not applied."


@dataclass(frozen=True)
class GeminationEvent:
    """One word whose IPA onset was doubled.

    RULES:
    - index: position of the geminated word in the line
    - reason: "idiom", "cogeminant" or "pregeminant"
    - unit: the consonant/affricate that was doubled
    """

    index: int
    word: str
    trigger: str
    reason: str
    unit: str
    before: str
    after: str


def _trigger_reason(previous: str, current: str) -> Optional[str]:
    if (previous, current) in IDIOMS:
        return "idiom"
    if is_cogeminant(previous):
        return "cogeminant"
    if is_pregeminant(current) and ends_in_vowel(previous):
        return "pregeminant"
    return None


def geminate_ipa_word(ipa_word: str) -> Optional[str]:
    """Double the onset of ``ipa_word``, or None when it has no geminable onset."""
    unit = first_consonant(ipa_word)
    if unit is None:
        return None
    stress, body = split_stress(ipa_word)
    return stress + geminate_unit(unit) + body[len(unit):]


def find_gemination_events(
    original_text: str,
    ipa_text: str,
    on_diagnostic: Callable[[str], None] | None = None,
) -> Optional[List[GeminationEvent]]:
    """Compute which IPA words of a single line get a doubled onset.

    Returns None when the word counts do not match (nothing can be aligned).
    """
    words = tokenize_words(original_text)
    ipa_words = tokenize_ipa(ipa_text)

    if len(words) != len(ipa_words):
        message = MISMATCH_MESSAGE.format(len(words), len(ipa_words))
        logger.warning(message)
        if on_diagnostic:
            on_diagnostic(message)
        return None

    events: List[GeminationEvent] = []
    for i in range(1, len(words)):
        previous = clean_word(words[i - 1].text)
        current = clean_word(words[i].text)
        reason = _trigger_reason(previous, current)
        if reason is None:
            continue

        before = ipa_words[i].text
        after = geminate_ipa_word(before)
        if after is None:
            continue

        events.append(GeminationEvent(
            index=i,
            word=words[i].text,
            trigger=words[i - 1].text,
            reason=reason,
            unit=first_consonant(before) or "",
            before=before,
            after=after,
        ))
    return events


def apply_raddoppiamento_fonosintattico(
    original_text: str,
    ipa_text: str,
    on_diagnostic: Callable[[str], None] | None = None,
) -> str:
    """Apply raddoppiamento fonosintattico to one line of IPA.

    Args:
        original_text: The Italian text the IPA was generated from.
        ipa_text: Space-separated IPA, one token per word.
        on_diagnostic: Optional callback receiving alignment warnings.

    Returns:
        The IPA with doubled onsets, or ``ipa_text`` unchanged when the
        word counts do not match.
    """
    events = find_gemination_events(original_text, ipa_text, on_diagnostic)
    if events is None:
        return ipa_text

    output = [ipa.text for ipa in tokenize_ipa(ipa_text)]
    for event in events:
        output[event.index] = event.after
    return " ".join(output)


def post_process_italian_ipa(
    original_text: str,
    ipa_text: str,
    on_diagnostic: Callable[[str], None] | None = None,
) -> str:
    """Apply every Italian post-processing rule, line by line when possible.

    RULES:
    - Lines are processed independently when both sides have the same
      number of lines; line breaks are kept as "\\n"
    - Otherwise the whole text is handed to the single-line rule
    """
    return "\n".join(
        apply_raddoppiamento_fonosintattico(line, ipa_line, on_diagnostic)
        for line, ipa_line in align_lines(original_text, ipa_text)
    )
