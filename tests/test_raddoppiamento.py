"""Tests for raddoppiamento fonosintattico on IPA.

WHY: This is the rule espeak-ng does not apply, and the reason the
package exists. Each trigger class (oxytones, cogeminant monosyllables,
polysyllabic cogeminants, pregeminants, idioms) and each blocker
(articles, clitics, falling diphthongs) needs its own check, as do the
affricates, which must be doubled whole.

HOW: Organized by trigger class. Inputs are hand-written espeak-style
IPA, so no engine is needed.

RULES:
- A word-count mismatch leaves the IPA untouched and reports a diagnostic
- Multi-line input is processed line by line
"""

from __future__ import annotations

import pytest

from dizionario_ipa.core.raddoppiamento import (
    apply_raddoppiamento_fonosintattico,
    find_gemination_events,
    geminate_ipa_word,
    post_process_italian_ipa,
)


class TestTriggers:
    """Words after a trigger get a doubled onset."""

    @pytest.mark.parametrize("text, ipa, expected", [
        ("La città nuova", "la t͡ʃitˈta ˈnwɔːva", "la t͡ʃitˈta ˈnnwɔːva"),
        ("Andrò subito", "anˈdrɔ suˈbito", "anˈdrɔ ssuˈbito"),
    ])
    def test_oxytone(self, text, ipa, expected):
        assert apply_raddoppiamento_fonosintattico(text, ipa) == expected

    @pytest.mark.parametrize("text, ipa, expected", [
        ("Andiamo a casa", "anˈdjaːmo a ˈkaːsa", "anˈdjaːmo a ˈkkaːsa"),
        ("E bello", "ɛ ˈbɛllo", "ɛ ˈbbɛllo"),
        ("Da Roma", "da ˈroːma", "da ˈrroːma"),
        ("Più forte", "pju ˈfɔrte", "pju ˈffɔrte"),
        ("De Roma", "de ˈroːma", "de ˈrroːma"),
    ])
    def test_monosyllables(self, text, ipa, expected):
        assert apply_raddoppiamento_fonosintattico(text, ipa) == expected

    @pytest.mark.parametrize("text, ipa, expected", [
        ("Come va", "ˈkoːme ˈva", "ˈkoːme ˈvva"),
        ("Dove sei", "ˈdoːve ˈsɛi̯", "ˈdoːve ˈssɛi̯"),
        ("Qualche volta", "ˈkwalke ˈvɔlta", "ˈkwalke ˈvvɔlta"),
        ("Sopra la tavola", "ˈsoːpra la ˈtaːvola", "ˈsoːpra lla ˈtaːvola"),
    ])
    def test_polysyllables(self, text, ipa, expected):
        assert apply_raddoppiamento_fonosintattico(text, ipa) == expected

    def test_pregeminant_after_vowel(self):
        assert apply_raddoppiamento_fonosintattico("Mio dio", "ˈmiːo ˈdiːo") == "ˈmiːo ˈddiːo"

    def test_pregeminant_after_consonant(self):
        assert apply_raddoppiamento_fonosintattico("Per dio", "per ˈdiːo") == "per ˈdiːo"

    @pytest.mark.parametrize("text, ipa, expected", [
        ("Ave Maria", "ˈaːve maˈriːa", "ˈaːve mmaˈriːa"),
        ("Spirito Santo", "ˈspiːrito ˈsanto", "ˈspiːrito ˈssanto"),
    ])
    def test_idioms(self, text, ipa, expected):
        assert apply_raddoppiamento_fonosintattico(text, ipa) == expected

    def test_punctuation_does_not_block(self):
        assert apply_raddoppiamento_fonosintattico("«Tra» Roma", "tra ˈroːma") == "tra ˈrroːma"


class TestBlockers:
    @pytest.mark.parametrize("text, ipa", [
        ("Il cane", "il ˈkaːne"),
        ("Mai parla", "ˈmai ˈparla"),
        ("Poi cambia", "ˈpɔi ˈkambja"),
        ("Ne parla", "ne ˈparla"),
        ("La casa", "la ˈkaːsa"),
        ("Bella casa", "ˈbɛlla ˈkaːsa"),
    ])
    def test_unchanged(self, text, ipa):
        assert apply_raddoppiamento_fonosintattico(text, ipa) == ipa

    def test_vowel_initial_target(self):
        assert apply_raddoppiamento_fonosintattico("a Enzo", "a ˈɛnt͡so") == "a ˈɛnt͡so"

    def test_only_next_word_is_affected(self):
        result = apply_raddoppiamento_fonosintattico("Andiamo a casa tua", "anˈdjaːmo a ˈkaːsa ˈtuːa")
        assert result == "anˈdjaːmo a ˈkkaːsa ˈtuːa"


class TestAffricates:
    """Tie-barred affricates are doubled as whole units."""

    @pytest.mark.parametrize("text, ipa, expected", [
        ("che cena", "ke ˈt͡ʃeːna", "ke ˈt͡ʃt͡ʃeːna"),
        ("a giocare", "a d͡ʒoˈkaːre", "a d͡ʒd͡ʒoˈkaːre"),
        ("è zia", "ɛ ˈt͡siːa", "ɛ ˈt͡st͡siːa"),
        ("a zero", "a ˈd͡zɛːro", "a ˈd͡zd͡zɛːro"),
    ])
    def test_affricate_doubling(self, text, ipa, expected):
        assert apply_raddoppiamento_fonosintattico(text, ipa) == expected

    def test_geminate_ipa_word(self):
        assert geminate_ipa_word("ˈt͡ʃeːna") == "ˈt͡ʃt͡ʃeːna"
        assert geminate_ipa_word("ˈɛnt͡so") is None


class TestAlignment:
    def test_single_word(self):
        assert apply_raddoppiamento_fonosintattico("casa", "ˈkaːsa") == "ˈkaːsa"

    def test_empty(self):
        assert apply_raddoppiamento_fonosintattico("", "") == ""

    def test_mismatch_returns_ipa_unchanged(self):
        ipa = "a  ˈkaːsa extra"
        assert apply_raddoppiamento_fonosintattico("a casa", ipa) == ipa

    def test_mismatch_reports_diagnostic(self):
        messages = []
        apply_raddoppiamento_fonosintattico("a casa", "a ˈkaːsa extra", on_diagnostic=messages.append)
        assert len(messages) == 1
        assert "2 vs 3" in messages[0]

    def test_match_reports_nothing(self):
        messages = []
        apply_raddoppiamento_fonosintattico("a casa", "a ˈkaːsa", on_diagnostic=messages.append)
        assert messages == []

    def test_whitespace_normalized_on_success(self):
        assert apply_raddoppiamento_fonosintattico("a casa", " a   ˈkaːsa ") == "a ˈkkaːsa"


class TestPostProcess:
    """post_process_italian_ipa() works line by line."""

    def test_multi_line(self):
        text = "Andiamo a casa\nIl cane"
        ipa = "anˈdjaːmo a ˈkaːsa\nil ˈkaːne"
        assert post_process_italian_ipa(text, ipa) == "anˈdjaːmo a ˈkkaːsa\nil ˈkaːne"

    def test_no_rule_across_lines(self):
        assert post_process_italian_ipa("Andiamo a\ncasa", "anˈdjaːmo a\nˈkaːsa") == "anˈdjaːmo a\nˈkaːsa"

    def test_blank_lines_kept(self):
        assert post_process_italian_ipa("a casa\n\nda Roma", "a ˈkaːsa\n\nda ˈroːma") == "a ˈkkaːsa\n\nda ˈrroːma"

    def test_mismatched_line_counts_fall_back_to_single_line(self):
        assert post_process_italian_ipa("a\ncasa", "a ˈkaːsa") == "a ˈkkaːsa"


class TestEvents:
    """find_gemination_events() explains every doubling."""

    def test_reasons(self):
        events = find_gemination_events("Ave Maria e mio dio", "ˈaːve maˈriːa e ˈmiːo ˈdiːo")
        assert [(e.word, e.reason) for e in events] == [
            ("Maria", "idiom"),
            ("mio", "cogeminant"),
            ("dio", "pregeminant"),
        ]

    def test_event_fields(self):
        (event,) = find_gemination_events("che cena", "ke ˈt͡ʃeːna")
        assert event.index == 1
        assert event.trigger == "che"
        assert event.unit == "t͡ʃ"
        assert event.before == "ˈt͡ʃeːna"
        assert event.after == "ˈt͡ʃt͡ʃeːna"

    def test_vowel_onset_produces_no_event(self):
        assert find_gemination_events("a Enzo", "a ˈɛnt͡so") == []

    def test_mismatch_is_none(self):
        assert find_gemination_events("a casa", "a") is None
