"""Tests for the end-to-end transcribe() entry point.

WHY: transcribe() is what the UI calls: text in, every rendering out.
It must compose the engine, raddoppiamento and both renderers over the
same IPA, and fall back to the original text when the engine fails.
"""

from __future__ import annotations

import asyncio

from dizionario_ipa.pipeline import TranscriptionResult, transcribe


class TestTranscribe:
    def test_all_outputs(self, fake_phonemizer):
        result = asyncio.run(transcribe("Andiamo a casa", phonemizer=fake_phonemizer))
        assert isinstance(result, TranscriptionResult)
        assert not result.failed
        assert result.ipa == "anˈdjaːmo a ˈkkaːsa"
        assert result.simplified == "Andiamo a kkasa"
        assert result.simplified_html == (
            'Andiam<span class="ipa-emphasis">o</span> a '
            '<span class="ipa-emphasis">kk</span>a'
            '<span class="ipa-emphasis">s</span>a'
        )

    def test_open_vowels(self, fake_phonemizer):
        result = asyncio.run(transcribe("persone scelte", phonemizer=fake_phonemizer))
        assert result.simplified == "pɛrsone scɛlte"

    def test_blank(self, fake_phonemizer):
        result = asyncio.run(transcribe("   ", phonemizer=fake_phonemizer))
        assert result.ipa == ""
        assert result.simplified == ""
        assert result.simplified_html == ""
        assert not result.failed

    def test_failure_falls_back_to_text(self, failing_phonemizer):
        result = asyncio.run(transcribe(" a <b> ", phonemizer=failing_phonemizer))
        assert result.failed
        assert result.simplified == "a <b>"
        assert result.simplified_html == "a &lt;b&gt;"
