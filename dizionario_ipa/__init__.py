"""Dizionario IPA: Italian text to IPA with a simplified hybrid rendering.

WHY: Learners of Italian need to see how a sentence is actually
pronounced: which e/o vowels are open, which s/z are voiced, and which
word-initial consonants are doubled by the preceding word. A raw IPA
transcription is hard to read; the original spelling hides all of it.

HOW: Four stages: phonemize (espeak-ng engine boundary),
post-process (raddoppiamento fonosintattico over word-aligned IPA),
simplify (overlay IPA detail onto the original spelling as emphasized
segments) and render (plain text or HTML).

RULES:
- The transform layer is pure and never raises; mismatches degrade to identity
- Only the engine boundary performs I/O and it never raises either
- Segments are the stable contract between the builder and the renderers
"""

__version__ = "0.1.0"
