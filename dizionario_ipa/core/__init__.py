"""Core alignment, classification and rewriting modules.

WHY: The core package contains the pure heart of the converter: the IR
dataclasses, the tokenizer that aligns spelling with IPA, the lexical
tables, and the two rewriting passes built on them.

HOW: ir.py defines the data structures, tokenizer.py produces them,
lexicon.py and phonology.py answer word- and sound-level questions,
raddoppiamento.py rewrites IPA and simplifier.py builds segments.

RULES:
- No I/O and no shared mutable state anywhere in this package
- Nothing here raises on bad alignment; it degrades to identity
- phonology.CONSONANT_SPELLINGS is the only consonant table
"""
