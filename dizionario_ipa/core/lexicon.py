"""Lexical tables and word classification for raddoppiamento fonosintattico.

WHY: Whether a word doubles the initial consonant of the next one is a
lexical property in standard Italian: a closed list of monosyllables and
a handful of other words do (cogeminant), articles and clitic pronouns
do not, and every word stressed on its last syllable does. The rule
engine needs a single yes/no answer per word.

HOW: Category lists are module-level frozensets built once at import.
The inclusion lists are unioned into one lookup set. Classification
checks, in order: exclusion set, falling-diphthong exceptions, inclusion
set, oxytone pattern.

RULES:
- Exclusion wins over every inclusion list ("ne" is a preposition in the
  lists but always a clitic here; "mi", "la", "si", "ci" likewise)
- "poi", "mai", "sei" never trigger, despite being stressed monosyllables
- Any word ending in à è é ì ò ó ù is oxytone and triggers
- Tables are never mutated at runtime
- Sources: it.wikipedia.org/wiki/Raddoppiamento_fonosintattico,
  it.wikipedia.org/wiki/Dizione_della_lingua_italiana
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List

# ---------------------------------------------------------------------------
# Cogeminant monosyllables, by grammatical category
# ---------------------------------------------------------------------------

VERBS: FrozenSet[str] = frozenset({
    "è", "fu", "ho", "ha", "vo", "va", "do", "dà", "da", "fo", "fa",
    "fé", "so", "sa", "sto", "sta", "stiè", "può", "dì",
})

CONJUNCTIONS: FrozenSet[str] = frozenset({"che", "ché", "e", "ma", "né", "o", "se"})

PRONOUNS: FrozenSet[str] = frozenset({"che", "chi", "ciò", "sé", "tu", "me", "te"})

# "de" and "ne" are poetic prepositions; "ne" is shadowed by the clitic below.
PREPOSITIONS: FrozenSet[str] = frozenset({"a", "da", "su", "tra", "fra", "de", "ne"})

ADVERBS: FrozenSet[str] = frozenset({
    "su", "sù", "giù", "qui", "qua", "lì", "là", "sì", "no", "già",
    "più", "ve", "mo",
})

NOUNS: FrozenSet[str] = frozenset({"blu", "co", "dì", "gru", "gnu", "pro", "re", "sci", "tè", "tre"})

# Truncations; "po'" and "pro'" (valoroso) do not trigger.
TRUNCATIONS: FrozenSet[str] = frozenset({"fé", "fra'", "pre'", "piè"})

LETTERS: FrozenSet[str] = frozenset({
    "a", "bi", "ci", "di", "e", "gi", "i", "o", "pi", "qu", "cu", "ti",
    "u", "vu", "vi", "be", "ce", "de", "ge", "pe", "te", "ve", "ca",
    "mi", "chi", "ni", "csi",
})

MUSICAL_NOTES: FrozenSet[str] = frozenset({"do", "re", "mi", "fa", "la", "si"})

OTHER_COGEMINANT: FrozenSet[str] = frozenset({"come", "dove", "qualche", "sopra"})

# ---------------------------------------------------------------------------
# Exclusions and pregeminants
# ---------------------------------------------------------------------------

ARTICLES: FrozenSet[str] = frozenset({"il", "lo", "la", "i", "gli", "le"})

CLITIC_PRONOUNS: FrozenSet[str] = frozenset({"mi", "ti", "si", "ci", "vi", "li", "ne"})

NON_COGEMINANT: FrozenSet[str] = ARTICLES | CLITIC_PRONOUNS

NON_COGEMINANT_FALLING_DIPHTHONGS: FrozenSet[str] = frozenset({"poi", "mai", "sei"})

PREGEMINANT: FrozenSet[str] = frozenset({"dio", "dèi", "dea", "dee"})

LEXICAL_CATEGORIES: Dict[str, FrozenSet[str]] = {
    "verbs": VERBS,
    "conjunctions": CONJUNCTIONS,
    "pronouns": PRONOUNS,
    "prepositions": PREPOSITIONS,
    "adverbs": ADVERBS,
    "nouns": NOUNS,
    "truncations": TRUNCATIONS,
    "letters": LETTERS,
    "musical_notes": MUSICAL_NOTES,
    "other_cogeminant": OTHER_COGEMINANT,
    "non_cogeminant": NON_COGEMINANT,
    "non_cogeminant_falling_diphthongs": NON_COGEMINANT_FALLING_DIPHTHONGS,
    "pregeminant": PREGEMINANT,
}
"""Every named word list, for introspection and diagnostics."""

_INCLUSION_KEYS = (
    "verbs", "conjunctions", "pronouns", "prepositions", "adverbs", "nouns",
    "truncations", "letters", "musical_notes", "other_cogeminant",
)

_STRIP_TABLE = str.maketrans("", "", ".,;:!?'\"«»“”„’")


def clean_word(raw: str) -> str:
    """Lowercase and strip punctuation and quote marks."""
    return raw.lower().translate(_STRIP_TABLE)


# Stored in cleaned form so "fra'" and "pre'" match what clean_word produces.
COGEMINANT: FrozenSet[str] = frozenset(
    clean_word(word) for key in _INCLUSION_KEYS for word in LEXICAL_CATEGORIES[key]
)

# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

OXYTONE_ENDINGS = frozenset("àèéìòóù")
VOWELS = frozenset("aeiouàèéìòóù")


def is_oxytone(word: str) -> bool:
    """True when the word ends in an accented vowel (parola tronca)."""
    return bool(word) and word[-1] in OXYTONE_ENDINGS


def is_cogeminant(word: str) -> bool:
    """Decide whether ``word`` triggers gemination of the next word.

    RULES (first match wins):
    1. Article or clitic pronoun → False
    2. Falling-diphthong exception (poi, mai, sei) → False
    3. Any inclusion list → True
    4. Oxytone → True
    5. Otherwise → False
    """
    if word in NON_COGEMINANT:
        return False
    if word in NON_COGEMINANT_FALLING_DIPHTHONGS:
        return False
    if word in COGEMINANT:
        return True
    return is_oxytone(word)


def is_pregeminant(word: str) -> bool:
    return word in PREGEMINANT


def ends_in_vowel(word: str) -> bool:
    return bool(word) and word[-1].lower() in VOWELS


def categories_of(word: str) -> List[str]:
    """Names of every lexical list containing ``word``, in table order."""
    return [name for name, words in LEXICAL_CATEGORIES.items() if word in words]
