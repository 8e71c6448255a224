"""
porterstem — The Porter stemming algorithm for English words.

Usage:
    from porterstem import stem

    stem("caresses")     # -> "caress"
    stem("motoring")     # -> "motor"

    # Custom boundary policy
    from porterstem import PorterStemmer, StemmerConfig

    stemmer = PorterStemmer(StemmerConfig.lenient())
    stemmer.stem_words(["Running", "e-mail", "ponies"])   # -> ["run", "e-mail", "poni"]

    # What did each step do?
    for step in stemmer.trace("relational").changes():
        print(step.step, step.before, "->", step.after)
"""

from porterstem.config import StemmerConfig
from porterstem.letters import (
    consonant_mask,
    contains_vowel,
    cv_pattern,
    ends_cvc,
    ends_double_consonant,
    is_consonant,
    measure,
)
from porterstem.stemmer import PorterStemmer, StemTrace, StepRecord, stem, stem_words
from porterstem.validation import InvalidWordError

__all__ = [
    "stem",
    "stem_words",
    "PorterStemmer",
    "StemmerConfig",
    "StemTrace",
    "StepRecord",
    "InvalidWordError",
    "consonant_mask",
    "is_consonant",
    "cv_pattern",
    "measure",
    "contains_vowel",
    "ends_double_consonant",
    "ends_cvc",
]
__version__ = "0.1.0"
