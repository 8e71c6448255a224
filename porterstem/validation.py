"""Boundary checks run before a word reaches the rule engine."""

import logging
import re

from porterstem.config import StemmerConfig

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[a-z]*")


class InvalidWordError(ValueError):
    """Raised in strict mode for input the algorithm does not define."""

    def __init__(self, word: str, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"cannot stem {word!r}: {reason}")


def is_stemmable(word: str) -> bool:
    """True if word consists only of lowercase ASCII letters."""
    return _WORD_RE.fullmatch(word) is not None


def _reason(word: str) -> str:
    bad = sorted({ch for ch in word if not ("a" <= ch <= "z")})
    if any(ch.isupper() for ch in bad):
        return "uppercase letters (enable lowercasing or normalize first)"
    shown = "".join(bad[:5])
    return f"contains non a-z characters {shown!r}"


def validate_word(word, config: StemmerConfig) -> tuple[str, bool]:
    """
    Normalize word according to config.

    Returns:
        (word, ok). When ok is False the caller must return word
        untouched instead of stemming it (lenient pass-through).

    Raises:
        TypeError: If word is not a str
        InvalidWordError: If strict and word has characters outside a-z
    """
    if not isinstance(word, str):
        raise TypeError(f"word must be str, not {type(word).__name__}")
    if config.lowercase:
        word = word.lower()
    if is_stemmable(word):
        return word, True
    if config.strict:
        raise InvalidWordError(word, _reason(word))
    logger.debug("Passing through unstemmable token %r", word)
    return word, False
