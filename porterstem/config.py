"""
Stemmer configuration.

All boundary policy lives here; the rule engine itself has no knobs.

Usage:
    from porterstem import PorterStemmer, StemmerConfig

    stemmer = PorterStemmer(StemmerConfig.lenient())
    stemmer.stem("don't")   # -> "don't" (passed through, not rejected)
"""

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


@dataclass
class StemmerConfig:
    """
    Boundary policy for PorterStemmer.

    Attributes:
        lowercase: Lowercase input before validating it. The canonical
            algorithm only defines lowercase letters.
        strict: Reject words containing anything but a-z with
            InvalidWordError. When False such words are returned unchanged.
        min_length: Words shorter than this are returned as-is. The
            canonical release leaves one- and two-letter words alone.
    """
    lowercase: bool = True
    strict: bool = True
    min_length: int = 3

    def __post_init__(self):
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0 (got {self.min_length})")

    @classmethod
    def default(cls) -> "StemmerConfig":
        return cls()

    @classmethod
    def canonical(cls) -> "StemmerConfig":
        """Exactly the C driver's contract: pre-normalized lowercase words only."""
        return cls(lowercase=False, strict=True)

    @classmethod
    def lenient(cls) -> "StemmerConfig":
        """For raw token streams: anything that isn't a plain word passes through."""
        return cls(lowercase=True, strict=False)

    @classmethod
    def from_env(cls) -> "StemmerConfig":
        """
        Build a config from PORTERSTEM_* environment variables.

        PORTERSTEM_STRICT, PORTERSTEM_LOWERCASE: booleans (1/0, true/false, ...)
        PORTERSTEM_MIN_LENGTH: integer
        """
        base = cls.default()
        raw_min = os.environ.get("PORTERSTEM_MIN_LENGTH")
        try:
            min_length = int(raw_min) if raw_min is not None else base.min_length
        except ValueError:
            raise ValueError(f"PORTERSTEM_MIN_LENGTH must be an integer (got {raw_min!r})") from None
        return cls(
            lowercase=_env_flag("PORTERSTEM_LOWERCASE", base.lowercase),
            strict=_env_flag("PORTERSTEM_STRICT", base.strict),
            min_length=min_length,
        )
