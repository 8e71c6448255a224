"""
Porter Stemmer step engine.

Runs a word through the fixed pipeline of suffix-rule groups defined in
rules.py:

    1a -> 1b (-> 1b cleanup) -> 1c -> 2 -> 3 -> 4 -> 5a -> 5b

Each group is applied exactly once, in order, and never revisited. A
group that finds no applicable rule leaves the word unchanged.

Reference:
    Porter, M.F., "An algorithm for suffix stripping", Program, Vol. 14,
    No. 3, pp 130-137, July 1980.

Usage:
    from porterstem import stem

    stem("relational")   # -> "relat"
    stem("ponies")       # -> "poni"
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from porterstem.config import StemmerConfig
from porterstem.rules import (
    PIPELINE,
    STEP_1A,
    STEP_1B,
    STEP_1C,
    STEP_2,
    STEP_3,
    STEP_4,
    STEP_5A,
    STEP_5B,
    StepGroup,
    SuffixRule,
)
from porterstem.validation import validate_word

logger = logging.getLogger(__name__)


@dataclass
class StepRecord:
    """What one step group did to the word."""
    step: str
    before: str
    after: str
    rules: list[SuffixRule] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.before != self.after


@dataclass
class StemTrace:
    """Step-by-step account of a single stem() call."""
    word: str
    stem: str
    steps: list[StepRecord] = field(default_factory=list)
    skipped: Optional[str] = None  # why the pipeline did not run, if it didn't

    def changes(self) -> list[StepRecord]:
        return [s for s in self.steps if s.changed]


class PorterStemmer:
    """
    Stateless Porter stemmer.

    Holds only its (read-only) config, so one instance can be shared
    across threads.
    """

    def __init__(self, config: StemmerConfig = None):
        self.config = config or StemmerConfig.default()

    # ── individual steps ──────────────────────────────────

    def step1a(self, word: str) -> str:
        return STEP_1A.apply(word)[0]

    def step1b(self, word: str) -> str:
        return STEP_1B.apply(word)[0]

    def step1c(self, word: str) -> str:
        return STEP_1C.apply(word)[0]

    def step2(self, word: str) -> str:
        return STEP_2.apply(word)[0]

    def step3(self, word: str) -> str:
        return STEP_3.apply(word)[0]

    def step4(self, word: str) -> str:
        return STEP_4.apply(word)[0]

    def step5a(self, word: str) -> str:
        return STEP_5A.apply(word)[0]

    def step5b(self, word: str) -> str:
        return STEP_5B.apply(word)[0]

    # ── pipeline ──────────────────────────────────────────

    def _run(self, word: str, steps: Optional[list[StepRecord]]) -> str:
        for group in PIPELINE:
            # A one-letter word after step 1b ("ied" -> "i") has nothing
            # left to strip.
            if group is STEP_1C and len(word) <= 1:
                break
            word = self._apply(group, word, steps)
        return word

    def _apply(self, group: StepGroup, word: str, steps: Optional[list[StepRecord]]) -> str:
        after, fired = group.apply(word)
        if after != word:
            logger.debug(
                "step %s: %s -> %s (%s)",
                group.name, word, after, "; ".join(r.describe() for r in fired),
            )
        if steps is not None:
            steps.append(StepRecord(group.name, word, after, fired if after != word else []))
        return after

    def _prepare(self, word: str) -> tuple[str, Optional[str]]:
        """Validate word; return (word, skip_reason) where skip_reason is None to stem."""
        word, ok = validate_word(word, self.config)
        if not ok:
            return word, "not a plain lowercase word"
        if len(word) < self.config.min_length:
            return word, f"shorter than {self.config.min_length} letters"
        return word, None

    def stem(self, word: str) -> str:
        """
        Reduce word to its stem.

        Args:
            word: A single word token

        Returns:
            The stem. May be shorter than any dictionary word ("poni"),
            and is never longer than the input.

        Raises:
            TypeError: If word is not a str
            InvalidWordError: In strict mode, for characters outside a-z
        """
        word, skipped = self._prepare(word)
        if skipped is not None:
            return word
        return self._run(word, None)

    def trace(self, word: str) -> StemTrace:
        """Like stem(), but record what every step group did."""
        prepared, skipped = self._prepare(word)
        if skipped is not None:
            return StemTrace(word=prepared, stem=prepared, skipped=skipped)
        steps: list[StepRecord] = []
        result = self._run(prepared, steps)
        return StemTrace(word=prepared, stem=result, steps=steps)

    def stem_words(self, words: Iterable[str]) -> list[str]:
        return [self.stem(w) for w in words]


_default = PorterStemmer()


def stem(word: str) -> str:
    """Stem a single word with the default configuration."""
    return _default.stem(word)


def stem_words(words: Iterable[str]) -> list[str]:
    """Stem each word with the default configuration."""
    return _default.stem_words(words)
