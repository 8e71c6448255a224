"""
Suffix rule tables for the Porter stemmer.

Each step of the algorithm is a StepGroup: an ordered list of SuffixRule
records, tried longest suffix first. The first rule whose suffix matches
decides the step: if its guard holds the suffix is rewritten, otherwise
the word is left alone. Shorter suffixes never get a second chance.

Guards receive the stem, i.e. the word with the matched suffix removed,
and are labelled with the notation of Porter's paper:

    m>N   measure of the stem greater than N
    *v*   stem contains a vowel
    *o    stem ends consonant-vowel-consonant (last not w, x, y)
    *d    stem ends with a double consonant
    *S    stem ends with the letter S

The tables follow the canonical C release rather than the 1980 paper where
the two differ (bli -> ble, and the extra logi -> log rule in step 2).
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from porterstem.letters import contains_vowel, ends_cvc, ends_double_consonant, measure


@dataclass(frozen=True)
class Guard:
    """A named precondition on the stem left after removing a suffix."""
    label: str
    test: Callable[[str], bool] = field(compare=False)

    def __call__(self, stem: str) -> bool:
        return self.test(stem)


def always() -> Guard:
    return Guard("", lambda stem: True)


def measure_above(n: int) -> Guard:
    return Guard(f"m>{n}", lambda stem: measure(stem) > n)


def measure_equals(n: int) -> Guard:
    return Guard(f"m={n}", lambda stem: measure(stem) == n)


def has_vowel() -> Guard:
    return Guard("*v*", contains_vowel)


def ends_cvc_guard() -> Guard:
    return Guard("*o", ends_cvc)


def ends_with_any(letters: str) -> Guard:
    label = " or ".join(f"*{ch.upper()}" for ch in letters)
    return Guard(label, lambda stem: bool(stem) and stem[-1] in letters)


def doubled_consonant(letter: str) -> Guard:
    """*d for a suffix that is letter doubled; only 'y' can fail it."""
    pair = letter * 2
    return Guard("*d", lambda stem: ends_double_consonant(stem + pair))


def negate(guard: Guard) -> Guard:
    return Guard(f"not {guard.label}", lambda stem: not guard(stem))


def all_of(*guards: Guard) -> Guard:
    label = " and ".join(g.label for g in guards)
    return Guard(f"({label})", lambda stem: all(g(stem) for g in guards))


def any_of(*guards: Guard) -> Guard:
    label = " or ".join(g.label for g in guards)
    return Guard(f"({label})", lambda stem: any(g(stem) for g in guards))


@dataclass(frozen=True)
class SuffixRule:
    """suffix -> replacement, applied only when guard(stem) holds."""
    suffix: str
    replacement: str
    guard: Guard = field(default_factory=always)
    chain: bool = False

    def describe(self) -> str:
        rewrite = f"-{self.suffix or '∅'} -> -{self.replacement or '∅'}"
        if self.guard.label:
            return f"{self.guard.label} {rewrite}"
        return rewrite


@dataclass
class StepGroup:
    """
    One stage of the pipeline.

    Rules are re-ordered by decreasing suffix length on construction (a
    stable sort, so equal lengths keep declaration order). When a rule
    marked chain=True fires, the followup group is applied once to the
    result.
    """
    name: str
    rules: list[SuffixRule]
    followup: Optional["StepGroup"] = None

    def __post_init__(self):
        self.rules = sorted(self.rules, key=lambda r: -len(r.suffix))

    def match(self, word: str) -> Optional[SuffixRule]:
        """Return the rule whose suffix matches word, if any."""
        for rule in self.rules:
            if word.endswith(rule.suffix):
                return rule
        return None

    def apply(self, word: str) -> tuple[str, list[SuffixRule]]:
        """
        Apply the group to word.

        Returns:
            (new_word, fired) where fired lists the rules that rewrote the
            word, the group's own rule first and any followup rule after it.
        """
        rule = self.match(word)
        if rule is None:
            return word, []
        stem = word[:len(word) - len(rule.suffix)]
        if not rule.guard(stem):
            return word, []
        word = stem + rule.replacement
        fired = [rule]
        if rule.chain and self.followup is not None:
            word, more = self.followup.apply(word)
            fired.extend(more)
        return word, fired


# ═══════════════════════════════════════════════════════════
# Step 1: plurals and past participles
# ═══════════════════════════════════════════════════════════

STEP_1A = StepGroup("1a", [
    SuffixRule("sses", "ss"),
    SuffixRule("ies", "i"),
    SuffixRule("ss", "ss"),
    SuffixRule("s", ""),
])

# After -ed / -ing removal: restore an 'e' or undouble the final consonant.
# The empty suffix always matches, so the *o rule acts as the final else.
_DOUBLED = "bcdfghjkmnpqrtvwxy"

STEP_1B_CLEANUP = StepGroup("1b*", [
    SuffixRule("at", "ate"),
    SuffixRule("bl", "ble"),
    SuffixRule("iz", "ize"),
    *(SuffixRule(ch * 2, ch, doubled_consonant(ch)) for ch in _DOUBLED),
    SuffixRule("", "e", all_of(measure_equals(1), ends_cvc_guard())),
])

STEP_1B = StepGroup("1b", [
    SuffixRule("eed", "ee", measure_above(0)),
    SuffixRule("ed", "", has_vowel(), chain=True),
    SuffixRule("ing", "", has_vowel(), chain=True),
], followup=STEP_1B_CLEANUP)

STEP_1C = StepGroup("1c", [
    SuffixRule("y", "i", has_vowel()),
])

# ═══════════════════════════════════════════════════════════
# Steps 2 and 3: double suffixes to single ones (m>0)
# ═══════════════════════════════════════════════════════════

_M0 = measure_above(0)

STEP_2 = StepGroup("2", [SuffixRule(s, r, _M0) for s, r in [
    ("ational", "ate"), ("tional", "tion"),
    ("enci", "ence"), ("anci", "ance"),
    ("izer", "ize"),
    ("bli", "ble"), ("alli", "al"), ("entli", "ent"), ("eli", "e"), ("ousli", "ous"),
    ("ization", "ize"), ("ation", "ate"), ("ator", "ate"),
    ("alism", "al"), ("iveness", "ive"), ("fulness", "ful"), ("ousness", "ous"),
    ("aliti", "al"), ("iviti", "ive"), ("biliti", "ble"),
    ("logi", "log"),
]])

STEP_3 = StepGroup("3", [SuffixRule(s, r, _M0) for s, r in [
    ("icate", "ic"), ("ative", ""), ("alize", "al"),
    ("iciti", "ic"),
    ("ical", "ic"), ("ful", ""),
    ("ness", ""),
]])

# ═══════════════════════════════════════════════════════════
# Step 4: strip suffixes from long stems (m>1)
# ═══════════════════════════════════════════════════════════

_M1 = measure_above(1)

STEP_4 = StepGroup("4", [
    *(SuffixRule(s, "", _M1) for s in (
        "al", "ance", "ence", "er", "ic", "able", "ible",
        "ant", "ement", "ment", "ent",
    )),
    SuffixRule("ion", "", all_of(_M1, ends_with_any("st"))),
    *(SuffixRule(s, "", _M1) for s in (
        "ou", "ism", "ate", "iti", "ous", "ive", "ize",
    )),
])

# ═══════════════════════════════════════════════════════════
# Step 5: tidy up a final -e and -ll
# ═══════════════════════════════════════════════════════════

STEP_5A = StepGroup("5a", [
    SuffixRule("e", "", any_of(
        _M1,
        all_of(measure_equals(1), negate(ends_cvc_guard())),
    )),
])

# Removing one 'l' leaves a stem that still ends in 'l', so its measure
# equals that of the whole word.
STEP_5B = StepGroup("5b", [
    SuffixRule("l", "", all_of(ends_with_any("l"), _M1)),
])

PIPELINE = (STEP_1A, STEP_1B, STEP_1C, STEP_2, STEP_3, STEP_4, STEP_5A, STEP_5B)
