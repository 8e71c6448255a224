"""
Letter classification for the Porter algorithm.

A word is viewed as alternating runs of consonants (C) and vowels (V):

    [C](VC){m}[V]

where m is the "measure", the syllable-count heuristic gating most
suffix removals. The only subtlety is 'y': it is a consonant at the start
of a word or after a vowel, and a vowel after a consonant. That makes the
classification of each letter depend on the one before it, so the mask is
always built with a single forward scan.

Examples:
    measure("tree")     -> 0
    measure("trouble")  -> 1
    measure("private")  -> 2
    cv_pattern("ivy")   -> "VCV"
"""

VOWELS = frozenset("aeiou")

# Final letters that never complete a *o (CVC) ending
_CVC_EXCLUDED = frozenset("wxy")


def consonant_mask(word: str) -> list[bool]:
    """Return, for each position in word, True if the letter acts as a consonant."""
    mask: list[bool] = []
    for i, ch in enumerate(word):
        if ch in VOWELS:
            mask.append(False)
        elif ch == "y":
            mask.append(i == 0 or not mask[i - 1])
        else:
            mask.append(True)
    return mask


def is_consonant(word: str, i: int) -> bool:
    """
    Check whether the letter at index i acts as a consonant.

    Args:
        word: Lowercase letters
        i: 0-based index, 0 <= i < len(word)

    Raises:
        IndexError: If i is outside the word
    """
    if not 0 <= i < len(word):
        raise IndexError(f"index {i} out of range for {word!r}")
    return consonant_mask(word[:i + 1])[i]


def cv_pattern(word: str) -> str:
    """Render the consonant mask as a C/V string, e.g. "trouble" -> "CCVVCCV"."""
    return "".join("C" if c else "V" for c in consonant_mask(word))


def measure(word: str) -> int:
    """Count VC transitions (m). A leading C run and a trailing V run add nothing."""
    mask = consonant_mask(word)
    return sum(
        1 for i in range(1, len(mask))
        if mask[i] and not mask[i - 1]
    )


def contains_vowel(word: str) -> bool:
    """*v*: the word has at least one vowel."""
    return not all(consonant_mask(word))


def ends_double_consonant(word: str) -> bool:
    """*d: the word ends with two identical consonants."""
    if len(word) < 2 or word[-1] != word[-2]:
        return False
    return consonant_mask(word)[-1]


def ends_cvc(word: str) -> bool:
    """
    *o: the word ends consonant-vowel-consonant, the last not w, x or y.

    Signals a short syllable such as "hop", "cav" or "lov" where a
    silent 'e' should be kept or restored.
    """
    if len(word) < 3 or word[-1] in _CVC_EXCLUDED:
        return False
    mask = consonant_mask(word)
    return mask[-3] and not mask[-2] and mask[-1]
