"""Token set similarity."""

from typing import AbstractSet, Set


def tokenize(text: str) -> Set[str]:
    """Split a cleaned name into its set of whitespace separated tokens."""
    return set(text.split())


def jaccard_index(tokens1: AbstractSet[str], tokens2: AbstractSet[str]) -> float:
    """
    Calculate the overlap between two token sets.

    Uses the overlap coefficient ``|A & B| / min(|A|, |B|)`` so that a name
    with a missing component (e.g. no middle name) still scores 1.0 against
    the full name.

    Args:
        tokens1: First token set
        tokens2: Second token set

    Returns:
        float: Overlap between 0 and 1, 0.0 when either set is empty
    """
    smallest = min(len(tokens1), len(tokens2))
    if smallest == 0:
        return 0.0

    return len(tokens1 & tokens2) / smallest
