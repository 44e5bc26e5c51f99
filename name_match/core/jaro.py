"""Jaro and Jaro-Winkler string similarity."""

from typing import List, Optional, Tuple

from name_match.config.models import JaroWinklerConfig

DEFAULT_CONFIG = JaroWinklerConfig()


def max_distance_allowed(len1: int, len2: int) -> int:
    """
    Half-width of the matching window for two strings.

    Negative for strings of length one, in which case no characters match
    unless the strings are identical.
    """
    return max(len1, len2) // 2 - 1


def common_prefix_length(s1: str, s2: str) -> int:
    """Count leading characters shared by both strings."""
    prefix = 0
    for c1, c2 in zip(s1, s2):
        if c1 != c2:
            break
        prefix += 1
    return prefix


def find_matches(
    s1: str,
    s2: str,
    max_dist: int
) -> Tuple[int, List[bool], List[bool]]:
    """
    Find characters of s1 that match a character of s2 inside the window.

    Each position of s1 claims the first unmatched equal character of s2
    within ``[i - max_dist, i + max_dist]``, scanning left to right.

    Args:
        s1: First string
        s2: Second string
        max_dist: Half-width of the matching window

    Returns:
        Tuple[int, List[bool], List[bool]]: Match count and the matched flags
        for each position of s1 and s2
    """
    len2 = len(s2)
    flags1 = [False] * len(s1)
    flags2 = [False] * len2
    matches = 0

    for i, char in enumerate(s1):
        start = max(0, i - max_dist)
        end = min(i + max_dist + 1, len2)

        for j in range(start, end):
            if not flags2[j] and s2[j] == char:
                flags1[i] = True
                flags2[j] = True
                matches += 1
                break

    return matches, flags1, flags2


def count_transpositions(
    s1: str,
    s2: str,
    flags1: List[bool],
    flags2: List[bool]
) -> float:
    """Half the number of matched characters that appear out of order."""
    matched2 = (char for char, flag in zip(s2, flags2) if flag)
    out_of_order = 0

    for char, flag in zip(s1, flags1):
        if flag and char != next(matched2):
            out_of_order += 1

    return out_of_order / 2


def jaro_score(s1: str, s2: str) -> float:
    """
    Calculate the Jaro similarity of two strings.

    Args:
        s1: First string, already normalized
        s2: Second string, already normalized

    Returns:
        float: Similarity score between 0 and 1
    """
    len1 = len(s1)
    len2 = len(s2)

    if len1 == 0 or len2 == 0:
        return 0.0

    if s1 == s2:
        return 1.0

    matches, flags1, flags2 = find_matches(
        s1, s2, max_distance_allowed(len1, len2)
    )
    if matches == 0:
        return 0.0

    transpositions = count_transpositions(s1, s2, flags1, flags2)

    return (
        matches / len1 +
        matches / len2 +
        (matches - transpositions) / matches
    ) / 3.0


def jaro_winkler_score(
    s1: str,
    s2: str,
    config: Optional[JaroWinklerConfig] = None
) -> float:
    """
    Calculate the Jaro-Winkler similarity of two strings.

    The Jaro score is boosted by the length of the common prefix once it is
    above the configured similarity threshold. The result is not clamped.

    Args:
        s1: First string, already normalized
        s2: Second string, already normalized
        config: Prefix bonus configuration, defaults to JaroWinklerConfig()

    Returns:
        float: Similarity score, between 0 and 1 for valid configurations
    """
    config = config or DEFAULT_CONFIG
    score = jaro_score(s1, s2)

    if score > config.similarity_threshold:
        prefix_length = min(common_prefix_length(s1, s2), config.max_prefix_length)
        score += config.scaling_factor * prefix_length * (1.0 - score)

    return score
