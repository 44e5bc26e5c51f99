"""Similarity matchers sharing a common weighted scoring interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Set, Type, Union

from name_match.core.preprocessor import clean
from name_match.core.jaro import jaro_winkler_score
from name_match.core.soundex import soundex
from name_match.core.similarity import jaccard_index, tokenize
from name_match.config.models import JaroWinklerConfig, MatcherKind, MatchResult


class BaseMatcher(ABC):
    """
    Base class for name matchers.

    A matcher cleans both names, scores them with its algorithm and scales the
    score by its weight. Scores are always between 0 and 1; the weight is not
    constrained.
    """

    name: str = ''
    config_class: Optional[type] = None

    def __init__(self, weight: Optional[float] = None):
        """
        Initialize the matcher.

        Args:
            weight: Multiplier applied to the score, defaults to 1.0
        """
        self._weight = 1.0 if weight is None else float(weight)

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = float(value)

    def clean(self, value: Any) -> str:
        """Normalize a name before scoring."""
        return clean(value)

    @abstractmethod
    def score(self, s1: str, s2: str) -> float:
        """
        Calculate the unweighted similarity of two names.

        Args:
            s1: First name
            s2: Second name

        Returns:
            float: Similarity score between 0 and 1
        """
        pass

    def weighted_score(self, s1: str, s2: str) -> float:
        """Calculate the similarity of two names scaled by the weight."""
        return self.weight * self.score(s1, s2)

    def result(self, s1: str, s2: str) -> MatchResult:
        """
        Score two names and package the outcome.

        Args:
            s1: First name
            s2: Second name

        Returns:
            MatchResult: Absolute and weighted score for this matcher
        """
        absolute_score = self.score(s1, s2)
        return MatchResult(
            algorithm=self.name,
            weight=self.weight,
            absolute_score=absolute_score,
            weighted_score=absolute_score * self.weight
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(weight={self.weight!r})"


class JaroWinklerMatcher(BaseMatcher):
    """Edit distance based matching using Jaro-Winkler similarity."""

    name = 'Jaro-Winkler'
    config_class = JaroWinklerConfig

    def __init__(
        self,
        config: Optional[JaroWinklerConfig] = None,
        weight: Optional[float] = None
    ):
        super().__init__(weight)
        self.config = config or JaroWinklerConfig()

    def score(self, s1: str, s2: str) -> float:
        return jaro_winkler_score(self.clean(s1), self.clean(s2), self.config)


class SoundexMatcher(BaseMatcher):
    """
    Phonetic matching on the Soundex code of the whole name.

    Scores 1.0 when both names share a Soundex code and 0.0 otherwise.
    """

    name = 'Soundex'

    def score(self, s1: str, s2: str) -> float:
        code1 = soundex(self.clean(s1))
        code2 = soundex(self.clean(s2))
        return 1.0 if code1 == code2 else 0.0


class SoundexJaccardMatcher(BaseMatcher):
    """
    Phonetic matching tolerant of reordered name parts.

    Each token is replaced by its Soundex code and the resulting code sets are
    compared, so "James Bond" and "Bond, Jaimes" score 1.0.
    """

    name = 'Soundex-Jaccard'

    def _soundex_tokens(self, value: str) -> Set[str]:
        return {soundex(token) for token in tokenize(self.clean(value))}

    def score(self, s1: str, s2: str) -> float:
        return jaccard_index(self._soundex_tokens(s1), self._soundex_tokens(s2))


class JaccardMatcher(BaseMatcher):
    """Token overlap matching, handles reordered and missing name parts."""

    name = 'Jaccard'

    def score(self, s1: str, s2: str) -> float:
        return jaccard_index(tokenize(self.clean(s1)), tokenize(self.clean(s2)))


class MatcherRegistry:
    """Registry for matcher types."""

    def __init__(self):
        self._matchers: Dict[MatcherKind, Type[BaseMatcher]] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default matchers."""
        self.register(MatcherKind.JARO_WINKLER, JaroWinklerMatcher)
        self.register(MatcherKind.SOUNDEX, SoundexMatcher)
        self.register(MatcherKind.SOUNDEX_JACCARD, SoundexJaccardMatcher)
        self.register(MatcherKind.JACCARD, JaccardMatcher)

    @staticmethod
    def _resolve(kind: Union[MatcherKind, str]) -> MatcherKind:
        try:
            return MatcherKind(kind)
        except ValueError:
            raise ValueError(f"Unknown matcher type: {kind}") from None

    def register(
        self,
        kind: Union[MatcherKind, str],
        matcher_class: Type[BaseMatcher]
    ) -> None:
        """
        Register a matcher class.

        Args:
            kind: Matcher kind to register the class under
            matcher_class: Matcher class to register
        """
        self._matchers[self._resolve(kind)] = matcher_class

    def create(self, kind: Union[MatcherKind, str], **kwargs: Any) -> BaseMatcher:
        """
        Create a matcher instance.

        Args:
            kind: Matcher kind, either a MatcherKind or its value
            **kwargs: Constructor arguments for the matcher

        Returns:
            BaseMatcher: Configured matcher instance

        Raises:
            ValueError: If the matcher kind is not registered
        """
        matcher_class = self._matchers.get(self._resolve(kind))
        if not matcher_class:
            raise ValueError(f"Unknown matcher type: {kind}")

        return matcher_class(**kwargs)

    def accepts_config(self, kind: Union[MatcherKind, str]) -> bool:
        """Whether matchers of this kind take an algorithm configuration."""
        matcher_class = self._matchers.get(self._resolve(kind))
        return matcher_class is not None and matcher_class.config_class is not None

# Global registry instance
registry = MatcherRegistry()

def construct_matcher(
    kind: Union[MatcherKind, str],
    config: Optional[JaroWinklerConfig] = None,
    weight: Optional[float] = None
) -> BaseMatcher:
    """
    Construct a matcher from the global registry.

    Args:
        kind: Matcher kind, either a MatcherKind or its value
        config: Algorithm configuration, only for Jaro-Winkler matchers
        weight: Weight of the matcher, defaults to 1.0

    Returns:
        BaseMatcher: Configured matcher instance

    Raises:
        ValueError: If the kind is unknown or does not take a configuration
    """
    if config is None:
        return registry.create(kind, weight=weight)

    if not registry.accepts_config(kind):
        raise ValueError(f"Matcher type {kind} does not accept a configuration")

    return registry.create(kind, config=config, weight=weight)
