"""Configuration and result models for the name matching system."""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional
from enum import Enum
import logging

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class JaroWinklerConfig:
    """Configuration for the Jaro-Winkler prefix bonus.

    The bonus never clamps the adjusted score, so callers are expected to keep
    ``scaling_factor * max_prefix_length <= 1``.
    """
    similarity_threshold: float = 0.7  # Jaro score must exceed this
    max_prefix_length: int = 4
    scaling_factor: float = 0.1

    def __post_init__(self):
        """Warn about configurations that can push scores above 1.0."""
        if self.scaling_factor * self.max_prefix_length > 1.0:
            logger.warning(
                f"Jaro-Winkler scaling_factor={self.scaling_factor} with "
                f"max_prefix_length={self.max_prefix_length} can produce "
                f"scores above 1.0"
            )

class MatcherKind(str, Enum):
    """Available matching algorithms."""
    JARO_WINKLER = "jaro_winkler"
    SOUNDEX = "soundex"
    SOUNDEX_JACCARD = "soundex_jaccard"
    JACCARD = "jaccard"

@dataclass(frozen=True)
class MatcherSpec:
    """Declarative description of a single matcher."""
    kind: MatcherKind
    weight: float = 1.0
    options: Optional[JaroWinklerConfig] = None

@dataclass(frozen=True)
class EnsembleConfig:
    """Configuration for building an ensemble of matchers."""
    matchers: List[MatcherSpec] = field(default_factory=list)
    equal_weight: bool = False
    worker_processes: int = -1
    use_processes: bool = False
    min_parallel_batch: int = 100

@dataclass(frozen=True)
class MatchResult:
    """Score produced by one matcher for a pair of names."""
    algorithm: str
    weight: float
    absolute_score: float
    weighted_score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class EnsembleResult:
    """Aggregate score of an ensemble together with its constituent results."""
    name1: str
    name2: str
    score: float
    results: List[MatchResult]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result into plain, serializable types."""
        return {
            'name1': self.name1,
            'name2': self.name2,
            'score': self.score,
            'results': [result.to_dict() for result in self.results]
        }
