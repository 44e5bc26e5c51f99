"""
Name Match
==========

Similarity scoring for personal names using several independent algorithms
combined into a single weighted judgment.

Key Features:
- Jaro-Winkler edit distance similarity
- Soundex phonetic matching, per name and per token
- Token overlap (Jaccard) similarity
- Weighted ensembles with parallel batch scoring
"""

from name_match.core.preprocessor import clean
from name_match.core.jaro import jaro_score, jaro_winkler_score
from name_match.core.soundex import soundex
from name_match.core.similarity import jaccard_index
from name_match.core.matcher import (
    BaseMatcher,
    JaroWinklerMatcher,
    SoundexMatcher,
    SoundexJaccardMatcher,
    JaccardMatcher,
    MatcherRegistry,
    construct_matcher
)
from name_match.core.ensemble import Ensemble, results_to_frame

from name_match.config.models import (
    JaroWinklerConfig,
    MatcherKind,
    MatcherSpec,
    EnsembleConfig,
    MatchResult,
    EnsembleResult
)
from name_match.config.loader import load_ensemble_config, parse_ensemble_config

__version__ = "1.0.0"
