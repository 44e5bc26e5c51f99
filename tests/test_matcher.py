"""
Unit tests for matchers and the matcher registry.
"""

import pytest

from name_match.config.models import JaroWinklerConfig, MatcherKind, MatchResult
from name_match.core.matcher import (
    BaseMatcher,
    JaccardMatcher,
    JaroWinklerMatcher,
    MatcherRegistry,
    SoundexJaccardMatcher,
    SoundexMatcher,
    construct_matcher
)


ALL_MATCHERS = [JaroWinklerMatcher, SoundexMatcher, SoundexJaccardMatcher, JaccardMatcher]


class TestJaroWinklerMatcher:
    """Test cases for the Jaro-Winkler matcher."""

    def setup_method(self):
        """Setup test fixtures."""
        self.matcher = JaroWinklerMatcher()

    def test_defaults(self):
        assert self.matcher.name == "Jaro-Winkler"
        assert self.matcher.weight == 1.0
        assert self.matcher.config == JaroWinklerConfig()

    def test_case_insensitive_match(self):
        assert self.matcher.score("john doe", "JOHN DOE") == 1.0

    def test_ignores_special_characters(self):
        assert self.matcher.score("joh^ doe", "joh**doe") == 1.0

    def test_ignores_surrounding_whitespace(self):
        assert self.matcher.score("  john doe   ", "JOHN DOE") == 1.0

    def test_weighted_match(self):
        matcher = JaroWinklerMatcher(weight=0.5)
        assert matcher.weighted_score("JOHN DOE", "JOHN DOE") == 0.5

    def test_similar_names(self):
        assert self.matcher.score("Dwayne", "Duane") == pytest.approx(0.84, abs=0.01)


class TestSoundexMatcher:
    """Test cases for the Soundex matcher."""

    def setup_method(self):
        """Setup test fixtures."""
        self.matcher = SoundexMatcher()

    def test_match(self):
        assert self.matcher.score("Jame", "Jimmy") == 1.0

    def test_no_match(self):
        assert self.matcher.score("James", "Jimmy") == 0.0

    def test_case_insensitive_match(self):
        assert self.matcher.score("james", "JAMES") == 1.0

    def test_whitespace(self):
        assert self.matcher.score("   james    ", "JAMES") == 1.0

    def test_punctuation(self):
        assert self.matcher.score("O'Brien", "OBRIEN") == 1.0

    def test_half_weight(self):
        matcher = SoundexMatcher(weight=0.5)
        assert matcher.weighted_score("JAMES", "JAMES") == 0.5

    def test_empty_names_share_empty_code(self):
        assert self.matcher.score("", "") == 1.0
        assert self.matcher.score("", "James") == 0.0


class TestSoundexJaccardMatcher:
    """Test cases for the Soundex-Jaccard matcher."""

    def setup_method(self):
        """Setup test fixtures."""
        self.matcher = SoundexJaccardMatcher()

    def test_half_match(self):
        assert self.matcher.score("Jame Bond", "Bane Jimmy") == 0.5

    def test_longer_name(self):
        assert self.matcher.score("Robert Downey Junior", "Anthony Rupert") == 0.5

    def test_transposed_tokens(self):
        assert self.matcher.score("James Bond", "Bond, Jaimes") == 1.0

    def test_case_insensitive_match(self):
        assert self.matcher.score("james", "JAMES") == 1.0

    def test_whitespace(self):
        assert self.matcher.score("   james    Bay  ", "JAMES bay") == 1.0

    def test_half_weight(self):
        matcher = SoundexJaccardMatcher(weight=0.5)
        assert matcher.weighted_score("JAMES", "JAMES") == 0.5

    def test_empty(self):
        assert self.matcher.score("", "James") == 0.0


class TestJaccardMatcher:
    """Test cases for the Jaccard matcher."""

    def setup_method(self):
        """Setup test fixtures."""
        self.matcher = JaccardMatcher()

    def test_case_insensitive_match(self):
        assert self.matcher.score("john doe", "JOHN DOE") == 1.0

    def test_ignores_special_characters(self):
        assert self.matcher.score("joh^ doe", "joh**doe") == 1.0

    def test_whitespace(self):
        assert self.matcher.score("  john    doe   ", "JOHN DOE") == 1.0

    def test_transposed_and_partial(self):
        assert self.matcher.score("Doe, John", "John Doe") == 1.0
        assert self.matcher.score("John Doe", "John Smith") == 0.5
        assert self.matcher.score("John Doe", "Jane Smith") == 0.0

    def test_half_weight(self):
        matcher = JaccardMatcher(weight=0.5)
        assert matcher.weighted_score("JOHN DOE", "JOHN DOE") == 0.5

    def test_empty(self):
        assert self.matcher.score("", "") == 0.0


class TestMatcherCapabilities:
    """Test cases shared by all matchers."""

    @pytest.mark.parametrize("matcher_class", ALL_MATCHERS)
    @pytest.mark.parametrize("name", ["John Doe", "o'brien", "Anne-Marie Smith", "X"])
    def test_self_match_is_one(self, matcher_class, name):
        assert matcher_class().score(name, name) == 1.0

    @pytest.mark.parametrize("matcher_class", ALL_MATCHERS)
    def test_score_in_unit_interval(self, matcher_class):
        matcher = matcher_class()
        for s1, s2 in [("John Doe", "Jon Doh"), ("Smith", "Smyth"), ("A", "Zed Quux")]:
            assert 0.0 <= matcher.score(s1, s2) <= 1.0

    def test_result(self):
        matcher = JaccardMatcher(weight=0.25)
        result = matcher.result("John Doe", "John Smith")
        assert result == MatchResult(
            algorithm="Jaccard",
            weight=0.25,
            absolute_score=0.5,
            weighted_score=0.125
        )

    def test_weight_is_mutable(self):
        matcher = SoundexMatcher()
        matcher.weight = 1
        assert isinstance(matcher.weight, float)
        matcher.weight = 0.2
        assert matcher.weighted_score("James", "James") == 0.2

    def test_base_matcher_is_abstract(self):
        with pytest.raises(TypeError):
            BaseMatcher()


class TestMatcherRegistry:
    """Test cases for matcher construction."""

    def setup_method(self):
        """Setup test fixtures."""
        self.registry = MatcherRegistry()

    @pytest.mark.parametrize("kind,matcher_class", [
        (MatcherKind.JARO_WINKLER, JaroWinklerMatcher),
        ("soundex", SoundexMatcher),
        ("soundex_jaccard", SoundexJaccardMatcher),
        (MatcherKind.JACCARD, JaccardMatcher),
    ])
    def test_create(self, kind, matcher_class):
        assert isinstance(self.registry.create(kind), matcher_class)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown matcher type"):
            self.registry.create("levenshtein")

    def test_register_custom_matcher(self):
        class ExactMatcher(BaseMatcher):
            name = "Exact"

            def score(self, s1, s2):
                return 1.0 if self.clean(s1) == self.clean(s2) else 0.0

        self.registry.register(MatcherKind.SOUNDEX, ExactMatcher)
        assert isinstance(self.registry.create("soundex"), ExactMatcher)
        assert not self.registry.accepts_config("soundex")

    def test_construct_matcher(self):
        config = JaroWinklerConfig(similarity_threshold=0.8)
        matcher = construct_matcher("jaro_winkler", config=config, weight=0.3)
        assert isinstance(matcher, JaroWinklerMatcher)
        assert matcher.config is config
        assert matcher.weight == 0.3

        matcher = construct_matcher(MatcherKind.SOUNDEX)
        assert isinstance(matcher, SoundexMatcher)
        assert matcher.weight == 1.0

    def test_construct_matcher_rejects_config(self):
        with pytest.raises(ValueError, match="does not accept a configuration"):
            construct_matcher("soundex", config=JaroWinklerConfig())
