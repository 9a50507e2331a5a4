"""Tests for name rules and regex building blocks."""

import pytest

from narrative_graph.extract.patterns import (
    PRONOUNS,
    STOP_WORDS,
    clean_name,
    compile_name_matcher,
    is_valid_name,
    name_then_verb,
    verb_then_name,
    verb_to_name,
)


class TestNameRules:
    """Test the shape checks applied to every candidate name."""

    @pytest.mark.parametrize("name", ["Alex", "Mary Jane", "Bo"])
    def test_valid_names(self, name):
        assert is_valid_name(name)

    @pytest.mark.parametrize(
        "name",
        ["", "A", "alex", "The", "Monday", "Chapter", "He", "Their expression", "X" + "y" * 30],
    )
    def test_invalid_names(self, name):
        assert not is_valid_name(name)

    def test_pronouns_case_insensitive(self):
        for pronoun in PRONOUNS:
            assert not is_valid_name(pronoun.capitalize())
            assert not is_valid_name(pronoun.upper())

    def test_stop_words_rejected(self):
        assert all(not is_valid_name(word) for word in STOP_WORDS)

    def test_max_length_configurable(self):
        assert is_valid_name("Bartholomew")
        assert not is_valid_name("Bartholomew", max_length=10)

    def test_clean_name_drops_leading_stop_word(self):
        assert clean_name("When Alex") == "Alex"
        assert clean_name("Mary   Jane") == "Mary Jane"
        assert clean_name("The") == "The"


class TestMarkerPatterns:
    """Test the dialogue and introduction regexes."""

    def test_verb_then_name(self):
        assert verb_then_name("said").search("said Alex quietly").group(1) == "Alex"

    def test_verb_case_insensitive(self):
        assert verb_then_name("said").search("Said Alex").group(1) == "Alex"

    def test_name_must_be_capitalized(self):
        assert verb_then_name("said").search("said goodbye") is None

    def test_two_word_name(self):
        assert verb_then_name("met").search("met Mary Jane today").group(1) == "Mary Jane"

    def test_name_does_not_cross_lines(self):
        assert verb_then_name("met").search("met Mary\nJane").group(1) == "Mary"

    def test_marker_and_name_share_a_line(self):
        assert verb_then_name("said").search("Bob said\n\nAlex left") is None
        assert name_then_verb("said").search("Bob\n\nsaid nothing") is None
        assert verb_to_name("said").search("said goodbye\nto Jane") is None
        assert verb_then_name("said").search("said\tAlex").group(1) == "Alex"

    def test_name_then_verb(self):
        assert name_then_verb("said").search('"Hi," Maria said').group(1) == "Maria"

    def test_verb_must_be_whole_word(self):
        assert name_then_verb("said").search("Alex saidx") is None

    def test_addressee(self):
        assert verb_to_name("said").search("Tom said hi to Jane").group(1) == "Jane"
        assert verb_to_name("whispered").search("whispered to Jane").group(1) == "Jane"

    def test_addressee_needs_adjacent_to(self):
        assert verb_to_name("said").search("said he was going to London") is None


class TestNameMatcher:
    """Test compiling whole-word matchers from literal names."""

    def test_case_insensitive_by_default(self):
        matcher = compile_name_matcher("Alex")
        assert matcher.search("ALEX waved")
        assert matcher.search("then alex waved")

    def test_case_sensitive_option(self):
        matcher = compile_name_matcher("Will", ignore_case=False)
        assert matcher.search("Will laughed")
        assert not matcher.search("it will rain")

    def test_whole_word_only(self):
        matcher = compile_name_matcher("Alex")
        assert not matcher.search("Alexander arrived")
        assert not matcher.search("McAlex arrived")

    def test_metacharacters_are_literal(self):
        matcher = compile_name_matcher("C++")
        assert matcher.search("C++ helped Amy")
        assert not matcher.search("CCC helped Amy")

        matcher = compile_name_matcher("Smith (Elder)")
        assert matcher.search("then Smith (Elder) spoke")
        assert not matcher.search("then Smith Elder spoke")
