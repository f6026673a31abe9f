"""Unit tests for the analysis engine.

Tests verify counts, derived metrics and rankings. Each test has exactly one
assertion.
"""

import math

from textconvert.core import AnalysisReport, TextComplexity, TextStats, WordCount, analyze
from textconvert.core.analysis import (
    character_frequency,
    classify_complexity,
    most_common_words,
    quick_stats,
    readability_level,
    readability_score,
)

SAMPLE = "Hello world. This is a test."


class TestEmptyInput:
    """Test the report for blank input."""

    def test_empty_string_gives_default_report(self) -> None:
        """Empty input produces the all-zero report."""
        assert analyze("") == AnalysisReport()

    def test_whitespace_only_has_zero_characters(self) -> None:
        """Whitespace-only input counts as blank."""
        assert analyze("   \n\t ").characters == 0

    def test_empty_rankings(self) -> None:
        """Blank input has no word ranking."""
        assert analyze("").most_common_words == ()

    def test_empty_complexity_is_simple(self) -> None:
        """Blank input is rated Simple."""
        assert analyze("").text_complexity is TextComplexity.SIMPLE


class TestSampleSentence:
    """Test the two-sentence sample."""

    def test_words(self) -> None:
        """Sample has six words."""
        assert analyze(SAMPLE).words == 6

    def test_sentences(self) -> None:
        """Sample has two sentences."""
        assert analyze(SAMPLE).sentences == 2

    def test_average_words_per_sentence(self) -> None:
        """Sample averages three words per sentence."""
        assert analyze(SAMPLE).average_words_per_sentence == 3.0

    def test_complexity(self) -> None:
        """Sample is Simple."""
        assert analyze(SAMPLE).text_complexity is TextComplexity.SIMPLE

    def test_characters_no_spaces(self) -> None:
        """Five spaces are excluded from the 28 characters."""
        assert analyze(SAMPLE).characters_no_spaces == 23

    def test_avg_word_length_rounded(self) -> None:
        """23 characters over 6 words rounds to 3.8."""
        assert analyze(SAMPLE).avg_word_length == 3.8

    def test_readability_score(self) -> None:
        """Seven vowels give eight splits; score rounds to 91."""
        assert analyze(SAMPLE).readability_score == 91

    def test_most_common_words_in_first_seen_order(self) -> None:
        """Tied words keep their order of appearance."""
        assert [entry.word for entry in analyze(SAMPLE).most_common_words] == [
            "hello",
            "world",
            "test",
        ]

    def test_character_frequency(self) -> None:
        """Letters are ranked by count, ties by first appearance."""
        assert [entry.char for entry in analyze(SAMPLE).character_frequency] == [
            "l",
            "t",
            "s",
            "h",
            "e",
        ]

    def test_deterministic(self) -> None:
        """Analyzing the same text twice gives equal reports."""
        assert analyze(SAMPLE) == analyze(SAMPLE)


class TestCounts:
    """Test individual counters."""

    def test_consecutive_terminators_split_once(self) -> None:
        """Runs of terminators count as one sentence end."""
        assert analyze("Wait... what?! Yes.").sentences == 3

    def test_punctuation_only_has_no_sentences(self) -> None:
        """Text without sentence content has zero sentences."""
        assert analyze("...").sentences == 0

    def test_no_sentences_gives_zero_average(self) -> None:
        """Zero sentences yields a zero average instead of dividing by zero."""
        assert analyze("...").average_words_per_sentence == 0.0

    def test_paragraphs_split_on_blank_lines(self) -> None:
        """Blank lines, including whitespace-only ones, separate paragraphs."""
        assert analyze("First para.\n\nSecond para.\n \nThird.").paragraphs == 3

    def test_reading_time_rounds_up(self) -> None:
        """201 words take two minutes."""
        assert analyze("word " * 201).reading_time_minutes == 2

    def test_reading_time_matches_word_count(self) -> None:
        """Reading time is the word count over 200, rounded up."""
        report = analyze("one two three four five")
        assert report.reading_time_minutes == math.ceil(report.words / 200)


class TestRankings:
    """Test word and character frequency rankings."""

    def test_stop_words_and_short_words_excluded(self) -> None:
        """Stop words and words under three letters are not ranked."""
        assert most_common_words("the cat sat on the mat with the cat")[0] == WordCount(
            word="cat", count=2
        )

    def test_ranking_capped_at_five(self) -> None:
        """At most five words are ranked."""
        assert len(most_common_words("alpha beta gamma delta epsilon zeta")) == 5

    def test_tie_keeps_first_occurrence(self) -> None:
        """Equal counts keep first-seen order."""
        assert most_common_words("zebra apple zebra apple mango")[0].word == "zebra"

    def test_punctuation_stripped_from_words(self) -> None:
        """Punctuation does not split or distinguish words."""
        assert most_common_words("Apple! apple, APPLE.")[0].count == 3

    def test_accented_letters_stripped_from_words(self) -> None:
        """Non-ASCII letters are stripped like punctuation."""
        assert most_common_words("café café")[0].word == "caf"

    def test_unicode_space_still_separates_words(self) -> None:
        """Non-breaking spaces keep separating words."""
        assert most_common_words("apple\u00a0mango")[0].word == "apple"

    def test_only_ascii_letters_counted(self) -> None:
        """Accented letters and digits are not ranked."""
        assert [entry.char for entry in character_frequency("ééé 123 a")] == ["a"]


class TestScores:
    """Test readability and complexity helpers."""

    def test_readability_formula(self) -> None:
        """Score follows the Flesch constants."""
        assert readability_score(3.0, 8 / 6) == 91

    def test_readability_clamped_high(self) -> None:
        """Scores above 100 clamp to 100."""
        assert analyze("xyz.").readability_score == 100

    def test_readability_clamped_low(self) -> None:
        """Scores below 0 clamp to 0."""
        assert analyze("aeiouaeiou").readability_score == 0

    def test_complex_by_sentence_length(self) -> None:
        """Over twenty words per sentence is Complex."""
        assert classify_complexity(21.0, 3.0) is TextComplexity.COMPLEX

    def test_complex_by_word_length(self) -> None:
        """Over six characters per word is Complex."""
        assert classify_complexity(10.0, 6.5) is TextComplexity.COMPLEX

    def test_moderate_by_sentence_length(self) -> None:
        """Over fifteen words per sentence is Moderate."""
        assert classify_complexity(16.0, 4.0) is TextComplexity.MODERATE

    def test_moderate_by_word_length(self) -> None:
        """Over five characters per word is Moderate."""
        assert classify_complexity(10.0, 5.5) is TextComplexity.MODERATE

    def test_simple_at_thresholds(self) -> None:
        """Values at the thresholds stay Simple."""
        assert classify_complexity(15.0, 5.0) is TextComplexity.SIMPLE

    def test_long_words_make_text_complex(self) -> None:
        """Long technical words push the rating to Complex."""
        assert (
            analyze("Extraordinarily complicated terminology").text_complexity
            is TextComplexity.COMPLEX
        )

    def test_level_very_easy(self) -> None:
        """Scores of 90 and above are Very Easy."""
        assert readability_level(95) == "Very Easy"

    def test_level_standard(self) -> None:
        """Scores in the sixties are Standard."""
        assert readability_level(65) == "Standard"

    def test_level_difficult_boundary(self) -> None:
        """A score of exactly 30 is Difficult."""
        assert readability_level(30) == "Difficult"

    def test_level_very_difficult(self) -> None:
        """Scores under 30 are Very Difficult."""
        assert readability_level(10) == "Very Difficult"


class TestQuickStats:
    """Test the lightweight input counters."""

    def test_counts(self) -> None:
        """Characters, words and lines are counted."""
        assert quick_stats("a b\nc") == TextStats(characters=5, words=3, lines=2)

    def test_empty_has_one_line(self) -> None:
        """Empty text is a single empty line."""
        assert quick_stats("").lines == 1
