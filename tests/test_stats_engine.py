"""Tests for core.stats_engine."""

import pytest

from core.stats_engine import (
    AnalysisConfig,
    DerivedStats,
    LetterStat,
    count_characters,
    count_sentences,
    count_words,
    format_reading_time,
    letter_frequencies,
    recompute,
)

SAMPLES = [
    "",
    "   ",
    "Design is the silent ambassador.",
    "Hello. World! How are you?",
    "tabs\tand\nnewlines  everywhere",
    "1234 !!! ???",
]


class TestCountCharacters:
    def test_raw_length(self):
        assert count_characters("a b\tc\n") == 6

    def test_exclude_whitespace(self):
        assert count_characters("a b\tc\n", exclude_spaces=True) == 3

    @pytest.mark.parametrize("text", SAMPLES)
    def test_excluding_never_increases_count(self, text):
        excluded = count_characters(text, exclude_spaces=True)
        raw = count_characters(text)
        assert excluded <= raw
        has_whitespace = any(ch.isspace() for ch in text)
        assert (excluded == raw) == (not has_whitespace)


class TestCountWords:
    @pytest.mark.parametrize(
        "text, expected",
        [("", 0), ("   ", 0), ("a b  c", 3), ("  padded  ", 1), ("line\nbreak\ttab", 3)],
    )
    def test_counts(self, text, expected):
        assert count_words(text) == expected


class TestCountSentences:
    def test_two_sentences(self):
        assert count_sentences("Hello. World!") == 2

    def test_text_without_terminator_is_one_sentence(self):
        assert count_sentences("no terminators") == 1

    def test_blank_text(self):
        assert count_sentences("   \n") == 0

    def test_terminator_runs_collapse(self):
        assert count_sentences("Wait... what?!") == 2

    def test_only_punctuation(self):
        assert count_sentences("...") == 0

    def test_whitespace_only_segments_are_dropped(self):
        assert count_sentences("One.   . Two!  ") == 2


class TestReadingTime:
    @pytest.mark.parametrize(
        "words, expected",
        [
            (0, "0 seconds"),
            (1, "1 seconds"),
            (224, "60 seconds"),
            (225, "1 minute"),
            (226, "2 minutes"),
            (450, "2 minutes"),
            (451, "3 minutes"),
        ],
    )
    def test_format(self, words, expected):
        assert format_reading_time(words) == expected

    def test_custom_rate(self):
        assert format_reading_time(100, words_per_minute=100) == "1 minute"


class TestLetterFrequencies:
    def test_empty_when_no_letters(self):
        assert letter_frequencies("1234 !?") == ()
        assert letter_frequencies("") == ()

    def test_sorted_by_count(self):
        freqs = letter_frequencies("aab")
        assert freqs == (
            LetterStat("a", 2, "66.67%"),
            LetterStat("b", 1, "33.33%"),
        )

    def test_ties_keep_first_seen_order(self):
        assert [s.letter for s in letter_frequencies("zyx")] == ["z", "y", "x"]
        freqs = letter_frequencies("ba")
        assert [(s.letter, s.percentage) for s in freqs] == [("b", "50.00%"), ("a", "50.00%")]

    def test_case_folded_and_non_ascii_ignored(self):
        freqs = letter_frequencies("AaÉé!")
        assert freqs == (LetterStat("a", 2, "100.00%"),)

    def test_rounds_half_up(self):
        # 1/32 = 3.125% and 31/32 = 96.875%, both exact in binary
        freqs = letter_frequencies("a" * 31 + "b")
        assert [s.percentage for s in freqs] == ["96.88%", "3.13%"]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_counts_sum_to_letter_total(self, text):
        total = sum(1 for ch in text.lower() if "a" <= ch <= "z")
        freqs = letter_frequencies(text)
        assert sum(s.count for s in freqs) == total
        assert (len(freqs) == 0) == (total == 0)

    def test_percentages_sum_to_hundred(self):
        freqs = letter_frequencies("The quick brown fox jumps over the lazy dog")
        total = sum(float(s.percentage.rstrip("%")) for s in freqs)
        assert total == pytest.approx(100.0, abs=0.1)


class TestRecompute:
    @pytest.mark.parametrize("text", SAMPLES)
    def test_deterministic(self, text):
        config = AnalysisConfig(exclude_spaces=True, char_limit=10)
        assert recompute(text, config) == recompute(text, config)

    def test_end_to_end_sentence(self):
        text = "Design is the silent ambassador."
        stats = recompute(text, AnalysisConfig())
        assert stats.char_count == 32
        assert stats.word_count == 5
        assert stats.sentence_count == 1
        assert stats.reading_time == "2 seconds"

        without_spaces = recompute(text, AnalysisConfig(exclude_spaces=True))
        assert without_spaces.char_count == stats.char_count - text.count(" ") == 28

    def test_empty_buffer(self):
        assert recompute("", AnalysisConfig()) == DerivedStats()

    def test_no_limit_never_exceeds(self):
        assert recompute("x" * 10_000, AnalysisConfig()).exceeds_limit is False

    def test_limit_is_strictly_greater(self):
        assert recompute("abcde", AnalysisConfig(char_limit=5)).exceeds_limit is False
        assert recompute("abcdef", AnalysisConfig(char_limit=5)).exceeds_limit is True

    def test_limit_follows_exclude_spaces(self):
        text = "ab cd ef"   # 8 raw, 6 without spaces
        assert recompute(text, AnalysisConfig(char_limit=7)).exceeds_limit is True
        assert recompute(text, AnalysisConfig(exclude_spaces=True, char_limit=7)).exceeds_limit is False
