"""Tests for the standalone splitters and the character-code converter."""

import logging

import numpy as np
import pytest

from ruletok.errors import InvalidInputTypeError, MalformedRuleError
from ruletok.pre_tokenizers import (
    ADVANCED_PATTERN,
    RegexSplit,
    SpaceSplit,
    char_codes,
    regex_tokenize,
    split_on_spaces,
)

SAMPLE_TEXT = "The 1st player's score is 100-50, and he said, 'I'm ready!'"


class TestSplitOnSpaces:
    """Tests for split_on_spaces."""

    def test_sample_sentence(self) -> None:
        assert split_on_spaces(SAMPLE_TEXT) == [
            "The", "1st", "player's", "score", "is", "100-50,", "and", "he", "said,", "'I'm", "ready!'",
        ]

    def test_keeps_empty_strings_for_consecutive_spaces(self) -> None:
        assert split_on_spaces("a  b") == ["a", "", "b"]

    def test_only_splits_on_spaces(self) -> None:
        assert split_on_spaces("a\tb c") == ["a\tb", "c"]

    def test_empty_string(self) -> None:
        assert SpaceSplit().pre_tokenize_str("") == [""]


class TestRegexTokenize:
    """Tests for the single-pattern regex tokenizer."""

    def test_sample_sentence(self) -> None:
        """Test that words and listed punctuation are split apart and other symbols dropped."""
        assert regex_tokenize(SAMPLE_TEXT) == [
            "The", "1st", "player", "'", "s", "score", "is", "100", "50", ",",
            "and", "he", "said", ",", "'", "I", "'", "m", "ready", "!", "'",
        ]

    def test_no_match_returns_empty_list(self) -> None:
        assert regex_tokenize("   ---   ") == []

    def test_custom_pattern(self) -> None:
        assert regex_tokenize("a1 b2", pattern=r"\d") == ["1", "2"]

    def test_malformed_pattern(self) -> None:
        with pytest.raises(MalformedRuleError):
            RegexSplit("(")

    def test_default_pattern(self) -> None:
        assert RegexSplit().pre_tokenize_str("hi!") == RegexSplit(ADVANCED_PATTERN).pre_tokenize_str("hi!")


class TestCharCodes:
    """Tests for char_codes."""

    def test_ascii(self) -> None:
        assert char_codes("AB") == [65, 66]

    def test_code_points_not_bytes(self) -> None:
        """Test that non-ASCII characters give one code point each."""
        assert char_codes("é😀") == [233, 128512]

    def test_empty(self) -> None:
        assert char_codes("") == []

    def test_non_string_logs_and_returns_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="ruletok"):
            assert char_codes(42) == []
        assert any("InvalidInputTypeError" in record.getMessage() for record in caplog.records)

    def test_non_string_strict_raises(self) -> None:
        with pytest.raises(InvalidInputTypeError):
            char_codes(42, strict=True)

    def test_invalid_input_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            char_codes(["A"], strict=True)

    def test_numpy_output(self) -> None:
        result = char_codes("AB", return_tensors="np")
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [65, 66]

    def test_numpy_output_for_invalid_input(self) -> None:
        assert char_codes(None, return_tensors="np").shape == (0,)

    def test_torch_output(self) -> None:
        torch = pytest.importorskip("torch")
        result = char_codes("AB", return_tensors="pt")
        assert isinstance(result, torch.Tensor)
        assert result.tolist() == [65, 66]

    def test_unsupported_return_tensors(self) -> None:
        with pytest.raises(ValueError):
            char_codes("AB", return_tensors="tf")
