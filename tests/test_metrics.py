import pytest

from metrics import (
    CharMark,
    accuracy_percent,
    char_marks,
    compute_correct_chars,
    words_per_minute,
)


def test_correct_chars_compares_typed_prefix_only():
    assert compute_correct_chars("cat dog", "cat") == 3
    assert compute_correct_chars("cat dog", "") == 0
    assert compute_correct_chars("cat", "cab") == 2


def test_accuracy_for_one_wrong_letter():
    assert accuracy_percent("cat dog", "cat cog") == pytest.approx(600 / 7)


def test_accuracy_is_case_sensitive():
    assert accuracy_percent("Cat", "cat") == pytest.approx(200 / 3)


def test_accuracy_of_empty_target_is_rejected():
    with pytest.raises(ValueError):
        accuracy_percent("", "")


def test_wpm_uses_five_characters_per_word():
    # 50 characters in 30 seconds is 10 words in half a minute
    assert words_per_minute(50, 30.0) == pytest.approx(20.0)


def test_wpm_with_zero_elapsed_time_is_finite():
    assert words_per_minute(1, 0.0) > 0


def test_char_marks():
    assert char_marks("cat", "cx") == [
        CharMark.CORRECT,
        CharMark.INCORRECT,
        CharMark.PENDING,
    ]
