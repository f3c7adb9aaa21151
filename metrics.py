from __future__ import annotations

import enum

CHARS_PER_WORD = 5.0
MIN_ELAPSED_S = 1e-6


class CharMark(enum.Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    PENDING = "pending"


def compute_correct_chars(target_text: str, typed_text: str) -> int:
    correct = 0
    for i, ch in enumerate(typed_text):
        if i >= len(target_text):
            break
        if ch == target_text[i]:
            correct += 1
    return correct


def words_per_minute(char_count: int, elapsed_s: float) -> float:
    # every five characters count as one word, whatever the real word lengths
    seconds = max(elapsed_s, MIN_ELAPSED_S)
    return (char_count / CHARS_PER_WORD) / seconds * 60.0


def accuracy_percent(target_text: str, typed_text: str) -> float:
    if not target_text:
        raise ValueError("accuracy is undefined for an empty target text")
    return 100.0 * compute_correct_chars(target_text, typed_text) / len(target_text)


def char_marks(target_text: str, typed_text: str) -> list[CharMark]:
    marks = []
    for i, ch in enumerate(target_text):
        if i >= len(typed_text):
            marks.append(CharMark.PENDING)
        elif typed_text[i] == ch:
            marks.append(CharMark.CORRECT)
        else:
            marks.append(CharMark.INCORRECT)
    return marks
