import pytest

from dailyword.config.game_settings import (
    ANSWER_LIST, GUESS_LIST, WORD_LENGTH, get_word_statistics, validate_word_list_integrity
)


def test_bundled_word_lists_are_valid():
    assert validate_word_list_integrity(ANSWER_LIST)
    assert validate_word_list_integrity(GUESS_LIST)
    assert all(len(word) == WORD_LENGTH for word in ANSWER_LIST + GUESS_LIST)


@pytest.mark.parametrize("words", [
    [],
    ["CRANE", "SLAT"],
    ["CRANE", "SL4TE"],
    ["CRANE", "slate"],
    ["CRANE", "CRANE"],
])
def test_integrity_check_rejects_bad_lists(words):
    with pytest.raises(ValueError):
        validate_word_list_integrity(words)


def test_word_statistics():
    stats = get_word_statistics(["CRANE", "SLATE"])

    assert stats["total_words"] == 2
    assert stats["avg_vowel_count"] == 2.0
    assert stats["letter_frequency"]["A"] == 2
    assert stats["most_common_letters"][0][1] == 2
