from datetime import datetime, timedelta, timezone

import pytest

from dailyword.config.game_settings import EPOCH
from dailyword.services.puzzle_selector import (
    PERMUTED, SEQUENTIAL, PuzzleSelector, day_index_for, permute, seconds_until_next_puzzle
)

WORDS = ["CRANE", "SLATE", "ABIDE", "HOUSE", "PLANT", "MOUSE", "TRACE", "GREET"]


def test_epoch_is_day_zero():
    assert day_index_for(EPOCH) == 0


def test_index_is_stable_within_a_utc_day():
    assert day_index_for(EPOCH + timedelta(hours=23, minutes=59, seconds=59)) == 0
    assert day_index_for(EPOCH + timedelta(days=1)) == 1
    assert day_index_for(EPOCH + timedelta(days=40, hours=7)) == 40


def test_instants_before_epoch_floor_to_negative_days():
    assert day_index_for(EPOCH - timedelta(seconds=1)) == -1


def test_local_offsets_are_normalized_to_utc():
    # 00:30 at UTC+2 is still 22:30 of the previous UTC day
    local = datetime(2022, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=2)))
    assert day_index_for(local) == 1


def test_naive_datetimes_are_treated_as_utc():
    assert day_index_for(datetime(2022, 1, 1, 12, 0)) == 2


def test_day_index_is_monotonic():
    instants = [EPOCH + timedelta(hours=5 * step) for step in range(100)]
    indexes = [day_index_for(instant) for instant in instants]
    assert indexes == sorted(indexes)


def test_seconds_until_next_puzzle():
    assert seconds_until_next_puzzle(EPOCH + timedelta(hours=23)) == 3600
    assert seconds_until_next_puzzle(EPOCH) == 86400


def test_permute_is_deterministic_and_complete():
    first = permute(WORDS, "seed")
    second = permute(WORDS, "seed")

    assert first == second
    assert sorted(first) == sorted(WORDS)


def test_permute_does_not_touch_its_input():
    words = list(WORDS)
    permute(words, "seed")
    assert words == WORDS


def test_permutation_depends_on_the_seed():
    words = [f"W{i:04d}" for i in range(50)]
    assert permute(words, "one") != permute(words, "two")


def test_sequential_policy_rotates_through_answers():
    selector = PuzzleSelector(WORDS, policy=SEQUENTIAL)

    assert selector.answer_for(0) == "CRANE"
    assert selector.answer_for(1) == "SLATE"
    assert selector.answer_for(len(WORDS)) == "CRANE"


def test_permuted_policy_uses_the_seeded_permutation():
    selector = PuzzleSelector(WORDS, policy=PERMUTED, seed="dailyword-v1")
    rotation = permute(WORDS, "dailyword-v1")

    assert [selector.answer_for(day) for day in range(len(WORDS))] == rotation
    assert selector.answer_for(123) == PuzzleSelector(WORDS, PERMUTED, "dailyword-v1").answer_for(123)


def test_selector_uppercases_answers():
    selector = PuzzleSelector(["crane"], policy=SEQUENTIAL)
    assert selector.answer_for(7) == "CRANE"


@pytest.mark.parametrize("kwargs", [
    {"answers": [], "policy": SEQUENTIAL},
    {"answers": WORDS, "policy": "random"},
    {"answers": WORDS, "policy": PERMUTED, "seed": None},
])
def test_selector_rejects_bad_configuration(kwargs):
    with pytest.raises(ValueError):
        PuzzleSelector(**kwargs)
