"""
Puzzle Selector

Maps a point in time to the day's answer. The same day index always yields
the same answer for a given answer list, on every host.
"""

import hashlib
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from ..config.game_settings import EPOCH

SEQUENTIAL = "sequential"
PERMUTED = "permuted"
SELECTION_POLICIES = (SEQUENTIAL, PERMUTED)

ONE_DAY = timedelta(days=1)


def _to_utc(now: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already.
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def day_index_for(now: datetime, epoch: datetime = EPOCH) -> int:
    """Whole UTC days elapsed since the epoch (floored, may be negative)."""
    return (_to_utc(now) - epoch) // ONE_DAY


def seconds_until_next_puzzle(now: datetime, epoch: datetime = EPOCH) -> int:
    """Seconds left until the next UTC day boundary."""
    next_start = epoch + (day_index_for(now, epoch) + 1) * ONE_DAY
    return int((next_start - _to_utc(now)).total_seconds())


def permute(words: Sequence[str], seed: str) -> List[str]:
    """
    Deterministic Fisher-Yates shuffle (version 1).

    Step i (from len-1 down to 1) swaps position i with
    j = first 8 bytes of sha256("<seed>:<i>") as a big-endian int, mod (i + 1).
    The result only depends on the input order and the seed.
    """
    shuffled = list(words)
    for i in range(len(shuffled) - 1, 0, -1):
        digest = hashlib.sha256(f"{seed}:{i}".encode('utf-8')).digest()
        j = int.from_bytes(digest[:8], 'big') % (i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class PuzzleSelector:
    """
    Picks the answer for a day index.

    Policies:
    - "sequential": answers[day_index mod len(answers)]
    - "permuted": permute(answers, seed)[day_index mod len(answers)]
    """

    def __init__(self, answers: Sequence[str], policy: str = PERMUTED, seed: Optional[str] = None,
                 epoch: datetime = EPOCH):
        if not answers:
            raise ValueError("Answer list cannot be empty")
        if policy not in SELECTION_POLICIES:
            raise ValueError(f"Unknown selection policy: {policy!r}")
        if policy == PERMUTED and not seed:
            raise ValueError("The permuted policy requires a seed")

        self.policy = policy
        self.seed = seed
        self.epoch = epoch
        words = [word.upper() for word in answers]
        self._rotation = permute(words, seed) if policy == PERMUTED else words

    def day_index_for(self, now: datetime) -> int:
        return day_index_for(now, self.epoch)

    def answer_for(self, day_index: int) -> str:
        return self._rotation[day_index % len(self._rotation)]
