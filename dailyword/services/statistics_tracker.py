"""
Statistics Tracker

Folds completed puzzles into the player's Statistics. Every function returns
a new Statistics value and leaves its input untouched.
"""

from dataclasses import replace

from ..models.statistics import FAILED_BUCKET, Statistics


def record_win(stats: Statistics, attempts_used: int) -> Statistics:
    """
    Records a won game.

    Args:
        stats: Statistics before the game
        attempts_used: Rows used to find the answer, 1 to MAX_ATTEMPTS

    Returns:
        New Statistics with the streak extended and the matching bucket incremented

    Raises:
        ValueError: If attempts_used has no bucket
    """
    bucket = str(attempts_used)
    if bucket not in stats.guess_distribution or bucket == FAILED_BUCKET:
        raise ValueError(f"Attempts used out of range: {attempts_used}")

    distribution = dict(stats.guess_distribution)
    distribution[bucket] += 1
    current_streak = stats.current_streak + 1
    return replace(
        stats,
        games_played=stats.games_played + 1,
        games_won=stats.games_won + 1,
        current_streak=current_streak,
        max_streak=max(stats.max_streak, current_streak),
        guess_distribution=distribution,
    )


def record_loss(stats: Statistics) -> Statistics:
    """
    Records a lost game.

    Args:
        stats: Statistics before the game

    Returns:
        New Statistics with the streak reset and the fail bucket incremented.
        max_streak is left as it was.
    """
    distribution = dict(stats.guess_distribution)
    distribution[FAILED_BUCKET] += 1
    return replace(
        stats,
        games_played=stats.games_played + 1,
        current_streak=0,
        guess_distribution=distribution,
    )


def win_rate(stats: Statistics) -> float:
    """Fraction of games won; 0.0 before any game was played."""
    return stats.win_rate


def average_guesses(stats: Statistics) -> float:
    return stats.average_guesses
