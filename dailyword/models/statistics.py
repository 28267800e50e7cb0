"""
Statistics Data Models

Cross-puzzle play history, persisted across sessions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

FAILED_BUCKET = "fail"


def empty_distribution(max_attempts: int = 6) -> Dict[str, int]:
    distribution = {str(attempt): 0 for attempt in range(1, max_attempts + 1)}
    distribution[FAILED_BUCKET] = 0
    return distribution


@dataclass
class Statistics:
    """Aggregate results over all completed puzzles."""
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: Dict[str, int] = field(default_factory=empty_distribution)

    @property
    def win_rate(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.games_won / self.games_played

    @property
    def win_percentage(self) -> int:
        return round(self.win_rate * 100)

    @property
    def average_guesses(self) -> float:
        """Mean number of attempts over won games."""
        if self.games_won == 0:
            return 0.0
        total = sum(int(bucket) * count
                    for bucket, count in self.guess_distribution.items()
                    if bucket != FAILED_BUCKET)
        return round(total / self.games_won, 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "games_played": self.games_played,
            "games_won": self.games_won,
            "current_streak": self.current_streak,
            "max_streak": self.max_streak,
            "guess_distribution": dict(self.guess_distribution),
            "win_percentage": self.win_percentage,
            "average_guesses": self.average_guesses,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Statistics":
        distribution = empty_distribution()
        for bucket, count in data.get("guess_distribution", {}).items():
            if bucket not in distribution:
                raise ValueError(f"Unknown guess distribution bucket: {bucket!r}")
            distribution[bucket] = int(count)
        stats = cls(
            games_played=int(data.get("games_played", 0)),
            games_won=int(data.get("games_won", 0)),
            current_streak=int(data.get("current_streak", 0)),
            max_streak=int(data.get("max_streak", 0)),
            guess_distribution=distribution,
        )
        counts = [stats.games_played, stats.games_won, stats.current_streak, stats.max_streak]
        if min(counts + list(distribution.values())) < 0:
            raise ValueError("Statistics counters cannot be negative")
        if stats.games_won > stats.games_played or stats.current_streak > stats.max_streak:
            raise ValueError("Inconsistent statistics counters")
        return stats
