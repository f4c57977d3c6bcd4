"""Running means over five-star pulls.

Every bin keeps only the current means and counts; a pull is folded in with
the incremental mean recurrence ``m' = (m * n + x) / (n + 1)``. The result is
independent of fold order up to floating point rounding.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from .tracker import Pull


@dataclass(frozen=True)
class PullStats:
    pity_avg: float = 0.0
    pity_avg_special: float = 0.0
    win_chance: float = 0.0
    special_count: int = 0
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def _running_mean(mean: float, n: int, x: float) -> float:
    return (mean * n + x) / (n + 1.0)


def fold(stats: PullStats, pull: Pull) -> PullStats:
    """Return ``stats`` with one more pull accounted for."""
    # The means must be updated with the counts from before this pull.
    stats = replace(
        stats,
        pity_avg=_running_mean(stats.pity_avg, stats.count, pull.pities),
        count=stats.count + 1,
    )
    if not pull.is_special:
        return stats

    n = stats.special_count
    return replace(
        stats,
        win_chance=_running_mean(stats.win_chance, n, 1 if pull.won_fifty else 0),
        pity_avg_special=_running_mean(stats.pity_avg_special, n, pull.pities_special),
        special_count=n + 1,
    )


def fold_all(pulls: Iterable[Pull], stats: PullStats = PullStats()) -> PullStats:
    for pull in pulls:
        stats = fold(stats, pull)
    return stats
