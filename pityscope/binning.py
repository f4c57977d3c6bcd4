"""Route pulls into bins along time of day, calendar date and account."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, List, Optional, Sequence

import numpy as np

from .config import DAY_SLICES, MINUTES_PER_DAY
from .errors import ConfigError, NoDataError
from .stats import PullStats, fold
from .tracker import AccountRange, Pull

FIELDS = ("pity_avg", "pity_avg_special", "win_chance", "special_count", "count")


@dataclass
class BinnedStats:
    """Dense per-bin stats plus the axis values that place each bin.

    ``axis`` holds slice start hours for time of day, ``datetime64[D]`` days
    for dates and account names for accounts.
    """

    name: str
    stats: List[PullStats]
    axis: np.ndarray
    bin_width: float = 1.0

    def __len__(self) -> int:
        return len(self.stats)

    def column(self, field: str) -> np.ndarray:
        if field not in FIELDS:
            raise KeyError(field)
        dtype = np.int64 if field.endswith("count") else np.float64
        return np.fromiter((getattr(s, field) for s in self.stats), dtype=dtype, count=len(self.stats))

    @property
    def total(self) -> int:
        return sum(s.count for s in self.stats)


def _fill(size: int, pulls: Iterable[Pull], index: Callable[[Pull], Optional[int]]) -> List[PullStats]:
    bins = [PullStats() for _ in range(size)]
    for pull in pulls:
        i = index(pull)
        if i is not None:
            bins[i] = fold(bins[i], pull)
    return bins


def time_slice_index(pull: Pull, slice_minutes: int) -> int:
    t = pull.time
    return (t.hour * 60 + t.minute) // slice_minutes


def bin_by_time_of_day(
    pulls: Sequence[Pull],
    slices: int = DAY_SLICES,
    excluded_dates: Iterable[date] = (),
) -> BinnedStats:
    """Bin pulls into ``slices`` equal parts of the day, ignoring the date.

    Pulls made on any of ``excluded_dates`` are left out entirely.
    """
    if slices <= 0 or MINUTES_PER_DAY % slices:
        raise ConfigError(f"slices must evenly divide {MINUTES_PER_DAY} minutes, got {slices}")
    slice_minutes = MINUTES_PER_DAY // slices
    skip = frozenset(excluded_dates)

    def index(pull: Pull) -> Optional[int]:
        if pull.time.date() in skip:
            return None
        return time_slice_index(pull, slice_minutes)

    hours = np.arange(slices) * slice_minutes / 60.0
    return BinnedStats("time", _fill(slices, pulls, index), hours, bin_width=slice_minutes / 60.0)


def bin_by_date(pulls: Sequence[Pull]) -> BinnedStats:
    """One bin per calendar day from the first pull to the last, inclusive."""
    if not pulls:
        raise NoDataError("no five-star pulls to spread over dates")
    first = min(p.time.date() for p in pulls)
    last = max(p.time.date() for p in pulls)
    days = np.arange(np.datetime64(first, "D"), np.datetime64(last, "D") + 1)

    bins = _fill(len(days), pulls, lambda p: (p.time.date() - first).days)
    return BinnedStats("date", bins, days)


def bin_by_account(pulls: Sequence[Pull], ranges: Sequence[AccountRange]) -> BinnedStats:
    bins = []
    for account in ranges:
        stats = PullStats()
        for pull in pulls[account.as_slice()]:
            stats = fold(stats, pull)
        bins.append(stats)
    names = np.array([r.name or str(i) for i, r in enumerate(ranges)], dtype=object)
    return BinnedStats("account", bins, names)
