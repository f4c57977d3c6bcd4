"""Pity and 50/50 statistics from per-account gacha draw logs."""
from __future__ import annotations

from .binning import BinnedStats, bin_by_account, bin_by_date, bin_by_time_of_day
from .classify import DrawClass, classify
from .config import GachaConfig
from .errors import (
    ConfigError,
    DataDirError,
    MalformedRecordError,
    NoDataError,
    PityscopeError,
    RecordError,
    TruncatedRecordError,
)
from .stats import PullStats, fold, fold_all
from .tracker import AccountRange, Pull, RawDraw, track

__all__ = [
    "AccountRange",
    "BinnedStats",
    "ConfigError",
    "DataDirError",
    "DrawClass",
    "GachaConfig",
    "MalformedRecordError",
    "NoDataError",
    "Pull",
    "PullStats",
    "PityscopeError",
    "RawDraw",
    "RecordError",
    "TruncatedRecordError",
    "bin_by_account",
    "bin_by_date",
    "bin_by_time_of_day",
    "classify",
    "fold",
    "fold_all",
    "track",
]
