from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .binning import BinnedStats, bin_by_account, bin_by_date, bin_by_time_of_day
from .config import GachaConfig
from .errors import Diagnostics, NoDataError
from .ingest import read_accounts
from .tracker import AccountLog, AccountRange, Pull, track

logger = logging.getLogger(__name__)


@dataclass
class Analysis:
    pulls: Tuple[Pull, ...]
    ranges: Tuple[AccountRange, ...]
    by_time: BinnedStats
    by_date: BinnedStats
    by_account: BinnedStats
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def binned(self) -> Tuple[BinnedStats, ...]:
        return self.by_time, self.by_date, self.by_account


def analyze(
    accounts: Iterable[AccountLog],
    config: GachaConfig = GachaConfig(),
    diagnostics: Optional[Diagnostics] = None,
) -> Analysis:
    """Track every account, then bin the pulls three ways.

    Raises NoDataError when no account produced a five-star pull.
    """
    config.validate()
    if diagnostics is None:
        diagnostics = Diagnostics()

    pulls, ranges = track(accounts, config)
    logger.info("Tracked %d five-star pulls over %d accounts", len(pulls), len(ranges))
    if not pulls:
        raise NoDataError("no five-star pulls on the tracked banner")

    return Analysis(
        pulls=pulls,
        ranges=ranges,
        by_time=bin_by_time_of_day(pulls, config.day_slices, config.excluded_dates),
        by_date=bin_by_date(pulls),
        by_account=bin_by_account(pulls, ranges),
        diagnostics=diagnostics,
    )


def analyze_dir(data_dir: Path, config: GachaConfig = GachaConfig()) -> Analysis:
    diagnostics = Diagnostics()
    try:
        # Reading is lazy; the generator is drained inside track().
        return analyze(read_accounts(data_dir, diagnostics), config, diagnostics)
    finally:
        if diagnostics:
            logger.warning(
                "Skipped %d records (%d malformed, %d truncated)",
                len(diagnostics),
                len(diagnostics.malformed),
                len(diagnostics.truncated),
            )
