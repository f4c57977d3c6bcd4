"""Turn per-account draw streams into five-star pull events.

Two counters run side by side for each account:

- ``pities`` counts draws since the last five-star of any kind and resets
  on every five-star.
- the guarantee window. A five-star that misses the limited character
  guarantees the next one, so a limited five-star that follows a loss
  reports the draws of both five-stars in ``pities_special``. A loss cannot
  happen twice in a row, so one step of carry is enough.

Draws on excluded banners never touch either counter.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .classify import DrawClass, classify
from .config import GachaConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawDraw:
    character: str
    banner_id: str
    rarity: int
    timestamp: datetime


@dataclass(frozen=True)
class Pull:
    is_special: bool
    won_fifty: bool
    pities: int
    pities_special: int
    time: datetime


@dataclass(frozen=True)
class AccountRange:
    """Slice ``[start, end)`` of the flat pull sequence owned by one account."""

    start: int
    end: int
    name: str = ""

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


@dataclass
class AccountLog:
    name: str
    draws: List[RawDraw] = field(default_factory=list)


@dataclass
class PityState:
    pities: int = 0
    # No guarantee is owed when an account starts.
    won_fifty: bool = True
    last_pities: int = 0


def _step(state: PityState, draw: RawDraw, config: GachaConfig) -> Optional[Pull]:
    """Advance the state by one draw; return the pull it emits, if any."""
    kind = classify(draw, config)
    if kind is DrawClass.EXCLUDED:
        return None

    state.pities += 1
    if kind is DrawClass.ORDINARY:
        return None

    is_special = kind is DrawClass.FIVE_STAR_SPECIAL
    carried = 0 if state.won_fifty else state.last_pities
    pull = Pull(
        is_special=is_special,
        won_fifty=state.won_fifty,
        pities=state.pities,
        pities_special=state.pities + carried,
        time=draw.timestamp,
    )

    state.won_fifty = is_special
    state.last_pities = state.pities
    state.pities = 0
    return pull


def track_account(draws: Iterable[RawDraw], config: GachaConfig) -> List[Pull]:
    state = PityState()
    pulls = []
    for draw in draws:
        pull = _step(state, draw, config)
        if pull is not None:
            pulls.append(pull)
    return pulls


def track(
    accounts: Iterable[AccountLog], config: GachaConfig
) -> Tuple[Tuple[Pull, ...], Tuple[AccountRange, ...]]:
    """Run every account through its own tracker.

    Returns the concatenated pulls in account order together with the range
    each account occupies in it.
    """
    pulls: List[Pull] = []
    ranges: List[AccountRange] = []
    for account in accounts:
        start = len(pulls)
        pulls.extend(track_account(account.draws, config))
        ranges.append(AccountRange(start, len(pulls), account.name))
        if len(pulls) == start:
            logger.info("Account %s has no five-star pulls on the tracked banner", account.name)
    return tuple(pulls), tuple(ranges)
