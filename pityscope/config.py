"""Banner and roster configuration.

Defaults reproduce the Genshin Impact character event wish as of the 3.x
patches: the six standard five-stars and the beginner (100), standard (200)
and weapon (302) banner ids.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path
from typing import FrozenSet, Iterable, List

from .errors import ConfigError

MINUTES_PER_DAY = 24 * 60

NON_LIMITED_FIVE_STARS = frozenset({"刻晴", "迪卢克", "七七", "莫娜", "琴", "提纳里"})
EXCLUDED_BANNERS = frozenset({"100", "200", "302"})
DAY_SLICES = 48


@dataclass(frozen=True)
class GachaConfig:
    non_limited: FrozenSet[str] = NON_LIMITED_FIVE_STARS
    excluded_banners: FrozenSet[str] = EXCLUDED_BANNERS
    day_slices: int = DAY_SLICES
    excluded_dates: FrozenSet[date] = field(default_factory=frozenset)

    @property
    def slice_minutes(self) -> int:
        return MINUTES_PER_DAY // self.day_slices

    def validate(self) -> "GachaConfig":
        if self.day_slices <= 0 or MINUTES_PER_DAY % self.day_slices:
            raise ConfigError(
                f"day_slices must evenly divide {MINUTES_PER_DAY} minutes, got {self.day_slices}"
            )
        return self

    def extended(
        self,
        non_limited: Iterable[str] = (),
        excluded_banners: Iterable[str] = (),
        excluded_dates: Iterable[date] = (),
    ) -> "GachaConfig":
        """Return a copy with extra roster, banner and date entries added."""
        return replace(
            self,
            non_limited=self.non_limited | frozenset(non_limited),
            excluded_banners=self.excluded_banners | frozenset(excluded_banners),
            excluded_dates=self.excluded_dates | frozenset(excluded_dates),
        )

    @classmethod
    def from_json(cls, path: Path) -> "GachaConfig":
        """Load a config file; keys left out keep their defaults.

        Recognised keys: ``non_limited``, ``excluded_banners`` (lists of
        strings), ``day_slices`` (int) and ``excluded_dates`` (list of
        ``YYYY-MM-DD`` strings).
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigError(f"cannot read config {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"config {path} must be a JSON object")

        unknown = set(raw) - {"non_limited", "excluded_banners", "day_slices", "excluded_dates"}
        if unknown:
            raise ConfigError(f"unknown config keys in {path}: {', '.join(sorted(unknown))}")

        kwargs = {}
        if "non_limited" in raw:
            kwargs["non_limited"] = frozenset(_string_list(raw, "non_limited", path))
        if "excluded_banners" in raw:
            kwargs["excluded_banners"] = frozenset(_string_list(raw, "excluded_banners", path))
        if "day_slices" in raw:
            slices = raw["day_slices"]
            # bool is an int subclass
            if isinstance(slices, bool) or not isinstance(slices, int):
                raise ConfigError(f"day_slices in {path} must be an integer, got {slices!r}")
            kwargs["day_slices"] = slices
        if "excluded_dates" in raw:
            kwargs["excluded_dates"] = frozenset(parse_date(x) for x in _string_list(raw, "excluded_dates", path))
        return cls(**kwargs).validate()


def parse_date(text: str) -> date:
    try:
        return date.fromisoformat(str(text))
    except ValueError as exc:
        raise ConfigError(f"invalid date {text!r}, expected YYYY-MM-DD") from exc


def _string_list(raw: dict, key: str, path: Path) -> List[str]:
    value = raw[key]
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise ConfigError(f"{key} in {path} must be a list of strings, got {value!r}")
    return value
