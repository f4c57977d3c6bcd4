from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from pityscope.config import GachaConfig
from pityscope.tracker import AccountLog, Pull, RawDraw

LIMITED_BANNER = "301"
START = datetime(2022, 9, 9, 18, 0, 0)


def draw(rarity=3, character="冷刃", banner=LIMITED_BANNER, when=START):
    return RawDraw(character, banner, rarity, when)


def draws(*specs, start=START):
    """Build consecutive draws one minute apart from (rarity, character, banner) tuples."""
    return [
        draw(rarity, character, banner, start + timedelta(minutes=i))
        for i, (rarity, character, banner) in enumerate(specs)
    ]


def pull(pities, special=True, won=True, pities_special=None, when=START):
    return Pull(special, won, pities, pities if pities_special is None else pities_special, when)


@pytest.fixture
def config():
    return GachaConfig()


@pytest.fixture
def account():
    def make(name, *specs, start=START):
        return AccountLog(name, draws(*specs, start=start))
    return make
