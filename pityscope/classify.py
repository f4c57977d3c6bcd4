from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from .config import GachaConfig

if TYPE_CHECKING:
    from .tracker import RawDraw


class DrawClass(Enum):
    EXCLUDED = auto()
    ORDINARY = auto()
    FIVE_STAR_SPECIAL = auto()
    FIVE_STAR_NON_SPECIAL = auto()


def classify(draw: RawDraw, config: GachaConfig) -> DrawClass:
    """Place a raw draw relative to the tracked limited banner.

    Characters missing from the non-limited roster count as limited.
    """
    if draw.banner_id in config.excluded_banners:
        return DrawClass.EXCLUDED
    if draw.rarity < 5:
        return DrawClass.ORDINARY
    if draw.character in config.non_limited:
        return DrawClass.FIVE_STAR_NON_SPECIAL
    return DrawClass.FIVE_STAR_SPECIAL
