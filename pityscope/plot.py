"""Charts: average pulls per limited five-star as bars, 50/50 win rate as a line."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .binning import BinnedStats

TITLE = "Genshin Pulls Analysis"
X_LABELS = {"time": "Time", "date": "Date", "account": "Account"}

Limits = Optional[Tuple[float, float]]


def _positions(binned: BinnedStats) -> Tuple[np.ndarray, float, str]:
    if binned.name == "account":
        return np.arange(len(binned)), 0.8, "center"
    if binned.name == "date":
        return binned.axis, 0.8, "center"
    # Time bins start at their axis value.
    return binned.axis, 0.8 * binned.bin_width, "edge"


def plot_binned(
    binned: BinnedStats,
    output_path: Path,
    avg_limits: Limits = None,
    chance_limits: Limits = None,
) -> None:
    x, width, align = _positions(binned)

    fig, ax = plt.subplots(figsize=(10, 6))
    bars = ax.bar(x, binned.column("pity_avg_special"), width=width, align=align)
    bar_color = bars.patches[0].get_facecolor() if bars.patches else "C0"

    ax2 = ax.twinx()
    line = ax2.plot(x, binned.column("win_chance"), marker="o", color="C1")[0]

    ax.set_title(TITLE)
    ax.set_xlabel(X_LABELS.get(binned.name, binned.name))
    ax.set_ylabel("Avg Pulls", color=bar_color)
    ax2.set_ylabel("Winning Chance", color=line.get_color())
    if avg_limits is not None:
        ax.set_ylim(*avg_limits)
    if chance_limits is not None:
        ax2.set_ylim(*chance_limits)

    if binned.name == "account":
        ax.set_xticks(x)
        ax.set_xticklabels([str(n) for n in binned.axis], rotation=45, ha="right")
    elif binned.name == "date":
        fig.autofmt_xdate()

    ax.grid(alpha=0.3)
    fig.tight_layout()
    fig.savefig(output_path, dpi=200)
    plt.close(fig)
