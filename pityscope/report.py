from __future__ import annotations

from pathlib import Path

import numpy as np

from .binning import FIELDS, BinnedStats


def _axis_labels(binned: BinnedStats) -> np.ndarray:
    if binned.name == "time":
        minutes = np.rint(binned.axis * 60).astype(int)
        return np.array([f"{m // 60:02d}:{m % 60:02d}" for m in minutes], dtype=object)
    return np.array([str(x) for x in binned.axis], dtype=object)


def save_csv(binned: BinnedStats, output_path: Path) -> None:
    """Write one row per bin: axis label followed by the five stats."""
    columns = [_axis_labels(binned)] + [binned.column(f) for f in FIELDS]
    table = np.column_stack(columns) if len(binned) else np.empty((0, len(columns)), dtype=object)
    np.savetxt(
        output_path,
        table,
        delimiter=",",
        header=",".join((binned.name,) + FIELDS),
        comments="",
        fmt="%s",
        encoding="utf-8",
    )
