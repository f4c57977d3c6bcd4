import logging

import pytest

from pityscope.config import GachaConfig
from pityscope.errors import NoDataError
from pityscope.pipeline import analyze, analyze_dir

from conftest import LIMITED_BANNER as L, START

ORD = (3, "冷刃", L)
LOSS = (5, "迪卢克", L)
WIN = (5, "雷电将军", L)


def test_analyze_bins_every_pull(account, config):
    accounts = [
        account("a", *[ORD] * 9, LOSS, *[ORD] * 4, WIN),
        account("b", ORD, ORD),
        account("c", *[ORD] * 2, WIN),
    ]
    analysis = analyze(accounts, config)

    assert len(analysis.pulls) == 3
    assert [len(r) for r in analysis.ranges] == [2, 0, 1]
    for binned in analysis.binned():
        assert binned.total == 3
    assert analysis.by_date.stats[0].win_chance == pytest.approx(0.5)
    assert analysis.by_account.stats[0].pity_avg_special == 15
    assert analysis.by_account.stats[2].pity_avg_special == 3


def test_analyze_without_pulls(account, config):
    with pytest.raises(NoDataError):
        analyze([account("a", ORD, ORD)], config)
    with pytest.raises(NoDataError):
        analyze([], config)


def test_time_bins_use_excluded_dates(account):
    config = GachaConfig().extended(excluded_dates=[START.date()])
    analysis = analyze([account("a", WIN, WIN)], config)
    assert analysis.by_time.total == 0
    assert analysis.by_date.total == 2


def test_analyze_dir_logs_skipped_records(tmp_path, caplog):
    (tmp_path / "a.csv").write_text(
        "h\n"
        "冷刃,301,1,3,武器,2022-09-09 18:00:00\n"
        "oops\n"
        "雷电将军,301,3,5,角色,2022-09-09 18:00:02\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.INFO, logger="pityscope"):
        analysis = analyze_dir(tmp_path)

    assert len(analysis.pulls) == 1
    assert analysis.pulls[0].pities == 2
    assert len(analysis.diagnostics) == 1
    assert "Reading file a.csv" in caplog.text
    assert "a.csv:3" in caplog.text


def test_analyze_dir_empty(tmp_path):
    with pytest.raises(NoDataError):
        analyze_dir(tmp_path)
