from datetime import timedelta

from pityscope.tracker import AccountLog, PityState, track, track_account

from conftest import LIMITED_BANNER as L, START, draws

ORD = (3, "冷刃", L)
LOSS = (5, "迪卢克", L)
WIN = (5, "雷电将军", L)


def test_guarantee_carry_scenario(config):
    pulls = track_account(draws(*[ORD] * 9, LOSS, *[ORD] * 4, WIN, *[ORD] * 2, LOSS), config)

    assert [(p.is_special, p.won_fifty, p.pities, p.pities_special) for p in pulls] == [
        (False, True, 10, 10),
        (True, False, 5, 15),
        (False, True, 3, 3),
    ]
    assert pulls[0].time == START + timedelta(minutes=9)


def test_excluded_banner_is_invisible(config):
    specs = [ORD] * 3 + [(5, "雷电将军", "200"), (4, "香菱", "302")] + [ORD] * 2 + [WIN]
    pulls = track_account(draws(*specs), config)
    assert len(pulls) == 1
    assert pulls[0].pities == 6


def test_back_to_back_five_stars(config):
    pulls = track_account(draws(WIN, WIN, LOSS, WIN), config)
    assert [p.pities for p in pulls] == [1, 1, 1, 1]
    assert [p.won_fifty for p in pulls] == [True, True, True, False]
    assert [p.pities_special for p in pulls] == [1, 1, 1, 2]


def test_pities_special_follows_previous_result(config):
    specs = [ORD] * 7 + [LOSS] + [ORD] * 3 + [WIN] + [ORD] * 5 + [WIN] + [LOSS] + [ORD] + [LOSS]
    pulls = track_account(draws(*specs), config)
    assert all(p.pities >= 1 for p in pulls)
    for prev, cur in zip(pulls, pulls[1:]):
        if prev.is_special:
            assert cur.won_fifty and cur.pities_special == cur.pities
        else:
            assert not cur.won_fifty
            assert cur.pities_special == cur.pities + prev.pities
    assert pulls[0].pities_special == pulls[0].pities


def test_trailing_draws_do_not_emit(config):
    assert track_account(draws(ORD, ORD, ORD), config) == []


def test_accounts_reset_and_partition(config):
    a = AccountLog("a", draws(*[ORD] * 4, LOSS, *[ORD] * 3))
    empty = AccountLog("empty", draws(ORD, ORD))
    b = AccountLog("b", draws(ORD, WIN, WIN))
    pulls, ranges = track([a, empty, b], config)

    assert [(r.name, r.start, r.end) for r in ranges] == [("a", 0, 1), ("empty", 1, 1), ("b", 1, 3)]
    assert sum(len(r) for r in ranges) == len(pulls)
    for prev, cur in zip(ranges, ranges[1:]):
        assert prev.end == cur.start
    # b starts fresh: no carried loss from a, no leftover pity.
    first_b = pulls[ranges[2].start]
    assert first_b.won_fifty and first_b.pities == 2 and first_b.pities_special == 2


def test_initial_state():
    state = PityState()
    assert state.pities == 0 and state.won_fifty and state.last_pities == 0
