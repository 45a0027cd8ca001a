from dataclasses import replace

import polars as pl

from ttcompetition.config import EngineConfig
from ttcompetition.engine.advancement import record_sets
from ttcompetition.engine.scheduling import round_robin
from ttcompetition.engine.standings import standings, standings_frame
from ttcompetition.models.match import MatchRecord, MatchStatus

from conftest import make_competitors


def play(match, *sets):
    return record_sets(match, sets)


def test_set_difference_breaks_points_tie():
    a, b, c, d = make_competitors(4)
    matches = [
        play(MatchRecord("m1", a, b), "11:5", "11:5"),
        play(MatchRecord("m2", c, d), "11:5", "5:11", "11:5"),
    ]
    table = standings([c, d, a, b], matches)
    assert [s.competitor_id for s in table] == ["P1", "P3", "P4", "P2"]
    assert table[0].points == 3 and table[1].points == 3
    assert (table[0].sets_won, table[0].sets_lost) == (2, 0)
    assert (table[1].sets_won, table[1].sets_lost) == (2, 1)
    assert [s.rank for s in table] == [1, 2, 3, 4]


def test_sets_won_breaks_equal_difference():
    a, b, c, d = make_competitors(4)
    matches = [
        play(MatchRecord("m1", a, b), "11:5", "11:5", "5:11", "11:5"),
        play(MatchRecord("m2", c, d), "11:5", "11:5"),
    ]
    # A: 3-1 (+2), C: 2-0 (+2); A has more sets won
    table = standings([c, d, a, b], matches)
    assert [s.competitor_id for s in table[:2]] == ["P1", "P3"]


def test_residual_ties_keep_member_order_with_consecutive_ranks():
    members = make_competitors(3)
    table = standings(list(reversed(members)), [])
    assert [s.competitor_id for s in table] == ["P3", "P2", "P1"]
    assert [s.rank for s in table] == [1, 2, 3]
    assert all(s.points == 0 and s.matches_played == 0 for s in table)


def test_only_completed_matches_count():
    members = make_competitors(3)
    matches = round_robin("g", members)
    matches[0] = play(matches[0], "11:1", "11:1", "11:1")
    matches[1] = replace(matches[1], status=MatchStatus.IN_PROGRESS)
    table = standings(members, matches)
    by_id = {s.competitor_id: s for s in table}
    assert by_id["P1"].wins == 1 and by_id["P1"].matches_played == 1
    assert by_id["P2"].losses == 1
    assert by_id["P3"].matches_played == 0


def test_full_group_totals():
    members = make_competitors(4)
    matches = [play(m, "11:9", "9:11", "11:9") for m in round_robin("g", members)]
    table = standings(members, matches)
    assert [s.competitor_id for s in table] == ["P1", "P2", "P3", "P4"]
    assert [s.wins for s in table] == [3, 2, 1, 0]
    assert [s.points for s in table] == [9, 6, 3, 0]
    assert sum(s.sets_won for s in table) == sum(s.sets_lost for s in table)
    assert all(s.matches_played == 3 for s in table)


def test_points_per_win_is_configurable(four_players):
    a, b = four_players[:2]
    matches = [play(MatchRecord("m1", a, b), "11:5")]
    table = standings([a, b], matches, EngineConfig(points_per_win=2))
    assert table[0].points == 2


def test_standings_frame_columns(four_players):
    frame = standings_frame(four_players, [])
    assert isinstance(frame, pl.DataFrame)
    assert frame.height == 4
    assert {"competitor_id", "points", "set_difference", "rank"} <= set(frame.columns)
    assert frame["rank"].to_list() == [1, 2, 3, 4]
