import random
from datetime import date

import pytest

from ttcompetition import Tournament
from ttcompetition.db.repository import SqlMatchRepository
from ttcompetition.engine.advancement import record_sets
from ttcompetition.engine.qualification import qualifiers
from ttcompetition.exceptions import GroupNotFoundError, MatchNotFoundError
from ttcompetition.models.group import Group
from ttcompetition.models.match import MatchStatus
from ttcompetition.simulation import (
    draw_sample_groups,
    generate_sample_competitors,
    simulate_match,
    simulate_set,
    simulate_tournament,
)

from conftest import make_competitors


def test_simulated_sets_and_matches_are_legal():
    rng = random.Random(7)
    for _ in range(50):
        assert simulate_set(1800, 1200, rng).is_valid()
    a, b = generate_sample_competitors(2, rng)
    sets = simulate_match(a, b, best_of=5, rng=rng)
    wins1 = sum(1 for s in sets if s.side1_score > s.side2_score)
    assert 3 <= len(sets) <= 5
    assert max(wins1, len(sets) - wins1) == 3


def test_draw_sample_groups_snakes_by_rating():
    players = make_competitors(8)
    groups = draw_sample_groups(players, group_size=4)
    assert [g.label for g in groups] == ["A", "B"]
    assert groups[0].member_ids == ["P1", "P4", "P5", "P8"]
    assert groups[1].member_ids == ["P2", "P3", "P6", "P7"]
    assert all(m.group_label == "B" for m in groups[1].members)


def test_qualifiers_take_top_two_who_played():
    group_a = Group("ga", "A", make_competitors(3))
    group_b = Group("gb", "B", [c.with_rating(1000) for c in make_competitors(2)])
    matches = {"ga": [record_sets(m, ["11:1", "11:1", "11:1"]) for m in group_a.schedule()]}
    qualified = qualifiers([group_a, group_b], matches)
    assert [(c.id, c.seed_rank, c.group_label) for c in qualified] == [
        ("P1", 1, "A"),
        ("P2", 2, "A"),
    ]


def test_tournament_flow_with_sql_repository():
    tournament = Tournament(
        "Club Cup", date(2024, 5, 1), repository=SqlMatchRepository.from_url()
    )
    players = make_competitors(6)
    tournament.add_group("Open", Group("ga", "A", players[:3]))
    tournament.add_group("Open", Group("gb", "B", players[3:]))
    assert tournament.generate_group_matches() == 6

    for group_id in ("ga", "gb"):
        for match in tournament.group_matches(group_id):
            tournament.record_group_result(group_id, match.id, ["11:5", "11:5", "11:5"])

    assert [s.competitor_id for s in tournament.group_standings("ga")] == ["P1", "P2", "P3"]
    assert [s.competitor_id for s in tournament.group_standings("gb")] == ["P4", "P5", "P6"]

    bracket = tournament.setup_knockout_stage("Open")
    first = bracket.rounds[0].matches
    # A1 v B2 and B1 v A2
    assert [set(m.side_ids) for m in first] == [{"P1", "P5"}, {"P4", "P2"}]

    for match in first:
        tournament.record_knockout_result("Open", match.id, ["11:3", "11:3", "11:3"])
    final = tournament.bracket("Open").rounds[-1].matches[0]
    assert final.is_ready
    tournament.record_knockout_result("Open", final.id, ["3:11", "3:11", "3:11"])
    assert tournament.champion("Open") == "P4"


def test_tournament_errors():
    tournament = Tournament("Cup", date(2024, 1, 1))
    tournament.add_group("Open", Group("ga", "A", make_competitors(2)))
    tournament.generate_group_matches()
    with pytest.raises(GroupNotFoundError):
        tournament.group_standings("nope")
    with pytest.raises(MatchNotFoundError):
        tournament.record_group_result("ga", "nope", ["11:1"])


def test_simulated_tournament_has_a_champion():
    tournament = simulate_tournament(n_competitors=12, group_size=4, seed=11)
    bracket = tournament.bracket("Open")
    assert len(bracket.matches) == 7  # 6 qualifiers in a bracket of 8
    assert bracket.is_complete
    assert bracket.champion_id in {c.id for g in tournament.groups["Open"] for c in g.members}
    for group in tournament.groups["Open"]:
        assert all(m.status == MatchStatus.COMPLETED for m in tournament.group_matches(group.id))
