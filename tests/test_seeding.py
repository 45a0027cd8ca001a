from ttcompetition.engine.seeding import seed
from ttcompetition.models.competitor import Competitor


def test_group_winners_come_before_runners_up():
    competitors = [
        Competitor("B2", rating=1900, group_label="B", seed_rank=2, id="b2"),
        Competitor("A1", rating=1200, group_label="A", seed_rank=1, id="a1"),
        Competitor("A2", rating=1800, group_label="A", seed_rank=2, id="a2"),
        Competitor("B1", rating=1300, group_label="B", seed_rank=1, id="b1"),
    ]
    assert [c.id for c in seed(competitors)] == ["a1", "b1", "a2", "b2"]


def test_same_rank_and_group_breaks_by_rating():
    competitors = [
        Competitor("Low", rating=1400, group_label="A", seed_rank=1, id="low"),
        Competitor("High", rating=1600, group_label="A", seed_rank=1, id="high"),
    ]
    assert [c.id for c in seed(competitors)] == ["high", "low"]


def test_finish_order_overrides_seed_rank():
    competitors = [
        Competitor("X", rating=1500, group_label="A", seed_rank=1, id="x"),
        Competitor("Y", rating=1500, group_label="B", id="y"),
    ]
    seeded = seed(competitors, {"x": 2, "y": 1})
    assert [c.id for c in seeded] == ["y", "x"]
    assert [c.seed_rank for c in seeded] == [1, 2]


def test_unranked_and_unlabelled_go_last():
    competitors = [
        Competitor("None", rating=2000, id="n"),
        Competitor("NoLabel", rating=2000, seed_rank=1, id="nl"),
        Competitor("Labelled", rating=1000, group_label="Z", seed_rank=1, id="l"),
    ]
    assert [c.id for c in seed(competitors)] == ["l", "nl", "n"]


def test_seeding_is_reproducible_and_does_not_mutate_input():
    competitors = [
        Competitor(f"P{i}", rating=1500 + i * 10, group_label="AB"[i % 2],
                   seed_rank=1 + i % 2, id=f"p{i}")
        for i in range(8)
    ]
    original = list(competitors)
    first = seed(competitors)
    assert seed(list(reversed(competitors))) == first
    assert competitors == original
