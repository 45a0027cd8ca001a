import pytest

from ttcompetition.engine.rating import (
    expected_score,
    k_factor,
    rate_match,
    rating_category,
    update_ratings,
)
from ttcompetition.exceptions import InvalidOutcomeError
from ttcompetition.models.competitor import Competitor


def test_equal_ratings_move_by_half_k():
    update = update_ratings(1500, 1500, 1, 32)
    assert update.delta_a == 16
    assert update.delta_b == -16
    assert (update.new_a, update.new_b) == (1516, 1484)


def test_draw_between_equals_changes_nothing():
    update = update_ratings(1500, 1500, 0.5, 32)
    assert (update.delta_a, update.delta_b) == (0, 0)


def test_rating_floor():
    update = update_ratings(110, 2000, 0, 40)
    assert update.new_a >= 100
    update = update_ratings(110, 110, 0, 40)
    assert update.delta_a == -20
    assert update.new_a == 100
    assert update.new_b == 130


def test_upset_gains_more_than_expected_win():
    upset = update_ratings(1400, 1800, 1, 32)
    expected = update_ratings(1800, 1400, 1, 32)
    assert upset.delta_a > expected.delta_a > 0


def test_each_side_uses_its_own_k_factor():
    update = update_ratings(1500, 1500, 1, 40, 24)
    assert update.delta_a == 20
    assert update.delta_b == -12


def test_default_k_factor():
    assert update_ratings(1500, 1500, 0).delta_a == -16


@pytest.mark.parametrize("outcome", [2, -1, 0.25, True, "1"])
def test_invalid_outcome(outcome):
    with pytest.raises(InvalidOutcomeError):
        update_ratings(1500, 1500, outcome)


@pytest.mark.parametrize(
    "rating, games, expected",
    [(2500, 0, 40), (1000, 29, 40), (1399, 30, 36), (1400, 30, 32), (1799, 100, 32), (1800, 30, 24)],
)
def test_k_factor(rating, games, expected):
    assert k_factor(rating, games) == expected


def test_expected_score_is_symmetric():
    assert expected_score(1500, 1500) == 0.5
    assert expected_score(1600, 1400) + expected_score(1400, 1600) == pytest.approx(1)
    assert expected_score(1900, 1500) == pytest.approx(0.909, abs=1e-3)


def test_rate_match_returns_new_competitors():
    a = Competitor("A", rating=1500, id="a")
    b = Competitor("B", rating=1500, id="b")
    new_a, new_b = rate_match(a, 10, b, 100, 1)
    assert new_a.rating == 1520  # provisional K 40
    assert new_b.rating == 1484  # K 32
    assert a.rating == 1500 and b.rating == 1500
    assert new_a.id == "a"


@pytest.mark.parametrize(
    "rating, category",
    [(2300, "Master"), (2000, "Expert"), (1850, "Advanced"), (1600, "Intermediate+"),
     (1450, "Intermediate"), (1200, "Beginner+"), (900, "Beginner")],
)
def test_rating_category(rating, category):
    assert rating_category(rating) == category
