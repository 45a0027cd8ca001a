import pytest

from ttcompetition.models.competitor import Competitor


def make_competitors(n, rating=1500, **kwargs):
    return [
        Competitor(f"Player {i}", rating=rating - i * 10, id=f"P{i}", **kwargs)
        for i in range(1, n + 1)
    ]


@pytest.fixture
def five_players():
    return make_competitors(5)


@pytest.fixture
def four_players():
    return make_competitors(4)
