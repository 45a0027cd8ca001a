import random
from datetime import date
from typing import List, Optional, Sequence

from ..engine.rating import win_probability
from ..models.competitor import Competitor
from ..models.group import Group
from ..models.match import SetResult

FIRST_NAMES = ["John", "Jane", "Bob", "Alice", "Charlie", "Diana", "Eve", "Frank",
               "George", "Helen", "Ian", "Julia", "Kevin", "Laura", "Mike", "Nina"]
LAST_NAMES = ["Smith", "Jones", "Brown", "Wilson", "Taylor", "Davis", "Miller",
              "Moore", "Anderson", "Thomas", "Jackson", "White", "Harris", "Martin"]


def generate_sample_competitors(
    n: int = 8, rng: Optional[random.Random] = None
) -> List[Competitor]:
    """Generate n competitors with random names and ratings between 1000 and 2000."""
    rng = rng or random.Random()
    return [
        Competitor(
            display_name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
            rating=rng.randint(1000, 2000),
            id=f"p{i + 1}",
        )
        for i in range(n)
    ]


def draw_sample_groups(
    competitors: Sequence[Competitor], group_size: int = 4
) -> List[Group]:
    """Snake-distribute competitors by rating into groups labelled A, B, ..."""
    ordered = sorted(competitors, key=lambda c: c.rating, reverse=True)
    num_groups = max(1, len(ordered) // group_size)
    buckets: List[List[Competitor]] = [[] for _ in range(num_groups)]
    for i, competitor in enumerate(ordered):
        group_idx = (
            i % num_groups
            if (i // num_groups) % 2 == 0
            else num_groups - 1 - (i % num_groups)
        )
        buckets[group_idx].append(competitor)

    groups = []
    for i, members in enumerate(buckets):
        label = chr(65 + i)
        groups.append(
            Group(
                id=f"group_{label.lower()}",
                label=label,
                members=tuple(m.with_seed(None, label) for m in members),
            )
        )
    return groups


def simulate_set(
    rating1: float, rating2: float, rng: Optional[random.Random] = None
) -> SetResult:
    """Play one set point by point; the stronger side wins points more often."""
    rng = rng or random.Random()
    # Flatten the match win probability so single points stay close.
    point_chance = 0.5 + (win_probability(rating1, rating2) - 0.5) / 4
    points1 = points2 = 0
    while True:
        if rng.random() < point_chance:
            points1 += 1
        else:
            points2 += 1
        if max(points1, points2) >= 11 and abs(points1 - points2) >= 2:
            return SetResult(points1, points2)


def simulate_match(
    side1: Competitor,
    side2: Competitor,
    best_of: int = 5,
    rng: Optional[random.Random] = None,
) -> List[SetResult]:
    rng = rng or random.Random()
    needed = best_of // 2 + 1
    sets_won = [0, 0]
    sets = []
    while max(sets_won) < needed:
        set_ = simulate_set(side1.rating, side2.rating, rng)
        sets_won[0 if set_.side1_score > set_.side2_score else 1] += 1
        sets.append(set_)
    return sets


def simulate_tournament(
    n_competitors: int = 12, group_size: int = 4, seed: Optional[int] = None
):
    """Run a whole category: groups, knockout stage and champion."""
    from ..models.tournament import Tournament

    rng = random.Random(seed)
    tournament = Tournament("Simulated Championship", date.today())
    for group in draw_sample_groups(generate_sample_competitors(n_competitors, rng), group_size):
        tournament.add_group("Open", group)
    tournament.simulate(rng)
    return tournament
