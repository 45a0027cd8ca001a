"""Single-elimination bracket generation.

Matches are returned as a flat list; the tree lives in ``round``,
``position_in_round`` and ``next_match_id``.
"""

from dataclasses import replace
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..models.bracket import Bracket
from ..models.competitor import Competitor
from ..models.match import MatchRecord, MatchStatus
from ..utils import setup_logger
from .seeding import seed

logger = setup_logger(__name__)


def bracket_size_for(n: int) -> int:
    """Smallest power of two that holds n competitors."""
    size = 1
    while size < n:
        size *= 2
    return size


def total_rounds_for(bracket_size: int) -> int:
    return bracket_size.bit_length() - 1


@lru_cache(maxsize=None)
def seed_positions(bracket_size: int) -> Tuple[int, ...]:
    """Standard bracket order of seeds, slot by slot.

    Each round-1 match pairs seed s with seed bracket_size + 1 - s, and the
    top two seeds can only meet in the final::

        >>> seed_positions(8)
        (1, 8, 4, 5, 2, 7, 3, 6)
    """
    if bracket_size < 1 or bracket_size & (bracket_size - 1):
        raise ValueError(f"Bracket size must be a power of two, got {bracket_size}")
    if bracket_size == 1:
        return (1,)

    positions = []
    for s in seed_positions(bracket_size // 2):
        positions.extend([s, bracket_size + 1 - s])
    return tuple(positions)


def first_round_slots(seeded: Sequence[Competitor]) -> List[Optional[Competitor]]:
    """Place seeded competitors into the round-1 slot array, None for byes."""
    n = len(seeded)
    return [
        seeded[s - 1] if s <= n else None
        for s in seed_positions(bracket_size_for(n))
    ]


def build_single_elimination(
    seeded: Sequence[Competitor], id_prefix: str
) -> List[MatchRecord]:
    """Build every match of a single-elimination bracket.

    Fewer than two competitors give an empty list. Round-1 matches with a
    single competitor are byes already won by that competitor; later rounds
    start empty. Ids are ``{id_prefix}_m{counter}`` in round-major order.
    """
    n = len(seeded)
    if n < 2:
        logger.debug(f"{id_prefix}: {n} competitor(s), no bracket generated")
        return []

    bracket_size = bracket_size_for(n)
    total_rounds = total_rounds_for(bracket_size)
    slots = first_round_slots(seeded)

    matches: List[MatchRecord] = []
    counter = 1
    for round_number in range(1, total_rounds + 1):
        matches_in_round = bracket_size >> round_number
        for position in range(1, matches_in_round + 1):
            match = MatchRecord(
                id=f"{id_prefix}_m{counter}",
                round=round_number,
                position_in_round=position,
            )
            counter += 1
            if round_number == 1:
                side1 = slots[2 * position - 2]
                side2 = slots[2 * position - 1]
                match = replace(match, side1=side1, side2=side2)
                if side1 is None or side2 is None:
                    filled = side1 or side2
                    match = replace(match, status=MatchStatus.BYE, winner_id=filled.id)
            matches.append(match)

    ids: Dict[Tuple[int, int], str] = {
        (m.round, m.position_in_round): m.id for m in matches
    }
    wired = [
        replace(
            m,
            next_match_id=ids[(m.round + 1, (m.position_in_round + 1) // 2)],
        )
        if m.round < total_rounds
        else m
        for m in matches
    ]

    byes = sum(1 for m in wired if m.status == MatchStatus.BYE)
    logger.debug(
        f"{id_prefix}: bracket of {bracket_size} for {n} competitors, "
        f"{total_rounds} rounds, {len(wired)} matches, {byes} byes"
    )
    return wired


def propagate_byes(matches: Sequence[MatchRecord]) -> List[MatchRecord]:
    """Return a copy with every bye winner placed in its next-round slot."""
    updated = list(matches)
    index = {m.id: i for i, m in enumerate(updated)}
    for match in matches:
        if match.status != MatchStatus.BYE or match.next_match_id is None:
            continue
        winner = match.side1 if match.side1_id == match.winner_id else match.side2
        child_index = index[match.next_match_id]
        slot = 1 if match.position_in_round % 2 else 2
        updated[child_index] = updated[child_index].with_side(slot, winner)
    return updated


def build_bracket(
    category_label: str,
    competitors: Sequence[Competitor],
    group_finish_order: Optional[Mapping[str, int]] = None,
    id_prefix: Optional[str] = None,
) -> Bracket:
    """Seed ``competitors`` and build the category's bracket."""
    seeded = seed(competitors, group_finish_order)
    prefix = id_prefix or category_label.lower().replace(" ", "_")
    return Bracket(category_label, tuple(build_single_elimination(seeded, prefix)))
