import math
from typing import List, Optional, Sequence

from ..models.competitor import Competitor
from ..models.match import MatchRecord
from ..utils import setup_logger

logger = setup_logger(__name__)


def round_robin(group_id: str, members: Sequence[Competitor]) -> List[MatchRecord]:
    """Every player plays every other player once.

    The round number is only a display label: ``index // ceil(n / 2) + 1``.
    It does not guarantee that a player appears once per round; use
    ``berger_schedule`` for that.
    """
    n = len(members)
    if n < 2:
        return []

    per_round = math.ceil(n / 2)
    matches = []
    index = 0
    for i, p1 in enumerate(members):
        for p2 in members[i + 1:]:
            matches.append(
                MatchRecord(
                    id=f"match_{group_id}_{index}",
                    side1=p1,
                    side2=p2,
                    round=index // per_round + 1,
                    position_in_round=index % per_round + 1,
                    group_id=group_id,
                )
            )
            index += 1

    logger.debug(f"Group {group_id}: {len(matches)} round robin matches for {n} players")
    return matches


def berger_schedule(group_id: str, members: Sequence[Competitor]) -> List[MatchRecord]:
    """Round robin in conflict-free rounds using the Berger table.

    The first player stays fixed while the others rotate. An odd group gets
    a dummy player, and whoever meets the dummy sits the round out.
    """
    n = len(members)
    if n < 2:
        return []

    players: List[Optional[Competitor]] = list(members)
    if n % 2 == 1:
        players.append(None)
    size = len(players)

    matches = []
    for round_index in range(size - 1):
        position = 1
        for i in range(size // 2):
            p1 = players[i]
            p2 = players[size - 1 - i]
            if p1 and p2:
                matches.append(
                    MatchRecord(
                        id=f"match_{group_id}_r{round_index + 1}_{position}",
                        side1=p1,
                        side2=p2,
                        round=round_index + 1,
                        position_in_round=position,
                        group_id=group_id,
                    )
                )
                position += 1
        players.insert(1, players.pop())

    logger.debug(f"Group {group_id}: {size - 1} Berger rounds, {len(matches)} matches")
    return matches
