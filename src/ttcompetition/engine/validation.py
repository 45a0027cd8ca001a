"""Set and match score validation.

A set is finished when the leader has at least 11 points and leads by at
least two. The match winner is never read from the input, it is always
derived from the set scores.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from ..config import DEFAULT_CONFIG, EngineConfig
from ..exceptions import AmbiguousResultError, InvalidSetCountError, InvalidSetScoreError
from ..utils import setup_logger

if TYPE_CHECKING:
    from ..models.match import SetResult

logger = setup_logger(__name__)

SET_POINTS = 11
DEUCE_POINTS = 10
MIN_LEAD = 2


@dataclass(frozen=True)
class MatchOutcome:
    winning_side: int
    sets_won1: int
    sets_won2: int

    @property
    def sets_lost1(self) -> int:
        return self.sets_won2

    @property
    def sets_lost2(self) -> int:
        return self.sets_won1


def _is_score(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _set_problem(set_result: "SetResult", strict_deuce: bool) -> Optional[str]:
    """Return why the set is not a legal finished set, or None."""
    s1 = getattr(set_result, "side1_score", None)
    s2 = getattr(set_result, "side2_score", None)
    if not (_is_score(s1) and _is_score(s2)):
        return f"scores must be non-negative integers, got {s1!r}:{s2!r}"

    high, low = max(s1, s2), min(s1, s2)
    if high < SET_POINTS:
        return f"{s1}:{s2} is not finished, nobody reached {SET_POINTS}"
    if high - low < MIN_LEAD:
        return f"{s1}:{s2} needs a lead of {MIN_LEAD}"
    if strict_deuce and high > SET_POINTS and (low < DEUCE_POINTS or high - low != MIN_LEAD):
        return f"{s1}:{s2} went past {SET_POINTS} without a deuce"
    return None


def validate_set(set_result: "SetResult", config: EngineConfig = DEFAULT_CONFIG) -> bool:
    return _set_problem(set_result, config.strict_deuce) is None


def set_winner(
    set_result: "SetResult", set_index: int = 0, config: EngineConfig = DEFAULT_CONFIG
) -> int:
    """Return 1 or 2 for the side that won a finished set."""
    problem = _set_problem(set_result, config.strict_deuce)
    if problem:
        raise InvalidSetScoreError(set_index, problem)
    return 1 if set_result.side1_score > set_result.side2_score else 2


def match_result_from_sets(
    sets: Sequence["SetResult"],
    match_id: Optional[str] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MatchOutcome:
    """Count sets won per side and derive the winner.

    Raises InvalidSetCountError, InvalidSetScoreError (with the index of the
    first bad set) or AmbiguousResultError when there is no majority.
    """
    if not 1 <= len(sets) <= config.max_sets:
        raise InvalidSetCountError(len(sets), config.max_sets)

    won = {1: 0, 2: 0}
    for index, set_result in enumerate(sets):
        won[set_winner(set_result, index, config)] += 1

    if won[1] == won[2]:
        logger.warning(f"Match {match_id}: sets tied {won[1]}:{won[2]}")
        raise AmbiguousResultError(match_id)

    return MatchOutcome(1 if won[1] > won[2] else 2, won[1], won[2])


def match_winning_side(
    sets: Sequence["SetResult"],
    match_id: Optional[str] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    return match_result_from_sets(sets, match_id, config).winning_side
