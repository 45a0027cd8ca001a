"""Recording results and moving winners through an elimination bracket.

Every function returns a new list and leaves its input untouched, so a host
can diff the two or simply discard the new one on error.
"""

from dataclasses import replace
from typing import List, Optional, Sequence

from ..config import DEFAULT_CONFIG, EngineConfig
from ..exceptions import (
    CascadingResultConflictError,
    InvalidWinnerError,
    MatchNotFoundError,
    MatchNotReadyError,
)
from ..models.match import MatchRecord, MatchStatus, SetResult
from ..utils import setup_logger
from .validation import match_result_from_sets

logger = setup_logger(__name__)


def _find(matches: Sequence[MatchRecord], match_id: str) -> int:
    for i, match in enumerate(matches):
        if match.id == match_id:
            return i
    raise MatchNotFoundError(match_id)


def next_slot(match: MatchRecord) -> int:
    """Odd positions feed side 1 of the next match, even positions side 2."""
    return 1 if match.position_in_round % 2 else 2


def record_sets(
    match: MatchRecord, sets: Sequence, config: EngineConfig = DEFAULT_CONFIG
) -> MatchRecord:
    """Return a completed copy of ``match`` with the winner derived from ``sets``.

    ``sets`` may hold SetResult objects, '11:7' strings or (11, 7) tuples.
    """
    if not match.is_ready:
        raise MatchNotReadyError(match.id)
    parsed = tuple(SetResult.from_any(s) for s in sets)
    outcome = match_result_from_sets(parsed, match.id, config)
    winner = match.side1 if outcome.winning_side == 1 else match.side2
    return replace(
        match, sets=parsed, status=MatchStatus.COMPLETED, winner_id=winner.id
    )


def apply_result(
    matches: Sequence[MatchRecord], match_id: str, winner_id: str
) -> List[MatchRecord]:
    """Complete ``match_id`` with ``winner_id`` and fill the next match slot.

    Re-applying the same winner changes nothing. A different winner replaces
    the one placed downstream and drops the old set scores, unless that next
    match is already in progress or completed, which raises
    CascadingResultConflictError. Use ``record_result`` to correct a result
    together with its scores.
    """
    updated = list(matches)
    i = _find(updated, match_id)
    match = updated[i]

    if winner_id not in match.side_ids:
        logger.warning(f"Refused result for {match_id}: {winner_id} is not a side")
        raise InvalidWinnerError(match_id, winner_id)
    if not match.is_ready and match.status != MatchStatus.BYE:
        raise MatchNotReadyError(match_id)

    winner = match.side1 if match.side1_id == winner_id else match.side2

    if match.is_decided and match.winner_id == winner_id:
        # A bye keeps its status; applying it only fills the empty next slot.
        if match.status == MatchStatus.BYE and match.next_match_id is not None:
            j = _find(updated, match.next_match_id)
            slot = next_slot(match)
            child = updated[j]
            if (child.side1 if slot == 1 else child.side2) is None:
                updated[j] = child.with_side(slot, winner)
        return updated

    previous_winner: Optional[str] = match.winner_id if match.is_decided else None

    if match.next_match_id is not None:
        j = _find(updated, match.next_match_id)
        child = updated[j]
        slot = next_slot(match)
        if previous_winner is not None:
            if child.status in (MatchStatus.IN_PROGRESS, MatchStatus.COMPLETED):
                logger.warning(
                    f"Refused to change winner of {match_id}: "
                    f"{child.id} is {child.status.value}"
                )
                raise CascadingResultConflictError(match_id, child.id)
            logger.info(f"{match_id}: winner changed {previous_winner} -> {winner_id}")
        updated[j] = child.with_side(slot, winner)

    # Scores that named the old winner no longer back the result.
    sets = () if previous_winner is not None else match.sets
    updated[i] = replace(
        match, sets=sets, status=MatchStatus.COMPLETED, winner_id=winner_id
    )
    return updated


def record_result(
    matches: Sequence[MatchRecord],
    match_id: str,
    sets: Sequence,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[MatchRecord]:
    """Score ``match_id`` from its sets and advance the derived winner."""
    i = _find(matches, match_id)
    scored = record_sets(matches[i], sets, config)
    advanced = apply_result(matches, match_id, scored.winner_id)
    advanced[i] = replace(advanced[i], sets=scored.sets)
    return advanced


def is_complete(matches: Sequence[MatchRecord]) -> bool:
    """True once the match of the highest round is completed."""
    if not matches:
        return False
    final = max(matches, key=lambda m: m.round)
    return final.status == MatchStatus.COMPLETED


def champion(matches: Sequence[MatchRecord]) -> Optional[str]:
    if not is_complete(matches):
        return None
    return max(matches, key=lambda m: m.round).winner_id
