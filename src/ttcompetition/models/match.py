from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

import pyarrow as pa

from ..exceptions import CompetitorNotFoundError
from .competitor import Competitor


class MatchStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BYE = "bye"


@dataclass(frozen=True)
class SetResult:
    side1_score: int
    side2_score: int

    @classmethod
    def from_string(cls, score: str) -> "SetResult":
        """Create a SetResult from a string like '11:9', '+9' or '-3'.

        The signed shorthand gives the loser's points; '+' means side 1 won.
        Losers on 10 or more imply a deuce finish two points ahead.
        """
        score = score.strip()
        if not score:
            raise ValueError("Empty set score")
        if ":" in score:
            p1, p2 = map(int, score.split(":"))
            return cls(p1, p2)

        points = int(score[1:]) if score[0] in ("+", "-") else int(score)
        winner_points = 11 if points <= 9 else points + 2
        if score.startswith("-"):
            return cls(points, winner_points)
        return cls(winner_points, points)

    @classmethod
    def from_tuple(cls, score: Tuple[int, int]) -> "SetResult":
        return cls(*score)

    @classmethod
    def from_any(cls, score) -> "SetResult":
        """Create a SetResult from a SetResult, a string or a 2-tuple."""
        if isinstance(score, SetResult):
            return score
        if isinstance(score, str):
            return cls.from_string(score)
        if isinstance(score, (tuple, list)) and len(score) == 2:
            return cls.from_tuple(tuple(score))
        if isinstance(score, Mapping):
            return cls.from_dict(score)
        raise ValueError(f"Cannot create SetResult from {score!r}")

    def __str__(self) -> str:
        return f"{self.side1_score}:{self.side2_score}"

    def is_valid(self) -> bool:
        from ..engine.validation import validate_set

        return validate_set(self)

    @property
    def points(self) -> tuple[int, int]:
        return (self.side1_score, self.side2_score)

    @property
    def points_diff(self) -> int:
        return self.side1_score - self.side2_score

    def as_dict(self) -> Dict[str, Any]:
        return {"side1Score": self.side1_score, "side2Score": self.side2_score}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SetResult":
        # A 'winner' key is never trusted; it is derived from the scores.
        return cls(data.get("side1Score"), data.get("side2Score"))

    @property
    def df(self):
        return pa.Table.from_pylist([self.as_dict()])


@dataclass(frozen=True)
class MatchRecord:
    id: str
    side1: Optional[Competitor] = None
    side2: Optional[Competitor] = None
    sets: Tuple[SetResult, ...] = ()
    status: MatchStatus = MatchStatus.PENDING
    winner_id: Optional[str] = None
    round: int = 1
    position_in_round: int = 1
    next_match_id: Optional[str] = None
    group_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.sets, tuple):
            object.__setattr__(self, "sets", tuple(self.sets))

    def __str__(self):
        name1 = self.side1.display_name if self.side1 else "TBD"
        name2 = self.side2.display_name if self.side2 else "TBD"
        result = f"{name1} vs {name2}"
        if self.sets:
            result += f" ({', '.join(str(s) for s in self.sets)})"
        return result

    @property
    def side1_id(self) -> Optional[str]:
        return self.side1.id if self.side1 else None

    @property
    def side2_id(self) -> Optional[str]:
        return self.side2.id if self.side2 else None

    @property
    def side_ids(self) -> Tuple[str, ...]:
        return tuple(c.id for c in (self.side1, self.side2) if c is not None)

    def involves(self, competitor_id: str) -> bool:
        return competitor_id in self.side_ids

    @property
    def is_ready(self) -> bool:
        return self.side1 is not None and self.side2 is not None

    @property
    def is_completed(self) -> bool:
        return self.status == MatchStatus.COMPLETED

    @property
    def is_decided(self) -> bool:
        return self.status in (MatchStatus.COMPLETED, MatchStatus.BYE)

    @property
    def loser_id(self) -> Optional[str]:
        if self.status != MatchStatus.COMPLETED:
            return None
        return self.side2_id if self.winner_id == self.side1_id else self.side1_id

    @property
    def points(self) -> tuple[int, int]:
        return (
            sum(s.side1_score for s in self.sets),
            sum(s.side2_score for s in self.sets),
        )

    def with_side(self, slot: int, competitor: Optional[Competitor]) -> "MatchRecord":
        if slot == 1:
            return replace(self, side1=competitor)
        return replace(self, side2=competitor)

    def as_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "side1Id": self.side1_id,
            "side2Id": self.side2_id,
            "sets": [s.as_dict() for s in self.sets],
            "status": self.status.value,
            "winnerId": self.winner_id,
            "round": self.round,
            "positionInRound": self.position_in_round,
            "nextMatchId": self.next_match_id,
        }
        if self.group_id is not None:
            data["groupId"] = self.group_id
        return data

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], competitors: Mapping[str, Competitor]
    ) -> "MatchRecord":
        """Rebuild a record from its JSON form, resolving side ids."""

        def lookup(competitor_id: Optional[str]) -> Optional[Competitor]:
            if competitor_id is None:
                return None
            if competitor_id not in competitors:
                raise CompetitorNotFoundError(competitor_id)
            return competitors[competitor_id]

        return cls(
            id=data["id"],
            side1=lookup(data.get("side1Id")),
            side2=lookup(data.get("side2Id")),
            sets=tuple(SetResult.from_dict(s) for s in data.get("sets") or []),
            status=MatchStatus(data.get("status", MatchStatus.PENDING.value)),
            winner_id=data.get("winnerId"),
            round=data.get("round", 1),
            position_in_round=data.get("positionInRound", 1),
            next_match_id=data.get("nextMatchId"),
            group_id=data.get("groupId"),
        )

    @property
    def df(self):
        return pa.Table.from_pylist([self.as_dict()])
