from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple

import polars as pl

from .competitor import Competitor
from .match import MatchRecord
from .standing import Standing


@dataclass(frozen=True)
class Group:
    """A group of a tournament category. Membership never changes."""

    id: str
    label: str
    members: Tuple[Competitor, ...] = ()

    def __post_init__(self):
        if not isinstance(self.members, tuple):
            object.__setattr__(self, "members", tuple(self.members))

    def __len__(self) -> int:
        return len(self.members)

    @property
    def member_ids(self) -> List[str]:
        return [m.id for m in self.members]

    @property
    def members_df(self) -> pl.DataFrame:
        if not self.members:
            return pl.DataFrame()
        return pl.DataFrame([m.as_dict() for m in self.members])

    @property
    def matches_per_round(self) -> int:
        return len(self.members) // 2

    def schedule(self, berger: bool = False) -> List[MatchRecord]:
        """All group matches; ``berger`` gives conflict-free rounds."""
        from ..engine.scheduling import berger_schedule, round_robin

        if berger:
            return berger_schedule(self.id, self.members)
        return round_robin(self.id, self.members)

    def standings(self, matches: Sequence[MatchRecord], config=None) -> List[Standing]:
        from ..config import DEFAULT_CONFIG
        from ..engine.standings import standings

        return standings(self.members, matches, config or DEFAULT_CONFIG)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "members": [m.as_dict() for m in self.members],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Group":
        return cls(
            id=data["id"],
            label=data["label"],
            members=tuple(Competitor.from_dict(m) for m in data.get("members", [])),
        )
