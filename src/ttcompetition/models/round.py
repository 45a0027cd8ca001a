from dataclasses import dataclass
from typing import List, Optional

from .match import MatchRecord, MatchStatus

STAGE_NAMES = {
    2: "Final",
    4: "Semifinals",
    8: "Quarterfinals",
}


def stage_name(entrants: int) -> str:
    return STAGE_NAMES.get(entrants, f"Round of {entrants}")


@dataclass
class Round:
    number: int
    matches: List[MatchRecord]
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = stage_name(2 * len(self.matches))

    @property
    def is_completed(self) -> bool:
        return all(m.is_decided for m in self.matches)

    @property
    def byes(self) -> int:
        return sum(1 for m in self.matches if m.status == MatchStatus.BYE)

    def as_dict(self):
        return {
            "number": self.number,
            "name": self.name,
            "matches": [m.as_dict() for m in self.matches],
        }
