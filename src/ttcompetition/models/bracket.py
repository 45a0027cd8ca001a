from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pyarrow as pa

from ..exceptions import MatchNotFoundError
from .competitor import Competitor
from .match import MatchRecord
from .round import Round


@dataclass(frozen=True)
class Bracket:
    category_label: str
    matches: Tuple[MatchRecord, ...] = ()

    def __post_init__(self):
        if not isinstance(self.matches, tuple):
            object.__setattr__(self, "matches", tuple(self.matches))

    @property
    def total_rounds(self) -> int:
        return max((m.round for m in self.matches), default=0)

    @property
    def rounds(self) -> List[Round]:
        return [
            Round(
                number,
                sorted(
                    (m for m in self.matches if m.round == number),
                    key=lambda m: m.position_in_round,
                ),
            )
            for number in range(1, self.total_rounds + 1)
        ]

    def match(self, match_id: str) -> MatchRecord:
        for m in self.matches:
            if m.id == match_id:
                return m
        raise MatchNotFoundError(match_id)

    @property
    def is_complete(self) -> bool:
        from ..engine.advancement import is_complete

        return is_complete(self.matches)

    @property
    def champion_id(self) -> Optional[str]:
        from ..engine.advancement import champion

        return champion(self.matches)

    def with_matches(self, matches) -> "Bracket":
        return Bracket(self.category_label, tuple(matches))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "categoryLabel": self.category_label,
            "matches": [m.as_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], competitors: Mapping[str, Competitor]
    ) -> "Bracket":
        return cls(
            data["categoryLabel"],
            tuple(MatchRecord.from_dict(m, competitors) for m in data["matches"]),
        )

    @property
    def df(self):
        return pa.Table.from_pylist([m.as_dict() for m in self.matches])
