from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Standing:
    """One row of a group table. Always derived from matches, never stored."""

    competitor_id: str
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    points: int = 0
    rank: int = 0

    @property
    def set_difference(self) -> int:
        return self.sets_won - self.sets_lost

    def as_dict(self) -> Dict[str, Any]:
        return {
            "competitorId": self.competitor_id,
            "matchesPlayed": self.matches_played,
            "wins": self.wins,
            "losses": self.losses,
            "setsWon": self.sets_won,
            "setsLost": self.sets_lost,
            "points": self.points,
            "rank": self.rank,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Standing":
        return cls(
            competitor_id=data["competitorId"],
            matches_played=data.get("matchesPlayed", 0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            sets_won=data.get("setsWon", 0),
            sets_lost=data.get("setsLost", 0),
            points=data.get("points", 0),
            rank=data.get("rank", 0),
        )
