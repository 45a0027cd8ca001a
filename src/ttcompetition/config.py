from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class EngineConfig:
    """Tunable rules of the competition engine.

    Attributes
    ----------
    points_per_win : int
        Standings points awarded for a won group match.
    qualifiers_per_group : int
        How many competitors of each group reach the knockout stage.
    max_sets : int
        Longest allowed match (best of 7).
    strict_deuce : bool
        When True a set longer than 11 points must end exactly two apart
        with the loser on at least 10.
    rating_floor : int
        No rating drops below this value.
    default_k_factor : int
        K-factor used when the caller does not pass one.
    provisional_games : int
        Players with fewer games get the provisional K-factor.
    """

    points_per_win: int = 3
    qualifiers_per_group: int = 2
    max_sets: int = 7
    strict_deuce: bool = False
    rating_floor: int = 100
    default_k_factor: int = 32
    provisional_games: int = 30

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Build a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


DEFAULT_CONFIG = EngineConfig()
