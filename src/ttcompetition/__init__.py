"""Table tennis competition engine: seeding, group schedules, standings,
elimination brackets and Elo ratings."""

from .config import DEFAULT_CONFIG, EngineConfig
from .engine import *  # noqa: F401,F403
from .engine import __all__ as _engine_all
from .models import (
    Bracket,
    Competitor,
    Group,
    MatchRecord,
    MatchStatus,
    Round,
    SetResult,
    Standing,
)
from .models.tournament import Tournament

__version__ = "0.1.0"

__all__ = [
    "Bracket",
    "Competitor",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "Group",
    "MatchRecord",
    "MatchStatus",
    "Round",
    "SetResult",
    "Standing",
    "Tournament",
] + list(_engine_all)
