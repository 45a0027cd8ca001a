from .bracket import Bracket
from .competitor import Competitor
from .group import Group
from .match import MatchRecord, MatchStatus, SetResult
from .round import Round
from .standing import Standing

__all__ = [
    "Bracket",
    "Competitor",
    "Group",
    "MatchRecord",
    "MatchStatus",
    "Round",
    "SetResult",
    "Standing",
]
