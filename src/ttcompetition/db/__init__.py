from .repository import (
    InMemoryMatchRepository,
    MatchRepository,
    SqlMatchRepository,
    get_db_session,
)

__all__ = [
    "InMemoryMatchRepository",
    "MatchRepository",
    "SqlMatchRepository",
    "get_db_session",
]
