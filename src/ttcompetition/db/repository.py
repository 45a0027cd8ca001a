"""Storage seam between a host application and the engine.

The engine never loads or saves anything itself. Hosts inject a
``MatchRepository`` and hand the loaded snapshot to the engine functions.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from ..models.competitor import Competitor
from ..models.match import MatchRecord, MatchStatus, SetResult
from ..utils import setup_logger
from .models import Base, MatchDB

logger = setup_logger(__name__)


class MatchRepository(ABC):
    @abstractmethod
    def load_matches(self, group_id: str) -> List[MatchRecord]:
        """Return the records saved under ``group_id``, in saved order."""

    @abstractmethod
    def save_matches(self, group_id: str, records: Sequence[MatchRecord]) -> None:
        """Replace everything saved under ``group_id`` with ``records``."""


class InMemoryMatchRepository(MatchRepository):
    def __init__(self):
        self._matches: Dict[str, List[MatchRecord]] = {}

    def load_matches(self, group_id: str) -> List[MatchRecord]:
        return list(self._matches.get(group_id, []))

    def save_matches(self, group_id: str, records: Sequence[MatchRecord]) -> None:
        self._matches[group_id] = list(records)


def get_db_session(db_url: str = "sqlite:///:memory:") -> Session:
    engine = create_engine(db_url)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)()


class SqlMatchRepository(MatchRepository):
    def __init__(self, session: Session):
        self.session = session

    @classmethod
    def from_url(cls, db_url: str = "sqlite:///:memory:") -> "SqlMatchRepository":
        return cls(get_db_session(db_url))

    def load_matches(self, group_id: str) -> List[MatchRecord]:
        rows = (
            self.session.query(MatchDB)
            .filter(MatchDB.owner_id == group_id)
            .order_by(MatchDB.sequence)
            .all()
        )
        return [self._to_record(row) for row in rows]

    def save_matches(self, group_id: str, records: Sequence[MatchRecord]) -> None:
        try:
            existing = {
                row.id: row
                for row in self.session.query(MatchDB).filter(MatchDB.owner_id == group_id)
            }
            for sequence, record in enumerate(records):
                row = self._to_row(group_id, sequence, record)
                if row.id in existing:
                    self.session.merge(row)
                    del existing[row.id]
                else:
                    self.session.add(row)
            for stale in existing.values():
                self.session.delete(stale)
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.error(f"Saving matches of {group_id} failed", exc_info=True)
            raise
        logger.debug(f"Saved {len(records)} matches under {group_id}")

    @staticmethod
    def _to_row(owner_id: str, sequence: int, record: MatchRecord) -> MatchDB:
        return MatchDB(
            id=record.id,
            owner_id=owner_id,
            sequence=sequence,
            group_id=record.group_id,
            side1=record.side1.as_dict() if record.side1 else None,
            side2=record.side2.as_dict() if record.side2 else None,
            sets=[s.as_dict() for s in record.sets],
            status=record.status.value,
            winner_id=record.winner_id,
            round=record.round,
            position_in_round=record.position_in_round,
            next_match_id=record.next_match_id,
        )

    @staticmethod
    def _to_record(row: MatchDB) -> MatchRecord:
        return MatchRecord(
            id=row.id,
            side1=Competitor.from_dict(row.side1) if row.side1 else None,
            side2=Competitor.from_dict(row.side2) if row.side2 else None,
            sets=tuple(SetResult.from_dict(s) for s in row.sets or []),
            status=MatchStatus(row.status),
            winner_id=row.winner_id,
            round=row.round,
            position_in_round=row.position_in_round,
            next_match_id=row.next_match_id,
            group_id=row.group_id,
        )
