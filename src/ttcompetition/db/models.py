from sqlalchemy import JSON, Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class MatchDB(Base):
    __tablename__ = "matches"
    # Group id or bracket key the host saved the records under. Match ids
    # only need to be unique per owner.
    owner_id = Column(String, primary_key=True)
    id = Column(String, primary_key=True)
    sequence = Column(Integer, nullable=False)
    group_id = Column(String)
    # Competitor snapshots as of the time the match was saved.
    side1 = Column(JSON)
    side2 = Column(JSON)
    sets = Column(JSON, nullable=False, default=list)
    status = Column(String, nullable=False)
    winner_id = Column(String)
    round = Column(Integer, nullable=False)
    position_in_round = Column(Integer, nullable=False)
    next_match_id = Column(String)
