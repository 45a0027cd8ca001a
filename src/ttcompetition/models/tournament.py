import random
import uuid
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..config import DEFAULT_CONFIG, EngineConfig
from ..db.repository import InMemoryMatchRepository, MatchRepository
from ..engine.advancement import record_result, record_sets
from ..engine.brackets import build_bracket, propagate_byes
from ..engine.qualification import qualifiers
from ..exceptions import GroupNotFoundError, MatchNotFoundError
from ..utils import setup_logger
from .bracket import Bracket
from .group import Group
from .match import MatchRecord, MatchStatus
from .standing import Standing

logger = setup_logger(__name__)


class Tournament:
    """Host-side driver for the engine.

    Groups are kept per category; match records go through the injected
    repository and every change is computed by the pure engine functions
    on a freshly loaded snapshot.
    """

    def __init__(
        self,
        name: str,
        tournament_date: date,
        repository: Optional[MatchRepository] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.id = str(uuid.uuid4())
        self.name = name
        self.date = tournament_date
        self.groups: Dict[str, List[Group]] = {}
        self.repository = repository or InMemoryMatchRepository()
        self.config = config or DEFAULT_CONFIG

    def add_group(self, category: str, group: Group):
        self.groups.setdefault(category, []).append(group)

    def group(self, group_id: str) -> Group:
        for groups in self.groups.values():
            for group in groups:
                if group.id == group_id:
                    return group
        raise GroupNotFoundError(group_id)

    def generate_group_matches(self, berger: bool = False) -> int:
        total = 0
        for groups in self.groups.values():
            for group in groups:
                matches = group.schedule(berger)
                self.repository.save_matches(group.id, matches)
                total += len(matches)
        logger.info(f"{self.name}: generated {total} group matches")
        return total

    def group_matches(self, group_id: str) -> List[MatchRecord]:
        self.group(group_id)
        return self.repository.load_matches(group_id)

    def record_group_result(self, group_id: str, match_id: str, sets: Sequence) -> MatchRecord:
        matches = self.group_matches(group_id)
        for i, match in enumerate(matches):
            if match.id == match_id:
                matches[i] = record_sets(match, sets, self.config)
                self.repository.save_matches(group_id, matches)
                return matches[i]
        raise MatchNotFoundError(match_id)

    def group_standings(self, group_id: str) -> List[Standing]:
        return self.group(group_id).standings(self.group_matches(group_id), self.config)

    @staticmethod
    def bracket_key(category: str) -> str:
        return f"bracket_{category.lower().replace(' ', '_')}"

    def setup_knockout_stage(self, category: str, per_group: Optional[int] = None) -> Bracket:
        groups = self.groups.get(category, [])
        matches = {g.id: self.repository.load_matches(g.id) for g in groups}
        qualified = qualifiers(groups, matches, per_group, self.config)
        key = self.bracket_key(category)
        bracket = build_bracket(category, qualified, id_prefix=key)
        bracket = bracket.with_matches(propagate_byes(bracket.matches))
        self.repository.save_matches(key, bracket.matches)
        logger.info(
            f"{category}: knockout stage with {len(qualified)} players, "
            f"{len(bracket.matches)} matches"
        )
        return bracket

    def bracket(self, category: str) -> Bracket:
        return Bracket(category, tuple(self.repository.load_matches(self.bracket_key(category))))

    def record_knockout_result(self, category: str, match_id: str, sets: Sequence) -> Bracket:
        bracket = self.bracket(category)
        updated = record_result(bracket.matches, match_id, sets, self.config)
        self.repository.save_matches(self.bracket_key(category), updated)
        return bracket.with_matches(updated)

    def champion(self, category: str) -> Optional[str]:
        return self.bracket(category).champion_id

    def simulate(self, rng: Optional[random.Random] = None):
        from ..simulation.tournaments import simulate_match

        rng = rng or random.Random()
        self.generate_group_matches()
        for groups in self.groups.values():
            for group in groups:
                for match in self.group_matches(group.id):
                    sets = simulate_match(match.side1, match.side2, rng=rng)
                    self.record_group_result(group.id, match.id, sets)

        for category in self.groups:
            bracket = self.setup_knockout_stage(category)
            while bracket.matches and not bracket.is_complete:
                playable = [
                    m for m in bracket.matches
                    if m.is_ready and m.status == MatchStatus.PENDING
                ]
                if not playable:
                    break
                for match in playable:
                    sets = simulate_match(match.side1, match.side2, rng=rng)
                    bracket = self.record_knockout_result(category, match.id, sets)
            logger.info(f"{category}: champion {bracket.champion_id}")
