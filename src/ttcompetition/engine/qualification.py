from typing import List, Mapping, Optional, Sequence

from ..config import DEFAULT_CONFIG, EngineConfig
from ..models.competitor import Competitor
from ..models.group import Group
from ..models.match import MatchRecord
from ..utils import setup_logger
from .standings import standings

logger = setup_logger(__name__)


def qualifiers(
    groups: Sequence[Group],
    matches: Mapping[str, Sequence[MatchRecord]],
    per_group: Optional[int] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[Competitor]:
    """Top finishers of every group, tagged for seeding.

    ``matches`` maps group id to that group's matches. A competitor who has
    not completed a single match does not qualify. The returned competitors
    carry their group rank as ``seed_rank`` and the group label.
    """
    if per_group is None:
        per_group = config.qualifiers_per_group

    qualified = []
    for group in groups:
        table = standings(group.members, matches.get(group.id, []), config)
        members = {m.id: m for m in group.members}
        top = [s for s in table[:per_group] if s.matches_played > 0]
        qualified.extend(
            members[s.competitor_id].with_seed(s.rank, group.label) for s in top
        )
        logger.info(
            f"Group {group.label}: qualified {[s.competitor_id for s in top]}"
        )
    return qualified
