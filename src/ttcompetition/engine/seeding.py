from typing import Iterable, List, Mapping, Optional

from ..models.competitor import Competitor
from ..utils import setup_logger

logger = setup_logger(__name__)


def _seed_key(competitor: Competitor):
    rank = competitor.seed_rank
    label = competitor.group_label
    return (
        rank is None,
        rank if rank is not None else 0,
        label is None,
        label or "",
        -competitor.rating,
    )


def seed(
    competitors: Iterable[Competitor],
    group_finish_order: Optional[Mapping[str, int]] = None,
) -> List[Competitor]:
    """Order competitors for bracket placement.

    All group winners come before all runners-up and so on. Equal ranks are
    broken by group label, then by descending rating. Unranked competitors
    go last. ``group_finish_order`` maps competitor id to finishing position
    and takes precedence over ``Competitor.seed_rank``. Python's sort is
    stable, so fully identical keys keep their input order.
    """
    group_finish_order = group_finish_order or {}
    ranked = [
        c.with_seed(group_finish_order[c.id]) if c.id in group_finish_order else c
        for c in competitors
    ]
    ranked.sort(key=_seed_key)
    logger.debug(f"Seeded {len(ranked)} competitors: {[c.id for c in ranked]}")
    return ranked
