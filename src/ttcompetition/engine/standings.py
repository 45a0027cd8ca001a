"""Group tables computed from completed matches.

Order: points, then set difference, then sets won, all descending. Players
still level keep the order in which they were passed in as members, so the
member list decides residual ties at a qualification cutoff. Ranks are the
1-based table positions; tied players get consecutive ranks, never equal ones.
"""

from typing import List, Sequence

import polars as pl

from ..config import DEFAULT_CONFIG, EngineConfig
from ..models.competitor import Competitor
from ..models.match import MatchRecord, MatchStatus
from ..models.standing import Standing
from ..utils import setup_logger
from .validation import set_winner

logger = setup_logger(__name__)

MATCH_ROW_SCHEMA = {
    "competitor_id": pl.Utf8,
    "win": pl.Int64,
    "loss": pl.Int64,
    "sets_won": pl.Int64,
    "sets_lost": pl.Int64,
}

STAT_COLUMNS = ["matches_played", "wins", "losses", "sets_won", "sets_lost"]


def _set_counts(match: MatchRecord, config: EngineConfig) -> tuple[int, int]:
    won = [0, 0]
    for index, set_result in enumerate(match.sets):
        won[set_winner(set_result, index, config) - 1] += 1
    return won[0], won[1]


def _match_rows(matches: Sequence[MatchRecord], config: EngineConfig) -> List[dict]:
    rows = []
    for match in matches:
        if match.status != MatchStatus.COMPLETED or not match.is_ready:
            continue
        sets1, sets2 = _set_counts(match, config)
        side1_won = match.winner_id == match.side1_id
        rows.append(
            {
                "competitor_id": match.side1_id,
                "win": int(side1_won),
                "loss": int(not side1_won),
                "sets_won": sets1,
                "sets_lost": sets2,
            }
        )
        rows.append(
            {
                "competitor_id": match.side2_id,
                "win": int(not side1_won),
                "loss": int(side1_won),
                "sets_won": sets2,
                "sets_lost": sets1,
            }
        )
    return rows


def standings_frame(
    members: Sequence[Competitor],
    matches: Sequence[MatchRecord],
    config: EngineConfig = DEFAULT_CONFIG,
) -> pl.DataFrame:
    """The group table as a polars DataFrame, one row per member, sorted."""
    match_rows = pl.DataFrame(_match_rows(matches, config), schema=MATCH_ROW_SCHEMA)
    totals = match_rows.group_by("competitor_id").agg(
        pl.col("win").count().alias("matches_played"),
        pl.col("win").sum().alias("wins"),
        pl.col("loss").sum().alias("losses"),
        pl.col("sets_won").sum().alias("sets_won"),
        pl.col("sets_lost").sum().alias("sets_lost"),
    )

    roster = pl.DataFrame(
        {
            "competitor_id": [m.id for m in members],
            "member_order": list(range(len(members))),
        },
        schema={"competitor_id": pl.Utf8, "member_order": pl.Int64},
    )

    table = (
        roster.join(totals, on="competitor_id", how="left")
        .with_columns(pl.col(STAT_COLUMNS).fill_null(0).cast(pl.Int64))
        .with_columns(
            (pl.col("wins") * config.points_per_win).alias("points"),
            (pl.col("sets_won") - pl.col("sets_lost")).alias("set_difference"),
        )
        .sort(
            ["points", "set_difference", "sets_won", "member_order"],
            descending=[True, True, True, False],
        )
    )
    ranks = pl.Series("rank", list(range(1, table.height + 1)), dtype=pl.Int64)
    return table.with_columns(ranks).drop("member_order")


def standings(
    members: Sequence[Competitor],
    matches: Sequence[MatchRecord],
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[Standing]:
    """Ranked Standing rows for a group.

    Only completed matches count. Results against competitors outside
    ``members`` still count for the member who played them.
    """
    table = standings_frame(members, matches, config)
    result = [
        Standing(
            competitor_id=row["competitor_id"],
            matches_played=row["matches_played"],
            wins=row["wins"],
            losses=row["losses"],
            sets_won=row["sets_won"],
            sets_lost=row["sets_lost"],
            points=row["points"],
            rank=row["rank"],
        )
        for row in table.iter_rows(named=True)
    ]
    logger.debug(f"Standings: {[(s.competitor_id, s.points) for s in result]}")
    return result
