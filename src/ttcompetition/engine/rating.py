"""Elo rating updates for table tennis matches."""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import DEFAULT_CONFIG, EngineConfig
from ..exceptions import InvalidOutcomeError
from ..models.competitor import Competitor
from ..utils import setup_logger

logger = setup_logger(__name__)

VALID_OUTCOMES = (1, 0, 0.5)

RATING_CATEGORIES = (
    (2200, "Master"),
    (2000, "Expert"),
    (1800, "Advanced"),
    (1600, "Intermediate+"),
    (1400, "Intermediate"),
    (1200, "Beginner+"),
)


@dataclass(frozen=True)
class RatingUpdate:
    new_a: float
    new_b: float
    delta_a: int
    delta_b: int


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def expected_score(rating_a: float, rating_b: float) -> float:
    """Expected score of A against B."""
    return 1 / (1 + 10 ** ((rating_b - rating_a) / 400))


win_probability = expected_score


def k_factor(
    rating: float, games_played: int, config: EngineConfig = DEFAULT_CONFIG
) -> int:
    """Volatility for a player, based on the player's own history.

    New players move fastest, strong players slowest.
    """
    if games_played < config.provisional_games:
        return 40
    if rating < 1400:
        return 36
    if rating < 1800:
        return 32
    return 24


def update_ratings(
    rating_a: float,
    rating_b: float,
    outcome: float,
    k_factor: Optional[int] = None,
    k_factor_b: Optional[int] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> RatingUpdate:
    """Rate one match. ``outcome`` is 1 if A won, 0 if B won, 0.5 for a draw.

    Each side may use its own K-factor; ``k_factor_b`` defaults to A's.
    New ratings never drop below ``config.rating_floor``.
    """
    if isinstance(outcome, bool) or outcome not in VALID_OUTCOMES:
        raise InvalidOutcomeError(outcome)
    if k_factor is None:
        k_factor = config.default_k_factor
    if k_factor_b is None:
        k_factor_b = k_factor

    expected_a = expected_score(rating_a, rating_b)
    delta_a = _round_half_up(k_factor * (outcome - expected_a))
    delta_b = _round_half_up(k_factor_b * ((1 - outcome) - (1 - expected_a)))

    return RatingUpdate(
        new_a=max(config.rating_floor, rating_a + delta_a),
        new_b=max(config.rating_floor, rating_b + delta_b),
        delta_a=delta_a,
        delta_b=delta_b,
    )


def rate_match(
    competitor_a: Competitor,
    games_a: int,
    competitor_b: Competitor,
    games_b: int,
    outcome: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Tuple[Competitor, Competitor]:
    """Return both competitors with their new ratings."""
    update = update_ratings(
        competitor_a.rating,
        competitor_b.rating,
        outcome,
        k_factor(competitor_a.rating, games_a, config),
        k_factor(competitor_b.rating, games_b, config),
        config,
    )
    logger.debug(
        f"{competitor_a.id} {update.delta_a:+d}, {competitor_b.id} {update.delta_b:+d}"
    )
    return competitor_a.with_rating(update.new_a), competitor_b.with_rating(update.new_b)


def rating_category(rating: float) -> str:
    for threshold, name in RATING_CATEGORIES:
        if rating >= threshold:
            return name
    return "Beginner"
