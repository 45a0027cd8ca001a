from .advancement import apply_result, champion, is_complete, record_result, record_sets
from .brackets import build_bracket, build_single_elimination, propagate_byes, seed_positions
from .qualification import qualifiers
from .rating import (
    expected_score,
    k_factor,
    rate_match,
    rating_category,
    update_ratings,
    win_probability,
)
from .scheduling import berger_schedule, round_robin
from .seeding import seed
from .standings import standings, standings_frame
from .validation import (
    MatchOutcome,
    match_result_from_sets,
    match_winning_side,
    set_winner,
    validate_set,
)

__all__ = [
    "MatchOutcome",
    "apply_result",
    "berger_schedule",
    "build_bracket",
    "build_single_elimination",
    "champion",
    "expected_score",
    "is_complete",
    "k_factor",
    "match_result_from_sets",
    "match_winning_side",
    "propagate_byes",
    "qualifiers",
    "rate_match",
    "rating_category",
    "record_result",
    "record_sets",
    "round_robin",
    "seed",
    "seed_positions",
    "set_winner",
    "standings",
    "standings_frame",
    "update_ratings",
    "validate_set",
    "win_probability",
]
