import pytest

from ttcompetition.config import EngineConfig
from ttcompetition.engine.validation import (
    match_result_from_sets,
    match_winning_side,
    set_winner,
    validate_set,
)
from ttcompetition.exceptions import (
    AmbiguousResultError,
    InvalidSetCountError,
    InvalidSetScoreError,
)
from ttcompetition.models.match import SetResult


@pytest.mark.parametrize(
    "score", [(11, 0), (11, 9), (9, 11), (12, 10), (10, 12), (15, 13), (14, 3)]
)
def test_finished_sets_are_valid(score):
    assert validate_set(SetResult(*score))


@pytest.mark.parametrize(
    "score", [(11, 10), (10, 8), (0, 0), (12, 11), (-1, 11), (11, None), (None, None)]
)
def test_unfinished_or_malformed_sets_are_invalid(score):
    assert not validate_set(SetResult(*score))


def test_non_integer_scores_are_invalid():
    assert not validate_set(SetResult(11.0, 5))
    assert not validate_set(SetResult(True, 11))


def test_strict_deuce_rejects_long_sets_without_deuce():
    strict = EngineConfig(strict_deuce=True)
    assert validate_set(SetResult(11, 9), strict)
    assert validate_set(SetResult(13, 11), strict)
    assert not validate_set(SetResult(14, 3), strict)
    assert not validate_set(SetResult(15, 12), strict)


def test_set_winner():
    assert set_winner(SetResult(11, 4)) == 1
    assert set_winner(SetResult(10, 12)) == 2


def test_set_winner_reports_index():
    with pytest.raises(InvalidSetScoreError) as exc:
        set_winner(SetResult(11, 10), set_index=3)
    assert exc.value.set_index == 3


def test_match_winner_is_majority_of_sets():
    sets = [SetResult(11, 5), SetResult(8, 11), SetResult(11, 9)]
    assert match_winning_side(sets) == 1

    outcome = match_result_from_sets(sets + [SetResult(3, 11), SetResult(9, 11)])
    assert outcome.winning_side == 2
    assert (outcome.sets_won1, outcome.sets_won2) == (2, 3)
    assert outcome.sets_lost1 == 3


def test_tied_sets_are_ambiguous():
    with pytest.raises(AmbiguousResultError) as exc:
        match_winning_side([SetResult(11, 5), SetResult(5, 11)], match_id="m7")
    assert exc.value.match_id == "m7"


def test_invalid_set_is_reported_by_index():
    sets = [SetResult(11, 5), SetResult(11, 5), SetResult(11, 10)]
    with pytest.raises(InvalidSetScoreError) as exc:
        match_result_from_sets(sets)
    assert exc.value.set_index == 2


@pytest.mark.parametrize("count", [0, 8])
def test_set_count_must_be_between_one_and_seven(count):
    with pytest.raises(InvalidSetCountError):
        match_result_from_sets([SetResult(11, 5)] * count)


def test_single_set_match_is_allowed():
    assert match_winning_side([SetResult(3, 11)]) == 2
