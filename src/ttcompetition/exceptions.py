"""Exceptions raised by the competition engine."""


class CompetitionException(Exception):
    """Base exception for all ttcompetition errors."""

    pass


# ========== Result Exceptions ==========


class ResultException(CompetitionException):
    """Base exception for set and match result errors."""

    pass


class InvalidSetScoreError(ResultException):
    """Raised when a set score is not a legal finished table tennis set."""

    def __init__(self, set_index: int, detail: str | None = None):
        self.set_index = set_index
        message = f"Invalid score in set {set_index}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class InvalidSetCountError(ResultException):
    """Raised when a match has no sets or more sets than allowed."""

    def __init__(self, count: int, max_sets: int):
        self.count = count
        self.max_sets = max_sets
        super().__init__(f"A match needs between 1 and {max_sets} sets, got {count}")


class AmbiguousResultError(ResultException):
    """Raised when both sides won the same number of sets."""

    def __init__(self, match_id: str | None = None):
        self.match_id = match_id
        super().__init__(f"Match {match_id or '<unsaved>'} has no majority winner")


# ========== Bracket Exceptions ==========


class BracketException(CompetitionException):
    """Base exception for elimination bracket errors."""

    pass


class MatchNotFoundError(BracketException):
    def __init__(self, match_id: str):
        self.match_id = match_id
        super().__init__(f"Match {match_id} not found")


class InvalidWinnerError(BracketException):
    def __init__(self, match_id: str, winner_id: str):
        self.match_id = match_id
        self.winner_id = winner_id
        super().__init__(f"{winner_id} is not playing in match {match_id}")


class MatchNotReadyError(BracketException):
    """Raised when a result is applied to a match still waiting for a feeder."""

    def __init__(self, match_id: str):
        self.match_id = match_id
        super().__init__(f"Match {match_id} does not have both sides yet")


class CascadingResultConflictError(BracketException):
    """Raised when changing a winner whose next match is already under way."""

    def __init__(self, match_id: str, next_match_id: str | None = None):
        self.match_id = match_id
        self.next_match_id = next_match_id
        super().__init__(
            f"Cannot change the winner of {match_id}: "
            f"match {next_match_id} has already been played"
        )


# ========== Competitor Exceptions ==========


class CompetitorNotFoundError(CompetitionException):
    def __init__(self, competitor_id: str):
        self.competitor_id = competitor_id
        super().__init__(f"Competitor {competitor_id} not found")


class InsufficientCompetitorsError(CompetitionException):
    """Available to hosts that want to refuse draws with fewer than two entries.

    Scheduling and bracket generation return an empty list instead of raising.
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"At least 2 competitors are required, got {count}")


# ========== Rating Exceptions ==========


class RatingException(CompetitionException):
    """Base exception for rating calculation errors."""

    pass


class InvalidOutcomeError(RatingException):
    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(f"Outcome must be 1, 0 or 0.5, got {outcome!r}")


class GroupNotFoundError(CompetitionException):
    def __init__(self, group_id: str):
        self.group_id = group_id
        super().__init__(f"Group {group_id} not found")
