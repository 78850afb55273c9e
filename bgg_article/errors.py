"""Exceptions raised by the article engine."""


class ArticleError(Exception):
    """Base class for engine errors."""


class DegenerateInputError(ArticleError):
    """Regression input has no spread on the x axis."""


class InsufficientDataError(ArticleError):
    """Too few records passed the builder filter to report an average."""

    def __init__(self, match_count: int, required: int):
        super().__init__(f"only {match_count} matching games, need at least {required}")
        self.match_count = match_count
        self.required = required


class InvalidPreferenceError(ArticleError, ValueError):
    """A preference value could not be used for scoring or filtering."""


class QuizStateError(ArticleError):
    """Quiz transition not allowed from the current stage."""
