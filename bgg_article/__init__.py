"""Matching and summarization engine behind the board game article."""

from .errors import (
    ArticleError, DegenerateInputError, InsufficientDataError, InvalidPreferenceError,
    QuizStateError,
)
from .percentile import percentile_rank
from .preferences import PreferenceVector
from .queries import (
    BuilderResult, Point, QuizResult, complexity_points, complexity_trend,
    mechanics_by_year, query_builder, query_quiz_result,
)
from .quiz import QuizSession, QuizStage
from .ranking import rank, top_k
from .records import GameRecord, RecordStore, load_records
from .regression import FittedLine, TrendSegment, fit_line
from .sampling import sample_random, sample_stride
from .scoring import ScoredRecord, score, score_records

__version__ = "0.1.0"
