# quiz.py - question flow for the "which game are you" quiz
from enum import Enum
from typing import Dict, List, Optional

from .config import QUIZ_KEYS
from .errors import QuizStateError
from .preferences import PreferenceVector


class QuizStage(Enum):
    INTRO = "intro"
    QUESTION = "question"
    RESULTS = "results"


def _coerce_answer(value):
    # Buttons hand back strings; keep numbers numeric and everything else as text
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return value
        return int(number) if number.is_integer() else number
    return value


class QuizSession:
    """Intro -> Question(0..n-1) -> Results, and back to Intro on reset."""

    def __init__(self, keys: Optional[List[str]] = None):
        self.keys = list(keys or QUIZ_KEYS)
        self.stage = QuizStage.INTRO
        self.question_index = 0
        self.answers: Dict[str, object] = {k: None for k in self.keys}

    @property
    def total_questions(self) -> int:
        return len(self.keys)

    @property
    def current_key(self) -> str:
        if self.stage is not QuizStage.QUESTION:
            raise QuizStateError(f"no current question while in {self.stage.value}")
        return self.keys[self.question_index]

    @property
    def progress(self) -> float:
        return (self.question_index + 1) / self.total_questions * 100

    @property
    def progress_label(self) -> str:
        return f"{self.question_index + 1} / {self.total_questions}"

    def start(self):
        if self.stage is not QuizStage.INTRO:
            raise QuizStateError(f"cannot start from {self.stage.value}")
        self.stage = QuizStage.QUESTION
        self.question_index = 0

    def answer(self, value) -> QuizStage:
        """Record the answer to the current question and move on."""
        self.answers[self.current_key] = _coerce_answer(value)
        if self.question_index < self.total_questions - 1:
            self.question_index += 1
        else:
            self.stage = QuizStage.RESULTS
        return self.stage

    def reset(self):
        self.stage = QuizStage.INTRO
        self.question_index = 0
        self.answers = {k: None for k in self.keys}

    def preferences(self) -> PreferenceVector:
        if self.stage is not QuizStage.RESULTS:
            raise QuizStateError("answers are incomplete")
        return PreferenceVector.from_answers(self.answers)
