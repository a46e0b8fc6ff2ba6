from datetime import datetime
from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .settings import settings

QuestionType = Literal["multiple-choice", "fill-in-blank", "short-answer"]
Difficulty = Literal["easy", "medium", "hard"]

MULTIPLE_CHOICE_OPTIONS = 4


class _Model(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Question(_Model):
    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    type: QuestionType
    options: Optional[Tuple[str, ...]] = None
    correct_answer: str
    explanation: Optional[str] = None
    difficulty: Difficulty
    keywords: Tuple[str, ...] = Field(min_length=1)
    gradable: bool = True

    @model_validator(mode="after")
    def _check_options(self):
        if self.type == "multiple-choice":
            opts = self.options or ()
            if len(opts) != MULTIPLE_CHOICE_OPTIONS or len(set(opts)) != MULTIPLE_CHOICE_OPTIONS:
                raise ValueError("multiple-choice needs exactly 4 distinct options")
            if opts.count(self.correct_answer) != 1:
                raise ValueError("correct answer must appear exactly once in options")
        elif self.options is not None:
            raise ValueError(f"{self.type} questions take no options")
        return self


class QuestionTypes(_Model):
    model_config = ConfigDict(frozen=True)

    fill_in_blank: bool = True
    multiple_choice: bool = True
    short_answer: bool = True

    def enabled(self) -> List[QuestionType]:
        """Enabled types in generation order."""
        flags = [
            ("fill-in-blank", self.fill_in_blank),
            ("multiple-choice", self.multiple_choice),
            ("short-answer", self.short_answer),
        ]
        return [t for t, on in flags if on]


class QuizSettings(_Model):
    model_config = ConfigDict(frozen=True)

    num_questions: int = Field(default_factory=lambda: settings.DEFAULT_NUM_QUESTIONS, gt=0)
    difficulty: Difficulty = "medium"
    question_types: QuestionTypes = Field(default_factory=QuestionTypes)


class Quiz(_Model):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    questions: Tuple[Question, ...]
    created_at: datetime
    source_text: str
    settings: QuizSettings


# ---------- HTTP payloads ----------

class GenerateRequest(_Model):
    text: str
    settings: QuizSettings = Field(default_factory=QuizSettings)


class GradeRequest(_Model):
    quiz: Quiz
    answers: Dict[str, str] = Field(default_factory=dict)  # question id -> answer


class QuestionResult(_Model):
    question_id: str
    user_answer: Optional[str] = None
    correct_answer: str
    is_correct: Optional[bool] = None  # None = self-assessed


class QuizResult(_Model):
    correct: int
    total: int
    percentage: float
    message: str
    results: List[QuestionResult]
