"""
Tests for answer grading and question/quiz models
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from quizgen.schemas import Question, Quiz, QuizSettings
from quizgen.services.grading import grade_quiz, is_correct, score_message


def make_question(qid="q1", qtype="fill-in-blank", answer="Paris", **kw):
    return Question(
        id=qid, question=f"Question {qid}", type=qtype, correct_answer=answer,
        difficulty="easy", keywords=[answer.lower()], **kw,
    )


def make_quiz(questions):
    return Quiz(
        id="abc123", title="t", description="d", questions=questions,
        created_at=datetime.now(timezone.utc), source_text="src", settings=QuizSettings(),
    )


class TestIsCorrect:
    def test_case_and_whitespace_insensitive(self):
        assert is_correct(make_question(answer="paris"), " Paris ")

    def test_wrong_or_missing(self):
        q = make_question()
        assert not is_correct(q, "London")
        assert not is_correct(q, None)
        assert not is_correct(q, "")


class TestGradeQuiz:
    def test_scores_gradable_questions_only(self):
        quiz = make_quiz([
            make_question("q1", answer="paris"),
            make_question("q2", qtype="multiple-choice", answer="rome", options=["rome", "oslo", "bern", "riga"]),
            make_question("q3", qtype="short-answer", answer="A brief explanation", gradable=False),
        ])
        result = grade_quiz(quiz, {"q1": "PARIS", "q2": "oslo", "q3": "whatever"})
        assert result.correct == 1
        assert result.total == 2
        assert result.percentage == 50.0
        assert [r.is_correct for r in result.results] == [True, False, None]
        assert result.results[2].user_answer == "whatever"

    def test_unanswered(self):
        result = grade_quiz(make_quiz([make_question()]), {})
        assert result.correct == 0
        assert result.results[0].user_answer is None

    def test_empty_quiz(self):
        result = grade_quiz(make_quiz([]), {})
        assert result.total == 0
        assert result.percentage == 0.0

    @pytest.mark.parametrize("pct,msg", [
        (100, "Excellent work!"), (90, "Excellent work!"), (85, "Great job!"),
        (70, "Good effort!"), (60, "Not bad, keep practicing!"), (59.9, "Keep studying and try again!"),
    ])
    def test_score_message(self, pct, msg):
        assert score_message(pct) == msg


class TestQuestionModel:
    def test_multiple_choice_needs_four_options(self):
        with pytest.raises(ValidationError):
            make_question(qtype="multiple-choice", answer="a", options=["a", "b", "c"])

    def test_multiple_choice_options_distinct(self):
        with pytest.raises(ValidationError):
            make_question(qtype="multiple-choice", answer="a", options=["a", "b", "b", "c"])

    def test_multiple_choice_contains_answer(self):
        with pytest.raises(ValidationError):
            make_question(qtype="multiple-choice", answer="z", options=["a", "b", "c", "d"])

    def test_other_types_take_no_options(self):
        with pytest.raises(ValidationError):
            make_question(options=["a", "b", "c", "d"])

    def test_camel_case_wire_format(self):
        data = make_question().model_dump(by_alias=True)
        assert data["correctAnswer"] == "Paris"
        assert "correct_answer" not in data

    def test_frozen(self):
        q = make_question()
        with pytest.raises(ValidationError):
            q.correct_answer = "London"
