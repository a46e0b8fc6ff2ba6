from typing import Dict, Optional
from ..schemas import Question, QuestionResult, Quiz, QuizResult

SCORE_MESSAGES = (
    (90, "Excellent work!"),
    (80, "Great job!"),
    (70, "Good effort!"),
    (60, "Not bad, keep practicing!"),
)
FALLBACK_MESSAGE = "Keep studying and try again!"

def normalize_answer(s: Optional[str]) -> str:
    return (s or "").strip().lower()

def is_correct(question: Question, answer: Optional[str]) -> bool:
    if answer is None:
        return False
    return normalize_answer(answer) == normalize_answer(question.correct_answer)

def score_message(percentage: float) -> str:
    for floor, msg in SCORE_MESSAGES:
        if percentage >= floor:
            return msg
    return FALLBACK_MESSAGE

def grade_quiz(quiz: Quiz, answers: Dict[str, str]) -> QuizResult:
    """
    Score answers keyed by question id.
    Non-gradable questions are reported with is_correct=None and left out
    of the percentage.
    """
    results = []
    correct = total = 0
    for q in quiz.questions:
        given = answers.get(q.id)
        verdict = None
        if q.gradable:
            verdict = is_correct(q, given)
            total += 1
            correct += verdict
        results.append(QuestionResult(
            question_id=q.id, user_answer=given,
            correct_answer=q.correct_answer, is_correct=verdict,
        ))
    percentage = (correct / total * 100) if total else 0.0
    return QuizResult(
        correct=correct, total=total, percentage=round(percentage, 2),
        message=score_message(percentage), results=results,
    )
