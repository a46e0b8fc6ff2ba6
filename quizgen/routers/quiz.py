from fastapi import APIRouter, HTTPException
from loguru import logger

from ..schemas import GenerateRequest, GradeRequest, Quiz, QuizResult, QuizSettings
from ..services.generator import generate_quiz
from ..services.grading import grade_quiz
from ..services.parse import SAMPLE_TEXT, normalize_text
from ..settings import settings

router = APIRouter()

def check_settings(qs: QuizSettings) -> None:
    if not qs.question_types.enabled():
        raise HTTPException(400, "Enable at least one question type.")
    if qs.num_questions > settings.MAX_QUESTIONS:
        raise HTTPException(400, f"Too many questions. Max {settings.MAX_QUESTIONS}.")

def build_quiz(text: str, qs: QuizSettings, tag: str) -> Quiz:
    check_settings(qs)
    text = normalize_text(text)
    try:
        quiz = generate_quiz(text, qs)
    except Exception as e:
        logger.exception(f"[{tag}] generation failed")
        raise HTTPException(500, f"Server error: {str(e)}")
    logger.info(f"[{tag}] quiz={quiz.id} questions={len(quiz.questions)}/{qs.num_questions} chars={len(text)}")
    return quiz

@router.post("/quiz", response_model=Quiz)
def quiz(body: GenerateRequest):
    return build_quiz(body.text, body.settings, "quiz")

@router.post("/quiz/grade", response_model=QuizResult)
def grade(body: GradeRequest):
    result = grade_quiz(body.quiz, body.answers)
    logger.info(f"[grade] quiz={body.quiz.id} score={result.correct}/{result.total}")
    return result

@router.get("/sample")
def sample():
    return {"text": SAMPLE_TEXT, "chars": len(SAMPLE_TEXT)}
