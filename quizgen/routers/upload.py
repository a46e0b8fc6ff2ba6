from fastapi import APIRouter, UploadFile, File, Form, HTTPException
from loguru import logger

from ..schemas import Difficulty, Quiz, QuestionTypes, QuizSettings
from ..services.parse import decode_upload
from ..settings import settings
from .quiz import build_quiz

router = APIRouter()

def to_bool(v: str) -> bool: return str(v).lower() in ("1","true","yes","on")

@router.post("/upload", response_model=Quiz)
def upload(
    file: UploadFile = File(...),
    num_questions: int = Form(settings.DEFAULT_NUM_QUESTIONS),
    difficulty: Difficulty = Form("medium"),
    fill_in_blank: str = Form("1"),
    multiple_choice: str = Form("1"),
    short_answer: str = Form("1"),
):
    raw = file.file.read()
    if not raw: raise HTTPException(400, "Empty file.")
    if not (file.filename or "").lower().endswith(".txt"): raise HTTPException(400, "Only .txt supported.")
    if len(raw) > settings.MAX_UPLOAD_KB * 1024:
        raise HTTPException(413, f"File too large. Max {settings.MAX_UPLOAD_KB} KB.")
    if num_questions < 1: raise HTTPException(400, "num_questions must be positive.")

    qs = QuizSettings(
        num_questions=num_questions,
        difficulty=difficulty,
        question_types=QuestionTypes(
            fill_in_blank=to_bool(fill_in_blank),
            multiple_choice=to_bool(multiple_choice),
            short_answer=to_bool(short_answer),
        ),
    )
    logger.info(f"[upload] file={file.filename!r} bytes={len(raw)}")
    return build_quiz(decode_upload(raw), qs, "upload")
