from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from pathlib import Path
import io, csv, re, tempfile, os
import genanki
from loguru import logger

from ..schemas import Quiz

router = APIRouter()

def int_id_from_hash(h: str, salt: int = 0) -> int:
    return int(h[:10], 16) + salt

def _filename(title: str, suffix: str) -> str:
    return f"{re.sub(r'[^A-Za-z0-9._-]+','_', title)}-{suffix}"

def _back(q) -> str:
    if q.type == "short-answer":
        return q.explanation or q.correct_answer
    return q.correct_answer

@router.post("/export/csv")
def export_csv(quiz: Quiz):
    if not quiz.questions: raise HTTPException(404, "No questions to export.")

    sio = io.StringIO(newline="")
    writer = csv.writer(sio)
    writer.writerow(["type", "question", "options", "answer", "explanation", "difficulty"])
    for q in quiz.questions:
        writer.writerow([
            q.type, q.question, " | ".join(q.options or []),
            q.correct_answer, q.explanation or "", q.difficulty,
        ])
    data = sio.getvalue().encode("utf-8-sig")
    headers = {"Content-Disposition": f'attachment; filename="{_filename(quiz.title, "quiz.csv")}"'}
    return StreamingResponse(io.BytesIO(data), media_type="text/csv", headers=headers)

@router.post("/export/apkg")
def export_apkg(quiz: Quiz):
    if not quiz.questions: raise HTTPException(404, "No questions to export.")
    try:
        deck_id = int_id_from_hash(quiz.id, 1000)
        model_id = int_id_from_hash(quiz.id, 2000)
    except ValueError:
        raise HTTPException(400, "Quiz id must be a hex token.")

    deck = genanki.Deck(deck_id, f"{quiz.title} - QuizGen")
    model = genanki.Model(
        model_id,
        "QuizGen Question",
        fields=[{"name":"Question"},{"name":"Options"},{"name":"Answer"},{"name":"Type"}],
        templates=[{
            "name":"Card 1",
            "qfmt":"{{Question}}<div style='margin-top:8px'>{{Options}}</div>",
            "afmt":"{{FrontSide}}<hr id=answer>{{Answer}}<div style='color:#6b7280;margin-top:6px'>{{Type}}</div>",
        }],
        css=".card { font-family: Inter, Arial; font-size: 18px; }",
    )
    for q in quiz.questions:
        options = "<br>".join(q.options or [])
        deck.add_note(genanki.Note(model=model, fields=[q.question, options, _back(q), q.type]))

    pkg = genanki.Package(deck)
    with tempfile.NamedTemporaryFile(delete=False, suffix=".apkg") as tmp:
        tmp_path = tmp.name
    try:
        pkg.write_to_file(tmp_path)
        data = Path(tmp_path).read_bytes()
    finally:
        try: os.remove(tmp_path)
        except OSError: logger.warning(f"[export] could not remove {tmp_path}")

    headers = {"Content-Disposition": f'attachment; filename="{_filename(quiz.title, "quizgen.apkg")}"'}
    return StreamingResponse(io.BytesIO(data), media_type="application/octet-stream", headers=headers)
