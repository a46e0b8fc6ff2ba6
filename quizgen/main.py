from __future__ import annotations

import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler

from .settings import settings
from .routers import quiz, upload, export

# ---------- logging ----------
logger.remove()
logger.add(
    sys.stderr,
    format="{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {message}",
    level=settings.LOG_LEVEL,
)

# ---------- app / limiter ----------
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])
app = FastAPI(title="QuizGen API", version="1.0.0")
app.state.limiter = limiter

# ---------- CORS ----------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# SlowAPI middleware + handler
app.add_middleware(SlowAPIMiddleware)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# ---------- health ----------
@app.get("/health")
def health():
    return {
        "ok": True,
        "rate_limit": settings.RATE_LIMIT,
        "max_questions": settings.MAX_QUESTIONS,
        "max_text_chars": settings.MAX_TEXT_CHARS,
        "max_upload_kb": settings.MAX_UPLOAD_KB,
    }

# ---------- routers ----------
app.include_router(quiz.router, tags=["quiz"])
app.include_router(upload.router, tags=["upload"])
app.include_router(export.router, tags=["export"])
