"""
Quiz assembly.

``generate_quiz`` is a single synchronous call: it extracts keywords once,
asks each enabled builder for its share of the questions, shuffles, tops
up with fallbacks when the first pass falls short, and wraps the result
in a Quiz. Falling short is not an error; callers should look at
``len(quiz.questions)``.
"""
import math
import random
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from loguru import logger

from ..schemas import Question, QuestionType, Quiz, QuizSettings
from .builders import build_fill_in_blank, build_multiple_choice, build_short_answer, new_id
from .keywords import extract_keywords

Builder = Callable[..., Optional[Question]]

BUILDERS: Dict[QuestionType, Builder] = {
    "fill-in-blank": build_fill_in_blank,
    "multiple-choice": build_multiple_choice,
    "short-answer": build_short_answer,
}

# order tried when topping up
FALLBACK_ORDER: List[QuestionType] = ["fill-in-blank", "multiple-choice", "short-answer"]

def generate_quiz(
    source_text: str,
    settings: QuizSettings,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Quiz:
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    target = settings.num_questions
    difficulty = settings.difficulty

    keywords = extract_keywords(source_text)
    enabled = settings.question_types.enabled()
    logger.debug(f"[generator] keywords={keywords} enabled={enabled}")

    questions: List[Question] = []
    prompts: set[str] = set()

    def attempt(qtype: QuestionType) -> Optional[Question]:
        q = BUILDERS[qtype](source_text, keywords, difficulty, rng=rng, exclude=prompts)
        if q is None or q.question in prompts:
            return None
        questions.append(q)
        prompts.add(q.question)
        return q

    if enabled:
        quota = math.ceil(target / len(enabled))
        for qtype in enabled:
            for _ in range(quota):
                if len(questions) >= target:
                    break
                attempt(qtype)

    rng.shuffle(questions)

    fallbacks = [t for t in FALLBACK_ORDER if t in enabled]
    while len(questions) < target:
        if not any(attempt(t) for t in fallbacks):
            logger.info(f"[generator] ran out of unique questions at {len(questions)}/{target}")
            break

    questions = questions[:target]
    return Quiz(
        id=new_id(rng),
        title=f"Generated Quiz - {now.date().isoformat()}",
        description=f"Auto-generated quiz from provided text with {len(questions)} questions",
        questions=tuple(questions),
        created_at=now,
        source_text=source_text,
        settings=settings.model_copy(deep=True),
    )
