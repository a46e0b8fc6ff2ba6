"""
Question builders.

Each builder looks at the source text and the ranked keywords and returns
one Question, or None when the text offers no usable candidate. Builders
take an explicit ``random.Random`` so callers can seed them, and an
``exclude`` collection of prompts that must not be produced again.
"""
import random
import re
import uuid
from typing import Collection, Optional
from loguru import logger

from ..schemas import Question
from .sentences import extract_sentences

BLANK = "_____"
DISTRACTOR_COUNT = 3
SHORT_ANSWER_POOL = 5
MC_QUOTE_CHARS = 80

SHORT_ANSWER_TEMPLATES = (
    "What is the significance of {kw} in the given context?",
    "Explain the role of {kw} based on the text.",
    "Define {kw} as described in the passage.",
    "How does {kw} relate to the main topic discussed?",
)

def new_id(rng: random.Random) -> str:
    return uuid.UUID(int=rng.getrandbits(128), version=4).hex

def _whole_word(keyword: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)

def build_fill_in_blank(
    text: str,
    keywords: list[str],
    difficulty: str,
    *,
    rng: Optional[random.Random] = None,
    exclude: Collection[str] = (),
) -> Optional[Question]:
    rng = rng or random.Random()
    for sentence in extract_sentences(text):
        for keyword in keywords:
            pattern = _whole_word(keyword)
            if not pattern.search(sentence):
                continue
            prompt = f"Fill in the blank: {pattern.sub(BLANK, sentence)}"
            if prompt in exclude:
                continue
            return Question(
                id=new_id(rng),
                question=prompt,
                type="fill-in-blank",
                correct_answer=keyword,
                explanation=f'The correct answer is "{keyword}" based on the context of the sentence.',
                difficulty=difficulty,
                keywords=[keyword],
            )
    return None

def build_multiple_choice(
    text: str,
    keywords: list[str],
    difficulty: str,
    *,
    rng: Optional[random.Random] = None,
    exclude: Collection[str] = (),
) -> Optional[Question]:
    rng = rng or random.Random()
    for sentence in extract_sentences(text):
        prompt = f'Based on the text, which term is most relevant to: "{sentence[:MC_QUOTE_CHARS]}..."?'
        if prompt in exclude:
            continue
        lowered = sentence.lower()
        for keyword in keywords:
            if keyword.lower() not in lowered:
                continue
            pool = list(dict.fromkeys(k for k in keywords if k != keyword))
            if len(pool) < DISTRACTOR_COUNT:
                logger.debug(f"[builders] only {len(pool)} distractors for {keyword!r}, skipping")
                continue
            options = [keyword, *rng.sample(pool, DISTRACTOR_COUNT)]
            rng.shuffle(options)
            return Question(
                id=new_id(rng),
                question=prompt,
                type="multiple-choice",
                options=options,
                correct_answer=keyword,
                explanation=f'"{keyword}" is the correct answer based on the context provided in the text.',
                difficulty=difficulty,
                keywords=[keyword],
            )
    return None

def build_short_answer(
    text: str,
    keywords: list[str],
    difficulty: str,
    *,
    rng: Optional[random.Random] = None,
    exclude: Collection[str] = (),
) -> Optional[Question]:
    """
    Open question about one of the top keywords.

    The expected answer is a generic phrase rather than a fact from the
    text, so these questions are marked non-gradable and left to the
    learner to self-assess against the quoted reference sentence.
    """
    rng = rng or random.Random()
    top = keywords[:SHORT_ANSWER_POOL]
    if not top:
        return None
    keyword = rng.choice(top)
    relevant = [s for s in extract_sentences(text) if keyword.lower() in s.lower()]
    if not relevant:
        return None

    for template in rng.sample(SHORT_ANSWER_TEMPLATES, len(SHORT_ANSWER_TEMPLATES)):
        prompt = template.format(kw=keyword)
        if prompt in exclude:
            continue
        return Question(
            id=new_id(rng),
            question=prompt,
            type="short-answer",
            correct_answer=f"A brief explanation about {keyword} based on the context provided.",
            explanation=(
                f"This question tests understanding of key concepts related to {keyword}. "
                f'Reference: "{relevant[0]}"'
            ),
            difficulty=difficulty,
            keywords=[keyword],
            gradable=False,
        )
    return None
