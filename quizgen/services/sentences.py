import re
from ..settings import settings

MIN_SENTENCE_CHARS = 20
MAX_SENTENCE_CHARS = 200

_TERMINATORS = re.compile(r"[.!?]+")

def extract_sentences(text: str, limit: int | None = None) -> list[str]:
    limit = settings.SENTENCE_LIMIT if limit is None else limit
    pieces = (s.strip() for s in _TERMINATORS.split(text or ""))
    kept = [s for s in pieces if MIN_SENTENCE_CHARS < len(s) < MAX_SENTENCE_CHARS]
    return kept[:limit]
