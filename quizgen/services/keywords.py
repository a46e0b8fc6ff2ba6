import re
from collections import Counter
from ..settings import settings

STOP_WORDS = frozenset("""
the a an and or but in on at to for of with by from up about into through during before after
above below between among this that these those is are was were be been being have has had do does
did will would could should may might can must shall
""".split())

_NON_WORD = re.compile(r"[^\w\s]")

def tokenize(text: str) -> list[str]:
    """Lowercased word tokens that can serve as keywords, in document order."""
    words = _NON_WORD.sub(" ", (text or "").lower()).split()
    return [w for w in words if len(w) > 3 and w not in STOP_WORDS]

def extract_keywords(text: str, limit: int | None = None) -> list[str]:
    """
    Rank content words by frequency, most frequent first.
    Ties keep the order in which the words first appear.
    """
    limit = settings.KEYWORD_LIMIT if limit is None else limit
    counts = Counter(tokenize(text))
    # Counter keeps insertion order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [word for word, _ in ranked[:limit]]
