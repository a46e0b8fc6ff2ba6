import re
from fastapi import HTTPException
from ..settings import settings

SAMPLE_TEXT = (
    "Artificial Intelligence (AI) is a transformative technology that has revolutionized various "
    "industries and aspects of human life. Machine learning, a subset of AI, enables computers to "
    "learn and improve from experience without being explicitly programmed. Deep learning, which "
    "uses neural networks with multiple layers, has been particularly successful in tasks such as "
    "image recognition, natural language processing, and speech synthesis. The applications of AI "
    "are vast and continue to expand, including autonomous vehicles, medical diagnosis, financial "
    "trading, and smart home devices. However, AI also presents challenges and ethical "
    "considerations, such as job displacement, privacy concerns, and the need for responsible "
    "development and deployment of AI systems."
)

def _clean(s: str) -> str:
    s = (s or "").replace("\r\n", "\n").replace("\r", "\n").replace("\ufeff", "")
    return re.sub(r"[ \t]+", " ", s).strip()

def normalize_text(s: str) -> str:
    text = _clean(s)
    if not text:
        raise HTTPException(400, "Empty text.")
    if len(text) > settings.MAX_TEXT_CHARS:
        raise HTTPException(413, f"Text too long. Max {settings.MAX_TEXT_CHARS} characters.")
    return text

def decode_upload(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(400, "File is not valid UTF-8 text.")
