import os
import random
from datetime import datetime, timezone

os.environ.setdefault("RATE_LIMIT", "1000/minute")

import pytest

from quizgen.services.parse import SAMPLE_TEXT

@pytest.fixture
def sample_text():
    return SAMPLE_TEXT

@pytest.fixture
def rng():
    return random.Random(1337)

@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
