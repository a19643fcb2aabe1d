"""Shared test fixtures."""

import re
from pathlib import Path

import pytest

from moodcut.analyzers.sentiment import SentimentScorer

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SCENARIO_SRT = (
    "1\n00:00:01,000 --> 00:00:03,000\nGreat news today!\n\n"
    "2\n00:00:03,000 --> 00:00:06,000\nTerrible disaster strikes.\n"
)


class FakeAnalyzer:
    """Tiny fixed lexicon, so tests do not depend on AFINN word weights."""

    LEXICON = {"great": 3, "happy": 3, "good": 2, "bad": -2, "terrible": -3, "disaster": -2}

    def score(self, text: str) -> float:
        return float(sum(self.LEXICON.get(w, 0) for w in re.findall(r"[a-z]+", text.lower())))


@pytest.fixture
def sample_manifest_path() -> Path:
    return FIXTURES_DIR / "sample_manifest.json"


@pytest.fixture
def sample_srt_path() -> Path:
    return FIXTURES_DIR / "sample.srt"


@pytest.fixture
def scorer() -> SentimentScorer:
    return SentimentScorer(analyzer=FakeAnalyzer())


@pytest.fixture
def scenario_srt() -> str:
    return SCENARIO_SRT
