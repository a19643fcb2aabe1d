"""Lexicon-based sentiment scorer using the AFINN word list."""

import re
from typing import Iterable, Protocol

from moodcut.models import Segment

TOKEN_RE = re.compile(r"[a-z0-9']+")


class Analyzer(Protocol):
    def score(self, text: str) -> float: ...


class SentimentScorer:
    """Assigns a signed polarity score to transcript text.

    The lexicon analyzer is read-only after construction, so one scorer can be
    shared across threads. Pass ``analyzer`` to substitute another lexicon.
    """

    def __init__(self, analyzer: Analyzer | None = None):
        if analyzer is None:
            from afinn import Afinn
            analyzer = Afinn(language="en")
        self._analyzer = analyzer

    def score(self, text: str) -> float:
        """Summed word polarity; positive is favorable."""
        return float(self._analyzer.score(text))

    def comparative(self, text: str) -> float:
        """Score divided by the number of word tokens (0 for no tokens)."""
        tokens = TOKEN_RE.findall(text.lower())
        if not tokens:
            return 0.0
        return self.score(text) / len(tokens)

    def score_segments(self, segments: Iterable[Segment]) -> list[Segment]:
        """Return new segments with ``score`` set; inputs are untouched."""
        return [seg.with_score(self.score(seg.text)) for seg in segments]
