"""Shared data types used across moodcut."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class TimeRange:
    """A start/end time pair in seconds."""

    start: float
    end: float


@dataclass(frozen=True)
class Segment:
    """A time-bounded span of transcript text with its sentiment score."""

    start: float
    end: float
    text: str
    score: float = 0.0

    def with_score(self, score: float) -> "Segment":
        return replace(self, score=score)

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "score": self.score,
        }


@dataclass(frozen=True)
class CutPoint:
    """A kept range as handed to a downstream editor."""

    start: float
    end: float
    duration: float

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end, "duration": self.duration}


@dataclass(frozen=True)
class Statistics:
    """Summary numbers over a scored transcript."""

    total: int
    matching: int
    average_sentiment: float
    percentage_kept: float

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "matching": self.matching,
            "averageSentiment": self.average_sentiment,
            "percentageKept": self.percentage_kept,
        }
