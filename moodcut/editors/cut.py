"""Sentiment-cut editor: selects which scored segments survive."""

from moodcut.models import CutPoint, Segment


def filter_segments(segments: list[Segment], threshold: float) -> list[Segment]:
    """Keep segments scoring at or above ``threshold``, in their original order.

    An empty result is valid; it means no edit command can be built.
    """
    return [s for s in segments if s.score >= threshold]


def cut_points(segments: list[Segment]) -> list[CutPoint]:
    return [
        CutPoint(start=s.start, end=s.end, duration=s.end - s.start)
        for s in segments
    ]
