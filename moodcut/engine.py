"""Orchestrator: segments, scores, filters and builds the edit for one transcript."""

import logging
from dataclasses import dataclass, field
from typing import Callable

from moodcut.analyzers.sentiment import SentimentScorer
from moodcut.analyzers.transcript import TranscriptFormat, segment_transcript
from moodcut.editors.cut import filter_segments
from moodcut.ffutil import EditCommand, build_edit_command
from moodcut.manifest import DEFAULT_OUTPUT_NAME, AnalysisRequest, SegmenterConfig
from moodcut.models import Segment, Statistics

logger = logging.getLogger(__name__)


@dataclass
class EngineResult:
    video: str
    threshold: float
    format: TranscriptFormat
    segments: list[Segment] = field(default_factory=list)
    kept: list[Segment] = field(default_factory=list)
    statistics: Statistics | None = None
    command: EditCommand | None = None

    @property
    def ffmpeg_command(self) -> str | None:
        return str(self.command) if self.command is not None else None

    def to_dict(self) -> dict:
        kept = [s.to_dict() for s in self.kept]
        return {
            "success": True,
            "videoUrl": self.video,
            "threshold": self.threshold,
            "totalSegments": self.statistics.total,
            "matchingSegments": self.statistics.matching,
            "averageSentiment": self.statistics.average_sentiment,
            "segments": kept,
            "ffmpegCommand": self.ffmpeg_command,
            "statistics": self.statistics.to_dict(),
        }


def compute_statistics(segments: list[Segment], kept: list[Segment]) -> Statistics:
    """Aggregate over the full scored set, not just the kept subset.

    ``segments`` must be non-empty.
    """
    total = len(segments)
    return Statistics(
        total=total,
        matching=len(kept),
        average_sentiment=sum(s.score for s in segments) / total,
        percentage_kept=len(kept) / total * 100,
    )


def process(
    request: AnalysisRequest,
    scorer: SentimentScorer,
    segmenter: SegmenterConfig | None = None,
    output: str = DEFAULT_OUTPUT_NAME,
    on_progress: Callable[[str, float], None] | None = None,
) -> EngineResult:
    """Run the full analysis pipeline.

    Args:
        request: Validated transcript, video identifier and threshold.
        scorer: Shared sentiment scorer.
        segmenter: Segmentation options; defaults allow every format.
        output: Output file name written into the edit command.
        on_progress: Optional callback(stage_name, fraction_complete).

    Raises:
        UnparsableTranscriptError: if the transcript yields no segments.
    """

    def _progress(stage: str, frac: float) -> None:
        if on_progress:
            on_progress(stage, frac)

    _progress("Parsing transcript", 0.0)
    parsed = segment_transcript(request.transcript, segmenter)

    _progress("Scoring sentiment", 0.3)
    scored = scorer.score_segments(parsed.segments)

    _progress("Filtering segments", 0.6)
    kept = filter_segments(scored, request.threshold)
    statistics = compute_statistics(scored, kept)
    logger.debug(
        "Kept %d of %d segments at threshold %s (average %.3f)",
        statistics.matching, statistics.total, request.threshold,
        statistics.average_sentiment,
    )

    _progress("Building edit command", 0.8)
    command = build_edit_command(kept, request.video, output=output)

    _progress("Done", 1.0)
    return EngineResult(
        video=request.video,
        threshold=request.threshold,
        format=parsed.format,
        segments=scored,
        kept=kept,
        statistics=statistics,
        command=command,
    )
