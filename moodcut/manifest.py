"""JSON manifest schema, the contract between CLI/API and engine."""

import json
import math
from dataclasses import dataclass, field
from pathlib import Path

# Heuristic durations, in seconds. Not physically meaningful.
BRACKETED_SEGMENT_DURATION = 5.0
SENTENCE_CHARS_PER_SECOND = 10.0
MIN_SENTENCE_DURATION = 3.0
MAX_SENTENCE_DURATION = 10.0

DEFAULT_OUTPUT_NAME = "output.mp4"


class MissingInputError(ValueError):
    """Raised when a required request field is absent or unusable."""
    pass


@dataclass
class SegmenterConfig:
    """Configuration for transcript segmentation."""

    allow_bracketed: bool = True
    bracketed_duration: float = BRACKETED_SEGMENT_DURATION
    chars_per_second: float = SENTENCE_CHARS_PER_SECOND
    min_sentence_duration: float = MIN_SENTENCE_DURATION
    max_sentence_duration: float = MAX_SENTENCE_DURATION


@dataclass
class AnalysisRequest:
    """One transcript/video pair to analyze."""

    transcript: str
    video: str
    threshold: float = 0.0

    @classmethod
    def from_mapping(cls, data: dict) -> "AnalysisRequest":
        """Validate raw request fields (JSON body or form data).

        Accepts ``transcriptContent`` or ``transcript`` for the text and
        ``videoUrl`` for the video identifier.
        """
        video = data.get("videoUrl")
        if not video or not isinstance(video, str):
            raise MissingInputError("videoUrl is required")

        transcript = data.get("transcriptContent") or data.get("transcript")
        if not transcript:
            raise MissingInputError("transcript or transcriptContent is required")
        if not isinstance(transcript, str):
            raise MissingInputError("transcript must be a string")

        return cls(
            transcript=transcript,
            video=video,
            threshold=parse_threshold(data.get("threshold")),
        )


@dataclass
class AnalysisManifest:
    """Top-level analysis manifest for the CLI."""

    transcript: Path
    video: str
    threshold: float = 0.0
    output: str = DEFAULT_OUTPUT_NAME
    version: str = "1"
    segmenter: SegmenterConfig = field(default_factory=SegmenterConfig)


def parse_threshold(value) -> float:
    """Coerce a threshold field to float. Absent or blank means 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    if isinstance(value, bool):
        raise MissingInputError("threshold must be a number")
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        raise MissingInputError(f"threshold must be a number, got {value!r}") from None
    if not math.isfinite(threshold):
        raise MissingInputError(f"threshold must be a finite number, got {value!r}")
    return threshold


def load_manifest(path: str | Path) -> AnalysisManifest:
    """Load and validate a manifest from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text())

    if "transcript" not in data or "video" not in data:
        raise ValueError("Manifest must contain 'transcript' and 'video' fields")

    try:
        segmenter = SegmenterConfig(**data.get("segmenter", {}))
    except TypeError as e:
        raise ValueError(f"Invalid segmenter settings in manifest: {e}") from None

    transcript = Path(data["transcript"])
    if not transcript.is_absolute():
        transcript = path.parent / transcript

    return AnalysisManifest(
        version=data.get("version", "1"),
        transcript=transcript,
        video=data["video"],
        threshold=parse_threshold(data.get("threshold")),
        output=data.get("output", DEFAULT_OUTPUT_NAME),
        segmenter=segmenter,
    )
