"""Transcript segmenter: detects the transcript format and splits it into timed segments.

Three formats are recognised, tried in priority order; a later strategy runs
only when every earlier one produced no segments:

1. Subtitle blocks (``index / HH:MM:SS,mmm --> HH:MM:SS,mmm / text``).
2. Bracketed lines (``[HH:MM:SS] text``), optional.
3. Plain sentences with synthetic, back-to-back durations.
"""

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from moodcut.manifest import BRACKETED_SEGMENT_DURATION, SegmenterConfig
from moodcut.models import Segment
from moodcut.timecode import parse_timecode

logger = logging.getLogger(__name__)

SUBTITLE_BLOCK_RE = re.compile(
    r"(\d+)\n"
    r"(\d{2}):(\d{2}):(\d{2}),(\d{3}) --> (\d{2}):(\d{2}):(\d{2}),(\d{3})\n"
    r"(.*?)(?=\n\n|\n*\Z)",
    re.DOTALL,
)
BRACKETED_LINE_RE = re.compile(r"\[(\d{2}):(\d{2}):(\d{2})\]\s*(.*)")
SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")


class UnparsableTranscriptError(ValueError):
    """Raised when no segmentation strategy yields a segment."""
    pass


class TranscriptFormat(enum.Enum):
    SUBTITLE_BLOCKS = "subtitle_blocks"
    BRACKETED_LINES = "bracketed_lines"
    PLAIN_SENTENCES = "plain_sentences"


@dataclass
class ParsedTranscript:
    """Segments tagged with the format they were parsed from."""

    format: TranscriptFormat
    segments: list[Segment] = field(default_factory=list)


def parse_subtitle_blocks(content: str) -> list[Segment]:
    segments: list[Segment] = []
    for m in SUBTITLE_BLOCK_RE.finditer(content):
        start = parse_timecode(m.group(2), m.group(3), m.group(4), m.group(5))
        end = parse_timecode(m.group(6), m.group(7), m.group(8), m.group(9))
        text = m.group(10).strip().replace("\n", " ")
        segments.append(Segment(start=start, end=end, text=text))
    return segments


def parse_bracketed_lines(
    content: str, duration: float = BRACKETED_SEGMENT_DURATION
) -> list[Segment]:
    """One segment per ``[HH:MM:SS] text`` line.

    Every segment lasts exactly ``duration`` seconds, whatever the next line's
    start, so consecutive segments can overlap or leave gaps.
    """
    segments: list[Segment] = []
    for line in content.split("\n"):
        if not line.strip():
            continue
        m = BRACKETED_LINE_RE.search(line)
        if m is None:
            continue
        start = parse_timecode(m.group(1), m.group(2), m.group(3))
        segments.append(Segment(start=start, end=start + duration, text=m.group(4).strip()))
    return segments


def sentence_duration(text: str, config: SegmenterConfig) -> float:
    """Synthetic speaking time: length / chars_per_second, clamped."""
    return max(
        config.min_sentence_duration,
        min(config.max_sentence_duration, len(text) / config.chars_per_second),
    )


def parse_plain_sentences(
    content: str, config: SegmenterConfig | None = None
) -> list[Segment]:
    """Split on sentence terminators and lay the chunks out from time 0."""
    config = config or SegmenterConfig()
    chunks = SENTENCE_RE.findall(content) or [content]

    segments: list[Segment] = []
    cursor = 0.0
    for chunk in chunks:
        text = chunk.strip()
        if not text:
            continue
        duration = sentence_duration(text, config)
        segments.append(Segment(start=cursor, end=cursor + duration, text=text))
        cursor += duration
    return segments


def _strategies(
    config: SegmenterConfig,
) -> list[tuple[TranscriptFormat, Callable[[str], list[Segment]]]]:
    strategies = [(TranscriptFormat.SUBTITLE_BLOCKS, parse_subtitle_blocks)]
    if config.allow_bracketed:
        strategies.append((
            TranscriptFormat.BRACKETED_LINES,
            lambda content: parse_bracketed_lines(content, config.bracketed_duration),
        ))
    strategies.append((
        TranscriptFormat.PLAIN_SENTENCES,
        lambda content: parse_plain_sentences(content, config),
    ))
    return strategies


def segment_transcript(
    content: str, config: SegmenterConfig | None = None
) -> ParsedTranscript:
    """Detect the transcript format and return its segments.

    Raises:
        UnparsableTranscriptError: if no strategy produced a segment.
    """
    config = config or SegmenterConfig()
    content = content.replace("\r\n", "\n").replace("\r", "\n")

    for fmt, strategy in _strategies(config):
        segments = strategy(content)
        if segments:
            logger.debug("Parsed %d segments as %s", len(segments), fmt.value)
            return ParsedTranscript(format=fmt, segments=segments)

    raise UnparsableTranscriptError(
        "Could not parse transcript. Please use SRT format or plain text with timestamps."
    )
