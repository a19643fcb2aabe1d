"""Caption editor: writes kept segments as a subtitle sidecar file."""

from pathlib import Path

from moodcut.models import Segment
from moodcut.timecode import format_srt_time, format_vtt_time


def _write_srt(segments: list[Segment], path: Path) -> None:
    lines: list[str] = []
    for i, seg in enumerate(segments, 1):
        lines.append(str(i))
        lines.append(f"{format_srt_time(seg.start)} --> {format_srt_time(seg.end)}")
        lines.append(seg.text)
        lines.append("")
    path.write_text("\n".join(lines), encoding="utf-8")


def _write_vtt(segments: list[Segment], path: Path) -> None:
    lines: list[str] = ["WEBVTT", ""]
    for seg in segments:
        lines.append(f"{format_vtt_time(seg.start)} --> {format_vtt_time(seg.end)}")
        lines.append(seg.text)
        lines.append("")
    path.write_text("\n".join(lines), encoding="utf-8")


def write_captions(segments: list[Segment], path: Path) -> Path:
    """Write ``segments`` to ``path``; a ``.vtt`` suffix selects WebVTT, else SRT.

    Times are those of the source video, not of the concatenated output.
    """
    path = Path(path)
    if path.suffix.lower() == ".vtt":
        _write_vtt(segments, path)
    else:
        _write_srt(segments, path)
    return path
