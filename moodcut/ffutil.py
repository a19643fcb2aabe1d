"""FFmpeg filter-graph synthesis for keep-segment edits.

Nothing here runs ffmpeg; the command is handed to an external executor.
"""

from dataclasses import dataclass, field

from moodcut.manifest import DEFAULT_OUTPUT_NAME
from moodcut.models import TimeRange
from moodcut.timecode import format_seconds

OUTPUT_VIDEO_LABEL = "[outv]"
OUTPUT_AUDIO_LABEL = "[outa]"


@dataclass
class EditCommand:
    """A declarative ffmpeg invocation: one input, a filter graph, mapped outputs."""

    input: str
    filters: list[str]
    output: str = DEFAULT_OUTPUT_NAME
    maps: tuple[str, ...] = field(default=(OUTPUT_VIDEO_LABEL, OUTPUT_AUDIO_LABEL))

    @property
    def filter_complex(self) -> str:
        return "; ".join(self.filters)

    def to_args(self) -> list[str]:
        cmd = ["ffmpeg", "-i", self.input, "-filter_complex", self.filter_complex]
        for label in self.maps:
            cmd += ["-map", label]
        cmd.append(self.output)
        return cmd

    def __str__(self) -> str:
        maps = " ".join(f'-map "{label}"' for label in self.maps)
        return (
            f'ffmpeg -i "{self.input}" -filter_complex "{self.filter_complex}" '
            f"{maps} {self.output}"
        )


def build_filter_graph(segments: list[TimeRange]) -> list[str]:
    """Trim/atrim each range, then concat all pairs in order.

    Range ``i`` produces streams labelled ``[v{i}]`` and ``[a{i}]``.
    """
    if not segments:
        raise ValueError("build_filter_graph called with empty segment list")

    filter_parts: list[str] = []
    stream_labels: list[str] = []

    for i, seg in enumerate(segments):
        start, end = format_seconds(seg.start), format_seconds(seg.end)
        filter_parts.append(
            f"[0:v]trim=start={start}:end={end},setpts=PTS-STARTPTS[v{i}]"
        )
        filter_parts.append(
            f"[0:a]atrim=start={start}:end={end},asetpts=PTS-STARTPTS[a{i}]"
        )
        stream_labels.append(f"[v{i}][a{i}]")

    concat_input = "".join(stream_labels)
    filter_parts.append(
        f"{concat_input}concat=n={len(segments)}:v=1:a=1"
        f"{OUTPUT_VIDEO_LABEL}{OUTPUT_AUDIO_LABEL}"
    )
    return filter_parts


def build_edit_command(
    segments: list, video: str, output: str = DEFAULT_OUTPUT_NAME
) -> EditCommand | None:
    """Build the command keeping ``segments`` of ``video``, or None if there are none.

    ``segments`` may be any objects with ``start``/``end`` attributes.
    """
    if not segments:
        return None
    ranges = [TimeRange(start=s.start, end=s.end) for s in segments]
    return EditCommand(input=video, filters=build_filter_graph(ranges), output=output)
