"""Conversion between textual time codes and seconds."""


def parse_timecode(hours, minutes, seconds, millis=None) -> float:
    """Return elapsed seconds for a time code given as its numeric fields.

    Fields may be ints or digit strings (regex groups are passed straight in).
    Ranges are not validated, so ``minutes=75`` is accepted as-is.
    """
    total = int(hours) * 3600 + int(minutes) * 60 + int(seconds)
    if millis is not None:
        total += int(millis) / 1000
    return float(total)


def _split(seconds: float) -> tuple[int, int, int, int]:
    total_ms = int(round(seconds * 1000))
    h, rem = divmod(total_ms, 3_600_000)
    m, rem = divmod(rem, 60_000)
    s, ms = divmod(rem, 1000)
    return h, m, s, ms


def format_srt_time(seconds: float) -> str:
    h, m, s, ms = _split(seconds)
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def format_vtt_time(seconds: float) -> str:
    h, m, s, ms = _split(seconds)
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"


def format_seconds(seconds: float) -> str:
    """Render seconds for a filter argument: ``1``, ``1.5``, ``3723.123``."""
    text = f"{seconds:.6f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"
