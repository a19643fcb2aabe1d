"""Thin CLI entry point: builds a manifest and calls the engine."""

import argparse
import json
import sys
from pathlib import Path

from moodcut.analyzers.sentiment import SentimentScorer
from moodcut.editors.captions import write_captions
from moodcut.engine import process
from moodcut.logging import configure_logging
from moodcut.manifest import (
    DEFAULT_OUTPUT_NAME,
    AnalysisManifest,
    AnalysisRequest,
    SegmenterConfig,
    load_manifest,
)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="moodcut",
        description="moodcut: keep the parts of a video whose transcript matches a mood.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    an = sub.add_parser("analyze", help="Score a transcript and print the edit command")
    an.add_argument("transcript", nargs="?", type=Path, help="Transcript file (SRT or text)")
    an.add_argument("--manifest", "-m", type=Path, help="Path to a JSON manifest file")
    an.add_argument("--video", type=str, help="Video URL or path")
    an.add_argument("--threshold", "-t", type=float, default=0.0, help="Minimum sentiment score to keep")
    an.add_argument("--output", "-o", type=str, default=DEFAULT_OUTPUT_NAME, help="Output file name in the command")
    an.add_argument("--no-bracketed", action="store_true", help="Do not parse [HH:MM:SS] lines")
    an.add_argument("--captions", type=Path, help="Write kept segments to an .srt or .vtt file")
    an.add_argument("--json", action="store_true", help="Print the full result as JSON")

    serve = sub.add_parser("serve", help="Launch the HTTP API")
    serve.add_argument("--port", type=int, default=8321, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from moodcut.web import create_app
        app = create_app()
        print(f"moodcut API: http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=False)
        return

    if not args.manifest and not (args.transcript and args.video):
        print("Error: provide TRANSCRIPT and --video, or --manifest.", file=sys.stderr)
        sys.exit(1)

    try:
        if args.manifest:
            m = load_manifest(args.manifest)
        else:
            m = AnalysisManifest(
                transcript=args.transcript,
                video=args.video,
                threshold=args.threshold,
                output=args.output,
                segmenter=SegmenterConfig(allow_bracketed=not args.no_bracketed),
            )
        request = AnalysisRequest.from_mapping({
            "transcript": m.transcript.read_text(encoding="utf-8"),
            "videoUrl": m.video,
            "threshold": m.threshold,
        })
        result = process(request, SentimentScorer(), segmenter=m.segmenter, output=m.output)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.captions and result.kept:
        write_captions(result.kept, args.captions)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    stats = result.statistics
    print(f"Format: {result.format.value}")
    print(f"  Segments kept: {stats.matching}/{stats.total} ({stats.percentage_kept:.1f}%)")
    print(f"  Average sentiment: {stats.average_sentiment:.2f}")
    if args.captions and result.kept:
        print(f"  Captions: {args.captions}")
    print()
    print(result.ffmpeg_command or "No segments met the threshold; nothing to cut.")
