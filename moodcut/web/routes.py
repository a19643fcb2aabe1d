"""HTTP entry points: multipart upload and JSON webhook."""

import dataclasses
import logging

from flask import Blueprint, current_app, jsonify, request

from moodcut.analyzers.transcript import UnparsableTranscriptError
from moodcut.editors.cut import cut_points
from moodcut.engine import EngineResult, process
from moodcut.manifest import AnalysisRequest, MissingInputError, parse_threshold

logger = logging.getLogger(__name__)

bp = Blueprint("web", __name__)


def _run(analysis: AnalysisRequest, allow_bracketed: bool) -> EngineResult:
    segmenter = dataclasses.replace(
        current_app.config["SEGMENTER"], allow_bracketed=allow_bracketed
    )
    return process(
        analysis,
        current_app.config["SCORER"],
        segmenter=segmenter,
        output=current_app.config["OUTPUT_NAME"],
    )


@bp.route("/api/analyze", methods=["POST"])
def analyze():
    """Multipart form: ``transcript`` file, ``videoUrl`` and ``threshold`` fields."""
    f = request.files.get("transcript")
    if f is None or not request.form.get("videoUrl"):
        return jsonify({"error": "Missing required fields"}), 400

    try:
        content = f.read().decode("utf-8", errors="replace")
        analysis = AnalysisRequest(
            transcript=content,
            video=request.form["videoUrl"],
            threshold=parse_threshold(request.form.get("threshold")),
        )
        result = _run(analysis, allow_bracketed=True)
    except (MissingInputError, UnparsableTranscriptError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Analysis failed")
        return jsonify({"error": "Internal server error"}), 500

    resp = result.to_dict()
    resp["n8nData"] = {
        "segments": resp["segments"],
        "videoUrl": result.video,
        "threshold": result.threshold,
        "statistics": resp["statistics"],
    }
    return jsonify(resp)


@bp.route("/api/webhook", methods=["POST"])
def webhook():
    """JSON body: ``transcriptContent``/``transcript``, ``videoUrl``, ``threshold``."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "JSON object body is required"}), 400

    try:
        analysis = AnalysisRequest.from_mapping(body)
        result = _run(analysis, allow_bracketed=False)
    except (MissingInputError, UnparsableTranscriptError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Webhook failed")
        return jsonify({"error": "Internal server error"}), 500

    resp = result.to_dict()
    resp["cutPoints"] = [c.to_dict() for c in cut_points(result.kept)]
    return jsonify(resp)
