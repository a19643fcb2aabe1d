"""Flask application factory for the moodcut HTTP API."""

from flask import Flask, jsonify

from moodcut.analyzers.sentiment import SentimentScorer
from moodcut.manifest import DEFAULT_OUTPUT_NAME, SegmenterConfig


def create_app(
    scorer: SentimentScorer | None = None,
    segmenter: SegmenterConfig | None = None,
) -> Flask:
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = 20 * 1024 * 1024  # 20 MB of transcript
    app.config["SCORER"] = scorer or SentimentScorer()
    app.config["SEGMENTER"] = segmenter or SegmenterConfig()
    app.config["OUTPUT_NAME"] = DEFAULT_OUTPUT_NAME

    from moodcut.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(413)
    def request_entity_too_large(error):
        return jsonify({"error": "File too large"}), 413

    return app
