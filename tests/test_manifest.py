"""Tests for manifest loading and request validation."""

import json
from pathlib import Path

import pytest

from moodcut.manifest import (
    AnalysisManifest,
    AnalysisRequest,
    MissingInputError,
    SegmenterConfig,
    load_manifest,
    parse_threshold,
)


class TestSegmenterConfig:
    def test_defaults(self):
        cfg = SegmenterConfig()
        assert cfg.allow_bracketed is True
        assert cfg.bracketed_duration == 5.0
        assert cfg.chars_per_second == 10.0
        assert cfg.min_sentence_duration == 3.0
        assert cfg.max_sentence_duration == 10.0


class TestAnalysisRequest:
    def test_transcript_content_preferred(self):
        req = AnalysisRequest.from_mapping({
            "transcriptContent": "first",
            "transcript": "second",
            "videoUrl": "v.mp4",
        })
        assert req.transcript == "first"
        assert req.threshold == 0.0

    def test_transcript_fallback(self):
        req = AnalysisRequest.from_mapping({"transcript": "t", "videoUrl": "v", "threshold": -2})
        assert req.transcript == "t"
        assert req.threshold == -2.0

    def test_missing_video(self):
        with pytest.raises(MissingInputError, match="videoUrl is required"):
            AnalysisRequest.from_mapping({"transcript": "t"})

    def test_missing_transcript(self):
        with pytest.raises(MissingInputError, match="transcript or transcriptContent"):
            AnalysisRequest.from_mapping({"videoUrl": "v", "transcript": ""})

    @pytest.mark.parametrize("value", [5, ["line"], {"text": "hi"}])
    def test_non_string_transcript(self, value):
        with pytest.raises(MissingInputError, match="transcript must be a string"):
            AnalysisRequest.from_mapping({"videoUrl": "v", "transcript": value})


class TestParseThreshold:
    @pytest.mark.parametrize("value, expected", [
        (None, 0.0), ("", 0.0), ("  ", 0.0), ("1.5", 1.5), (2, 2.0), ("-3", -3.0),
    ])
    def test_valid(self, value, expected):
        assert parse_threshold(value) == expected

    @pytest.mark.parametrize("value", ["abc", True, [1]])
    def test_invalid(self, value):
        with pytest.raises(MissingInputError, match="threshold must be a number"):
            parse_threshold(value)

    @pytest.mark.parametrize("value", ["nan", "inf", "-1e999", float("inf")])
    def test_non_finite(self, value):
        with pytest.raises(MissingInputError, match="threshold must be a finite number"):
            parse_threshold(value)


class TestAnalysisManifest:
    def test_minimal(self):
        m = AnalysisManifest(transcript=Path("t.srt"), video="v.mp4")
        assert m.version == "1"
        assert m.threshold == 0.0
        assert m.output == "output.mp4"
        assert m.segmenter.allow_bracketed is True


class TestLoadManifest:
    def test_load_sample(self, sample_manifest_path: Path):
        m = load_manifest(sample_manifest_path)
        assert m.version == "1"
        assert m.transcript == sample_manifest_path.parent / "sample.srt"
        assert m.video == "https://example.com/talk.mp4"
        assert m.threshold == 1.0
        assert m.output == "highlights.mp4"
        assert m.segmenter.allow_bracketed is False

    def test_absolute_transcript_path_kept(self, tmp_path: Path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"transcript": "/data/t.srt", "video": "v.mp4"}))
        assert load_manifest(path).transcript == Path("/data/t.srt")

    def test_load_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json")
        with pytest.raises(json.JSONDecodeError):
            load_manifest(bad)

    def test_load_missing_fields(self, tmp_path: Path):
        incomplete = tmp_path / "incomplete.json"
        incomplete.write_text('{"version": "1"}')
        with pytest.raises(ValueError, match="must contain"):
            load_manifest(incomplete)

    def test_unknown_segmenter_key(self, tmp_path: Path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({
            "transcript": "t.srt",
            "video": "v.mp4",
            "segmenter": {"allow_brackets": False},
        }))
        with pytest.raises(ValueError, match="Invalid segmenter settings"):
            load_manifest(path)
