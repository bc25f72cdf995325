"""Shared fixtures for lexicon and rendering tests."""

import json

import pytest


def _record(number, line_count=6):
    return {
        "number": number,
        "name": f"Hexagram {number}",
        "upper_trigram": "Upper",
        "lower_trigram": "Lower",
        "judgement": f"Judgement {number}",
        "image": f"Image {number}",
        "lines": [
            {"position": pos, "text": f"Line {pos} of {number}"}
            for pos in range(1, line_count + 1)
        ],
    }


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def records():
    """64 valid hexagram records, numbered 1..64."""
    return [_record(n) for n in range(1, 65)]


@pytest.fixture
def write_lexicon(tmp_path):
    """Write a lexicon document to a temp file and return its path."""

    def _write(data, name="lexicon.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
