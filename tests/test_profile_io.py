import logging
from pathlib import Path

import pytest

from bcov.coverage import CoverageRange
from bcov.errors import ProfileError
from bcov.io import Asset, is_script_asset, load_profile, parse_profile
from tests.infrastructure import make_asset, write, write_profile


def test_load_profile(tmp_path: Path):
    p = write_profile(tmp_path / "cov.json", [make_asset("https://x/app.js", "f();", [(0, 4)])])
    assets = load_profile(p)
    assert assets == [Asset(url="https://x/app.js", text="f();", ranges=[CoverageRange(0, 4)])]


def test_missing_file(tmp_path: Path):
    with pytest.raises(ProfileError, match="Cannot read"):
        load_profile(tmp_path / "absent.json")


def test_invalid_json(tmp_path: Path):
    p = write(tmp_path / "cov.json", "{not json")
    with pytest.raises(ProfileError, match="not valid JSON"):
        load_profile(p)


def test_top_level_must_be_array():
    with pytest.raises(ProfileError, match="JSON array"):
        parse_profile({"url": "x"})


def test_malformed_entries_skipped(caplog):
    data = [
        "not an object",
        {"url": "https://x/a.js"},  # нет text
        {"url": "https://x/b.js", "text": "", "ranges": [{"start": 5, "end": 1}]},
        {"url": "https://x/c.js", "text": "", "ranges": [{"start": True, "end": 1}]},
        {"url": "https://x/ok.js", "text": "ok();"},
    ]
    with caplog.at_level(logging.WARNING, logger="bcov"):
        assets = parse_profile(data)
    assert [a.url for a in assets] == ["https://x/ok.js"]
    assert assets[0].ranges == []
    assert caplog.text.count("skipping malformed entry") == 4


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/static/js/main.js", True),
        ("https://example.com/static/js/main.js?v=3#top", True),
        ("https://example.com/static/css/main.css", False),
        ("https://example.com/app.json", False),
        ("main.js", True),
    ],
)
def test_is_script_asset(url, expected):
    assert is_script_asset(Asset(url=url, text="")) is expected
