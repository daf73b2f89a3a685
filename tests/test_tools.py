import json

import pytest

from signmotion.core.db import MemorySignStore, SignDatabase
from signmotion.tools.check_database import report
from signmotion.tools.ingest_dataset import build_index, index_to_rows, ingest_dataset, parse_video_name


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")


@pytest.fixture
def dataset(tmp_path):
    root = tmp_path / "processed"
    _touch(root / "ASL" / "HELLO_720p.mp4")
    _touch(root / "ASL" / "HELLO_480p.mp4")
    _touch(root / "ASL" / "HELLO.jpg")
    _touch(root / "ASL" / "sign_thank-you_v2_1080p.mov")
    _touch(root / "ASL" / "notes.txt")
    _touch(root / "BSL" / "hello.mp4")
    (root / "ISL").mkdir()
    return root


@pytest.mark.parametrize("name, expected", [
    ("HELLO_720p.mp4", ("HELLO", "720p")),
    ("hello_480P.mp4", ("HELLO", "480p")),
    ("sign_thank-you_v2_1080p.mov", ("THANK_YOU", "1080p")),
    ("goodbye.mp4", ("GOODBYE", "720p")),
])
def test_parse_video_name(name, expected):
    assert parse_video_name(name) == expected


def test_build_index(dataset):
    index = build_index(dataset)
    hello = index["ASL"]["HELLO"]
    assert set(hello["variants"]) == {"720p", "480p"}
    assert hello["videoPath"].endswith("HELLO_720p.mp4")
    assert hello["thumbnail"].endswith("HELLO.jpg")
    assert index["ASL"]["THANK_YOU"]["videoPath"].endswith(".mov")
    assert "ISL" not in index
    assert index["_meta"]["totalSigns"] == 3
    assert index["_meta"]["dialects"] == {"ASL": 2, "BSL": 1}


def test_built_index_loads_into_database(dataset):
    db = SignDatabase(MemorySignStore(build_index(dataset)))
    assert db.has_video("thank you", "ASL") is False
    assert db.has_video("THANK_YOU", "ASL")
    assert db.video_entry("HELLO", "ASL").url_for("480p").endswith("HELLO_480p.mp4")


def test_index_to_rows_one_per_quality(dataset):
    rows = index_to_rows(build_index(dataset))
    assert len(rows) == 4
    assert {(r["dialect"], r["gloss"], r["quality"]) for r in rows} == {
        ("ASL", "HELLO", "720p"),
        ("ASL", "HELLO", "480p"),
        ("ASL", "THANK_YOU", "1080p"),
        ("BSL", "HELLO", "720p"),
    }


def test_dry_run_writes_nothing(dataset, tmp_path):
    out = tmp_path / "meta" / "sign-index.json"
    ingest_dataset(str(dataset), str(out), dry_run=True)
    assert not out.exists()


def test_ingest_writes_index(dataset, tmp_path):
    out = tmp_path / "meta" / "sign-index.json"
    ingest_dataset(str(dataset), str(out))
    saved = json.loads(out.read_text())
    assert set(saved) == {"ASL", "BSL", "_meta"}


def test_missing_dataset_exits(tmp_path):
    with pytest.raises(SystemExit):
        ingest_dataset(str(tmp_path / "nope"), str(tmp_path / "out.json"))


def test_report(db):
    text = report(db)
    assert "Total videos: 3" in text
    assert "ASL: 2 signs" in text
    assert "Total verified: 1" in text
    assert "greetings" in text
    assert "26 letters" in text
