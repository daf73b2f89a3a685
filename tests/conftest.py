import pytest

from signmotion.core.db import MemorySignStore, SignDatabase
from signmotion.core.resolver import SignResolver


def hand(position, handshape=None, landmarks=None):
    d = {"position": list(position)}
    if handshape:
        d["handshape"] = handshape
    if landmarks:
        d["landmarks"] = [list(p) for p in landmarks]
    return d


@pytest.fixture
def video_index():
    return {
        "ASL": {
            "HELLO": {
                "videoPath": "videos/asl/HELLO_720p.mp4",
                "variants": {
                    "720p": "videos/asl/HELLO_720p.mp4",
                    "480p": "videos/asl/HELLO_480p.mp4",
                },
                "thumbnail": "thumbs/asl/HELLO.jpg",
                "duration": 1.8,
                "source": "dataset",
                "category": "greetings",
            },
            "COFFEE": {
                "variants": {"720p": "videos/asl/COFFEE_720p.mp4"},
                "duration_ms": 2400,
            },
        },
        "BSL": {
            "HELLO": {"videoPath": "videos/bsl/HELLO.mp4"},
        },
        "_meta": {"totalSigns": 3},
    }


@pytest.fixture
def verified_signs():
    return {
        "signs": {
            "HELLO": {
                "duration_ms": 1000,
                "notes": "Start at the temple, move outward",
                "keyframes": [
                    {"time_ms": 0, "right_hand": hand((0.5, 0.3, 0.1), "open_palm")},
                    {"time_ms": 1000, "right_hand": hand((0.7, 0.5, 0.2), "open_palm")},
                ],
            },
        },
    }


@pytest.fixture
def db(video_index, verified_signs):
    return SignDatabase(MemorySignStore(video_index, verified_signs))


@pytest.fixture
def empty_db():
    return SignDatabase(MemorySignStore())


@pytest.fixture
def resolver(db):
    return SignResolver(db)


@pytest.fixture
def procedural_resolver(empty_db):
    return SignResolver(empty_db)
