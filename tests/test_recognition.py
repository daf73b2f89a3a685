import numpy as np
import pytest

from signmotion.core.db import MemorySignStore, SignDatabase
from signmotion.core.poses import HandPose, PoseFrame
from signmotion.core.recognition import (
    SignValidator,
    ValidationReason,
    cosine_similarity,
    flatten_keyframe,
    pose_similarity,
)


def hand(position, handshape=None):
    d = {"position": list(position)}
    if handshape:
        d["handshape"] = handshape
    return d


def _negated(keyframes):
    return [
        {"time_ms": kf["time_ms"], "right_hand": {"position": [-v for v in kf["right_hand"]["position"]]}}
        for kf in keyframes
    ]


# ── Similarity ────────────────────────────────────────────────

@pytest.mark.parametrize("v", [
    [1.0, 2.0, 3.0],
    [0.001, -5.0, 42.0, 7.0],
    [-1.0],
])
def test_cosine_self_similarity_is_one(v):
    assert cosine_similarity(np.array(v), np.array(v)) == pytest.approx(1.0)


def test_cosine_with_zero_vector_is_zero():
    assert cosine_similarity(np.array([1.0, 2.0]), np.zeros(2)) == 0.0
    assert cosine_similarity(np.zeros(3), np.zeros(3)) == 0.0


def test_cosine_length_mismatch_is_zero():
    assert cosine_similarity(np.ones(3), np.ones(6)) == 0.0


def test_pose_similarity_clamps_negative():
    assert pose_similarity(np.array([1.0, 0.0]), np.array([-1.0, 0.0])) == 0.0


def test_flatten_order():
    frame = PoseFrame(
        0,
        right_hand=HandPose((1, 2, 3), landmarks=((7, 8, 9),)),
        left_hand=HandPose((4, 5, 6)),
    )
    assert flatten_keyframe(frame).tolist() == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert flatten_keyframe({"time_ms": 0}).size == 0


# ── Validation ────────────────────────────────────────────────

def test_exact_match_passes(db, verified_signs):
    captured = verified_signs["signs"]["HELLO"]["keyframes"]
    result = SignValidator(db).validate("HELLO", captured)
    assert result.valid is True
    assert result.score == 100
    assert result.reason is ValidationReason.PASSED
    assert result.handshape_match is True
    assert result.suggestions == ()


def test_negated_positions_fail(db, verified_signs):
    captured = _negated(verified_signs["signs"]["HELLO"]["keyframes"])
    result = SignValidator(db).validate("HELLO", captured)
    assert result.valid is False
    assert result.score < 70
    assert result.reason is ValidationReason.LOW_SCORE
    assert result.suggestions == (
        "Expected handshape: open_palm",
        "Reference duration: 1000ms",
        "Start at the temple, move outward",
    )


def test_handshape_bonus_added_to_both_sides(db):
    captured = [
        {"time_ms": 0, "right_hand": hand((0.5, 0.3, 0.1), "open_palm")},
        {"time_ms": 900, "right_hand": hand((-0.7, -0.5, -0.2))},
    ]
    result = SignValidator(db).validate("HELLO", captured)
    assert result.first_similarity == pytest.approx(1.0)
    assert result.last_similarity == 0.0
    assert result.score == round((1.0 + 0.0 + 0.3) / 2.3 * 100)
    assert result.valid is False


def test_captured_pose_frames_accepted(db):
    captured = [
        PoseFrame(0, right_hand=HandPose((0.5, 0.3, 0.1), handshape="open_palm")),
        PoseFrame(1000, right_hand=HandPose((0.7, 0.5, 0.2))),
    ]
    assert SignValidator(db).validate("hello", captured).valid is True


def test_no_reference_is_a_result_not_an_error(db):
    result = SignValidator(db).validate("UNVERIFIED", [{"time_ms": 0}])
    assert result.valid is False
    assert result.score == 0
    assert result.reason is ValidationReason.NO_REFERENCE
    assert result.to_dict()["reason"] == "no_reference"


def test_empty_capture(db):
    result = SignValidator(db).validate("HELLO", [])
    assert result.reason is ValidationReason.NO_KEYFRAMES
    assert result.score == 0


def test_capture_without_positions_scores_zero(db):
    result = SignValidator(db).validate("HELLO", [{"time_ms": 0, "face": "smile"}])
    assert result.score == 0
    assert result.first_similarity is None
    assert result.reason is ValidationReason.LOW_SCORE


def test_threshold_is_configurable():
    store = MemorySignStore(verified_signs={"signs": {"NO": {
        "duration_ms": 600,
        "keyframes": [
            {"time_ms": 0, "right_hand": {"position": [1.0, 0.0, 0.0]}},
            {"time_ms": 600, "right_hand": {"position": [1.0, 0.0, 0.0]}},
        ],
    }}})
    captured = [{"time_ms": 0, "right_hand": {"position": [1.0, 1.0, 0.0]}}]
    strict = SignValidator(SignDatabase(store)).validate("NO", captured)
    lenient = SignValidator(SignDatabase(store), threshold=0.5).validate("NO", captured)
    assert strict.score == 71
    assert strict.valid is True
    assert lenient.valid is True
    assert SignValidator(SignDatabase(store), threshold=0.9).validate("NO", captured).valid is False
