import pytest

from signmotion import config
from signmotion.core.poses import (
    FacePose,
    HandPose,
    PoseFrame,
    ease_in_out,
    interpolate_frames,
    lerp,
    lerp_vec,
    neutral_frame,
)


def test_lerp_endpoints_and_midpoint():
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0
    assert lerp(2.0, 4.0, 0.5) == 3.0


def test_lerp_vec_missing_side_returns_other():
    assert lerp_vec(None, (1, 2, 3), 0.3) == (1.0, 2.0, 3.0)
    assert lerp_vec((1, 2, 3), None, 0.7) == (1.0, 2.0, 3.0)
    assert lerp_vec(None, None, 0.5) is None


def test_ease_in_out_curve():
    assert ease_in_out(0.0) == 0.0
    assert ease_in_out(1.0) == 1.0
    assert ease_in_out(0.5) == pytest.approx(0.5)
    assert ease_in_out(0.25) == pytest.approx(0.125)
    assert ease_in_out(0.75) == pytest.approx(0.875)


def test_interpolate_positions_linear_and_discrete_fields_switch_after_midpoint():
    a = PoseFrame(0, right_hand=HandPose((0, 0, 0), handshape="fist"), face=FacePose("neutral"))
    b = PoseFrame(100, right_hand=HandPose((1, 1, 1), handshape="point"), face=FacePose("smile"))

    early = interpolate_frames(a, b, 0.5)
    assert early.right_hand.position == pytest.approx((0.5, 0.5, 0.5))
    assert early.right_hand.handshape == "fist"
    assert early.face.expression == "neutral"
    assert early.timestamp_ms == pytest.approx(50)

    late = interpolate_frames(a, b, 0.51)
    assert late.right_hand.handshape == "point"
    assert late.face.expression == "smile"


def test_part_present_on_one_side_follows_discrete_rule():
    a = PoseFrame(0, right_hand=HandPose((0, 0, 0)))
    b = PoseFrame(100, right_hand=HandPose((1, 1, 1)), left_hand=HandPose((-1, 0, 0)))
    assert interpolate_frames(a, b, 0.4).left_hand is None
    assert interpolate_frames(a, b, 0.6).left_hand == b.left_hand


def test_from_dict_accepts_wire_and_camel_case_keys():
    frame = PoseFrame.from_dict({
        "time_ms": 250,
        "rightHand": {"position": [0.1, 0.2, 0.3], "palmOrientation": "up", "handshape": "flat"},
        "face": {"eyebrows": "raised", "headNod": "yes"},
        "torso": {"lean": [0.1, 0.0]},
    })
    assert frame.timestamp_ms == 250.0
    assert frame.right_hand.position == (0.1, 0.2, 0.3)
    assert frame.right_hand.palm_orientation == "up"
    assert frame.face.head_nod == "yes"
    assert frame.torso.lean == (0.1, 0.0)
    assert frame.left_hand is None


def test_to_dict_omits_unspecified_parts():
    d = PoseFrame(10, right_hand=HandPose((1, 2, 3), handshape="fist")).to_dict()
    assert d == {
        "timestamp_ms": 10,
        "right_hand": {"position": [1, 2, 3], "handshape": "fist"},
    }
    assert PoseFrame.from_dict(d).right_hand.handshape == "fist"


def test_empty_frame():
    assert PoseFrame(0).is_empty
    assert not neutral_frame(0).is_empty


def test_neutral_frame_rest_pose():
    frame = neutral_frame(500, left=False)
    assert frame.timestamp_ms == 500.0
    assert frame.right_hand.position == config.NEUTRAL_RIGHT_HAND
    assert frame.right_hand.handshape == "relaxed"
    assert frame.left_hand is None
    assert frame.face.expression == "neutral"


def test_lerp_vec_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        lerp_vec((0.1, 0.0), (0.1, 0.0, 0.2), 0.5)


@pytest.mark.parametrize("part", [
    {"right_hand": {"position": [0.1, 0.2]}},
    {"head": {"rotation": [0, 0, 0, 1]}},
    {"torso": {"lean": [0.1, 0.0, 0.2]}},
])
def test_from_dict_rejects_wrong_length_vectors(part):
    with pytest.raises(ValueError):
        PoseFrame.from_dict({"time_ms": 0, **part})
