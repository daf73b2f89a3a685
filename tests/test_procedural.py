import math

import numpy as np
import pytest

from signmotion import config
from signmotion.core.db import parse_fallback_signs
from signmotion.core.descriptors import SignSource
from signmotion.core.errors import CorruptIndexError
from signmotion.core.procedural import (
    MODIFIERS,
    HandMotion,
    Modifier,
    MotionSpec,
    generate,
    parse_motion,
    resolve_handshape,
    sample_positions,
)
from signmotion.core.tables import FALLBACK_SIGNS


def _motion(modifiers=(), start=(0.0, 0.0, 0.0), end=(1.0, 0.0, 0.0)):
    return HandMotion(start=start, end=end, modifiers=tuple(modifiers))


def test_every_table_entry_parses():
    entries = parse_fallback_signs(FALLBACK_SIGNS)
    assert len(entries) == len(FALLBACK_SIGNS)
    assert all(e.motion.duration_s > 0 for e in entries.values())


def test_modifier_registry_is_closed():
    assert set(MODIFIERS) == set(Modifier)


@pytest.mark.parametrize("flags, expected", [
    ({"fist": True, "pointing": True, "palm_up": True}, "fist"),
    ({"pointing": True, "palm_up": True}, "point"),
    ({"palm_up": True}, "open_palm"),
    ({"palmUp": True}, "open_palm"),
    ({"claw": True}, "relaxed"),
    ({}, "relaxed"),
])
def test_handshape_precedence(flags, expected):
    assert resolve_handshape(flags) == expected


def test_unknown_flags_are_ignored():
    motion = HandMotion.from_dict("X", {"start": [0, 0, 0], "end": [1, 1, 1],
                                        "claw": True, "y_shape": True, "tap": True, "wave": True})
    assert motion.modifiers == (Modifier.WAVE, Modifier.TAP)


def test_linear_path_without_modifiers():
    t = np.array([0.0, 0.5, 1.0])
    positions = sample_positions(_motion(), t)
    assert positions[:, 0] == pytest.approx([0.0, 0.5, 1.0])
    assert positions[:, 1] == pytest.approx([0.0, 0.0, 0.0])


def test_wave_adds_sine_on_x():
    t = np.array([0.125])
    x = sample_positions(_motion([Modifier.WAVE]), t)[0, 0]
    assert x == pytest.approx(0.125 + 0.05)


def test_circular_and_nod_stack_additively():
    t = np.array([0.25])
    pos = sample_positions(_motion([Modifier.CIRCULAR, Modifier.NOD]), t)[0]
    assert pos[0] == pytest.approx(0.25 + math.cos(math.pi / 2) * 0.03)
    assert pos[1] == pytest.approx(math.sin(math.pi / 2) * 0.03 + math.sin(math.pi) * 0.03)


def test_shake_frequency():
    t = np.array([1 / 12])
    x = sample_positions(_motion([Modifier.SHAKE]), t)[0, 0]
    assert x == pytest.approx(1 / 12 + 0.04)


def test_tap_dips_only_inside_window():
    t = np.array([0.4, 0.5, 0.6])
    z = sample_positions(_motion([Modifier.TAP]), t)[:, 2]
    assert z == pytest.approx([0.0, -0.02, 0.0])


def test_generate_hello_track():
    motion = parse_motion("HELLO", FALLBACK_SIGNS["HELLO"]["animation"])
    sign = generate("HELLO", motion)

    assert sign.source is SignSource.PROCEDURAL
    assert sign.fallback is True
    assert sign.duration_ms == pytest.approx(1500)
    # 1.5 s at 60/s -> 91 samples plus the trailing rest frame
    assert len(sign.keyframes) == 92
    assert sign.keyframes[0].timestamp_ms == 0.0
    assert sign.keyframes[-1].timestamp_ms == pytest.approx(1500)
    assert all(kf.left_hand is None for kf in sign.keyframes)


def test_trailing_frame_is_neutral():
    motion = parse_motion("HELP", FALLBACK_SIGNS["HELP"]["animation"])
    last = generate("HELP", motion).keyframes[-1]
    assert last.right_hand.position == config.NEUTRAL_RIGHT_HAND
    assert last.left_hand.position == config.NEUTRAL_LEFT_HAND
    assert last.face.expression == "neutral"


def test_face_only_at_schedule_points():
    motion = parse_motion("HELLO", FALLBACK_SIGNS["HELLO"]["animation"])
    faced = [(kf.timestamp_ms, kf.face.expression) for kf in generate("HELLO", motion).keyframes if kf.face]
    assert faced[0] == (0.0, "neutral")
    assert [ts for ts, expr in faced if expr == "smile"] == pytest.approx([100.0, 1400.0])
    assert faced[-1][1] == "neutral"
    assert len(faced) == 5


def test_short_sign_holds_expression_on_middle_sample():
    motion = MotionSpec(right_hand=_motion(), left_hand=None, expression="surprised", duration_s=0.125)
    sign = generate("BLINK", motion, sample_rate=32)
    faces = [kf.face.expression if kf.face else None for kf in sign.keyframes[:-1]]
    assert faces == ["neutral", None, "surprised", None, "neutral"]


def test_handshape_carried_on_every_sample():
    motion = parse_motion("YES", FALLBACK_SIGNS["YES"]["animation"])
    shapes = {kf.right_hand.handshape for kf in generate("YES", motion).keyframes[:-1]}
    assert shapes == {"fist"}


def test_parse_motion_rejects_non_positive_duration():
    with pytest.raises(CorruptIndexError):
        parse_motion("BAD", {"right_hand": {"start": [0, 0, 0], "end": [1, 1, 1]}, "duration": 0})
    with pytest.raises(CorruptIndexError):
        parse_motion("BAD", {"right_hand": {"start": [0, 0, 0]}, "duration": 1})
