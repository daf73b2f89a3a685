# ============================================================
# core/procedural.py - Procedural animation generator
#
# Turns a compact motion description (start/end positions per
# hand, modifier flags, expression, duration) into a dense
# keyframe track sampled at a fixed rate.
# ============================================================

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from signmotion import config
from .descriptors import ProceduralSign, SignSource
from .errors import CorruptIndexError
from .poses import NEUTRAL_FACE, FacePose, HandPose, PoseFrame, Vec, neutral_frame


# ──────────────────────────────────────────────────────────────
# 1. MOTION MODIFIERS
# ──────────────────────────────────────────────────────────────

class Modifier(str, Enum):
    # declaration order is the order perturbations are applied
    WAVE     = "wave"
    CIRCULAR = "circular"
    NOD      = "nod"
    SHAKE    = "shake"
    TAP      = "tap"


def _wave(t: np.ndarray) -> np.ndarray:
    d = np.zeros((len(t), 3))
    d[:, 0] = np.sin(t * 4 * np.pi) * 0.05
    return d


def _circular(t: np.ndarray) -> np.ndarray:
    d = np.zeros((len(t), 3))
    d[:, 0] = np.cos(t * 2 * np.pi) * 0.03
    d[:, 1] = np.sin(t * 2 * np.pi) * 0.03
    return d


def _nod(t: np.ndarray) -> np.ndarray:
    d = np.zeros((len(t), 3))
    d[:, 1] = np.sin(t * 4 * np.pi) * 0.03
    return d


def _shake(t: np.ndarray) -> np.ndarray:
    d = np.zeros((len(t), 3))
    d[:, 0] = np.sin(t * 6 * np.pi) * 0.04
    return d


def _tap(t: np.ndarray) -> np.ndarray:
    d = np.zeros((len(t), 3))
    d[(t > 0.4) & (t < 0.6), 2] = -0.02
    return d


MODIFIERS: Dict[Modifier, Callable[[np.ndarray], np.ndarray]] = {
    Modifier.WAVE:     _wave,
    Modifier.CIRCULAR: _circular,
    Modifier.NOD:      _nod,
    Modifier.SHAKE:    _shake,
    Modifier.TAP:      _tap,
}


def resolve_handshape(flags: dict) -> str:
    """fist > pointing > palm up > relaxed."""
    if flags.get("fist"):
        return "fist"
    if flags.get("pointing"):
        return "point"
    if flags.get("palm_up") or flags.get("palmUp"):
        return "open_palm"
    return "relaxed"


# ──────────────────────────────────────────────────────────────
# 2. MOTION DESCRIPTION
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class HandMotion:
    start: Vec
    end: Vec
    modifiers: Tuple[Modifier, ...] = ()
    handshape: str = "relaxed"

    @classmethod
    def from_dict(cls, gloss: str, d: dict) -> "HandMotion":
        if d.get("start") is None or d.get("end") is None:
            raise CorruptIndexError("FALLBACK_SIGNS", gloss, "hand motion needs start and end")
        return cls(
            start=tuple(float(v) for v in d["start"]),
            end=tuple(float(v) for v in d["end"]),
            modifiers=tuple(m for m in Modifier if d.get(m.value)),
            handshape=resolve_handshape(d),
        )


@dataclass(frozen=True)
class MotionSpec:
    right_hand: Optional[HandMotion]
    left_hand: Optional[HandMotion]
    expression: str
    duration_s: float

    @property
    def duration_ms(self) -> float:
        return self.duration_s * 1000.0


def parse_motion(gloss: str, animation: dict) -> MotionSpec:
    """Parse an ``animation`` block from the procedural table."""
    if not animation:
        raise CorruptIndexError("FALLBACK_SIGNS", gloss, "missing animation")
    duration = animation.get("duration")
    if duration is None or float(duration) <= 0:
        raise CorruptIndexError("FALLBACK_SIGNS", gloss, f"non-positive duration {duration!r}")

    right = animation.get("right_hand", animation.get("rightHand"))
    left = animation.get("left_hand", animation.get("leftHand"))
    return MotionSpec(
        right_hand=HandMotion.from_dict(gloss, right) if right else None,
        left_hand=HandMotion.from_dict(gloss, left) if left else None,
        expression=animation.get("expression") or "neutral",
        duration_s=float(duration),
    )


# ──────────────────────────────────────────────────────────────
# 3. SAMPLING
# ──────────────────────────────────────────────────────────────

def sample_positions(motion: HandMotion, t: np.ndarray) -> np.ndarray:
    """Linear start->end path plus every modifier's offset. Returns (n, 3)."""
    start = np.asarray(motion.start, dtype=float)
    end = np.asarray(motion.end, dtype=float)
    positions = start + (end - start) * t[:, None]
    for modifier in motion.modifiers:
        positions = positions + MODIFIERS[modifier](t)
    return positions


def _face_schedule(
    timestamps: np.ndarray,
    duration_ms: float,
    expression: str,
    lead_ms: float,
) -> Dict[int, FacePose]:
    """Frame index -> face. Unlisted frames carry no face."""
    last = len(timestamps) - 1
    schedule = {0: NEUTRAL_FACE, last: NEUTRAL_FACE}
    target = FacePose(expression=expression)

    if duration_ms < 2 * lead_ms:
        hold = [last // 2]
    else:
        first = int(np.searchsorted(timestamps, lead_ms, side="left"))
        final = int(np.searchsorted(timestamps, duration_ms - lead_ms, side="right")) - 1
        hold = [first, final]

    for i in hold:
        if 0 < i < last:
            schedule[i] = target
    return schedule


def _hand_frames(motion: Optional[HandMotion], t: np.ndarray):
    if motion is None:
        return [None] * len(t)
    positions = sample_positions(motion, t)
    return [
        HandPose(position=tuple(float(v) for v in row), handshape=motion.handshape)
        for row in positions
    ]


def generate(
    gloss: str,
    motion: MotionSpec,
    sample_rate: int = config.SAMPLE_RATE,
    description: Optional[str] = None,
    category: Optional[str] = None,
    lead_ms: float = config.EXPRESSION_LEAD_MS,
) -> ProceduralSign:
    """
    Expand a motion description into a ``ProceduralSign``.

    Parameters
    ----------
    gloss       : canonical gloss the track is for
    motion      : parsed motion description
    sample_rate : samples per second

    Returns
    -------
    ProceduralSign whose keyframes run 0 .. duration_ms, ending with
    a neutral rest frame for every animated hand.
    """
    duration_ms = motion.duration_ms
    total = max(1, math.ceil(motion.duration_s * sample_rate))
    steps = np.arange(total + 1)
    t = steps / total
    timestamps = steps * duration_ms / total

    rights = _hand_frames(motion.right_hand, t)
    lefts = _hand_frames(motion.left_hand, t)
    faces = _face_schedule(timestamps, duration_ms, motion.expression, lead_ms)

    keyframes = [
        PoseFrame(
            timestamp_ms=float(timestamps[i]),
            right_hand=rights[i],
            left_hand=lefts[i],
            face=faces.get(i),
        )
        for i in range(total + 1)
    ]
    keyframes.append(neutral_frame(
        duration_ms,
        right=motion.right_hand is not None,
        left=motion.left_hand is not None,
    ))

    return ProceduralSign(
        gloss=gloss,
        duration_ms=duration_ms,
        keyframes=tuple(keyframes),
        description=description,
        category=category,
        source=SignSource.PROCEDURAL,
        fallback=True,
    )
