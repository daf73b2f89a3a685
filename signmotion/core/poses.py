# ============================================================
# core/poses.py  -  Pose/keyframe primitives
#
# This file owns:
#   - immutable pose types (hand, head, torso, face, frame)
#   - vector interpolation and easing
#   - wire (dict) <-> pose conversion
# ============================================================

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from signmotion import config

Vec = Tuple[float, ...]


# ──────────────────────────────────────────────────────────────
# 1. INTERPOLATION
# ──────────────────────────────────────────────────────────────

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_vec(a: Optional[Sequence[float]], b: Optional[Sequence[float]], t: float) -> Optional[Vec]:
    """Component-wise lerp. A missing side yields the other side unchanged."""
    if a is None or b is None:
        return _vec(a if b is None else b)
    if len(a) != len(b):
        raise ValueError(f"cannot blend vectors of length {len(a)} and {len(b)}")
    return tuple(x + (y - x) * t for x, y in zip(a, b))


def ease_in_out(t: float) -> float:
    """Quadratic ease-in-out on [0, 1]."""
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


def _discrete(a, b, t: float):
    # named states do not blend: switch to the target past the midpoint
    return b if t > 0.5 else a


def _vec(value, size: Optional[int] = None) -> Optional[Vec]:
    if value is None:
        return None
    vec = tuple(float(v) for v in value)
    if size is not None and len(vec) != size:
        raise ValueError(f"expected {size} components, got {len(vec)}")
    return vec


def _compact(d: dict) -> dict:
    return {k: v for k, v in d.items() if v is not None}


# ──────────────────────────────────────────────────────────────
# 2. POSE TYPES
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class HandPose:
    position: Optional[Vec] = None
    rotation: Optional[Vec] = None
    handshape: Optional[str] = None
    palm_orientation: Optional[str] = None
    landmarks: Optional[Tuple[Vec, ...]] = None   # per-finger points, validator only

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> Optional["HandPose"]:
        if d is None:
            return None
        landmarks = d.get("landmarks")
        return cls(
            position=_vec(d.get("position"), 3),
            rotation=_vec(d.get("rotation"), 3),
            handshape=d.get("handshape"),
            palm_orientation=d.get("palm_orientation", d.get("palmOrientation")),
            landmarks=tuple(_vec(p, 3) for p in landmarks) if landmarks else None,
        )

    def to_dict(self) -> dict:
        return _compact({
            "position":         list(self.position) if self.position else None,
            "rotation":         list(self.rotation) if self.rotation else None,
            "handshape":        self.handshape,
            "palm_orientation": self.palm_orientation,
            "landmarks":        [list(p) for p in self.landmarks] if self.landmarks else None,
        })


@dataclass(frozen=True)
class HeadPose:
    position: Optional[Vec] = None
    rotation: Optional[Vec] = None

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> Optional["HeadPose"]:
        if d is None:
            return None
        return cls(position=_vec(d.get("position"), 3), rotation=_vec(d.get("rotation"), 3))

    def to_dict(self) -> dict:
        return _compact({
            "position": list(self.position) if self.position else None,
            "rotation": list(self.rotation) if self.rotation else None,
        })


@dataclass(frozen=True)
class TorsoPose:
    lean: Optional[Vec] = None    # (x, y)

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> Optional["TorsoPose"]:
        if d is None:
            return None
        return cls(lean=_vec(d.get("lean"), 2))

    def to_dict(self) -> dict:
        return _compact({"lean": list(self.lean) if self.lean else None})


@dataclass(frozen=True)
class FacePose:
    expression: Optional[str] = None
    eyebrows: Optional[str] = None
    eyes: Optional[str] = None
    mouth: Optional[str] = None
    head_nod: Optional[str] = None

    @classmethod
    def from_dict(cls, d) -> Optional["FacePose"]:
        if d is None:
            return None
        if isinstance(d, str):
            return cls(expression=d)
        return cls(
            expression=d.get("expression"),
            eyebrows=d.get("eyebrows"),
            eyes=d.get("eyes"),
            mouth=d.get("mouth"),
            head_nod=d.get("head_nod", d.get("headNod")),
        )

    def to_dict(self) -> dict:
        return _compact({
            "expression": self.expression,
            "eyebrows":   self.eyebrows,
            "eyes":       self.eyes,
            "mouth":      self.mouth,
            "head_nod":   self.head_nod,
        })


@dataclass(frozen=True)
class PoseFrame:
    """
    Point-in-time pose snapshot.

    Every body part is optional. ``None`` means "unspecified": a renderer
    applying this frame must leave that part as it is.
    """
    timestamp_ms: float = 0.0
    right_hand: Optional[HandPose] = None
    left_hand: Optional[HandPose] = None
    head: Optional[HeadPose] = None
    torso: Optional[TorsoPose] = None
    face: Optional[FacePose] = None

    @property
    def is_empty(self) -> bool:
        return not any((self.right_hand, self.left_hand, self.head, self.torso, self.face))

    def at(self, timestamp_ms: float) -> "PoseFrame":
        return replace(self, timestamp_ms=float(timestamp_ms))

    @classmethod
    def from_dict(cls, d: dict) -> "PoseFrame":
        ts = d.get("timestamp_ms", d.get("time_ms", 0.0))
        return cls(
            timestamp_ms=float(ts),
            right_hand=HandPose.from_dict(d.get("right_hand", d.get("rightHand"))),
            left_hand=HandPose.from_dict(d.get("left_hand", d.get("leftHand"))),
            head=HeadPose.from_dict(d.get("head")),
            torso=TorsoPose.from_dict(d.get("torso")),
            face=FacePose.from_dict(d.get("face")),
        )

    def to_dict(self) -> dict:
        out = {"timestamp_ms": self.timestamp_ms}
        for name in ("right_hand", "left_hand", "head", "torso", "face"):
            part = getattr(self, name)
            if part is not None:
                out[name] = part.to_dict()
        return out


def as_frame(value) -> PoseFrame:
    """Accept a PoseFrame or its wire dict."""
    if isinstance(value, PoseFrame):
        return value
    return PoseFrame.from_dict(value)


# ──────────────────────────────────────────────────────────────
# 3. FRAME INTERPOLATION
# ──────────────────────────────────────────────────────────────

def _interp_hand(a: Optional[HandPose], b: Optional[HandPose], t: float) -> Optional[HandPose]:
    if a is None or b is None:
        return _discrete(a, b, t)
    return HandPose(
        position=lerp_vec(a.position, b.position, t),
        rotation=lerp_vec(a.rotation, b.rotation, t),
        handshape=_discrete(a.handshape, b.handshape, t),
        palm_orientation=_discrete(a.palm_orientation, b.palm_orientation, t),
        landmarks=_discrete(a.landmarks, b.landmarks, t),
    )


def _interp_head(a: Optional[HeadPose], b: Optional[HeadPose], t: float) -> Optional[HeadPose]:
    if a is None or b is None:
        return _discrete(a, b, t)
    return HeadPose(
        position=lerp_vec(a.position, b.position, t),
        rotation=lerp_vec(a.rotation, b.rotation, t),
    )


def _interp_torso(a: Optional[TorsoPose], b: Optional[TorsoPose], t: float) -> Optional[TorsoPose]:
    if a is None or b is None:
        return _discrete(a, b, t)
    return TorsoPose(lean=lerp_vec(a.lean, b.lean, t))


def interpolate_frames(
    a: PoseFrame,
    b: PoseFrame,
    t: float,
    timestamp_ms: Optional[float] = None,
) -> PoseFrame:
    """
    Blend two frames at ``t`` in [0, 1].

    Positions, rotations and lean interpolate linearly. Handshape, palm
    orientation and the face are discrete: ``b``'s value once t > 0.5.
    """
    if timestamp_ms is None:
        timestamp_ms = lerp(a.timestamp_ms, b.timestamp_ms, t)
    return PoseFrame(
        timestamp_ms=timestamp_ms,
        right_hand=_interp_hand(a.right_hand, b.right_hand, t),
        left_hand=_interp_hand(a.left_hand, b.left_hand, t),
        head=_interp_head(a.head, b.head, t),
        torso=_interp_torso(a.torso, b.torso, t),
        face=_discrete(a.face, b.face, t),
    )


# ── Rest pose ─────────────────────────────────────────────────

NEUTRAL_FACE = FacePose(expression="neutral")


def neutral_frame(timestamp_ms: float, right: bool = True, left: bool = True) -> PoseFrame:
    """Rest pose for the requested hands, with a neutral face."""
    zero = (0.0, 0.0, 0.0)
    return PoseFrame(
        timestamp_ms=float(timestamp_ms),
        right_hand=HandPose(config.NEUTRAL_RIGHT_HAND, zero, "relaxed") if right else None,
        left_hand=HandPose(config.NEUTRAL_LEFT_HAND, zero, "relaxed") if left else None,
        face=NEUTRAL_FACE,
    )
