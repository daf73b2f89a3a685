# ============================================================
# core/timeline.py - Sequence assembly and scrubbing
#
# This file owns:
#   - AnimationTrack / Timeline
#   - descriptor -> track normalization
#   - eased _TRANSITION_ tracks between adjacent pose tracks
#   - scrub(): time -> interpolated pose, once per render tick
# ============================================================

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

from signmotion import config
from .descriptors import FingerspellingSign, ProceduralSign, SignDescriptor, SignSource, VideoSign
from .fingerspelling import fingerspelling_keyframes
from .poses import PoseFrame, ease_in_out, interpolate_frames
from .resolver import SignResolver

logger = logging.getLogger(__name__)

TRANSITION_GLOSS = "_TRANSITION_"


class TrackKind(str, Enum):
    VIDEO          = "video"
    PROCEDURAL     = "procedural"
    FINGERSPELLING = "fingerspelling"
    TRANSITION     = "transition"


# ──────────────────────────────────────────────────────────────
# 1. TRACKS
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AnimationTrack:
    """
    One sign placed on the global timeline.

    Keyframe timestamps are relative to ``start_ms``. Video tracks hold
    only an empty start/end pair: the renderer plays ``media_url``.
    """
    gloss: str
    kind: TrackKind
    start_ms: float
    end_ms: float
    keyframes: Tuple[PoseFrame, ...]
    source: Optional[SignSource] = None
    fallback: bool = False
    media_url: Optional[str] = None
    _times: Tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_times", tuple(kf.timestamp_ms for kf in self.keyframes))

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms

    @property
    def is_video(self) -> bool:
        return self.kind is TrackKind.VIDEO

    @property
    def is_transition(self) -> bool:
        return self.kind is TrackKind.TRANSITION

    def placed(self, start_ms: float) -> "AnimationTrack":
        return replace(self, start_ms=start_ms, end_ms=start_ms + self.duration_ms)

    def pose_at(self, local_ms: float, timestamp_ms: Optional[float] = None) -> PoseFrame:
        """Interpolated pose at a track-relative time. Holds at both ends."""
        ts = local_ms if timestamp_ms is None else timestamp_ms
        if not self.keyframes:
            return PoseFrame(timestamp_ms=ts)

        i = bisect_right(self._times, local_ms)
        if i == 0:
            return self.keyframes[0].at(ts)
        if i >= len(self.keyframes):
            return self.keyframes[-1].at(ts)

        a, b = self.keyframes[i - 1], self.keyframes[i]
        span = b.timestamp_ms - a.timestamp_ms
        u = (local_ms - a.timestamp_ms) / span if span > 0 else 1.0
        return interpolate_frames(a, b, u, timestamp_ms=ts)

    def to_dict(self) -> dict:
        return {
            "gloss":         self.gloss,
            "kind":          self.kind.value,
            "start_ms":      self.start_ms,
            "end_ms":        self.end_ms,
            "source":        self.source.value if self.source else None,
            "fallback":      self.fallback,
            "media_url":     self.media_url,
            "is_transition": self.is_transition,
            "frames":        [kf.to_dict() for kf in self.keyframes],
        }


def track_from_descriptor(descriptor: SignDescriptor, start_ms: float = 0.0) -> AnimationTrack:
    if isinstance(descriptor, VideoSign):
        kind = TrackKind.VIDEO
        keyframes = (PoseFrame(0.0), PoseFrame(descriptor.duration_ms))
        media_url = descriptor.url
    elif isinstance(descriptor, ProceduralSign):
        kind = TrackKind.PROCEDURAL
        keyframes = tuple(descriptor.keyframes)
        media_url = None
    elif isinstance(descriptor, FingerspellingSign):
        kind = TrackKind.FINGERSPELLING
        keyframes = tuple(fingerspelling_keyframes(descriptor.letters))
        media_url = None
    else:
        raise TypeError(f"Unknown descriptor type: {type(descriptor).__name__}")

    return AnimationTrack(
        gloss=descriptor.gloss,
        kind=kind,
        start_ms=start_ms,
        end_ms=start_ms + descriptor.duration_ms,
        keyframes=keyframes,
        source=descriptor.source,
        fallback=descriptor.fallback,
        media_url=media_url,
    )


def transition_track(
    a: AnimationTrack,
    b: AnimationTrack,
    start_ms: float,
    duration_ms: float = config.TRANSITION_MS,
    steps: int = config.TRANSITION_STEPS,
) -> AnimationTrack:
    """
    Eased bridge from the last pose of ``a`` to the first pose of ``b``.

    Easing is baked into the keyframes, so scrubbing stays linear. The
    face snaps to ``b``'s opening face for the whole window.
    """
    steps = max(3, steps)
    src, dst = a.keyframes[-1], b.keyframes[0]
    frames = []
    for i in range(steps + 1):
        u = i / steps
        frame = interpolate_frames(src, dst, ease_in_out(u), timestamp_ms=u * duration_ms)
        frames.append(replace(frame, face=dst.face))

    return AnimationTrack(
        gloss=TRANSITION_GLOSS,
        kind=TrackKind.TRANSITION,
        start_ms=start_ms,
        end_ms=start_ms + duration_ms,
        keyframes=tuple(frames),
    )


# ──────────────────────────────────────────────────────────────
# 2. TIMELINE
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Timeline:
    tracks: Tuple[AnimationTrack, ...] = ()
    _starts: Tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_starts", tuple(t.start_ms for t in self.tracks))

    @property
    def total_duration_ms(self) -> float:
        return self.tracks[-1].end_ms if self.tracks else 0.0

    def _clamp(self, time_ms: float) -> float:
        return min(max(time_ms, 0.0), self.total_duration_ms)

    def track_at(self, time_ms: float) -> Optional[AnimationTrack]:
        """Active track. On a shared boundary the later track wins."""
        if not self.tracks:
            return None
        i = bisect_right(self._starts, self._clamp(time_ms)) - 1
        return self.tracks[max(i, 0)]

    def scrub(self, time_ms: float) -> PoseFrame:
        return scrub(self, time_ms)

    def to_dict(self) -> dict:
        return {
            "total_duration_ms": self.total_duration_ms,
            "signs": [t.to_dict() for t in self.tracks],
        }


def scrub(timeline: Timeline, time_ms: float) -> PoseFrame:
    """
    Pose at ``time_ms`` on the global timeline.

    Out-of-range times clamp to [0, total]. Video tracks yield an empty
    pose since the renderer is playing media there.
    """
    if not timeline.tracks:
        return PoseFrame(timestamp_ms=0.0)
    t = timeline._clamp(time_ms)
    track = timeline.track_at(t)
    return track.pose_at(t - track.start_ms, timestamp_ms=t)


# ──────────────────────────────────────────────────────────────
# 3. ASSEMBLY
# ──────────────────────────────────────────────────────────────

class TimelineAssembler:
    """
    Usage
    -----
    assembler = TimelineAssembler(SignResolver(db))
    timeline  = assembler.assemble(["HELLO", "GOODBYE"])
    pose      = timeline.scrub(1200)
    """

    def __init__(
        self,
        resolver: Optional[SignResolver] = None,
        transition_ms: float = config.TRANSITION_MS,
        transition_steps: int = config.TRANSITION_STEPS,
    ):
        self.resolver = resolver if resolver is not None else SignResolver()
        self.transition_ms = transition_ms
        self.transition_steps = transition_steps

    def assemble(
        self,
        gloss_sequence: Iterable[str],
        dialect: str = config.DEFAULT_DIALECT,
        quality: str = config.DEFAULT_QUALITY,
    ) -> Timeline:
        tracks = []
        cursor = 0.0
        for gloss in gloss_sequence:
            track = track_from_descriptor(self.resolver.resolve(gloss, dialect, quality))

            prev = tracks[-1] if tracks else None
            if (prev is not None and self.transition_ms > 0
                    and not prev.is_video and not track.is_video
                    and prev.keyframes and track.keyframes):
                bridge = transition_track(prev, track, cursor, self.transition_ms, self.transition_steps)
                tracks.append(bridge)
                cursor = bridge.end_ms

            track = track.placed(cursor)
            tracks.append(track)
            cursor = track.end_ms

        timeline = Timeline(tuple(tracks))
        logger.debug("Assembled %d tracks, %.0f ms", len(tracks), timeline.total_duration_ms)
        return timeline


def assemble(
    gloss_sequence: Iterable[str],
    dialect: str = config.DEFAULT_DIALECT,
    quality: str = config.DEFAULT_QUALITY,
    resolver: Optional[SignResolver] = None,
) -> Timeline:
    return TimelineAssembler(resolver).assemble(gloss_sequence, dialect, quality)
