# ============================================================
# core/descriptors.py - Resolved sign descriptors
#
# A descriptor is what the resolver hands back for one gloss:
#   VideoSign           pre-recorded media, opaque beyond duration
#   ProceduralSign      fully expanded keyframe track
#   FingerspellingSign  one LetterSpec per character
# Each variant carries a ``kind`` discriminant plus ``source`` and
# ``fallback`` so callers can show a best-effort indicator.
# ============================================================

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from .poses import PoseFrame


class SignSource(str, Enum):
    VERIFIED       = "verified"
    PROCEDURAL     = "procedural"
    FINGERSPELLING = "fingerspelling"
    VIDEO          = "video"


class DescriptorKind(str, Enum):
    VIDEO          = "video"
    PROCEDURAL     = "procedural"
    FINGERSPELLING = "fingerspelling"


@dataclass(frozen=True)
class LetterSpec:
    letter: str
    index: int
    handshape: str
    description: str
    start_time_ms: float
    duration_ms: float

    @property
    def end_time_ms(self) -> float:
        return self.start_time_ms + self.duration_ms

    def to_dict(self) -> dict:
        return {
            "letter":        self.letter,
            "index":         self.index,
            "handshape":     self.handshape,
            "description":   self.description,
            "start_time_ms": self.start_time_ms,
            "duration_ms":   self.duration_ms,
        }


@dataclass(frozen=True)
class VideoSign:
    gloss: str
    url: str
    duration_ms: float
    thumbnail_url: Optional[str] = None
    source: SignSource = SignSource.VIDEO
    fallback: bool = False
    kind: DescriptorKind = field(default=DescriptorKind.VIDEO, init=False)

    def to_dict(self) -> dict:
        return {
            "kind":          self.kind.value,
            "gloss":         self.gloss,
            "source":        self.source.value,
            "fallback":      self.fallback,
            "url":           self.url,
            "duration_ms":   self.duration_ms,
            "thumbnail_url": self.thumbnail_url,
        }


@dataclass(frozen=True)
class ProceduralSign:
    gloss: str
    duration_ms: float
    keyframes: Tuple[PoseFrame, ...]
    description: Optional[str] = None
    category: Optional[str] = None
    source: SignSource = SignSource.PROCEDURAL
    fallback: bool = True
    kind: DescriptorKind = field(default=DescriptorKind.PROCEDURAL, init=False)

    def to_dict(self) -> dict:
        return {
            "kind":        self.kind.value,
            "gloss":       self.gloss,
            "source":      self.source.value,
            "fallback":    self.fallback,
            "duration_ms": self.duration_ms,
            "description": self.description,
            "category":    self.category,
            "keyframes":   [kf.to_dict() for kf in self.keyframes],
        }


@dataclass(frozen=True)
class FingerspellingSign:
    gloss: str
    letters: Tuple[LetterSpec, ...]
    source: SignSource = SignSource.FINGERSPELLING
    fallback: bool = True
    kind: DescriptorKind = field(default=DescriptorKind.FINGERSPELLING, init=False)

    @property
    def duration_ms(self) -> float:
        if not self.letters:
            return 0.0
        return self.letters[-1].end_time_ms

    def to_dict(self) -> dict:
        return {
            "kind":        self.kind.value,
            "gloss":       self.gloss,
            "source":      self.source.value,
            "fallback":    self.fallback,
            "duration_ms": self.duration_ms,
            "letters":     [ls.to_dict() for ls in self.letters],
        }


SignDescriptor = Union[VideoSign, ProceduralSign, FingerspellingSign]
