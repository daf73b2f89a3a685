"""Core modules for sign resolution, timelines and attempt scoring."""

from .errors import SignMotionError, InvalidGlossError, CorruptIndexError
from .poses import (
    HandPose, HeadPose, TorsoPose, FacePose, PoseFrame,
    lerp, lerp_vec, ease_in_out, interpolate_frames, neutral_frame,
)
from .descriptors import (
    SignSource, DescriptorKind, LetterSpec,
    VideoSign, ProceduralSign, FingerspellingSign, SignDescriptor,
)
from .db import SignDatabase, JsonSignStore, MemorySignStore, SupabaseSignStore, get_client
from .procedural import Modifier, HandMotion, MotionSpec, parse_motion, generate
from .fingerspelling import expand_fingerspelling, fingerspell, fingerspelling_keyframes
from .resolver import SignResolver, Availability, SequenceResolution, canonical_gloss
from .timeline import AnimationTrack, Timeline, TimelineAssembler, TrackKind, assemble, scrub
from .recognition import SignValidator, ValidationResult, ValidationReason, cosine_similarity, flatten_keyframe

__all__ = [
    "SignMotionError", "InvalidGlossError", "CorruptIndexError",
    "HandPose", "HeadPose", "TorsoPose", "FacePose", "PoseFrame",
    "lerp", "lerp_vec", "ease_in_out", "interpolate_frames", "neutral_frame",
    "SignSource", "DescriptorKind", "LetterSpec",
    "VideoSign", "ProceduralSign", "FingerspellingSign", "SignDescriptor",
    "SignDatabase", "JsonSignStore", "MemorySignStore", "SupabaseSignStore", "get_client",
    "Modifier", "HandMotion", "MotionSpec", "parse_motion", "generate",
    "expand_fingerspelling", "fingerspell", "fingerspelling_keyframes",
    "SignResolver", "Availability", "SequenceResolution", "canonical_gloss",
    "AnimationTrack", "Timeline", "TimelineAssembler", "TrackKind", "assemble", "scrub",
    "SignValidator", "ValidationResult", "ValidationReason", "cosine_similarity", "flatten_keyframe",
]
