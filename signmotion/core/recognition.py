# ============================================================
# core/recognition.py  -  Attempt scoring against references
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from signmotion import config
from .db import SignDatabase
from .poses import PoseFrame, as_frame

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────
# 1. FEATURES
# ──────────────────────────────────────────────────────────────

def flatten_keyframe(frame) -> np.ndarray:
    """
    Keyframe -> 1-D float vector.

    Order: right position, left position, right landmarks, left
    landmarks. Missing parts are skipped, so two frames with different
    parts present give vectors of different lengths.
    """
    frame = as_frame(frame)
    parts = []
    for hand in (frame.right_hand, frame.left_hand):
        if hand is not None and hand.position:
            parts.extend(hand.position)
    for hand in (frame.right_hand, frame.left_hand):
        if hand is not None and hand.landmarks:
            for point in hand.landmarks:
                parts.extend(point)
    return np.asarray(parts, dtype=np.float64)


def cosine_similarity(v1: np.ndarray, v2: np.ndarray) -> float:
    v1, v2 = np.asarray(v1, dtype=np.float64), np.asarray(v2, dtype=np.float64)
    if v1.shape != v2.shape:
        return 0.0
    n1, n2 = np.linalg.norm(v1), np.linalg.norm(v2)
    if n1 < 1e-9 or n2 < 1e-9:
        return 0.0
    return float(np.dot(v1, v2) / (n1 * n2))


def pose_similarity(a, b) -> float:
    """Cosine similarity clamped into [0, 1]."""
    return min(1.0, max(0.0, cosine_similarity(a, b)))


# ──────────────────────────────────────────────────────────────
# 2. VALIDATION
# ──────────────────────────────────────────────────────────────

class ValidationReason(str, Enum):
    PASSED       = "passed"
    LOW_SCORE    = "low_score"
    NO_REFERENCE = "no_reference"
    NO_KEYFRAMES = "no_keyframes"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    score: int                               # 0-100
    reason: ValidationReason
    message: str
    suggestions: Tuple[str, ...] = ()
    handshape_match: bool = False
    first_similarity: Optional[float] = None
    last_similarity: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "valid":            self.valid,
            "score":            self.score,
            "reason":           self.reason.value,
            "message":          self.message,
            "suggestions":      list(self.suggestions),
            "handshape_match":  self.handshape_match,
            "first_similarity": self.first_similarity,
            "last_similarity":  self.last_similarity,
        }


class SignValidator:
    """
    Scores a captured attempt against the verified reference.

    Compares first-vs-first and last-vs-last keyframes, plus a fixed
    bonus when the opening right-hand handshape matches exactly.
    """

    def __init__(
        self,
        database: Optional[SignDatabase] = None,
        threshold: float = config.VALIDATION_THRESHOLD / 100.0,
        handshape_bonus: float = config.HANDSHAPE_BONUS,
    ):
        self.db = database if database is not None else SignDatabase()
        self.threshold = threshold
        self.handshape_bonus = handshape_bonus

    def validate(self, gloss: str, captured_keyframes: Sequence) -> ValidationResult:
        reference = self.db.verified_sign(gloss)
        if reference is None:
            return ValidationResult(
                valid=False,
                score=0,
                reason=ValidationReason.NO_REFERENCE,
                message=f"No verified reference for sign: {gloss}",
            )

        captured: List[PoseFrame] = [as_frame(kf) for kf in captured_keyframes or ()]
        if not captured:
            return ValidationResult(
                valid=False,
                score=0,
                reason=ValidationReason.NO_KEYFRAMES,
                message="Captured attempt has no keyframes",
            )

        total, comparisons = 0.0, 0.0
        first_sim = self._compare(reference.keyframes[0], captured[0])
        last_sim = self._compare(reference.keyframes[-1], captured[-1])
        for sim in (first_sim, last_sim):
            if sim is not None:
                total += sim
                comparisons += 1

        expected = reference.handshape
        attempted = captured[0].right_hand.handshape if captured[0].right_hand else None
        handshape_match = expected is not None and expected == attempted
        if handshape_match:
            total += self.handshape_bonus
            comparisons += self.handshape_bonus

        avg = total / comparisons if comparisons > 0 else 0.0
        score = int(round(avg * 100))
        passed = avg >= self.threshold

        suggestions: Tuple[str, ...] = ()
        if not passed:
            suggestions = tuple(s for s in (
                f"Expected handshape: {expected}" if expected else None,
                f"Reference duration: {reference.duration_ms:g}ms",
                reference.notes,
            ) if s)

        logger.debug("Validated %s: score=%d match=%s", gloss, score, handshape_match)
        return ValidationResult(
            valid=passed,
            score=score,
            reason=ValidationReason.PASSED if passed else ValidationReason.LOW_SCORE,
            message=(
                f"Sign validated with {score}% confidence" if passed
                else f"Sign accuracy below threshold ({score}% < {self.threshold * 100:g}%)"
            ),
            suggestions=suggestions,
            handshape_match=handshape_match,
            first_similarity=first_sim,
            last_similarity=last_sim,
        )

    @staticmethod
    def _compare(reference: PoseFrame, attempt: PoseFrame) -> Optional[float]:
        v_ref, v_try = flatten_keyframe(reference), flatten_keyframe(attempt)
        if v_ref.size == 0 or v_try.size == 0:
            return None
        return pose_similarity(v_ref, v_try)
