# ============================================================
# core/fingerspelling.py - Letter-by-letter fallback
# ============================================================

from __future__ import annotations

from typing import Iterable, List, Optional

from signmotion import config
from .descriptors import FingerspellingSign, LetterSpec
from .errors import InvalidGlossError
from .poses import NEUTRAL_FACE, HandPose, PoseFrame
from .tables import FINGERSPELLING

UNKNOWN_HANDSHAPE = "unknown"


def expand_fingerspelling(
    gloss: str,
    letter_duration_ms: float = config.LETTER_DURATION_MS,
    alphabet: Optional[dict] = None,
) -> List[LetterSpec]:
    """
    Split a gloss into timed letters.

    Whitespace is dropped, hyphens are kept and spelled like any other
    character. Characters outside the alphabet get an ``unknown``
    handshape instead of failing.
    """
    if gloss is None:
        raise InvalidGlossError(gloss)
    chars = "".join(str(gloss).split()).upper()
    if not chars:
        raise InvalidGlossError(gloss)

    alphabet = FINGERSPELLING if alphabet is None else alphabet
    letters = []
    for i, ch in enumerate(chars):
        entry = alphabet.get(ch)
        letters.append(LetterSpec(
            letter=ch,
            index=i,
            handshape=entry["handshape"] if entry else UNKNOWN_HANDSHAPE,
            description=entry["description"] if entry else f"Letter {ch}",
            start_time_ms=float(i * letter_duration_ms),
            duration_ms=float(letter_duration_ms),
        ))
    return letters


def fingerspell(
    gloss: str,
    letter_duration_ms: float = config.LETTER_DURATION_MS,
    alphabet: Optional[dict] = None,
) -> FingerspellingSign:
    letters = expand_fingerspelling(gloss, letter_duration_ms, alphabet)
    return FingerspellingSign(gloss=" ".join(str(gloss).split()).upper(), letters=tuple(letters))


def fingerspelling_keyframes(letters: Iterable[LetterSpec]) -> List[PoseFrame]:
    """Right-hand track: the handshape holds for each letter's whole window."""
    frames = []
    for ls in letters:
        for ts in (ls.start_time_ms, ls.end_time_ms):
            frames.append(PoseFrame(
                timestamp_ms=ts,
                right_hand=HandPose(
                    position=config.FINGERSPELLING_POSITION,
                    rotation=(0.0, 0.0, 0.0),
                    handshape=ls.handshape,
                    palm_orientation="forward",
                ),
                face=NEUTRAL_FACE,
            ))
    return frames
