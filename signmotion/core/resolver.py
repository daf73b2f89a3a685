# ============================================================
# core/resolver.py - Gloss -> sign descriptor
#
# Tiered lookup, first match wins:
#   1. recorded video for (gloss, dialect, quality)
#   2. procedural table entry
#   3. fingerspelling (always succeeds)
# An opt-in verified-keyframe tier sits between 1 and 2.
# ============================================================

from __future__ import annotations

import logging
from collections import OrderedDict, namedtuple
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from signmotion import config
from . import procedural
from .db import SignDatabase
from .descriptors import ProceduralSign, SignDescriptor, SignSource, VideoSign
from .errors import InvalidGlossError
from .fingerspelling import fingerspell

logger = logging.getLogger(__name__)

CacheInfo = namedtuple("CacheInfo", ["hits", "misses", "maxsize", "currsize"])


def canonical_gloss(gloss) -> str:
    """Strip, collapse whitespace runs, upper-case. Empty -> InvalidGlossError."""
    if gloss is None:
        raise InvalidGlossError(gloss)
    canonical = " ".join(str(gloss).split()).upper()
    if not canonical:
        raise InvalidGlossError(gloss)
    return canonical


@dataclass(frozen=True)
class Availability:
    gloss: str
    has_video: bool
    has_procedural: bool
    has_verified: bool = False
    can_fingerspell: bool = True
    best_source: SignSource = SignSource.FINGERSPELLING

    def to_dict(self) -> dict:
        return {
            "gloss":           self.gloss,
            "has_video":       self.has_video,
            "has_procedural":  self.has_procedural,
            "has_verified":    self.has_verified,
            "can_fingerspell": self.can_fingerspell,
            "best_source":     self.best_source.value,
        }


@dataclass(frozen=True)
class SequenceResolution:
    dialect: str
    signs: Tuple[SignDescriptor, ...]
    stats: Dict[str, int] = field(default_factory=dict)


class SignResolver:
    """
    Resolves glosses against an injected ``SignDatabase``.

    Results are cached in an LRU keyed on (gloss, dialect, quality).
    Descriptors are immutable so cached values are shared as-is.
    """

    def __init__(
        self,
        database: Optional[SignDatabase] = None,
        cache_size: int = config.RESOLVER_CACHE_SIZE,
        sample_rate: int = config.SAMPLE_RATE,
        letter_duration_ms: float = config.LETTER_DURATION_MS,
        use_verified_keyframes: bool = False,
    ):
        self.db = database if database is not None else SignDatabase()
        self.cache_size = cache_size
        self.sample_rate = sample_rate
        self.letter_duration_ms = letter_duration_ms
        self.use_verified_keyframes = use_verified_keyframes

        self._cache: "OrderedDict[Tuple[str, str, str], SignDescriptor]" = OrderedDict()
        self._hits = 0
        self._misses = 0

    # ── Resolution ────────────────────────────────────────────

    def resolve(
        self,
        gloss: str,
        dialect: str = config.DEFAULT_DIALECT,
        quality: str = config.DEFAULT_QUALITY,
    ) -> SignDescriptor:
        key = (canonical_gloss(gloss), dialect, quality)

        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            self._hits += 1
            return cached

        self._misses += 1
        descriptor = self._resolve_uncached(*key)
        if self.cache_size > 0:
            self._cache[key] = descriptor
            if len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)

        logger.debug("Resolved %s (%s/%s) -> %s", key[0], dialect, quality, descriptor.source.value)
        return descriptor

    def _resolve_uncached(self, gloss: str, dialect: str, quality: str) -> SignDescriptor:
        video = self.db.video_entry(gloss, dialect)
        if video is not None:
            return VideoSign(
                gloss=gloss,
                url=video.url_for(quality),
                duration_ms=video.duration_ms,
                thumbnail_url=video.thumbnail,
            )

        if self.use_verified_keyframes:
            verified = self.db.verified_sign(gloss)
            if verified is not None:
                return ProceduralSign(
                    gloss=gloss,
                    duration_ms=verified.duration_ms,
                    keyframes=verified.keyframes,
                    description=verified.notes,
                    source=SignSource.VERIFIED,
                    fallback=True,
                )

        entry = self.db.procedural_entry(gloss)
        if entry is not None:
            return procedural.generate(
                gloss,
                entry.motion,
                sample_rate=self.sample_rate,
                description=entry.description,
                category=entry.category,
            )

        return fingerspell(gloss, self.letter_duration_ms, self.db.alphabet)

    def resolve_sequence(
        self,
        glosses: Iterable[str],
        dialect: str = config.DEFAULT_DIALECT,
        quality: str = config.DEFAULT_QUALITY,
    ) -> SequenceResolution:
        """Resolve every gloss and count how many came from each source."""
        signs = tuple(self.resolve(g, dialect, quality) for g in glosses)
        stats = {source.value: 0 for source in SignSource}
        for sign in signs:
            stats[sign.source.value] += 1
        stats["total"] = len(signs)
        return SequenceResolution(dialect=dialect, signs=signs, stats=stats)

    # ── Probes ────────────────────────────────────────────────

    def check_availability(self, gloss: str, dialect: str = config.DEFAULT_DIALECT) -> Availability:
        """Read-only pre-flight probe. Never touches the cache."""
        canonical = canonical_gloss(gloss)
        has_video = self.db.has_video(canonical, dialect)
        has_procedural = self.db.procedural_entry(canonical) is not None
        has_verified = self.db.verified_sign(canonical) is not None

        if has_video:
            best = SignSource.VIDEO
        elif has_verified and self.use_verified_keyframes:
            best = SignSource.VERIFIED
        elif has_procedural:
            best = SignSource.PROCEDURAL
        else:
            best = SignSource.FINGERSPELLING

        return Availability(
            gloss=canonical,
            has_video=has_video,
            has_procedural=has_procedural,
            has_verified=has_verified,
            best_source=best,
        )

    # ── Administration ────────────────────────────────────────

    def reload(self):
        """Re-read reference data and drop every cached descriptor."""
        self.db.reload()
        self.clear_cache()
        logger.info("Reference data reloaded, resolution cache cleared")

    def clear_cache(self):
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def cache_info(self) -> CacheInfo:
        return CacheInfo(self._hits, self._misses, self.cache_size, len(self._cache))
