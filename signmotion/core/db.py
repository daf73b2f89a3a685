# ============================================================
# core/db.py - Reference data provider
#
# Read-only tables consulted during resolution:
#   - video index      per-dialect recorded signs (JSON or Supabase)
#   - verified signs   authored reference keyframes
#   - procedural table FALLBACK_SIGNS
#   - alphabet         FINGERSPELLING
#
# Tables load lazily on first access and stay put until reload().
# A corrupt table is logged once and replaced by an empty one so
# fingerspelling always stays available.
# ============================================================

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from supabase import Client, create_client

from signmotion import config
from .errors import CorruptIndexError
from .poses import PoseFrame
from .procedural import MotionSpec, parse_motion
from .tables import FALLBACK_SIGNS, FINGERSPELLING

logger = logging.getLogger(__name__)

VIDEO_TABLE    = "sign_videos"
VERIFIED_TABLE = "verified_signs"


def get_client() -> Client:
    """Return an authenticated Supabase client."""
    return create_client(config.SUPABASE_URL, config.SUPABASE_KEY)


def _key(gloss: str) -> str:
    return " ".join(str(gloss).split()).upper()


# ──────────────────────────────────────────────────────────────
# 1. ENTRY TYPES
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class VideoEntry:
    gloss: str
    dialect: str
    video_path: Optional[str] = None
    variants: Dict[str, str] = field(default_factory=dict)
    thumbnail: Optional[str] = None
    duration_ms: float = config.DEFAULT_VIDEO_DURATION_MS
    source: Optional[str] = None
    category: Optional[str] = None

    def url_for(self, quality: str) -> str:
        return self.variants.get(quality) or self.video_path or next(iter(self.variants.values()))


@dataclass(frozen=True)
class VerifiedSign:
    gloss: str
    duration_ms: float
    keyframes: Tuple[PoseFrame, ...]
    notes: Optional[str] = None
    handshape: Optional[str] = None   # expected right-hand shape at keyframe 0


@dataclass(frozen=True)
class ProceduralEntry:
    gloss: str
    motion: MotionSpec
    description: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None


# ──────────────────────────────────────────────────────────────
# 2. PARSERS  (raise CorruptIndexError)
# ──────────────────────────────────────────────────────────────

_MALFORMED = (TypeError, ValueError, AttributeError)


def _mapping(value, table: str, key: str) -> dict:
    if not isinstance(value, dict):
        raise CorruptIndexError(table, key, f"expected a mapping, got {type(value).__name__}")
    return value


def _video_duration_ms(entry: dict) -> float:
    if entry.get("duration_ms") is not None:
        return float(entry["duration_ms"])
    if entry.get("duration") is not None:
        return float(entry["duration"]) * 1000.0
    return float(config.DEFAULT_VIDEO_DURATION_MS)


def _parse_video_entry(dialect: str, gloss: str, entry: dict) -> VideoEntry:
    where = f"{dialect}/{gloss}"
    _mapping(entry, "video_index", where)
    path = entry.get("videoPath") or entry.get("video_path")
    variants = dict(_mapping(entry.get("variants") or {}, "video_index", where))
    if not path and not variants:
        raise CorruptIndexError("video_index", where, "no video path or variants")
    duration_ms = _video_duration_ms(entry)
    if duration_ms <= 0:
        raise CorruptIndexError("video_index", where, f"non-positive duration {duration_ms:g}ms")
    key = _key(gloss)
    return VideoEntry(
        gloss=key,
        dialect=dialect.upper(),
        video_path=path,
        variants=variants,
        thumbnail=entry.get("thumbnail") or entry.get("thumbnail_url"),
        duration_ms=duration_ms,
        source=entry.get("source"),
        category=entry.get("category"),
    )


def parse_video_index(raw: dict) -> Tuple[Dict[str, Dict[str, VideoEntry]], dict]:
    """
    Parse ``{dialect: {gloss: entry}, "_meta": {...}}``.

    Returns
    -------
    (index, meta) where index is ``{DIALECT: {GLOSS: VideoEntry}}``.
    """
    index: Dict[str, Dict[str, VideoEntry]] = {}
    meta = {}
    for dialect, signs in _mapping(raw or {}, "video_index", "<root>").items():
        dialect = str(dialect)
        if dialect.startswith("_"):
            meta[dialect] = signs
            continue
        _mapping(signs, "video_index", dialect)
        table = index.setdefault(dialect.upper(), {})
        for gloss, entry in signs.items():
            gloss = str(gloss)
            if gloss.startswith("_"):
                continue
            try:
                parsed = _parse_video_entry(dialect, gloss, entry)
            except _MALFORMED as e:
                raise CorruptIndexError("video_index", f"{dialect}/{gloss}", f"malformed entry: {e}") from e
            table[parsed.gloss] = parsed
    return index, meta.get("_meta", meta)


def _parse_verified_entry(gloss: str, entry: dict) -> VerifiedSign:
    _mapping(entry, "verified_signs", gloss)
    keyframes = entry.get("keyframes") or []
    if not isinstance(keyframes, list) or not keyframes:
        raise CorruptIndexError("verified_signs", gloss, "no keyframes")
    duration = entry.get("duration_ms")
    if duration is None or float(duration) <= 0:
        raise CorruptIndexError("verified_signs", gloss, f"non-positive duration {duration!r}")

    frames = tuple(sorted((PoseFrame.from_dict(_mapping(kf, "verified_signs", gloss)) for kf in keyframes),
                          key=lambda f: f.timestamp_ms))
    handshape = entry.get("handshape")
    if handshape is None and frames[0].right_hand is not None:
        handshape = frames[0].right_hand.handshape

    key = _key(gloss)
    return VerifiedSign(
        gloss=key,
        duration_ms=float(duration),
        keyframes=frames,
        notes=entry.get("notes"),
        handshape=handshape,
    )


def parse_verified_signs(raw: dict) -> Dict[str, VerifiedSign]:
    """Parse ``{"signs": {gloss: entry}}`` or a bare gloss mapping."""
    raw = _mapping(raw or {}, "verified_signs", "<root>")
    signs = raw["signs"] if isinstance(raw.get("signs"), dict) else raw
    out: Dict[str, VerifiedSign] = {}
    for gloss, entry in signs.items():
        gloss = str(gloss)
        if gloss.startswith("_"):
            continue
        try:
            parsed = _parse_verified_entry(gloss, entry)
        except _MALFORMED as e:
            raise CorruptIndexError("verified_signs", gloss, f"malformed entry: {e}") from e
        out[parsed.gloss] = parsed
    return out


def parse_fallback_signs(table: dict) -> Dict[str, ProceduralEntry]:
    out: Dict[str, ProceduralEntry] = {}
    for gloss, entry in _mapping(table or {}, "FALLBACK_SIGNS", "<root>").items():
        key = _key(gloss)
        _mapping(entry, "FALLBACK_SIGNS", key)
        try:
            out[key] = ProceduralEntry(
                gloss=key,
                motion=parse_motion(key, entry.get("animation")),
                description=entry.get("description"),
                category=entry.get("category"),
                color=entry.get("color"),
            )
        except _MALFORMED as e:
            raise CorruptIndexError("FALLBACK_SIGNS", key, f"malformed entry: {e}") from e
    return out


# ──────────────────────────────────────────────────────────────
# 3. STORES  (raw tables in index shape)
# ──────────────────────────────────────────────────────────────

def _read_json(path: Path, table: str) -> dict:
    path = Path(path)
    if not path.exists():
        logger.warning("%s not found at %s, using an empty table", table, path)
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CorruptIndexError(table, str(path), f"invalid JSON: {e.msg}") from e


class JsonSignStore:
    """Index files on disk (``sign-index.json`` / ``verified-signs.json``)."""

    def __init__(self, index_path=None, verified_path=None):
        self.index_path = Path(index_path or config.SIGN_INDEX_PATH)
        self.verified_path = Path(verified_path or config.VERIFIED_SIGNS_PATH)

    def load_video_index(self) -> dict:
        return _read_json(self.index_path, "video_index")

    def load_verified_signs(self) -> dict:
        return _read_json(self.verified_path, "verified_signs")


class MemorySignStore:
    """Tables handed in directly. Used by tests and embedding callers."""

    def __init__(self, video_index: Optional[dict] = None, verified_signs: Optional[dict] = None):
        self.video_index = video_index or {}
        self.verified_signs = verified_signs or {}

    def load_video_index(self) -> dict:
        return self.video_index

    def load_verified_signs(self) -> dict:
        return self.verified_signs


class SupabaseSignStore:
    """
    Reads the ``sign_videos`` and ``verified_signs`` tables.

    Rows are paged 1000 at a time (the PostgREST default limit) and
    reshaped into the same structure as the JSON index files.
    """

    def __init__(self, client: Optional[Client] = None, page_size: int = config.SUPABASE_PAGE_SIZE):
        self._client = client
        self.page_size = page_size

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_client()
        return self._client

    def _fetch_all(self, table: str, columns: str) -> List[dict]:
        rows: List[dict] = []
        offset = 0
        while True:
            resp = (
                self.client.table(table)
                .select(columns)
                .range(offset, offset + self.page_size - 1)
                .execute()
            )
            page = resp.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                break
            offset += self.page_size
        return rows

    def load_video_index(self) -> dict:
        rows = self._fetch_all(
            VIDEO_TABLE,
            "dialect, gloss, quality, url, thumbnail_url, duration_ms, source, category",
        )
        index: Dict[str, dict] = {}
        for row in rows:
            entry = index.setdefault(row["dialect"], {}).setdefault(row["gloss"], {"variants": {}})
            entry["variants"][row["quality"]] = row["url"]
            entry.setdefault("videoPath", row["url"])
            for src, dst in (("thumbnail_url", "thumbnail"), ("duration_ms", "duration_ms"),
                             ("source", "source"), ("category", "category")):
                if row.get(src) is not None:
                    entry[dst] = row[src]
        logger.info("Fetched %d video rows from Supabase", len(rows))
        return index

    def load_verified_signs(self) -> dict:
        rows = self._fetch_all(VERIFIED_TABLE, "gloss, duration_ms, keyframes_json, notes")
        signs = {}
        for row in rows:
            keyframes = row.get("keyframes_json") or []
            if isinstance(keyframes, str):
                try:
                    keyframes = json.loads(keyframes)
                except json.JSONDecodeError as e:
                    raise CorruptIndexError("verified_signs", row["gloss"], f"invalid keyframes_json: {e.msg}") from e
            signs[row["gloss"]] = {
                "keyframes":   keyframes,
                "duration_ms": row.get("duration_ms"),
                "notes":       row.get("notes"),
            }
        logger.info("Fetched %d verified signs from Supabase", len(rows))
        return {"signs": signs}


# ──────────────────────────────────────────────────────────────
# 4. DATABASE
# ──────────────────────────────────────────────────────────────

class SignDatabase:
    """
    Injectable read-only provider for every reference table.

    Usage
    -----
    db = SignDatabase(JsonSignStore("data/sign-index.json"))
    db.video_entry("HELLO", "ASL")
    db.reload()          # administrative re-read
    """

    def __init__(self, store=None, fallback_signs: Optional[dict] = None, alphabet: Optional[dict] = None):
        self.store = store if store is not None else JsonSignStore()
        self._fallback_raw = FALLBACK_SIGNS if fallback_signs is None else fallback_signs
        self._alphabet = {k.upper(): v for k, v in (FINGERSPELLING if alphabet is None else alphabet).items()}

        self._videos: Dict[str, Dict[str, VideoEntry]] = {}
        self._video_meta: dict = {}
        self._verified: Dict[str, VerifiedSign] = {}
        self._procedural: Dict[str, ProceduralEntry] = {}
        self._loaded = False

    # ── Loading ───────────────────────────────────────────────

    def _load_table(self, name: str, loader, empty):
        try:
            return loader()
        except CorruptIndexError as e:
            logger.error("Corrupt %s, falling back to an empty table: %s", name, e)
            return empty

    def _load(self):
        self._videos, self._video_meta = self._load_table(
            "video index", lambda: parse_video_index(self.store.load_video_index()), ({}, {})
        )
        self._verified = self._load_table(
            "verified signs", lambda: parse_verified_signs(self.store.load_verified_signs()), {}
        )
        self._procedural = self._load_table(
            "procedural table", lambda: parse_fallback_signs(self._fallback_raw), {}
        )
        self._loaded = True
        logger.info(
            "Loaded %d videos across %d dialects, %d verified, %d procedural signs",
            sum(len(t) for t in self._videos.values()), len(self._videos),
            len(self._verified), len(self._procedural),
        )

    def _ensure_loaded(self):
        if not self._loaded:
            self._load()

    def reload(self):
        """Re-read every table from the store."""
        self._loaded = False
        self._load()

    # ── Lookups ───────────────────────────────────────────────

    def video_entry(self, gloss: str, dialect: str = config.DEFAULT_DIALECT) -> Optional[VideoEntry]:
        self._ensure_loaded()
        return self._videos.get(dialect.upper(), {}).get(_key(gloss))

    def has_video(self, gloss: str, dialect: str = config.DEFAULT_DIALECT) -> bool:
        return self.video_entry(gloss, dialect) is not None

    def verified_sign(self, gloss: str) -> Optional[VerifiedSign]:
        self._ensure_loaded()
        return self._verified.get(_key(gloss))

    def procedural_entry(self, gloss: str) -> Optional[ProceduralEntry]:
        """Case-insensitive; ``_`` and space are interchangeable."""
        self._ensure_loaded()
        key = _key(gloss)
        for candidate in (key, key.replace("_", " "), key.replace(" ", "_")):
            if candidate in self._procedural:
                return self._procedural[candidate]
        return None

    @property
    def alphabet(self) -> dict:
        return self._alphabet

    def letter(self, char: str) -> Optional[dict]:
        return self._alphabet.get(char.upper())

    # ── Catalogue ─────────────────────────────────────────────

    def dialects(self) -> List[str]:
        self._ensure_loaded()
        return sorted(self._videos)

    def available_signs(self, dialect: str = config.DEFAULT_DIALECT) -> List[str]:
        self._ensure_loaded()
        return sorted(self._videos.get(dialect.upper(), {}))

    def _category_map(self) -> Dict[str, set]:
        self._ensure_loaded()
        cats: Dict[str, set] = {}
        for entry in self._procedural.values():
            if entry.category:
                cats.setdefault(entry.category, set()).add(entry.gloss)
        for table in self._videos.values():
            for entry in table.values():
                if entry.category:
                    cats.setdefault(entry.category, set()).add(entry.gloss)
        return cats

    def categories(self) -> List[str]:
        return sorted(self._category_map())

    def signs_by_category(self, category: str) -> List[str]:
        return sorted(self._category_map().get(category, ()))

    def search_signs(self, keyword: str, dialect: str = config.DEFAULT_DIALECT, limit: int = 20) -> List[str]:
        self._ensure_loaded()
        needle = _key(keyword)
        if not needle:
            return []
        pool = set(self._videos.get(dialect.upper(), {})) | set(self._procedural)
        hits = sorted(g for g in pool if needle in g)
        # exact and prefix matches first
        hits.sort(key=lambda g: (g != needle, not g.startswith(needle)))
        return hits[:limit]

    def stats(self) -> dict:
        self._ensure_loaded()
        return {
            "dialects":   {d: len(t) for d, t in sorted(self._videos.items())},
            "videos":     sum(len(t) for t in self._videos.values()),
            "verified":   len(self._verified),
            "procedural": len(self._procedural),
            "letters":    len(self._alphabet),
            "categories": len(self.categories()),
            "meta":       self._video_meta,
        }
