# ============================================================
# tools/ingest_dataset.py - Build sign-index.json from videos
#
# Expected layout:
#   <root>/<DIALECT>/<GLOSS>_<quality>.mp4
#   <root>/<DIALECT>/<GLOSS>.jpg          (optional thumbnail)
# ============================================================

import argparse
import json
import logging
import re
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

from tqdm import tqdm

from signmotion import config
from signmotion.core.db import VIDEO_TABLE, get_client

# Batch settings to avoid overwhelming Supabase
BATCH_SIZE  = 20
BATCH_PAUSE = 1.0   # seconds
RETRIES     = 3

VIDEO_EXTS = {".mp4", ".mov", ".avi", ".webm", ".mkv"}
THUMB_EXTS = {".jpg", ".jpeg", ".png"}

_QUALITY_RE = re.compile(r"_(\d+p)$", re.IGNORECASE)


def parse_video_name(filename: str, default_quality: str = config.DEFAULT_QUALITY):
    """
    ``hello_720p.mp4`` -> ("HELLO", "720p").

    Strips a ``sign_`` prefix and a ``_v2`` style version suffix;
    hyphens become underscores.
    """
    stem = Path(filename).stem
    quality = default_quality
    m = _QUALITY_RE.search(stem)
    if m:
        quality = m.group(1).lower()
        stem = stem[:m.start()]
    stem = re.sub(r"^sign_", "", stem, flags=re.IGNORECASE)
    stem = re.sub(r"_v\d+$", "", stem, flags=re.IGNORECASE)
    gloss = re.sub(r"[_-]", "_", stem).upper().strip()
    return gloss, quality


def scan_dialect(folder: Path, default_quality: str = config.DEFAULT_QUALITY) -> dict:
    """One dialect folder -> ``{GLOSS: entry}`` in sign-index shape."""
    files = sorted(f for f in folder.iterdir() if f.is_file())
    thumbs = {
        parse_video_name(f.name)[0]: f.as_posix()
        for f in files if f.suffix.lower() in THUMB_EXTS
    }

    signs = {}
    for f in tqdm(files, desc=f"  [{folder.name:>4}]", leave=False):
        if f.suffix.lower() not in VIDEO_EXTS:
            continue
        gloss, quality = parse_video_name(f.name, default_quality)
        if not gloss:
            continue
        entry = signs.setdefault(gloss, {"variants": {}, "source": "dataset"})
        entry["variants"][quality] = f.as_posix()
        if gloss in thumbs:
            entry["thumbnail"] = thumbs[gloss]

    for entry in signs.values():
        variants = entry["variants"]
        entry["videoPath"] = variants.get(default_quality) or variants[sorted(variants)[0]]
    return signs


def build_index(root: Path, default_quality: str = config.DEFAULT_QUALITY) -> dict:
    index = {}
    for folder in sorted(d for d in root.iterdir() if d.is_dir()):
        signs = scan_dialect(folder, default_quality)
        if signs:
            index[folder.name.upper()] = signs

    index["_meta"] = {
        "generatedAt": datetime.now(timezone.utc).isoformat(),
        "totalSigns":  sum(len(v) for k, v in index.items() if not k.startswith("_")),
        "dialects":    {k: len(v) for k, v in index.items() if not k.startswith("_")},
    }
    return index


def index_to_rows(index: dict) -> list:
    """Flatten an index into ``sign_videos`` rows (one per quality)."""
    rows = []
    for dialect, signs in index.items():
        if dialect.startswith("_"):
            continue
        for gloss, entry in signs.items():
            for quality, url in entry["variants"].items():
                rows.append({
                    "dialect":       dialect,
                    "gloss":         gloss,
                    "quality":       quality,
                    "url":           url,
                    "thumbnail_url": entry.get("thumbnail"),
                    "source":        entry.get("source"),
                    "category":      entry.get("category"),
                })
    return rows


def push_rows(client, rows: list):
    """Upsert rows into Supabase in small batches with retry."""
    pushed = 0
    batches = range(0, len(rows), BATCH_SIZE)
    for start in tqdm(batches, desc="  [supabase]"):
        batch = rows[start:start + BATCH_SIZE]
        for attempt in range(RETRIES):
            try:
                client.table(VIDEO_TABLE).upsert(batch).execute()
                pushed += len(batch)
                break
            except Exception as e:
                if attempt < RETRIES - 1:
                    time.sleep(2 ** attempt)
                else:
                    print(f"  [WARN] Batch at row {start} failed after {RETRIES} attempts: {e}")
        time.sleep(BATCH_PAUSE)
    return pushed


def ingest_dataset(dataset_path: str, output: str, dry_run: bool = False,
                   supabase: bool = False, default_quality: str = config.DEFAULT_QUALITY):
    """Main ingestion flow."""
    root = Path(dataset_path).resolve()
    if not root.exists():
        print(f"[ERROR] Dataset path not found: {root}")
        sys.exit(1)

    print(f"\n{'='*55}")
    print(f"  Indexing dataset from: {root}")
    print(f"  Dry run: {dry_run}")
    print(f"{'='*55}\n")

    index = build_index(root, default_quality)
    meta = index["_meta"]
    if not meta["totalSigns"]:
        print(f"[ERROR] No videos found under {root}")
        print("        Make sure the structure is:  root/ASL/HELLO_720p.mp4")
        sys.exit(1)

    for dialect, count in meta["dialects"].items():
        print(f"  [{dialect}]: {count} signs")

    if dry_run:
        print("\n  ↑ This was a DRY RUN - nothing was written.\n"
              "  Re-run without --dry-run to commit.\n")
        return index

    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(index, f, indent=2)
    print(f"\n  ✓ Index saved to: {out}")

    if supabase:
        rows = index_to_rows(index)
        pushed = push_rows(get_client(), rows)
        print(f"  ✓ Supabase: {pushed}/{len(rows)} rows upserted")

    print(f"\n{'='*55}")
    print(f"  COMPLETE  -  {meta['totalSigns']} signs")
    print(f"{'='*55}\n")
    return index


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Index a processed sign video dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  signmotion-ingest --path ./dataset/processed
  signmotion-ingest --path ./dataset/processed --dry-run
  signmotion-ingest --path ./dataset/processed --supabase
        """
    )
    parser.add_argument("--path",     required=True, help="Root folder of the dataset")
    parser.add_argument("--output",   default=str(config.SIGN_INDEX_PATH), help="Where to write sign-index.json")
    parser.add_argument("--quality",  default=config.DEFAULT_QUALITY, help="Quality used for videoPath")
    parser.add_argument("--dry-run",  action="store_true", help="Scan without writing anything")
    parser.add_argument("--supabase", action="store_true", help="Also upsert rows into Supabase")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    ingest_dataset(args.path, args.output, dry_run=args.dry_run,
                   supabase=args.supabase, default_quality=args.quality)


if __name__ == "__main__":
    main()
