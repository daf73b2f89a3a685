# ============================================================
# tools/check_database.py - See what the reference data holds
# ============================================================

import argparse
import logging

from signmotion.core.db import JsonSignStore, SignDatabase, SupabaseSignStore


def report(db: SignDatabase) -> str:
    """Human-readable summary of every loaded table."""
    stats = db.stats()
    lines = ["", "=" * 60, "REFERENCE DATA CHECK", "=" * 60]

    lines.append("\n📹 VIDEO INDEX:")
    if not stats["videos"]:
        lines.append("  ⚠️  No recorded signs found!")
    else:
        lines.append(f"  Total videos: {stats['videos']}")
        for dialect, count in stats["dialects"].items():
            lines.append(f"  {dialect}: {count} signs")

    lines.append("\n✅ VERIFIED SIGNS:")
    if not stats["verified"]:
        lines.append("  ⚠️  No verified reference keyframes!")
    else:
        lines.append(f"  Total verified: {stats['verified']}")

    lines.append("\n🧩 PROCEDURAL FALLBACKS:")
    lines.append(f"  Total procedural: {stats['procedural']}")
    for category in db.categories():
        lines.append(f"    {category}: {len(db.signs_by_category(category)):3d}")

    lines.append(f"\n🔤 FINGERSPELLING: {stats['letters']} letters")
    lines += ["", "=" * 60, "✓ Check complete", "=" * 60, ""]
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Summarize the loaded sign reference data.")
    parser.add_argument("--index",    default=None, help="Path to sign-index.json")
    parser.add_argument("--verified", default=None, help="Path to verified-signs.json")
    parser.add_argument("--supabase", action="store_true", help="Read from Supabase instead of JSON files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    store = SupabaseSignStore() if args.supabase else JsonSignStore(args.index, args.verified)
    print(report(SignDatabase(store)))


if __name__ == "__main__":
    main()
