# ============================================================
# signmotion/config.py - Engine constants and storage settings
# ============================================================

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Storage ──────────────────────────────────────────────────
DATA_DIR            = Path(os.getenv("SIGNMOTION_DATA_DIR", "dataset/metadata"))
SIGN_INDEX_PATH     = Path(os.getenv("SIGNMOTION_SIGN_INDEX", DATA_DIR / "sign-index.json"))
VERIFIED_SIGNS_PATH = Path(os.getenv("SIGNMOTION_VERIFIED_SIGNS", DATA_DIR / "verified-signs.json"))

SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
SUPABASE_PAGE_SIZE = 1000   # PostgREST default row limit

# ── Resolution ───────────────────────────────────────────────
DEFAULT_DIALECT     = "ASL"
DEFAULT_QUALITY     = "720p"
RESOLVER_CACHE_SIZE = 256

# ── Timing (ms unless noted) ─────────────────────────────────
SAMPLE_RATE               = 60     # procedural samples per second
LETTER_DURATION_MS        = 800
TRANSITION_MS             = 150
TRANSITION_STEPS          = 3      # minimum interpolation steps
EXPRESSION_LEAD_MS        = 100
DEFAULT_VIDEO_DURATION_MS = 2000

# ── Validation ───────────────────────────────────────────────
VALIDATION_THRESHOLD = 70     # score out of 100
HANDSHAPE_BONUS      = 0.3

# ── Rest pose ────────────────────────────────────────────────
NEUTRAL_RIGHT_HAND     = (0.3, 0.0, 0.3)
NEUTRAL_LEFT_HAND      = (-0.3, 0.0, 0.3)
FINGERSPELLING_POSITION = (0.35, 0.3, 0.15)
