"""Centralised configuration loaded from environment variables and dotenv."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parents[2]

OUTPUT_DIR: Path = Path(os.getenv("TOPICPULSE_OUTPUT_DIR", str(PROJECT_ROOT / "out")))

# ── Taxonomy ───────────────────────────────────────────────────────────────
# Empty means the built-in ten-topic table
TAXONOMY_PATH: str = os.getenv("TOPICPULSE_TAXONOMY", "")

# ── Report sizes ───────────────────────────────────────────────────────────
KEYWORD_LIMIT: int = int(os.getenv("TOPICPULSE_KEYWORD_LIMIT", "20"))
TOP_POSTS: int = int(os.getenv("TOPICPULSE_TOP_POSTS", "10"))

# ── Logging ────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("TOPICPULSE_LOG_LEVEL", "INFO").upper()


def export_path(stem: str = "posts") -> Path:
    """Default location for an exported CSV named after *stem*."""
    return OUTPUT_DIR / f"{stem}.csv"
