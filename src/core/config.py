"""
core/config.py — Centralised path constants and environment defaults.

All other modules import paths and defaults from here rather than computing
them from __file__ or reading the environment themselves.

Usage::

    from core.config import BASE_URL, TEST_ATTRIBUTE, TIMEOUT_MS
"""

import os
from pathlib import Path

# ── Repository layout ──────────────────────────────────────────────────────────

SRC_DIR: Path = Path(__file__).parent.parent       # …/tulars-e2e/src/
REPO_ROOT: Path = SRC_DIR.parent                   # …/tulars-e2e/

# Elm module the application imports its data-cy attributes from
ELM_HANDLES_PATH: Path = Path(os.environ.get("ELM_HANDLES_PATH", REPO_ROOT / "app" / "CypressHandles.elm"))
ELM_MODULE_NAME: str = "CypressHandles"

# ── DOM attribute convention ──────────────────────────────────────────────────

# Every targetable element carries this attribute; the registry wraps tokens in it.
TEST_ATTRIBUTE: str = os.environ.get("TULARS_TEST_ATTRIBUTE", "data-cy")

# ── Browser defaults (overridable via env) ────────────────────────────────────

BASE_URL: str = os.environ.get("TULARS_BASE_URL", "http://localhost:8000")
TIMEOUT_MS: int = int(os.environ.get("TULARS_TIMEOUT_MS", "4000"))
POLL_INTERVAL_MS: int = int(os.environ.get("TULARS_POLL_INTERVAL_MS", "100"))
HEADLESS: bool = os.environ.get("TULARS_HEADLESS", "1") not in ("0", "false", "no")
VIEWPORT: dict[str, int] = {"width": 1280, "height": 900}
