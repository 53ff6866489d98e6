from __future__ import annotations

import os
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent
BACKEND_DIR = ROOT_DIR / "backend"

if BACKEND_DIR.exists():
    backend_path = str(BACKEND_DIR)
    if backend_path not in sys.path:
        sys.path.insert(0, backend_path)


def _ensure_test_env() -> None:
    # Keep tests away from a developer's real storage file and .env overrides.
    os.environ.setdefault("ENVIRONMENT", "development")
    os.environ.setdefault("LOCAL_STORAGE_BACKEND", "memory")
    os.environ.setdefault("I18N_STATIC_DIR", str(ROOT_DIR / "backend" / "tests" / "_no_static_dir"))


_ensure_test_env()
