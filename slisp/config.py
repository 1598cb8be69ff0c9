from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (slisp package directory)
_SLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _SLISP_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 20000


def get_prelude_root() -> Path:
    raw = os.environ.get('SLISP_PRELUDE_PATH', '').strip()
    p = Path(raw) if raw else _DEFAULT_PRELUDE_DIR
    # an existing file path stands for its directory
    return p.parent if p.is_file() else p


def get_log_level() -> str:
    return os.environ.get('SLISP_LOG_LEVEL', '').strip().upper() or _DEFAULT_LOG_LEVEL


def get_recursion_limit() -> int:
    raw = os.environ.get('SLISP_RECURSION_LIMIT', '').strip()
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 1000)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
