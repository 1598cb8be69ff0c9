from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from slisp.config import get_prelude_root

if TYPE_CHECKING:
    from slisp.interpreter import Interpreter

PRELUDE_FILE = 'std.lisp'


def prelude_path() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def load_prelude(itp: Interpreter) -> None:
    """Evaluate the standard prelude into `itp`; raises FileNotFoundError if missing."""
    path = prelude_path()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{path}' (check SLISP_PRELUDE_PATH)")
    logger.debug("loading prelude from {}", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'))
