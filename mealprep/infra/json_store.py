"""JSON file helpers shared by the repositories (tolerant reads, atomic writes)."""
import json
import logging
import os
import shutil
import tempfile
from functools import wraps
from pathlib import Path
from threading import RLock
from typing import List

logger = logging.getLogger(__name__)

# Serializes load-modify-save cycles across threads within one process.
STORE_LOCK = RLock()


def locked(func):
    """Hold STORE_LOCK for a whole load-modify-save cycle."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        with STORE_LOCK:
            return func(*args, **kwargs)
    return wrapper


class NotFoundError(LookupError):
    """Raised when an id does not resolve to a stored record."""


def load_rows(path: Path) -> List[dict]:
    """Read a JSON list from path; missing or invalid files read as empty."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Data file not found: {path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        return []
    if not isinstance(data, list):
        logger.error(f"Expected a JSON list in {path}, got {type(data).__name__}")
        return []
    return data


def save_rows(path: Path, rows: List[dict]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(rows, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
    finally:
        if os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                logger.warning(f"Could not remove temp file {tmp_path}")
