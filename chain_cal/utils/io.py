"""
Safe I/O operations with atomic writes and cooperative file locking.
"""

import contextlib
import errno
import json
import logging
import os
import tempfile
import time
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

try:  # fcntl is only available on POSIX platforms
    import fcntl  # type: ignore
except ImportError:  # pragma: no cover - Windows fallback
    fcntl = None  # type: ignore

from ..core.exceptions import InputError
from .date import parse_date


DEFAULT_LOCK_TIMEOUT = 8.0  # seconds
LOCK_SLEEP_INTERVAL = 0.05  # seconds
UNMARK_PREFIX = "!"
COMMENT_PREFIX = "#"

logger = logging.getLogger(__name__)


def _lock_file_path(path: Path) -> Path:
    """Return the companion lock file path for the target file."""
    return path.parent / f"{path.name}.lock"


@contextlib.contextmanager
def _file_lock(target_path: Path, exclusive: bool, timeout: float = DEFAULT_LOCK_TIMEOUT) -> Iterator[None]:
    """Acquire a cooperative file lock around the target path.

    Uses POSIX advisory locking via fcntl when available; otherwise acts as a no-op.
    """
    if fcntl is None:
        yield
        return

    lock_path = _lock_file_path(target_path)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    lock_type = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
    deadline = time.monotonic() + timeout

    with open(lock_path, "a") as lock_file:
        while True:
            try:
                fcntl.flock(lock_file.fileno(), lock_type | fcntl.LOCK_NB)
                break
            except OSError as exc:  # pragma: no cover - depends on timing
                if exc.errno not in (errno.EACCES, errno.EAGAIN):
                    raise
                if time.monotonic() >= deadline:
                    raise TimeoutError(f"Timed out waiting for lock on {target_path}") from exc
                time.sleep(LOCK_SLEEP_INTERVAL)

        try:
            yield
        finally:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)


def safe_read_json(file_path: str, default: Optional[Dict] = None, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> Dict[str, Any]:
    """
    Read a JSON object from file under a shared lock.

    Missing files, lock timeouts, undecodable content and documents whose
    top level is not an object all yield ``default``; every case except a
    missing file is logged as a warning.

    Args:
        file_path: Path to JSON file
        default: Value returned when the file cannot be used, ``{}`` if omitted

    Returns:
        Parsed JSON object or default value
    """
    if default is None:
        default = {}

    path_obj = Path(os.path.expanduser(file_path))
    if not path_obj.exists():
        return default

    try:
        with _file_lock(path_obj, exclusive=False, timeout=lock_timeout):
            with path_obj.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
    except TimeoutError as exc:
        logger.warning("Timed out waiting to read %s: %s", path_obj, exc)
        return default
    except (ValueError, OSError) as exc:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        logger.warning("Ignoring unreadable JSON %s: %s", path_obj, exc)
        return default

    if not isinstance(data, dict):
        logger.warning("Ignoring JSON %s: top level is not an object", path_obj)
        return default

    return data


def atomic_write(file_path: str, content: str, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> bool:
    """
    Atomically write content to file.

    Args:
        file_path: Path to write to
        content: Content to write
    
    Returns:
        True if successful, False otherwise
    """
    path_obj = Path(os.path.expanduser(file_path))
    path_obj.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with _file_lock(path_obj, exclusive=True, timeout=lock_timeout):
            with tempfile.NamedTemporaryFile(
                mode='w',
                dir=str(path_obj.parent),
                prefix='.tmp_',
                delete=False,
                encoding='utf-8'
            ) as tmp_file:
                tmp_file.write(content)
                tmp_path = Path(tmp_file.name)

            os.replace(str(tmp_path), str(path_obj))
        return True

    except (TimeoutError, OSError) as exc:
        logger.error("Error writing to %s: %s", file_path, exc)
    finally:
        if tmp_path and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass

    return False


def safe_write_json(file_path: str, data: Dict[str, Any], indent: int = 2, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> bool:
    """
    Safely write JSON to file with atomic write.

    Args:
        file_path: Path to write to
        data: Data to write
        indent: JSON indentation level
    
    Returns:
        True if successful, False otherwise
    """
    content = json.dumps(data, indent=indent, ensure_ascii=False, sort_keys=True)
    return atomic_write(file_path, content + "\n", lock_timeout=lock_timeout)


def read_marks(file_path: str) -> Tuple[List[date], List[date]]:
    """
    Read a marks file.

    One ISO date per line. Blank lines and lines starting with ``#`` are
    skipped; a line starting with ``!`` names a day to unmark.

    Args:
        file_path: Path to the marks file

    Returns:
        Tuple of (days to mark, days to unmark) in file order

    Raises:
        InputError: If the file is missing, unreadable or has a bad line
    """
    path_obj = Path(os.path.expanduser(file_path))

    try:
        with path_obj.open('r', encoding='utf-8') as handle:
            lines = handle.readlines()
    except FileNotFoundError as exc:
        raise InputError(f"Marks file not found: {path_obj}") from exc
    except UnicodeDecodeError as exc:
        raise InputError(f"Marks file {path_obj} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise InputError(f"Could not read marks file {path_obj}: {exc}") from exc

    marks: List[date] = []
    unmarks: List[date] = []

    for line_number, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        target = marks
        if line.startswith(UNMARK_PREFIX):
            target = unmarks
            line = line[len(UNMARK_PREFIX):].strip()

        parsed = parse_date(line)
        if parsed is None:
            raise InputError(f"{path_obj}:{line_number}: not a date: {raw.strip()!r}")
        target.append(parsed)

    logger.debug("Read %d marks and %d unmarks from %s", len(marks), len(unmarks), path_obj)
    return marks, unmarks
