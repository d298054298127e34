"""Filesystem probe: marker lookups one level below a directory.

Every failure to stat counts as "absent": a permission-denied marker must not
abort a scan.
"""

import errno
import logging
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

_MISSING = (errno.ENOENT, errno.ENOTDIR)


def _mode(path: Path) -> int | None:
    """st_mode of path (symlinks followed), or None if it cannot be stat'ed."""
    try:
        return path.stat().st_mode
    except OSError as e:
        if e.errno not in _MISSING:
            logger.debug("Treating %s as absent: %s", path, e)
        return None
    except ValueError as e:  # embedded NUL byte
        logger.debug("Treating %s as absent: %s", path, e)
        return None


def is_directory(path: str | Path) -> bool:
    """True if path exists and is a directory."""
    mode = _mode(Path(path))
    return mode is not None and stat.S_ISDIR(mode)


def has_dir(base: str | Path, name: str) -> bool:
    """True if base/name exists and is a directory."""
    return is_directory(Path(base) / name)


def has_file(base: str | Path, name: str) -> bool:
    """True if base/name exists and is a regular file."""
    mode = _mode(Path(base) / name)
    return mode is not None and stat.S_ISREG(mode)
