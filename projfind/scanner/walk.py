"""Tree walker: depth-first search for project roots, pruning at each one."""

import logging
from pathlib import Path
from typing import Callable, Iterator

from ..config import DEFAULT_MARKERS, Markers
from ..models import ProjectProfile
from .probe import is_directory
from .project import examine

logger = logging.getLogger(__name__)

FileCallback = Callable[[Path], None]
ProjectCallback = Callable[[ProjectProfile], None]


class ScanError(OSError):
    """A directory could not be listed. Aborts the whole scan."""

    def __init__(self, path: str | Path, cause: OSError):
        super().__init__(f"cannot read directory {path}: {cause}")
        self.errno = cause.errno
        self.path = str(path)
        self.cause = cause


def ignore_file(path: Path) -> None:
    """Default per-file hook: plain files are not examined."""


def _children(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        logger.debug("Listing %s failed: %s", directory, e)
        raise ScanError(directory, e) from e


def iter_projects(
    directory: str | Path,
    on_file: FileCallback = ignore_file,
    markers: Markers = DEFAULT_MARKERS,
) -> Iterator[ProjectProfile]:
    """Yield a profile for every project root under directory, in pre-order.

    A directory that is not a directory (or does not exist) yields nothing.
    Descent stops at the first project on each branch, so nothing inside a
    project root (node_modules, nested repos) is visited. Raises ScanError
    when a directory cannot be listed; profiles yielded before that stand.
    """
    root = Path(directory)
    if not is_directory(root):
        logger.debug("Skipping %s: not a directory", root)
        return
    # entries still to visit, next one on top
    stack = [root]
    while stack:
        current = stack.pop()
        if not is_directory(current):
            on_file(current)
            continue
        profile = examine(current, markers)
        if profile.is_project:
            logger.debug("Project root at %s, not descending", current)
            yield profile
            continue
        logger.debug("Descending into %s", current)
        stack.extend(reversed(_children(current)))


def visit_dirs(
    directory: str | Path,
    on_project: ProjectCallback,
    on_file: FileCallback = ignore_file,
    markers: Markers = DEFAULT_MARKERS,
) -> int:
    """Walk directory, calling on_project for each project root. Returns the count."""
    count = 0
    for profile in iter_projects(directory, on_file, markers):
        on_project(profile)
        count += 1
    logger.debug("Found %d project(s) under %s", count, directory)
    return count
