"""Project classifier: builds a ProjectProfile for a single directory."""

from pathlib import Path

from ..config import DEFAULT_MARKERS, Markers
from ..models import GitState, NodeEcosystem, ProjectProfile
from .probe import has_dir, has_file


def _examine_git(directory: Path, markers: Markers) -> GitState | None:
    if not has_dir(directory, markers.vcs_dir):
        return None
    # TODO: read worktree and upstream state via `git status --porcelain=v2 --branch`.
    return GitState(clean=True, in_sync=True)


def _examine_node(directory: Path, markers: Markers) -> NodeEcosystem | None:
    """Node.js fact; any of manifest, lockfile or node_modules triggers it."""
    has_manifest = has_file(directory, markers.node_manifest)
    has_lockfile = any(has_file(directory, name) for name in markers.node_lockfiles)
    installed = has_dir(directory, markers.node_install_dir)
    if not (has_manifest or has_lockfile or installed):
        return None
    return NodeEcosystem(installed=installed, lockfile=has_lockfile)


def examine(directory: str | Path, markers: Markers = DEFAULT_MARKERS) -> ProjectProfile:
    """Classify directory from the markers directly under it. Never raises."""
    directory = Path(directory)
    return ProjectProfile(
        path=str(directory),
        git=_examine_git(directory, markers),
        ecosystem=_examine_node(directory, markers),
    )
