"""Marker names that identify a project root."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Markers:
    """File and directory names looked up directly under a candidate directory."""

    vcs_dir: str = ".git"
    node_manifest: str = "package.json"
    node_lockfiles: tuple[str, ...] = ("yarn.lock", "package-lock.json")
    node_install_dir: str = "node_modules"


DEFAULT_MARKERS = Markers()
