"""Structured profile for one scanned directory."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class GitState:
    """Version-control fact for a directory holding a .git directory."""

    # Placeholders: not read from the repository yet.
    clean: bool = True
    in_sync: bool = True


@dataclass(frozen=True)
class NodeEcosystem:
    installed: bool  # node_modules/ present
    lockfile: bool  # yarn.lock or package-lock.json present


@dataclass(frozen=True)
class RustEcosystem:
    """Not produced by the classifier yet; kept so reports can render it."""

    installed: bool


Ecosystem = Union[NodeEcosystem, RustEcosystem]


@dataclass(frozen=True)
class ProjectProfile:
    """Classification of a single directory."""

    path: str
    git: Optional[GitState] = None
    ecosystem: Optional[Ecosystem] = None

    @property
    def is_project(self) -> bool:
        return self.git is not None or self.ecosystem is not None
