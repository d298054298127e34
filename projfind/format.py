"""Terminal output formatting: one block per project root."""

from typing import List

import click

from .models import NodeEcosystem, ProjectProfile, RustEcosystem


def _name(text: str, color: bool) -> str:
    return click.style(text, bold=True) if color else text


def _git_line(profile: ProjectProfile, color: bool) -> str:
    git = profile.git
    if git is None:
        return f"  no {_name('Git', color)} found"
    worktree = "clean" if git.clean else "dirty"
    sync = "synced" if git.in_sync else "need sync"
    return f"  found {_name('Git', color)} with {worktree} worktree and {sync}"


def _ecosystem_line(profile: ProjectProfile, color: bool) -> str | None:
    eco = profile.ecosystem
    if eco is None:
        return None
    state = "installed" if eco.installed else "uninitialized"
    if isinstance(eco, NodeEcosystem):
        lockfile = "has" if eco.lockfile else "no"
        return f"  found {state} {_name('Node.js', color)} ({lockfile} lockfile)"
    if isinstance(eco, RustEcosystem):
        return f"  found {state} {_name('Rust', color)}"
    raise TypeError(f"Unknown ecosystem: {eco!r}")


def report_lines(profile: ProjectProfile, color: bool = False) -> List[str]:
    """Report lines for a profile, without the path header."""
    lines = [_git_line(profile, color)]
    eco_line = _ecosystem_line(profile, color)
    if eco_line is not None:
        lines.append(eco_line)
    return lines


def format_project(profile: ProjectProfile, color: bool = False) -> str:
    """Build the block printed for one project root: [path] then report lines."""
    path = click.style(profile.path, fg="green") if color else profile.path
    return "\n".join([f"[{path}]"] + report_lines(profile, color))
