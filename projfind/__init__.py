"""projfind: find project roots in deeply nested development directories."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("projfind")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
