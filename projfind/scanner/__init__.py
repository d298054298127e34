"""Scanner: classifies directories and walks trees for project roots."""

from .project import examine
from .walk import ScanError, ignore_file, iter_projects, visit_dirs

__all__ = ["examine", "iter_projects", "visit_dirs", "ignore_file", "ScanError"]
