"""wslister - list the open projects of a host-supplied workspace."""

from .lister import (
    InvalidWorkspaceReference,
    Project,
    WorkspaceError,
    list_open_project_names,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidWorkspaceReference",
    "Project",
    "WorkspaceError",
    "list_open_project_names",
]
