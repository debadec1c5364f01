"""Project lister - filters a workspace snapshot down to open project names.

The workspace is owned by the host. It is read once, in order, and never
mutated or retained.
"""

from dataclasses import dataclass
from typing import Iterable


class WorkspaceError(Exception):
    """Base error for workspace handling."""

    pass


class InvalidWorkspaceReference(WorkspaceError):
    """The host did not supply a usable workspace."""

    pass


@dataclass(frozen=True)
class Project:
    """Snapshot of a project as observed at call time."""

    name: str
    is_open: bool = True

    def __post_init__(self):
        if not self.name:
            raise ValueError("Project name is required")
        if not isinstance(self.is_open, bool):
            raise TypeError(f"Project {self.name!r}: is_open must be a bool")


def list_open_project_names(workspace: Iterable[Project]) -> list[str]:
    """Return the names of open projects, in workspace order.

    Args:
        workspace: Ordered project records (may be empty)

    Returns:
        Names of the records with is_open set

    Raises:
        InvalidWorkspaceReference: workspace is None, not iterable, or
            holds something that is not a project record
    """
    if workspace is None:
        raise InvalidWorkspaceReference("No workspace supplied")

    try:
        records = iter(workspace)
    except TypeError:
        raise InvalidWorkspaceReference(
            f"Workspace is not a sequence: {type(workspace).__name__}"
        ) from None

    names = []
    for index, project in enumerate(records):
        try:
            is_open = project.is_open
            name = project.name
        except AttributeError:
            raise InvalidWorkspaceReference(
                f"Workspace entry {index} is not a project: {project!r}"
            ) from None
        if is_open:
            names.append(name)
    return names
