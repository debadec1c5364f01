"""Workspace sources - load the host's workspace snapshot from a file.

Snapshot location priority:
1. CLI argument (--workspace)
2. WSLISTER_WORKSPACE environment variable
3. workspace: in config
4. Default: ~/.wslister/workspace.yml

Snapshot layout (YAML or JSON):

    projects:
      - name: Alpha
        open: true
      - Beta            # shorthand for an open project
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .config import ListerConfig
from .lister import InvalidWorkspaceReference, Project
from .log import logger

ENV_VAR = "WSLISTER_WORKSPACE"


def default_snapshot_path() -> Path:
    return Path.home() / ".wslister" / "workspace.yml"


def resolve_snapshot_path(
    cli_path: Optional[str] = None, config: Optional[ListerConfig] = None
) -> Path:
    """Resolve snapshot path with priority: CLI > env > config > default."""
    config_path = config.workspace if config is not None else None
    path_str = cli_path or os.environ.get(ENV_VAR) or config_path
    if path_str:
        return Path(path_str).expanduser().resolve()
    return default_snapshot_path()


def _parse_entry(index: int, entry: Any) -> Project:
    if isinstance(entry, str):
        entry = {"name": entry}
    if not isinstance(entry, dict):
        raise InvalidWorkspaceReference(
            f"Project entry {index} must be a mapping or a name, got {type(entry).__name__}"
        )

    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise InvalidWorkspaceReference(f"Project entry {index} has no name")

    is_open = entry.get("open", True)
    if not isinstance(is_open, bool):
        raise InvalidWorkspaceReference(
            f"Project {name!r}: open must be true or false, got {is_open!r}"
        )
    return Project(name=name, is_open=is_open)


def parse_snapshot(data: Any) -> list[Project]:
    """Turn parsed snapshot data into project records, in file order."""
    if data is None:
        raise InvalidWorkspaceReference("Workspace snapshot is empty")

    if isinstance(data, dict):
        if "projects" not in data:
            raise InvalidWorkspaceReference("Workspace snapshot has no 'projects' key")
        entries = data["projects"] or []
    else:
        entries = data

    if not isinstance(entries, list):
        raise InvalidWorkspaceReference("Workspace 'projects' must be a list")

    return [_parse_entry(i, entry) for i, entry in enumerate(entries)]


def load_snapshot(path: Path) -> list[Project]:
    """Read and parse a snapshot file."""
    path = Path(path)
    if not path.is_file():
        raise InvalidWorkspaceReference(f"Workspace snapshot not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidWorkspaceReference(f"Workspace snapshot {path} is not valid YAML: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise InvalidWorkspaceReference(f"Workspace snapshot {path} is unreadable: {e}") from e

    projects = parse_snapshot(data)
    logger.debug("workspace", f"Loaded {len(projects)} project(s)", path=path)
    return projects


class WorkspaceSource:
    """File-backed workspace accessor.

    Every call to projects() re-reads the file; the host owns the data.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @classmethod
    def from_config(
        cls, config: ListerConfig, cli_path: Optional[str] = None
    ) -> "WorkspaceSource":
        return cls(resolve_snapshot_path(cli_path, config))

    @property
    def path(self) -> Path:
        return self._path

    def projects(self) -> list[Project]:
        return load_snapshot(self._path)
