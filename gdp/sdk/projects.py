"""Document project management.

A project is a Drive folder whose documents and sub-folders make up one
piece of writing. The folders a user works with are remembered in a local
YAML registry; the registry is refreshed against Drive so projects trashed
outside the application disappear from it.
"""

import yaml
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional, List, Dict, Any

from .config import get_config_value, get_config_file_path
from .drive.folders import create_folder
from .drive.files import get_item_metadata
from .drive.tree import TreeNode, map_folder
from .drive.validators import validate_item_id
from .exceptions import RegistryError

logger = logging.getLogger(__name__)

PROJECTS_FILE_NAME = "projects.yaml"


def get_projects_file_path() -> Path:
    """Get the registry path, respecting the projects.file config value."""
    configured = get_config_value("projects.file")
    if configured:
        return Path(configured).expanduser()
    return get_config_file_path().parent / PROJECTS_FILE_NAME


class ProjectRegistry:
    """
    Tracked projects stored as a YAML list, oldest first.

    Each entry holds:
        - project_id: Drive folder ID of the project
        - title: display title
        - tracked_at: ISO timestamp of when it was (re)tracked
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else get_projects_file_path()

    def _load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error loading project registry {self.path}: {e}")
            raise RegistryError(f"Project registry {self.path} is not valid YAML: {e}") from e

        if data is None:
            return []
        if not isinstance(data, dict) or not isinstance(data.get("projects") or [], list):
            raise RegistryError(
                f"Project registry {self.path} must be a mapping with a 'projects' list."
            )
        return list(data.get("projects") or [])

    def _save(self, projects: List[Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            yaml.safe_dump({"projects": projects}, f, default_flow_style=False)
        logger.debug(f"Project registry saved to {self.path}")

    def list(self) -> List[Dict[str, Any]]:
        return self._load()

    def get(self, project_id: str) -> Optional[Dict[str, Any]]:
        for project in self._load():
            if project.get("project_id") == project_id:
                return project
        return None

    def track(self, project_id: str, title: Optional[str] = None) -> Dict[str, Any]:
        """Track a project, moving it to the end if already present."""
        validate_item_id(project_id)
        projects = [p for p in self._load() if p.get("project_id") != project_id]
        entry = {
            "project_id": project_id,
            "title": title or project_id,
            "tracked_at": datetime.now().isoformat(),
        }
        projects.append(entry)
        self._save(projects)
        return entry

    def untrack(self, project_id: str) -> bool:
        """Stop tracking a project. Returns False if it was not tracked."""
        projects = self._load()
        remaining = [p for p in projects if p.get("project_id") != project_id]
        if len(remaining) == len(projects):
            return False
        self._save(remaining)
        return True

    def latest(self) -> Optional[Dict[str, Any]]:
        """Get the most recently tracked project."""
        projects = self._load()
        return projects[-1] if projects else None


def retrieve_project(service, project_id: str) -> List[TreeNode]:
    """Map the full document tree of a project folder."""
    return map_folder(service, project_id)


def create_project(service, name: str, registry: ProjectRegistry) -> dict:
    """
    Create a new top-level project folder and start tracking it.

    Returns:
        The created folder dict (id, name, mime_type, url)
    """
    folder = create_folder(service, name)
    registry.track(folder["id"], folder.get("name") or name)
    logger.info(f"Created project '{name}' ({folder['id']})")
    return folder


def refresh_projects(service, registry: ProjectRegistry) -> List[str]:
    """
    Drop tracked projects that were trashed in Drive.

    Metadata errors propagate; projects removed before the failure stay
    removed.

    Returns:
        IDs of the projects that were untracked
    """
    removed = []
    for project in registry.list():
        project_id = project["project_id"]
        metadata = get_item_metadata(service, project_id, fields="id, explicitlyTrashed")
        if metadata.get("explicitlyTrashed"):
            registry.untrack(project_id)
            removed.append(project_id)
            logger.info(f"Untracked trashed project {project_id}")
    return removed


def get_last_project(service, registry: ProjectRegistry) -> Optional[List[TreeNode]]:
    """Map the most recently tracked project, or None if nothing is tracked."""
    project = registry.latest()
    if not project:
        return None
    return retrieve_project(service, project["project_id"])
