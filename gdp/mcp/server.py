"""GDP MCP Server - Exposes Drive document projects via MCP.

This server uses the GDP SDK to provide project browsing and document
editing to MCP clients. It connects with whatever credentials are
configured for the CLI.
"""

import json
import logging
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from gdp.sdk import auth, drive, docs, projects

logger = logging.getLogger(__name__)

# Create the MCP server
mcp = FastMCP("gdp")


def _service():
    return auth.get_drive_service()


# =============================================================================
# Project Tools
# =============================================================================

@mcp.tool()
async def get_project_tree(folder_id: str) -> dict[str, Any]:
    """
    Get the full document tree of a project folder.

    Args:
        folder_id: Drive ID of the project folder

    Returns:
        Dict with "tree": a list of nodes, each with id, title, mime_type and
        kind ("doc" or "folder"). Folder nodes also carry "children".
        Files that are neither Google Docs nor folders are not included.
    """
    try:
        nodes = projects.retrieve_project(_service(), folder_id)
        return {"tree": drive.tree_to_dicts(nodes)}
    except Exception as e:
        logger.error(f"Error mapping project {folder_id}: {e}")
        return {"error": str(e)}


@mcp.tool()
async def list_projects() -> dict[str, Any]:
    """
    List tracked projects, most recently tracked last.

    Returns:
        Dict with "projects": list of {project_id, title, tracked_at}
    """
    try:
        return {"projects": projects.ProjectRegistry().list()}
    except Exception as e:
        logger.error(f"Error listing projects: {e}")
        return {"error": str(e)}


@mcp.tool()
async def create_project(name: str) -> dict[str, Any]:
    """
    Create a new top-level project folder and track it.

    Args:
        name: Name of the project folder

    Returns:
        Dict with folder id, name, mime_type, and url
    """
    try:
        return projects.create_project(_service(), name, projects.ProjectRegistry())
    except Exception as e:
        logger.error(f"Error creating project: {e}")
        return {"error": str(e)}


@mcp.tool()
async def refresh_projects() -> dict[str, Any]:
    """
    Untrack projects that were moved to the Drive trash.

    Returns:
        Dict with "removed": IDs of the projects that were untracked
    """
    try:
        removed = projects.refresh_projects(_service(), projects.ProjectRegistry())
        return {"removed": removed}
    except Exception as e:
        logger.error(f"Error refreshing projects: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_last_project() -> dict[str, Any]:
    """
    Get the tree of the most recently tracked project.

    Returns:
        Dict with project_id, title, and tree, or an error if nothing is tracked
    """
    try:
        registry = projects.ProjectRegistry()
        nodes = projects.get_last_project(_service(), registry)
        if nodes is None:
            return {"error": "No projects tracked."}
        latest = registry.latest()
        return {
            "project_id": latest["project_id"],
            "title": latest["title"],
            "tree": drive.tree_to_dicts(nodes),
        }
    except Exception as e:
        logger.error(f"Error loading last project: {e}")
        return {"error": str(e)}


@mcp.tool()
async def track_project(project_id: str, title: Optional[str] = None) -> dict[str, Any]:
    """
    Start tracking an existing project folder.

    Args:
        project_id: Drive ID of the project folder
        title: Display title (defaults to the ID)

    Returns:
        The registry entry: project_id, title, tracked_at
    """
    try:
        return projects.ProjectRegistry().track(project_id, title)
    except Exception as e:
        logger.error(f"Error tracking project {project_id}: {e}")
        return {"error": str(e)}


@mcp.tool()
async def untrack_project(project_id: str) -> dict[str, Any]:
    """
    Stop tracking a project. The Drive folder is left alone.

    Args:
        project_id: Drive ID of the project folder

    Returns:
        Dict with success status and the project id
    """
    try:
        if not projects.ProjectRegistry().untrack(project_id):
            return {"error": f"Project not tracked: {project_id}"}
        return {"success": True, "project_id": project_id}
    except Exception as e:
        logger.error(f"Error untracking project {project_id}: {e}")
        return {"error": str(e)}


# =============================================================================
# Drive Tools
# =============================================================================

@mcp.tool()
async def drive_list_folder(folder_id: str) -> dict[str, Any]:
    """
    List the immediate children of a Google Drive folder.

    Args:
        folder_id: Drive ID of the folder

    Returns:
        Dict with "items": list of {id, name, mimeType} in API order
        (first page only)
    """
    try:
        drive.validate_item_id(folder_id)
        return {"items": drive.list_children(_service(), folder_id)}
    except Exception as e:
        logger.error(f"Error listing folder {folder_id}: {e}")
        return {"error": str(e)}


@mcp.tool()
async def drive_get_metadata(item_id: str) -> dict[str, Any]:
    """
    Get the Drive metadata of a file or folder.

    Args:
        item_id: Drive ID of the item

    Returns:
        The file resource from the API (all fields)
    """
    try:
        return drive.get_item_metadata(_service(), item_id)
    except Exception as e:
        logger.error(f"Error reading metadata for {item_id}: {e}")
        return {"error": str(e)}


@mcp.tool()
async def drive_create_folder(
    name: str,
    parent_id: Optional[str] = None
) -> dict[str, Any]:
    """
    Create a new folder in Google Drive.

    Args:
        name: Name for the new folder
        parent_id: Parent folder ID. Use None for a top-level folder.

    Returns:
        Dict with folder id, name, mime_type, and url
    """
    try:
        return drive.create_folder(_service(), name=name, parent_id=parent_id)
    except Exception as e:
        logger.error(f"Error creating folder: {e}")
        return {"error": str(e)}


@mcp.tool()
async def drive_create_document(
    folder_id: Optional[str] = None,
    title: Optional[str] = None
) -> dict[str, Any]:
    """
    Create an empty Google Doc.

    Args:
        folder_id: Folder to create the document in. Use None for My Drive root.
        title: Document title (default "Text Document")

    Returns:
        Dict with document id, name, mime_type, and url
    """
    try:
        return drive.create_document(_service(), folder_id=folder_id, title=title)
    except Exception as e:
        logger.error(f"Error creating document: {e}")
        return {"error": str(e)}


@mcp.tool()
async def drive_delete(item_id: str) -> dict[str, Any]:
    """
    Permanently delete a file or folder. This cannot be undone.

    Args:
        item_id: Drive ID of the item to delete

    Returns:
        Dict with success status and the deleted id
    """
    try:
        drive.delete_item(_service(), item_id)
        return {"success": True, "id": item_id}
    except Exception as e:
        logger.error(f"Error deleting {item_id}: {e}")
        return {"error": str(e)}


# =============================================================================
# Document Tools
# =============================================================================

@mcp.tool()
async def read_doc(doc_id: str) -> dict[str, Any]:
    """
    Read a Google Doc's content as HTML.

    Args:
        doc_id: The Google Doc ID

    Returns:
        Dict with id and html
    """
    try:
        html = docs.export_document(_service(), doc_id)
        return {"id": doc_id, "html": html}
    except Exception as e:
        logger.error(f"Error reading doc: {e}")
        return {"error": str(e)}


@mcp.tool()
async def update_doc(doc_id: str, html: str) -> dict[str, Any]:
    """
    Replace a Google Doc's content with new HTML.

    The HTML is wrapped in a styled page (white background, 72pt margins)
    before upload.

    Args:
        doc_id: The Google Doc ID
        html: New document content

    Returns:
        Dict with success status, id, and name
    """
    try:
        result = docs.update_document(_service(), doc_id, html)
        return {"success": True, **result}
    except Exception as e:
        logger.error(f"Error updating doc: {e}")
        return {"error": str(e)}


# =============================================================================
# Resources (read-only data access)
# =============================================================================

@mcp.resource("gdp://projects")
async def projects_resource() -> str:
    """List of tracked projects."""
    result = await list_projects()
    return json.dumps(result, indent=2)


# =============================================================================
# Server entry point
# =============================================================================

def run_server():
    """Run the MCP server with stdio transport."""
    mcp.run()


if __name__ == "__main__":
    run_server()
