"""Google Drive folder operations."""

from typing import Optional, List, Dict, Any

from ..timing import time_api_call
from .mime import FOLDER_MIME_TYPE
from .validators import validate_item_id


@time_api_call
def list_children(service, folder_id: str) -> List[Dict[str, Any]]:
    """
    List the immediate children of a Google Drive folder.

    Only the first page of results is returned.

    Args:
        service: Drive v3 service object
        folder_id: Parent folder ID

    Returns:
        List of file dicts with id, name, and mimeType, in API order
    """
    results = service.files().list(
        q=f"'{folder_id}' in parents",
        fields="files(id, name, mimeType)"
    ).execute()

    return results.get("files", [])


@time_api_call
def create_folder(
    service,
    name: str,
    parent_id: Optional[str] = None
) -> dict:
    """
    Create a new folder in Google Drive.

    Args:
        service: Drive v3 service object
        name: Name for the new folder
        parent_id: Parent folder ID. None creates a top-level project folder.

    Returns:
        Dict with folder id, name, mime_type, and url
    """
    file_metadata = {
        "name": name,
        "mimeType": FOLDER_MIME_TYPE
    }

    if parent_id:
        validate_item_id(parent_id)
        file_metadata["parents"] = [parent_id]

    folder = service.files().create(
        body=file_metadata,
        fields="id, name, mimeType"
    ).execute()

    return {
        "id": folder.get("id"),
        "name": folder.get("name"),
        "mime_type": folder.get("mimeType", FOLDER_MIME_TYPE),
        "url": f"https://drive.google.com/drive/folders/{folder.get('id')}"
    }
