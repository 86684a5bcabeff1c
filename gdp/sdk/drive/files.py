"""Google Drive file operations."""

from typing import Optional

from ..timing import time_api_call
from .mime import DOCUMENT_MIME_TYPE
from .validators import validate_item_id

DEFAULT_DOCUMENT_TITLE = "Text Document"


@time_api_call
def create_document(
    service,
    folder_id: Optional[str] = None,
    title: Optional[str] = None
) -> dict:
    """
    Create an empty Google Doc.

    Args:
        service: Drive v3 service object
        folder_id: Folder to create the document in. None for My Drive root.
        title: Document title. Defaults to "Text Document".

    Returns:
        Dict with document id, name, mime_type, and url
    """
    file_metadata = {
        "name": title or DEFAULT_DOCUMENT_TITLE,
        "mimeType": DOCUMENT_MIME_TYPE
    }

    if folder_id:
        validate_item_id(folder_id)
        file_metadata["parents"] = [folder_id]

    doc = service.files().create(
        body=file_metadata,
        fields="id, name, mimeType"
    ).execute()

    return {
        "id": doc.get("id"),
        "name": doc.get("name"),
        "mime_type": doc.get("mimeType", DOCUMENT_MIME_TYPE),
        "url": f"https://docs.google.com/document/d/{doc.get('id')}/edit"
    }


@time_api_call
def delete_item(service, item_id: str) -> None:
    """
    Permanently delete a file or folder.

    Args:
        service: Drive v3 service object
        item_id: The Drive ID to delete
    """
    validate_item_id(item_id)
    service.files().delete(fileId=item_id).execute()


@time_api_call
def get_item_metadata(service, item_id: str, fields: str = "*") -> dict:
    """
    Get metadata for a file or folder.

    Args:
        service: Drive v3 service object
        item_id: The Drive ID
        fields: Partial response selector (default: all fields)

    Returns:
        The file resource dict from the API
    """
    validate_item_id(item_id)
    return service.files().get(fileId=item_id, fields=fields).execute()
