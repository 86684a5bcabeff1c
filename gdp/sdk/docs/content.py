"""Google Docs export and update operations."""

import io
import logging

from googleapiclient.http import MediaIoBaseUpload

from ..timing import time_api_call
from ..drive.mime import HTML_MIME_TYPE
from ..drive.validators import validate_item_id

logger = logging.getLogger(__name__)

# Exported HTML opens with this bare meta tag instead of a full head.
CONTENT_TYPE_META = '<meta content="text/html; charset=UTF-8" http-equiv="content-type">'

PAGE_OPENING = (
    '<html><head><meta content="text/html; charset=UTF-8" http-equiv="content-type"></head>'
    '<body style="background-color:#ffffff;padding:72pt 72pt 72pt 72pt;max-width:468pt">'
)

PAGE_CLOSING = '</body></html>'


def apply_page_style(html: str) -> str:
    """
    Wrap editor HTML in a styled page so Drive keeps the document layout.

    The content-type meta tag is replaced with a full html/head/body
    opening carrying the page background, margins, and width, and the
    closing tags are appended.

    Args:
        html: Document HTML as produced by the editor

    Returns:
        The styled HTML
    """
    return html.replace(CONTENT_TYPE_META, PAGE_OPENING) + PAGE_CLOSING


@time_api_call
def export_document(service, file_id: str, mime_type: str = HTML_MIME_TYPE) -> str:
    """
    Export a Google Doc's content.

    Args:
        service: Drive v3 service object
        file_id: The Google Doc ID
        mime_type: Export format (default text/html)

    Returns:
        The exported content decoded as UTF-8
    """
    validate_item_id(file_id)
    content = service.files().export(fileId=file_id, mimeType=mime_type).execute()
    if isinstance(content, bytes):
        return content.decode("utf-8")
    return content


@time_api_call
def update_document(service, file_id: str, html: str) -> dict:
    """
    Overwrite a Google Doc with new HTML content.

    Args:
        service: Drive v3 service object
        file_id: The Google Doc ID
        html: New document body as HTML

    Returns:
        Dict with the document id and name
    """
    validate_item_id(file_id)
    styled = apply_page_style(html)
    media = MediaIoBaseUpload(
        io.BytesIO(styled.encode("utf-8")),
        mimetype=HTML_MIME_TYPE,
        resumable=False
    )
    logger.debug(f"Uploading {len(styled)} characters to document {file_id}")

    updated = service.files().update(
        fileId=file_id,
        body={},
        media_body=media,
        fields="id, name"
    ).execute()

    return {
        "id": updated.get("id", file_id),
        "name": updated.get("name"),
    }
