"""Google Docs content operations.

Documents are read and written through the Drive API as HTML.
"""

from .content import export_document, update_document, apply_page_style

__all__ = [
    "export_document",
    "update_document",
    "apply_page_style",
]
