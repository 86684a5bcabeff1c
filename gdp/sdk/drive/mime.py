"""Google Drive MIME types used by document projects."""

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
DOCUMENT_MIME_TYPE = "application/vnd.google-apps.document"
HTML_MIME_TYPE = "text/html"
