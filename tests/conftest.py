"""
Shared fixtures for gdp unit tests.

Provides:
- An isolated config directory so tests never touch ~/.config/gdrive-projects
- A fake Drive v3 service backed by an in-memory folder listing
"""

import re
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

PARENT_QUERY = re.compile(r"^'([^']+)' in parents$")


def make_http_error(status=500, message=b"backend error"):
    return HttpError(httplib2.Response({"status": status}), message)


def make_drive_service(folders, failing=()):
    """
    Build a MagicMock Drive service whose files().list() serves `folders`.

    Args:
        folders: Dict of folder id -> list of file dicts (id, name, mimeType)
        failing: Folder ids whose listing raises HttpError

    The ids listed, in call order, are recorded on `service.listed`.
    """
    service = MagicMock()
    service.listed = []

    def list_files(q=None, fields=None, **kwargs):
        folder_id = PARENT_QUERY.match(q).group(1)
        service.listed.append(folder_id)
        request = MagicMock()
        if folder_id in failing:
            request.execute.side_effect = make_http_error()
        else:
            request.execute.return_value = {"files": list(folders.get(folder_id, []))}
        return request

    service.files.return_value.list.side_effect = list_files
    return service


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """
    Redirect gdp config paths into a temporary directory.

    Returns the config directory path.
    """
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("GDP_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("GDP_CONFIG_FILE", str(config_dir / "config.yaml"))
    return config_dir


@pytest.fixture
def drive_service_factory():
    """Factory fixture returning make_drive_service."""
    return make_drive_service


@pytest.fixture
def http_error_factory():
    """Factory fixture returning make_http_error."""
    return make_http_error
