"""GDP SDK - Core library for Drive-backed document projects.

Every operation takes the Drive service object explicitly, so the SDK can
be used by:
- The gdp CLI
- The gdp MCP server
- Web applications holding one service per signed-in user

Example usage:
    from gdp.sdk import auth, projects

    service = auth.get_drive_service()
    tree = projects.retrieve_project(service, "1AbCdEfGh...")
"""

from . import config
from . import auth
from . import drive
from . import docs
from . import projects

__all__ = ["config", "auth", "drive", "docs", "projects"]
