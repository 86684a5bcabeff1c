"""GDP - Google Drive document projects.

Namespace package containing:
- gdp.sdk: Core SDK for Drive-backed document projects
- gdp.cli: Command-line interface
- gdp.mcp: Model Context Protocol server for LLM integration
"""

__version__ = "0.3.0"
