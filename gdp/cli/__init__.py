"""GDP CLI - Command-line interface for Drive document projects."""
