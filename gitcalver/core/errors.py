"""
Errors - Exception hierarchy shared by core and services
"""
from typing import List, Optional


class GitCalverError(Exception):
    """Base class for errors that terminate a publish operation."""


class ConfigError(GitCalverError):
    """Configuration is missing a required value."""


class VcsError(GitCalverError):
    """A version-control command failed."""

    def __init__(self, message: str, command: Optional[List[str]] = None,
                 stderr: str = ""):
        self.command = command or []
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(f"{message}{detail}")


class CatalogFormatError(GitCalverError):
    """Catalog content does not match the expected layout."""

    def __init__(self, reason: str, path: Optional[str] = None):
        self.reason = reason
        self.path = path
        if path:
            super().__init__(f"Cannot read version catalog '{path}': {reason}")
        else:
            super().__init__(reason)

    def with_path(self, path: str) -> "CatalogFormatError":
        """Return a copy of this error that names the unreadable file."""
        return CatalogFormatError(self.reason, path)
