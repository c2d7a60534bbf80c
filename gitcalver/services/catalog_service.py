"""
Catalog Service - Publish the next version catalog entry
"""
import logging
import os
import threading
from pathlib import Path
from typing import Callable, Dict, Optional

from gitcalver.core.calendar_version import CalendarVersion
from gitcalver.core.errors import CatalogFormatError
from gitcalver.core.version_catalog import CatalogEntry, VersionCatalog
from gitcalver.interfaces.vcs_interface import IVcsActions

logger = logging.getLogger(__name__)

STATUS_PUBLISHED = "published"


class CatalogService:
    """
    Service for advancing the version catalog.

    The previous entry is read from the last commit, not the working
    tree, so uncommitted edits to the catalog never leak into the next
    version. The build code grows by exactly one per publish.
    """

    def __init__(self, vcs: IVcsActions, project_root: str, catalog_path: str,
                 remote: str = "origin", auto_push: bool = False,
                 lock: Optional[threading.Lock] = None):
        self.vcs = vcs
        self.project_root = os.path.abspath(project_root)
        self.catalog_path = os.path.join(self.project_root, catalog_path)
        self.remote = remote
        self.auto_push = auto_push
        self.lock = lock or threading.Lock()

    @property
    def vcs_path(self) -> str:
        """Catalog path relative to the project root, with forward slashes."""
        return Path(os.path.relpath(self.catalog_path, self.project_root)).as_posix()

    def next_entry(self, now) -> Dict:
        """
        Compute the entry that follows the committed catalog.

        Returns:
            Dict with 'previous' (CatalogEntry or None) and 'entry' (CatalogEntry).

        Raises:
            CatalogFormatError: If committed content cannot be read.
        """
        content = self.vcs.get_latest_contents(self.vcs_path)
        if not content.strip():
            return {
                "previous": None,
                "entry": CatalogEntry(CalendarVersion.generate(now, revision=1), 1)
            }

        try:
            previous = VersionCatalog.deserialize(content)
        except CatalogFormatError as e:
            raise e.with_path(self.vcs_path) from e

        return {
            "previous": previous,
            "entry": CatalogEntry(previous.version.increment(now), previous.code + 1)
        }

    def publish_catalog(self, now,
                        progress_callback: Optional[Callable[[str], None]] = None) -> Dict:
        """
        Write, commit and optionally push the next catalog entry.

        Args:
            now: Current point in time (datetime)
            progress_callback: Optional callback(msg: str) for status messages

        Returns:
            Dict containing:
                - status: published
                - previous: str or None
                - version: str
                - code: int
                - path: str (relative to project root)
                - message: str
        """
        with self.lock:
            step = self.next_entry(now)
            previous, entry = step["previous"], step["entry"]

            os.makedirs(os.path.dirname(self.catalog_path), exist_ok=True)
            with open(self.catalog_path, 'w', encoding='utf-8', newline='\n') as f:
                f.write(VersionCatalog.serialize(entry.version, entry.code))

            if previous is None:
                message = f"Version: {entry.version}"
            else:
                message = f"Version: {previous.version} → {entry.version}"
            self.vcs.commit_file(self.vcs_path, message)

            if self.auto_push:
                self.vcs.push_head(self.remote)

        result = {
            "status": STATUS_PUBLISHED,
            "previous": str(previous.version) if previous else None,
            "version": str(entry.version),
            "code": entry.code,
            "path": self.vcs_path,
            "message": f"Published {self.vcs_path}: {entry.version} (code {entry.code})"
        }
        logger.info(result["message"])
        if progress_callback:
            progress_callback(result["message"])
        return result
