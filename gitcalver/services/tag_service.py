"""
Tag Service - Decide and publish the calendar version tag for a variant
"""
import logging
import re
import threading
from typing import Callable, Dict, Iterable, List, Optional

from gitcalver.core.calendar_version import CalendarVersion, variant_of_tag
from gitcalver.core.errors import ConfigError
from gitcalver.interfaces.vcs_interface import IVcsActions

logger = logging.getLogger(__name__)

STATUS_CREATED = "created"
STATUS_SKIPPED_BRANCH = "skipped_branch"
STATUS_ALREADY_TAGGED = "already_tagged"


class TagService:
    """
    Service for publishing version tags on the current commit.

    Variants tagged on the same commit share one version; only the tag
    suffix differs. Calls that inspect and tag the same commit must not
    interleave, so the inspect-then-tag sequence runs under a lock. Pass
    the same lock to every service working on one repository.
    """

    def __init__(self, vcs: IVcsActions, remote: str = "origin", auto_push: bool = False,
                 branches: Iterable[str] = (), lock: Optional[threading.Lock] = None):
        self.vcs = vcs
        self.remote = remote
        self.auto_push = auto_push
        self.branches = list(branches)
        self.branch_patterns = [self._compile(pattern) for pattern in self.branches]
        self.lock = lock or threading.Lock()

    def branch_allowed(self, branch: str) -> bool:
        """An empty filter allows every branch; otherwise one pattern must match fully."""
        if not self.branch_patterns:
            return True
        return any(pattern.fullmatch(branch) for pattern in self.branch_patterns)

    @staticmethod
    def _compile(pattern: str):
        try:
            return re.compile(pattern)
        except re.error as e:
            raise ConfigError(f"Invalid branch pattern '{pattern}': {e}") from e

    def derive_version(self, now) -> CalendarVersion:
        """Next version after the latest reachable tag, or the first one of the month."""
        latest = CalendarVersion.parse(self.vcs.get_latest_tag()).get_or_none()
        if latest is not None:
            return latest.increment(now)
        return CalendarVersion.generate(now, revision=1)

    def publish_tag(self, variant: Optional[str], now,
                    progress_callback: Optional[Callable[[str], None]] = None) -> Dict:
        """
        Tag the current commit for one variant.

        Args:
            variant: Variant label; None or blank means no suffix
            now: Current point in time (datetime)
            progress_callback: Optional callback(msg: str) for status messages

        Returns:
            Dict containing:
                - status: created, skipped_branch or already_tagged
                - tag: str or None
                - version: str or None
                - message: str
        """
        variant = variant if variant and variant.strip() else ""
        result = {"status": None, "tag": None, "version": None, "message": ""}

        def report(message: str):
            result["message"] = message
            logger.info(message)
            if progress_callback:
                progress_callback(message)

        branch = self.vcs.get_branch_name()
        if not self.branch_allowed(branch):
            result["status"] = STATUS_SKIPPED_BRANCH
            report(f"Skipping auto versioning for branch '{branch}'")
            return result

        with self.lock:
            head_versions = {}
            for head_tag in self.vcs.get_head_tags():
                parsed = CalendarVersion.parse(head_tag)
                if parsed.ok:
                    head_versions[variant_of_tag(head_tag)] = parsed.version
                else:
                    logger.debug("Ignoring tag %s on HEAD: %s", head_tag, parsed.error)

            if variant in head_versions:
                result["status"] = STATUS_ALREADY_TAGGED
                result["version"] = str(head_versions[variant])
                report(f"Version tag {head_versions[variant].tag(variant)} "
                       f"is already applied on current commit")
                return result

            if head_versions:
                version = next(iter(head_versions.values()))
                logger.debug("Reusing version %s from HEAD", version)
            else:
                version = self.derive_version(now)

            tag = version.tag(variant)
            self.vcs.add_tag(tag)
            if self.auto_push:
                self.vcs.push_tag(self.remote, tag)

        result["status"] = STATUS_CREATED
        result["tag"] = tag
        result["version"] = str(version)
        pushed = f" and pushed to {self.remote}" if self.auto_push else ""
        report(f"Created tag {tag}{pushed}")
        return result

    def publish_tags(self, variants: Iterable[Optional[str]], now,
                     progress_callback: Optional[Callable[[str], None]] = None) -> List[Dict]:
        """Publish each variant in order, one after the other."""
        return [self.publish_tag(variant, now, progress_callback) for variant in variants]
