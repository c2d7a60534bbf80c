"""
Command line front end for publishing calendar versions.
"""
import argparse
import logging
import sys
import threading
from datetime import datetime, timezone
from typing import List, Optional

from gitcalver import __version__
from gitcalver.core import git_helper
from gitcalver.core.config_manager import ConfigManager
from gitcalver.core.errors import ConfigError, GitCalverError
from gitcalver.interfaces.vcs_interface import IVcsActions, VcsRegistry
from gitcalver.services.catalog_service import CatalogService
from gitcalver.services.tag_service import TagService

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure console logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitcalver",
        description="Publish calendar versions (YYYY.MM.R) as git tags and a version catalog."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--project-root", default=None,
                        help="Project root directory (default: current directory)")
    parser.add_argument("--config", default=None,
                        help="Config file (default: <project-root>/.gitcalver.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    tag = subparsers.add_parser("tag", help="Tag the current commit for each variant")
    tag.add_argument("--variant", action="append", dest="variants", default=None,
                     help="Variant to tag (repeatable; default: configured variants)")
    tag.add_argument("--branch", action="append", dest="branches", default=None,
                     help="Branch pattern allowed to publish (repeatable)")
    _add_push_arguments(tag)

    catalog = subparsers.add_parser("catalog", help="Advance and commit the version catalog")
    catalog.add_argument("--catalog", dest="version_catalog", default=None,
                         help="Catalog file path relative to the project root")
    _add_push_arguments(catalog)

    subparsers.add_parser("show", help="Print the version the next tag would get")

    return parser


def _add_push_arguments(subparser: argparse.ArgumentParser):
    subparser.add_argument("--remote", default=None, help="Remote to push to")
    subparser.add_argument("--push", dest="auto_push", action="store_true", default=None,
                           help="Push after publishing")


def create_vcs(config: ConfigManager) -> IVcsActions:
    vcs = VcsRegistry.get(config.get_vcs(), config.project_root)
    if vcs is None:
        raise ConfigError(
            f"Unknown vcs '{config.get_vcs()}'; available: {', '.join(VcsRegistry.get_available())}"
        )
    if isinstance(vcs, git_helper.GitHelper) and not vcs.is_git_repo():
        raise ConfigError(f"Not a git repository: {config.project_root}")
    return vcs


def run(args: argparse.Namespace, now: datetime) -> int:
    config = ConfigManager(args.project_root, args.config)
    config.override(
        remote=getattr(args, "remote", None),
        auto_push=getattr(args, "auto_push", None),
        branches=getattr(args, "branches", None),
        variants=getattr(args, "variants", None),
        version_catalog=getattr(args, "version_catalog", None),
    )
    vcs = create_vcs(config)
    lock = threading.Lock()

    if args.command == "tag":
        service = TagService(vcs, config.get_remote(), config.get_auto_push(),
                             config.get_branches(), lock)
        service.publish_tags(config.get_variants(), now)
    elif args.command == "catalog":
        service = CatalogService(vcs, config.project_root, config.get_version_catalog(),
                                 config.get_remote(), config.get_auto_push(), lock)
        service.publish_catalog(now)
    elif args.command == "show":
        print(TagService(vcs).derive_version(now))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    now = datetime.now(timezone.utc)
    try:
        return run(args, now)
    except GitCalverError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
