"""
Config Manager - Load versioning configuration
"""
import copy
import json
import logging
import os
from typing import Any, Dict, List, Optional

from gitcalver.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".gitcalver.json"


class ConfigManager:
    """Manage versioning configuration for one project."""

    DEFAULT_CONFIG = {
        "remote": "origin",
        "auto_push": False,
        "variants": [""],
        "branches": [],
        "version_catalog": None,
        "vcs": "git"
    }

    def __init__(self, project_root: Optional[str] = None, config_path: Optional[str] = None):
        self.project_root = os.path.abspath(project_root or os.getcwd())
        if config_path:
            self.config_path = config_path
        else:
            self.config_path = os.path.join(self.project_root, CONFIG_FILENAME)
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.load()

    def load(self) -> bool:
        """Load configuration from file, keeping defaults for missing keys."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    logger.error("Ignoring config %s: top level must be an object", self.config_path)
                    return False
                self._merge_config(loaded)
                return True
            except (json.JSONDecodeError, IOError) as e:
                logger.error("Error loading config %s: %s", self.config_path, e)
        return False

    def _merge_config(self, loaded: dict):
        """Merge loaded config with defaults."""
        for key, value in loaded.items():
            if key in self.config:
                self.config[key] = value
            else:
                logger.warning("Unknown config key '%s' in %s", key, self.config_path)

    def override(self, **values: Any):
        """Apply command-line overrides; None means "not given"."""
        for key, value in values.items():
            if value is not None:
                self.config[key] = value

    def get_remote(self) -> str:
        return self.config.get("remote") or "origin"

    def get_auto_push(self) -> bool:
        return bool(self.config.get("auto_push", False))

    def get_variants(self) -> List[str]:
        variants = self.config.get("variants")
        if not variants:
            return [""]
        # Keep order, drop duplicates
        return list(dict.fromkeys(variants))

    def get_branches(self) -> List[str]:
        return list(self.config.get("branches") or [])

    def get_vcs(self) -> str:
        return self.config.get("vcs") or "git"

    def get_version_catalog(self) -> str:
        """
        Absolute path of the version catalog file.

        Raises:
            ConfigError: If no catalog path is configured.
        """
        path = self.config.get("version_catalog")
        if not path:
            raise ConfigError(
                f"No version catalog configured; set 'version_catalog' in {self.config_path}"
            )
        if not os.path.isabs(path):
            path = os.path.join(self.project_root, path)
        return os.path.normpath(path)

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.config)
