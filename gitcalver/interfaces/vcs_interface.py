"""
VCS Interface - Abstract base for version-control actions
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Type


class IVcsActions(ABC):
    """
    Abstract interface for the version-control operations used by the
    tag and catalog publishers.

    Implementations perform blocking calls and raise on failure; the
    publishers never retry.

    Example:
        class MyVcs(IVcsActions):
            vcs_name = "my_vcs"

            def get_branch_name(self) -> str:
                return "main"
            ...
    """

    # Class attribute - must be defined by subclasses
    vcs_name: str = ""

    def __init__(self, repo_path: str = None):
        """
        Args:
            repo_path: Path to the working copy
        """
        self.repo_path = repo_path

    @abstractmethod
    def get_branch_name(self) -> str:
        """Current branch name."""
        pass

    @abstractmethod
    def get_latest_tag(self) -> str:
        """Most recent tag reachable from HEAD, or "" if there is none."""
        pass

    @abstractmethod
    def get_head_tags(self) -> Iterable[str]:
        """Names of the tags pointing at HEAD (possibly empty)."""
        pass

    @abstractmethod
    def add_tag(self, tag: str) -> None:
        """Create a tag on HEAD. Fails if the tag already exists."""
        pass

    @abstractmethod
    def push_tag(self, remote: str, tag: str) -> None:
        """Push a single tag to a remote."""
        pass

    @abstractmethod
    def commit_file(self, relative_path: str, message: str) -> None:
        """Stage and commit one file."""
        pass

    @abstractmethod
    def push_head(self, remote: str) -> None:
        """Push the current branch to a remote."""
        pass

    @abstractmethod
    def get_latest_contents(self, relative_path: str) -> str:
        """
        Last committed content of a file.

        Returns:
            File content, or "" if the path has no history.
        """
        pass


class VcsRegistry:
    """
    Registry for VCS action implementations.

    Example:
        VcsRegistry.register(GitHelper)
        vcs = VcsRegistry.get("git", "/path/to/repo")
    """

    _implementations: Dict[str, Type[IVcsActions]] = {}

    @classmethod
    def register(cls, vcs_class: Type[IVcsActions]) -> None:
        """
        Register an implementation class.

        Raises:
            ValueError: If class has no vcs_name
        """
        name = getattr(vcs_class, 'vcs_name', None)
        if not name:
            raise ValueError(
                f"VCS class {vcs_class.__name__} must define 'vcs_name'"
            )
        cls._implementations[name] = vcs_class

    @classmethod
    def unregister(cls, name: str) -> bool:
        if name in cls._implementations:
            del cls._implementations[name]
            return True
        return False

    @classmethod
    def get(cls, name: str, repo_path: str = None, **kwargs) -> Optional[IVcsActions]:
        """
        Get an implementation instance by name.

        Returns:
            Instance bound to repo_path, or None if the name is unknown.
        """
        vcs_class = cls._implementations.get(name)
        if vcs_class:
            return vcs_class(repo_path, **kwargs)
        return None

    @classmethod
    def get_available(cls) -> list:
        return list(cls._implementations.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._implementations
