"""Recording VCS double for publisher tests (no git, no network)."""

from .vcs import FakeVcsActions

__all__ = ["FakeVcsActions"]
