"""
GitCalver - Interfaces Package
Abstract base classes for pluggable version-control access.
"""
from .vcs_interface import IVcsActions, VcsRegistry

__all__ = ['IVcsActions', 'VcsRegistry']
