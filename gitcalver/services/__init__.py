"""
GitCalver - Services Layer
Publishing workflows built on the core version algebra and VCS actions.
"""
from .tag_service import TagService
from .catalog_service import CatalogService

__all__ = ['TagService', 'CatalogService']
