"""Geography services."""

from resolver.services.geography.service import GeographyService

__all__ = ["GeographyService"]
