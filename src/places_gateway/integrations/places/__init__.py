"""Google Places integration."""

from .client import PlacesClient

__all__ = ["PlacesClient"]
