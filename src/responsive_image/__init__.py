"""Responsive image package - catalog of generated variants and width resolution."""

__version__ = "0.1.0"

from .catalog import ImageCatalog
from .errors import MetadataError, ResponsiveImageError, UnknownImageError, VariantLookupError
from .models import DeviceContext, Variant
from .resolver import SizeResolver, resolve_target_width, select_closest_width
from .service import ResponsiveImageService

# Define what gets imported with: from responsive_image import *
__all__ = [
    "DeviceContext",
    "ImageCatalog",
    "MetadataError",
    "ResponsiveImageError",
    "ResponsiveImageService",
    "SizeResolver",
    "UnknownImageError",
    "Variant",
    "VariantLookupError",
    "resolve_target_width",
    "select_closest_width",
]
