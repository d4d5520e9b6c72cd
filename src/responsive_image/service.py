"""Public entry point for looking up responsive image variants."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Optional

from responsive_image.catalog import ImageCatalog
from responsive_image.models import DeviceContext, Variant
from responsive_image.resolver import SizeResolver

if TYPE_CHECKING:
    from responsive_image.settings import ResolverSettings

logger: Final = logging.getLogger(__name__)


class ResponsiveImageService:
    """Provides images generated by the build-time image pipeline.

    The service answers three questions for UI code:

    - which variants exist for an image (``get_images``)
    - which variant fits a given share of the screen (``get_image_data_by_size``)
    - which URL to use for it (``get_image_by_size``)

    Sizes are percentages of the screen width. The returned variant is the
    one closest to ``screen_width * pixel_density * size / 100``.

    Examples:
        service = ResponsiveImageService(catalog, DeviceContext(screen_width=100, pixel_density=2))
        service.get_image_by_size("hero", 50)  # -> "hero-160.jpg"
    """

    def __init__(self, catalog: ImageCatalog, device: DeviceContext | None = None):
        """Create the service.

        Args:
            catalog: Build-time image catalog
            device: Screen geometry; defaults to a 320 px wide, ratio 1 screen
        """
        self.catalog = catalog
        self._resolver = SizeResolver(catalog, device or DeviceContext())

    @classmethod
    def from_settings(cls, settings: ResolverSettings) -> ResponsiveImageService:
        """Build a service from loaded settings.

        Raises:
            FileNotFoundError: If the metadata file is missing
            MetadataError: If the metadata file is invalid
        """
        catalog = ImageCatalog.from_file(settings.metadata_file)
        return cls(catalog, settings.device())

    @property
    def device(self) -> DeviceContext:
        """Current device context."""
        return self._resolver.device

    @property
    def physical_width(self) -> float:
        """Physical screen width of the current device context."""
        return self._resolver.device.physical_width

    def reconfigure(
        self, screen_width: float | None = None, pixel_density: float | None = None
    ) -> DeviceContext:
        """Replace the device context before serving lookups.

        Omitted values keep their current setting. The physical width is
        recomputed from the new values.

        Returns:
            The new device context
        """
        device = self._resolver.device.with_geometry(screen_width, pixel_density)
        self._resolver = SizeResolver(self.catalog, device)
        logger.debug("Device reconfigured: physical width %.1f", device.physical_width)
        return device

    def get_images(self, image_name: str) -> tuple[Variant, ...]:
        """Return the variants of an image with their widths and heights.

        Raises:
            UnknownImageError: If the image is not in the catalog
        """
        return self.catalog.get_variants(image_name)

    def get_supported_widths(self, image_name: str) -> tuple[int, ...]:
        return self.catalog.get_supported_widths(image_name)

    def get_image_data_by_size(
        self, image_name: str, size_percent: Optional[float] = None
    ) -> Variant:
        """Return the variant that fits the given size.

        Args:
            image_name: The origin name of the image
            size_percent: Width of the image in percent of the screen width

        Raises:
            UnknownImageError: If the image is not in the catalog
            VariantLookupError: If no variant has the selected width
        """
        return self._resolver.resolve(image_name, size_percent)

    def get_image_by_size(self, image_name: str, size_percent: Optional[float] = None) -> str:
        """Return the reference (URL) of the variant that fits the given size."""
        return self.get_image_data_by_size(image_name, size_percent).reference
