"""Width resolution: screen percentage → target width → closest variant.

The selection policy prefers the smallest available width that is at least
the target width, so an image is never under-supplied when a large enough
variant exists. When none is large enough, the largest width is used as the
best upscaling source.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce
from typing import Final, Optional

from responsive_image.catalog import ImageCatalog
from responsive_image.errors import VariantLookupError
from responsive_image.models import DeviceContext, Variant

logger: Final = logging.getLogger(__name__)

DEFAULT_SIZE_PERCENT: Final = 100


def resolve_target_width(size_percent: Optional[float], physical_width: float) -> float:
    """Convert a percentage of the screen width into a pixel width.

    A missing or zero percentage means the full width. Values above 100 or
    below zero are not clamped.

    Args:
        size_percent: Requested width in percent of the screen width
        physical_width: Screen width in physical pixels

    Returns:
        Target width in physical pixels
    """
    factor = (size_percent or DEFAULT_SIZE_PERCENT) / 100
    return physical_width * factor


def select_closest_width(candidate_widths: Iterable[int], target_width: float) -> int:
    """Pick the smallest candidate ≥ target, else the largest candidate.

    Args:
        candidate_widths: Available widths of one image
        target_width: Desired width in physical pixels

    Returns:
        One of the candidate widths

    Raises:
        VariantLookupError: If there are no candidates
    """
    widths = list(candidate_widths)
    if not widths:
        raise VariantLookupError(None, None)

    def pick(best: int, item: int) -> int:
        if item >= target_width and best >= target_width:
            return best if item >= best else item
        # Still below target: move upward
        return item if item >= best else best

    # No initial value: the result is always one of the candidates
    return reduce(pick, widths)


class SizeResolver:
    """Resolves image names and size percentages to catalog variants.

    Stateless apart from the catalog and device snapshot it was built with.
    """

    def __init__(self, catalog: ImageCatalog, device: DeviceContext):
        self.catalog = catalog
        self.device = device

    def target_width(self, size_percent: Optional[float] = None) -> float:
        """Target width for a percentage of this device's screen."""
        return resolve_target_width(size_percent, self.device.physical_width)

    def destination_width(self, image_name: str, size_percent: Optional[float] = None) -> int:
        """Closest supported width of an image for a size percentage.

        Raises:
            UnknownImageError: If the image is not in the catalog
        """
        target = self.target_width(size_percent)
        widths = self.catalog.get_supported_widths(image_name)
        try:
            chosen = select_closest_width(widths, target)
        except VariantLookupError as err:
            raise VariantLookupError(image_name, None) from err
        logger.debug(
            "Image %s: target width %.1f from %s → %d", image_name, target, widths, chosen
        )
        return chosen

    def resolve(self, image_name: str, size_percent: Optional[float] = None) -> Variant:
        """Return the variant that fits a size percentage best.

        Args:
            image_name: The origin name of the image
            size_percent: Width of the image in percent of the screen width

        Returns:
            The chosen variant

        Raises:
            UnknownImageError: If the image is not in the catalog
            VariantLookupError: If no variant has the selected width
        """
        width = self.destination_width(image_name, size_percent)
        for variant in self.catalog.get_variants(image_name):
            if variant.width == width:
                return variant
        raise VariantLookupError(image_name, width)
