"""Typed value objects for image variants and device geometry."""

from __future__ import annotations

import logging
import os
from typing import Final

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

logger: Final = logging.getLogger(__name__)

# Fallbacks used when the environment cannot describe the screen
DEFAULT_SCREEN_WIDTH: Final = 320.0
DEFAULT_PIXEL_DENSITY: Final = 1.0

SCREEN_WIDTH_ENV: Final = "RESPONSIVE_IMAGE_SCREEN_WIDTH"
PIXEL_RATIO_ENV: Final = "RESPONSIVE_IMAGE_PIXEL_RATIO"


class Variant(BaseModel):
    """One pre-generated rendition of a source image.

    Build metadata names the asset reference ``image``; ``reference`` and
    ``url`` are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    width: int = Field(..., gt=0, description="Width in physical pixels")
    height: int = Field(..., gt=0, description="Height in physical pixels")
    reference: str = Field(
        ...,
        validation_alias=AliasChoices("reference", "image", "url"),
        description="Opaque asset reference, usually a URL",
    )


class DeviceContext(BaseModel):
    """Screen geometry of the viewing device.

    ``physical_width`` is always derived from the current fields, so a
    context built with a new screen width never carries a stale value.
    """

    model_config = ConfigDict(frozen=True)

    screen_width: float = Field(DEFAULT_SCREEN_WIDTH, gt=0, description="Logical pixels")
    pixel_density: float = Field(DEFAULT_PIXEL_DENSITY, gt=0, description="Device pixel ratio")

    @property
    def physical_width(self) -> float:
        """Screen width scaled by the device pixel ratio."""
        return self.screen_width * self.pixel_density

    def with_geometry(
        self, screen_width: float | None = None, pixel_density: float | None = None
    ) -> DeviceContext:
        """Return a new context; omitted values keep their current setting.

        Raises:
            pydantic.ValidationError: If a value is not positive
        """
        return DeviceContext(
            screen_width=self.screen_width if screen_width is None else screen_width,
            pixel_density=self.pixel_density if pixel_density is None else pixel_density,
        )

    @classmethod
    def from_environment(cls) -> DeviceContext:
        """Build a context from environment variables.

        Reads RESPONSIVE_IMAGE_SCREEN_WIDTH and RESPONSIVE_IMAGE_PIXEL_RATIO.
        Unset or empty variables fall back to 320 px and a ratio of 1.

        Returns:
            DeviceContext for the current process

        Raises:
            pydantic.ValidationError: If a variable is set to a non-positive
                or non-numeric value
        """
        screen_width = os.environ.get(SCREEN_WIDTH_ENV) or DEFAULT_SCREEN_WIDTH
        pixel_density = os.environ.get(PIXEL_RATIO_ENV) or DEFAULT_PIXEL_DENSITY
        logger.debug(
            "Device probed from environment: width=%s ratio=%s", screen_width, pixel_density
        )
        return cls.model_validate({"screen_width": screen_width, "pixel_density": pixel_density})
