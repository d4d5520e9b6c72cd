import copy
from typing import Any

import pytest

from responsive_image.catalog import ImageCatalog
from responsive_image.models import DeviceContext
from responsive_image.service import ResponsiveImageService

SAMPLE_METADATA: dict[str, list[dict[str, Any]]] = {
    "hero": [
        {"width": 40, "height": 20, "image": "hero-40.jpg"},
        {"width": 160, "height": 80, "image": "hero-160.jpg"},
    ],
    "gallery": [
        {"width": 160, "height": 120, "image": "gallery-160.jpg"},
        {"width": 40, "height": 30, "image": "gallery-40.jpg"},
        {"width": 80, "height": 60, "image": "gallery-80.jpg"},
    ],
}


@pytest.fixture
def sample_metadata() -> dict[str, list[dict[str, Any]]]:
    """Build metadata as emitted by the image pipeline (fresh copy per test)."""
    return copy.deepcopy(SAMPLE_METADATA)


@pytest.fixture
def catalog(sample_metadata: dict[str, list[dict[str, Any]]]) -> ImageCatalog:
    return ImageCatalog(sample_metadata)


@pytest.fixture
def retina_device() -> DeviceContext:
    """100 logical pixels at a pixel ratio of 2."""
    return DeviceContext(screen_width=100, pixel_density=2)


@pytest.fixture
def service(catalog: ImageCatalog, retina_device: DeviceContext) -> ResponsiveImageService:
    return ResponsiveImageService(catalog, retina_device)
