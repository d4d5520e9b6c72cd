"""Read-only store of generated image variants keyed by image name."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Union

import yaml
from pydantic import ValidationError

from responsive_image.errors import MetadataError, UnknownImageError
from responsive_image.models import Variant

logger: Final = logging.getLogger(__name__)

VariantLike = Union[Variant, Mapping[str, Any]]


class ImageCatalog:
    """Image name → variants mapping, fixed after construction.

    The catalog is populated once from build metadata shaped as
    ``{name: [{"width": ..., "height": ..., "image": ...}, ...]}`` and
    exposes no mutation operations. Every known name has at least one
    variant and no two variants of one image share a width.

    Examples:
        catalog = ImageCatalog.from_file(Path("images.json"))
        widths = catalog.get_supported_widths("hero")
    """

    def __init__(self, metadata: Mapping[str, Sequence[VariantLike]]):
        """Validate metadata and build the catalog.

        Args:
            metadata: Build-time variant data per image name

        Raises:
            MetadataError: If an entry is empty, malformed, repeats a width, or
                a name appears twice once converted to a string
        """
        entries: dict[str, tuple[Variant, ...]] = {}
        for raw_name, items in metadata.items():
            # YAML may load keys such as 404 as ints; lookups are by string
            name = str(raw_name)
            if name in entries:
                raise MetadataError(f"Image {name} is listed more than once", name)
            entries[name] = self._build_entry(name, items)
        self._entries = MappingProxyType(entries)
        logger.debug("Catalog built with %d images", len(entries))

    @staticmethod
    def _build_entry(name: str, items: Sequence[VariantLike]) -> tuple[Variant, ...]:
        if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
            raise MetadataError(f"Variants for image {name} must be a list", name)
        if not items:
            raise MetadataError(f"Image {name} has no variants", name)

        try:
            variants = tuple(
                item if isinstance(item, Variant) else Variant.model_validate(item)
                for item in items
            )
        except ValidationError as err:
            raise MetadataError(f"Invalid variant data for image {name}:\n{err}", name, err) from err

        seen: set[int] = set()
        for variant in variants:
            if variant.width in seen:
                raise MetadataError(
                    f"Image {name} has more than one variant with width {variant.width}", name
                )
            seen.add(variant.width)
        return variants

    @classmethod
    def from_file(cls, path: Path) -> ImageCatalog:
        """Load build metadata from a JSON or YAML file.

        Args:
            path: Metadata file; ``.json`` is parsed as JSON, anything else as YAML

        Returns:
            Populated ImageCatalog

        Raises:
            FileNotFoundError: If the file does not exist
            MetadataError: If the file cannot be read, cannot be parsed, or holds
                invalid data
        """
        if not path.exists():
            raise FileNotFoundError(f"Image metadata file not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
            raise MetadataError(f"Unable to read image metadata {path}: {exc}", None, exc) from exc

        if not isinstance(data, Mapping):
            raise MetadataError(f"Image metadata {path} must map image names to variant lists")

        catalog = cls(data)
        logger.info("Loaded %d images from %s", len(catalog), path)
        return catalog

    # ---- lookups ----
    def get_variants(self, image_name: str) -> tuple[Variant, ...]:
        """Return all variants of an image in metadata order.

        Args:
            image_name: The origin name of the image

        Returns:
            Non-empty tuple of variants

        Raises:
            UnknownImageError: If the name is not in the catalog
        """
        try:
            return self._entries[image_name]
        except KeyError:
            raise UnknownImageError(image_name) from None

    def get_supported_widths(self, image_name: str) -> tuple[int, ...]:
        """Return the widths of an image's variants.

        Raises:
            UnknownImageError: If the name is not in the catalog
        """
        return tuple(variant.width for variant in self.get_variants(image_name))

    @property
    def names(self) -> tuple[str, ...]:
        """Known image names."""
        return tuple(self._entries)

    def __contains__(self, image_name: object) -> bool:
        return image_name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
