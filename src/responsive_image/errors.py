"""Exception classes for image catalog lookups and width resolution.

All errors raised by this package derive from ResponsiveImageError. They
signal contract violations by the caller or by the build metadata and are
never retried.
"""

from __future__ import annotations

from typing import Optional


class ResponsiveImageError(Exception):
    """Base error for catalog and resolver failures.

    Carries the image name involved (when known) so callers can report
    which asset triggered the failure.
    """

    def __init__(self, message: str, image_name: Optional[str] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            image_name: Name of the image the error relates to, if any
        """
        super().__init__(message)
        self.message: str = message
        self.image_name: Optional[str] = image_name

    def __str__(self) -> str:
        return self.message


class UnknownImageError(ResponsiveImageError, KeyError):
    """Raised when an image name has no entry in the catalog."""

    def __init__(self, image_name: str) -> None:
        """Initialize with the missing image name.

        Args:
            image_name: The name that was looked up
        """
        super().__init__(f"There is no data for image {image_name}", image_name)


class VariantLookupError(ResponsiveImageError, LookupError):
    """Raised when a selected width has no matching variant."""

    def __init__(self, image_name: Optional[str], width: Optional[int]) -> None:
        """Initialize with the width that could not be matched.

        Args:
            image_name: Name of the image being resolved
            width: The selected width, or None if nothing could be selected
        """
        if width is None:
            message = f"No candidate widths to select from for image {image_name}"
        else:
            message = f"No variant of image {image_name} has width {width}"
        super().__init__(message, image_name)
        self.width: Optional[int] = width


class MetadataError(ResponsiveImageError, ValueError):
    """Raised when build metadata cannot be turned into a catalog."""

    def __init__(
        self,
        message: str,
        image_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with metadata error details.

        Args:
            message: Description of what is wrong with the metadata
            image_name: Image entry that failed validation, if any
            original_error: The underlying exception that was caught
        """
        super().__init__(message, image_name)
        self.original_error = original_error
