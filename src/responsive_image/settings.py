"""User-configurable settings loaded from a YAML config file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from responsive_image.models import DEFAULT_PIXEL_DENSITY, DEFAULT_SCREEN_WIDTH, DeviceContext

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class ResolverSettings(BaseModel):
    """Where the build metadata lives and which screen to resolve for.

    Screen defaults describe a 320 px wide screen with a pixel ratio of 1,
    used when the runtime cannot report its own geometry.
    """

    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("responsive-image.yaml"),
        Path("~/.config/responsive-image/config.yaml").expanduser(),
    ]

    metadata_file: Path = Field(..., description="JSON or YAML file with generated variants")
    screen_width: float = Field(
        DEFAULT_SCREEN_WIDTH, gt=0, description="Screen width in logical pixels"
    )
    pixel_density: float = Field(DEFAULT_PIXEL_DENSITY, gt=0, description="Device pixel ratio")
    default_size: int | None = Field(
        None, description="Size in percent of the screen width used when none is requested"
    )

    def device(self) -> DeviceContext:
        """Device context described by these settings."""
        return DeviceContext(screen_width=self.screen_width, pixel_density=self.pixel_density)

    @classmethod
    def load(cls, path: Path | None = None) -> ResolverSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ResolverSettings object; a relative ``metadata_file``
            is resolved against the config file's directory

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("RESPONSIVE_IMAGE_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Config file from RESPONSIVE_IMAGE_CONFIG not found: {path}"
                    )
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. "
                        "Create responsive-image.yaml or set RESPONSIVE_IMAGE_CONFIG."
                    )

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            settings = cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err

        if not settings.metadata_file.is_absolute():
            settings = settings.model_copy(
                update={"metadata_file": path.parent / settings.metadata_file}
            )
        return settings
