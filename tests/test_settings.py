from pathlib import Path

import pytest

from responsive_image.models import DeviceContext
from responsive_image.settings import ResolverSettings

GOOD_YAML = """
metadata_file: images.json
screen_width: 100
pixel_density: 2
default_size: 50
"""

BAD_YAML = """
metadata_file: images.json
screen_width: -100
"""


def test_valid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)
    cfg = ResolverSettings.load(cfg_file)
    assert cfg.metadata_file == tmp_path / "images.json"
    assert cfg.default_size == 50
    assert cfg.device() == DeviceContext(screen_width=100, pixel_density=2)


def test_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "minimal.yaml"
    cfg_file.write_text(f"metadata_file: {tmp_path / 'images.yaml'}\n")
    cfg = ResolverSettings.load(cfg_file)
    assert cfg.metadata_file == tmp_path / "images.yaml"
    assert cfg.device().physical_width == 320
    assert cfg.default_size is None


def test_invalid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(BAD_YAML)
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        ResolverSettings.load(cfg_file)


def test_env_interpolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCREEN_W", "414")
    cfg_file = tmp_path / "env.yaml"
    cfg_file.write_text("metadata_file: images.json\nscreen_width: ${SCREEN_W}\n")
    assert ResolverSettings.load(cfg_file).screen_width == 414


def test_config_from_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)
    monkeypatch.setenv("RESPONSIVE_IMAGE_CONFIG", str(cfg_file))
    assert ResolverSettings.load().pixel_density == 2


def test_config_env_var_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESPONSIVE_IMAGE_CONFIG", str(tmp_path / "nope.yaml"))
    with pytest.raises(FileNotFoundError):
        ResolverSettings.load()


def test_no_config_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RESPONSIVE_IMAGE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        ResolverSettings.load()
