from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from rotate_resize.utils.config import RunConfig
from rotate_resize.utils.logging import Log
from rotate_resize.utils.models import TargetEnvelope


def write_image(path: Path, size: tuple[int, int], fmt: str = "JPEG", color: str = "steelblue", exif: Image.Exif | None = None) -> Path:
    img = Image.new("RGB", size, color)
    kwargs = {"format": fmt}
    if exif is not None:
        kwargs["exif"] = exif.tobytes()
    img.save(path, **kwargs)
    return path


def write_mpo(path: Path, size: tuple[int, int] = (400, 200), preview: tuple[int, int] = (160, 80)) -> Path:
    primary = Image.new("RGB", size, "steelblue")
    thumbnail = Image.new("RGB", preview, "orange")
    primary.save(path, format="MPO", save_all=True, append_images=[thumbnail])
    return path


def write_animated_gif(path: Path, size: tuple[int, int] = (40, 30)) -> Path:
    frames = [Image.new("RGB", size, color) for color in ("red", "green", "blue")]
    frames[0].save(path, format="GIF", save_all=True, append_images=frames[1:], duration=100)
    return path


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_config(log_stream):
    def _make(horizontal: int = 0, vertical: int = 0, dpi: int = 264, level: str = "Trace") -> RunConfig:
        return RunConfig(
            log=Log(level, stream=log_stream),
            envelope=TargetEnvelope(horizontal, vertical),
            dpi=dpi,
        )

    return _make
