import struct
import zlib
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from watermarker.models.errors import (
    ImageNotFoundError,
    UnreadableImageError,
    UnsupportedBitDepthError,
    UnsupportedColorDepthError,
)
from watermarker.models.image_model import ImageKind, TransparencyMode
from watermarker.models.params import OutputFormat
from watermarker.services.image_service import ImageService, describe_mode


@pytest.fixture
def service() -> ImageService:
    return ImageService()


def test_load_rgb_is_opaque_24_bit(service: ImageService, make_image) -> None:
    path = make_image("base.png", (5, 3), (1, 2, 3))
    data = service.load_image(path)
    assert (data.width, data.height) == (5, 3)
    assert data.bit_depth == 24
    assert data.color_components == 3
    assert data.transparency is TransparencyMode.OPAQUE


def test_load_rgba_is_translucent_32_bit(service: ImageService, make_image) -> None:
    path = make_image("wm.png", (2, 2), (1, 2, 3, 4), mode="RGBA")
    data = service.load_image(path, ImageKind.WATERMARK)
    assert data.bit_depth == 32
    assert data.is_translucent
    assert service.to_rgba_array(data)[0, 0].tolist() == [1, 2, 3, 4]


def test_opaque_image_gets_full_alpha(service: ImageService, make_image) -> None:
    data = service.load_image(make_image("wm.png", (2, 2), (9, 8, 7)))
    assert np.all(service.to_rgba_array(data)[..., 3] == 255)


def test_missing_file(service: ImageService, tmp_path: Path) -> None:
    missing = tmp_path / "nope.png"
    with pytest.raises(ImageNotFoundError, match="doesn't exist"):
        service.load_image(missing)


def test_directory_is_not_found(service: ImageService, tmp_path: Path) -> None:
    with pytest.raises(ImageNotFoundError):
        service.load_image(tmp_path)


def test_not_an_image(service: ImageService, tmp_path: Path) -> None:
    path = tmp_path / "notes.png"
    path.write_text("hello")
    with pytest.raises(UnreadableImageError):
        service.load_image(path)


def test_grayscale_rejected(service: ImageService, make_image) -> None:
    path = make_image("gray.png", (2, 2), 128, mode="L")
    with pytest.raises(UnsupportedColorDepthError, match="watermark color components"):
        service.load_image(path, ImageKind.WATERMARK)


def test_palette_rejected_by_bit_depth(service: ImageService, make_image) -> None:
    path = make_image("pal.png", (2, 2), 0, mode="P")
    with pytest.raises(UnsupportedBitDepthError, match="The image isn't 24 or 32-bit."):
        service.load_image(path)


def _write_16_bit_png(path: Path, size, color_type: int, channels: int) -> Path:
    """PNG с 16 битами на канал; PIL такой не пишет, собираем чанки вручную."""

    def chunk(tag: bytes, data: bytes) -> bytes:
        return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)

    width, height = size
    row = b"\x00" + b"\x12\x34" * channels * width
    header = struct.pack(">IIBBBBB", width, height, 16, color_type, 0, 0, 0)
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", header)
        + chunk(b"IDAT", zlib.compress(row * height))
        + chunk(b"IEND", b"")
    )
    return path


def test_48_bit_rgb_rejected(service: ImageService, tmp_path: Path) -> None:
    path = _write_16_bit_png(tmp_path / "deep.png", (2, 2), color_type=2, channels=3)
    with pytest.raises(UnsupportedBitDepthError, match="The image isn't 24 or 32-bit."):
        service.load_image(path)


def test_64_bit_rgba_rejected(service: ImageService, tmp_path: Path) -> None:
    path = _write_16_bit_png(tmp_path / "deep.png", (2, 2), color_type=6, channels=4)
    with pytest.raises(UnsupportedBitDepthError, match="watermark"):
        service.load_image(path, ImageKind.WATERMARK)


def test_describe_mode() -> None:
    assert describe_mode("RGB") == (3, 24)
    assert describe_mode("RGBA") == (3, 32)
    assert describe_mode("CMYK") == (4, 32)
    assert describe_mode("YCbCr") == (3, 24)


@pytest.mark.parametrize("fmt,name", [(OutputFormat.PNG, "out.png"), (OutputFormat.JPG, "out.jpg")])
def test_save_image(service: ImageService, tmp_path: Path, fmt: OutputFormat, name: str) -> None:
    pixels = np.full((3, 4, 3), 200, dtype=np.uint8)
    path = service.save_image(pixels, tmp_path / name, fmt)
    with Image.open(path) as saved:
        assert saved.format == fmt.pil_format
        assert saved.size == (4, 3)
        assert saved.mode == "RGB"
