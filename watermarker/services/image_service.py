"""Загрузка изображений с диска, проверка глубины цвета и запись результата.

Принципы:
- SRP: класс отвечает только за ввод/вывод файлов и базовое извлечение свойств.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Tuple

import numpy as np
from PIL import Image, ImageMode, UnidentifiedImageError

from watermarker.models.errors import (
    ImageNotFoundError,
    UnreadableImageError,
    UnsupportedBitDepthError,
    UnsupportedColorDepthError,
)
from watermarker.models.image_model import ImageData, ImageKind, TransparencyMode
from watermarker.models.params import OutputFormat

logger = logging.getLogger(__name__)

SUPPORTED_BIT_DEPTHS = (24, 32)

# режим PIL -> (цветовых компонент без альфы, бит на пиксель)
_MODE_DEPTHS: Dict[str, Tuple[int, int]] = {
    "1": (1, 1),
    "L": (1, 8),
    "LA": (1, 16),
    "La": (1, 16),
    "P": (3, 8),
    "PA": (3, 16),
    "I": (1, 32),
    "I;16": (1, 16),
    "I;16B": (1, 16),
    "I;16L": (1, 16),
    "F": (1, 32),
    "RGB": (3, 24),
    "RGBA": (3, 32),
    "RGBa": (3, 32),
    "RGBX": (3, 32),
    "CMYK": (4, 32),
}

_ALPHA_BANDS = ("A", "a")


def _has_wide_samples(src: Image.Image) -> bool:
    """True, если декодер читает 16 бит на канал (например, 48-битный PNG).

    PIL приводит такие файлы к RGB/RGBA, поэтому исходную глубину видно только
    по rawmode в `tile` до вызова `load()`.
    """
    for tile in getattr(src, "tile", None) or ():
        args = tile[3]
        rawmode = args if isinstance(args, str) else (args[0] if args else "")
        if isinstance(rawmode, str) and ";16" in rawmode:
            return True
    return False


def describe_mode(mode: str) -> Tuple[int, int]:
    """Возвращает (число цветовых компонент, бит на пиксель) для режима PIL.

    Для неизвестных режимов считаем по полосам: альфа и заполнитель X не
    являются цветом, на полосу приходится 8 бит.
    """
    if mode in _MODE_DEPTHS:
        return _MODE_DEPTHS[mode]
    names = ImageMode.getmode(mode).bands
    components = len([b for b in names if b not in _ALPHA_BANDS and b != "X"])
    return components, len(names) * 8


class ImageService:
    def load_image(self, file_path: str | Path, kind: ImageKind = ImageKind.IMAGE) -> ImageData:
        """Загружает изображение с диска и проверяет, что оно 24- или 32-битное RGB(A).

        Args:
            file_path: Путь до файла изображения.
            kind: Роль изображения; используется в сообщениях об ошибках.

        Returns:
            `ImageData` c `PIL.Image.Image` в исходном режиме, размерами и метаданными.

        Raises:
            ImageNotFoundError: если путь не существует или не указывает на файл.
            UnreadableImageError: если файл не распознан как изображение.
            UnsupportedColorDepthError: если цветовых компонент не 3.
            UnsupportedBitDepthError: если глубина не 24 и не 32 бита.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise ImageNotFoundError(f"The file {file_path} doesn't exist.")

        try:
            with Image.open(path) as src:
                wide_samples = _has_wide_samples(src)
                src.load()
                pil_image = src.copy()
        except (UnidentifiedImageError, OSError) as exc:
            raise UnreadableImageError(f"The file {file_path} isn't a readable image.") from exc

        components, bit_depth = describe_mode(pil_image.mode)
        if wide_samples:
            bit_depth = len(pil_image.getbands()) * 16
        logger.debug("%s: mode=%s components=%d bits=%d", path, pil_image.mode, components, bit_depth)
        if components != 3:
            raise UnsupportedColorDepthError(f"The number of {kind.label} color components isn't 3.")
        if bit_depth not in SUPPORTED_BIT_DEPTHS:
            raise UnsupportedBitDepthError(f"The {kind.label} isn't 24 or 32-bit.")

        has_alpha = any(band in _ALPHA_BANDS for band in pil_image.getbands())
        transparency = TransparencyMode.TRANSLUCENT if has_alpha else TransparencyMode.OPAQUE

        width, height = pil_image.size
        logger.info("Loaded %s %s (%dx%d, %s)", kind.label, path, width, height, transparency.value)
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            color_components=components,
            bit_depth=bit_depth,
            transparency=transparency,
        )

    def to_rgb_array(self, image: ImageData) -> np.ndarray:
        """Пиксели изображения как uint8-массив (H, W, 3)."""
        return np.asarray(image.pil_image.convert("RGB"), dtype=np.uint8)

    def to_rgba_array(self, image: ImageData) -> np.ndarray:
        """Пиксели как (H, W, 4); у непрозрачных изображений альфа равна 255."""
        return np.asarray(image.pil_image.convert("RGBA"), dtype=np.uint8)

    def save_image(self, pixels: np.ndarray, file_path: str | Path, fmt: OutputFormat) -> Path:
        """Кодирует RGB-массив в JPEG или PNG и пишет на диск."""
        path = Path(file_path)
        out = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        out.save(path, format=fmt.pil_format)
        logger.info("Saved %s as %s", path, fmt.pil_format)
        return path
