"""Модели данных для изображений, цветов и координат.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

OPAQUE_ALPHA = 255


class TransparencyMode(Enum):
    OPAQUE = "opaque"
    TRANSLUCENT = "translucent"


class ImageKind(Enum):
    """Роль изображения в прогоне; `description` идёт в подсказку ввода."""
    IMAGE = "image"
    WATERMARK = "watermark image"

    @property
    def description(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, eq=False)
class Color:
    """Цвет RGB или RGBA (8 бит на канал).

    Отсутствующий альфа-канал означает полную непрозрачность (255), поэтому
    `Color(r, g, b) == Color(r, g, b, 255)`.
    """
    red: int
    green: int
    blue: int
    alpha: Optional[int] = None

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    @property
    def effective_alpha(self) -> int:
        return OPAQUE_ALPHA if self.alpha is None else self.alpha

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb == other.rgb and self.effective_alpha == other.effective_alpha

    def __hash__(self) -> int:
        return hash((self.rgb, self.effective_alpha))

    def __str__(self) -> str:
        channels = [self.red, self.green, self.blue]
        if self.alpha is not None:
            channels.append(self.alpha)
        return "(" + ", ".join(str(c) for c in channels) + ")"


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGBA".
        color_components: Число цветовых компонент без альфа-канала.
        bit_depth: Бит на пиксель (24 = RGB, 32 = RGB + альфа).
        transparency: Есть ли в изображении значимый альфа-канал.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    color_components: int
    bit_depth: int
    transparency: TransparencyMode

    @property
    def is_translucent(self) -> bool:
        return self.transparency is TransparencyMode.TRANSLUCENT
