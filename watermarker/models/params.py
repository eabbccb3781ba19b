"""Параметры прогона: варианты выбора, правило прозрачности, размещение.

Принципы:
- Закрытые множества вариантов вместо свободной диспетчеризации по строкам.
- Все объекты создаются один раз из провалидированного ввода и далее только читаются.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from watermarker.models.image_model import Color, Point


class _TokenChoice(Enum):
    """Перечисление, выбираемое по токену без учёта регистра."""

    @classmethod
    def from_token(cls, token: str):
        """Возвращает вариант, имя которого совпадает с токеном, иначе None."""
        wanted = token.upper()
        for member in cls:
            if member.name == wanted:
                return member
        return None


class YesNo(_TokenChoice):
    YES = "yes"
    NO = "no"


class PositionMethod(_TokenChoice):
    SINGLE = "single"
    GRID = "grid"


class OutputFormat(Enum):
    """Поддерживаемые форматы записи: расширение файла и имя кодека PIL."""
    JPG = (".jpg", "JPEG")
    PNG = (".png", "PNG")

    @property
    def extension(self) -> str:
        return self.value[0]

    @property
    def pil_format(self) -> str:
        return self.value[1]

    @classmethod
    def from_filename(cls, filename: str) -> Optional["OutputFormat"]:
        # суффикс сравнивается с учётом регистра
        for member in cls:
            if filename.endswith(member.extension):
                return member
        return None


# ---- Правило прозрачности ----
@dataclass(frozen=True)
class NoRule:
    """Смешивается каждый покрытый пиксель."""


@dataclass(frozen=True)
class AlphaBinary:
    """Смешиваются только пиксели водяного знака с альфой 255, остальные пропускаются."""


@dataclass(frozen=True)
class ChromaKey:
    """Пиксель, совпадающий по RGB с `color`, считается прозрачным."""
    color: Color


TransparencyRule = Union[NoRule, AlphaBinary, ChromaKey]


# ---- Размещение ----
@dataclass(frozen=True)
class Single:
    position: Point


@dataclass(frozen=True)
class Grid:
    pass


Placement = Union[Single, Grid]


@dataclass(frozen=True)
class BlendConfig:
    """Настройки смешивания на весь прогон.

    Fields:
        rule: Правило прозрачности; альфа и хромакей взаимоисключающие.
        weight_percent: Вес водяного знака, 0..100.
    """
    rule: TransparencyRule
    weight_percent: int

    @property
    def use_alpha_channel(self) -> bool:
        return isinstance(self.rule, AlphaBinary)

    @property
    def transparency_color(self) -> Optional[Color]:
        if isinstance(self.rule, ChromaKey):
            return self.rule.color
        return None
