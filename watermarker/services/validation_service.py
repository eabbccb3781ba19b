"""Разбор и проверка диапазонов для каждого интерактивного параметра.

Каждая функция принимает сырой текст строки ввода и возвращает типизированное
значение либо бросает наследника `WatermarkError` с готовым сообщением.
"""
from __future__ import annotations

import re
from typing import List

from watermarker.models.errors import (
    DimensionMismatchError,
    InvalidChoiceError,
    MalformedInputError,
    OutOfRangeError,
    UnsupportedOutputExtensionError,
)
from watermarker.models.image_model import Color, ImageData, Point
from watermarker.models.params import OutputFormat, PositionMethod, YesNo

MAX_CHANNEL = 255
MAX_WEIGHT = 100

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _parse_ints(raw: str, count: int) -> List[int]:
    """Ровно `count` целых через пробельные символы, иначе ValueError."""
    tokens = raw.split()
    if len(tokens) != count or not all(_INT_TOKEN.fullmatch(t) for t in tokens):
        raise ValueError(raw)
    return [int(t) for t in tokens]


def check_dimensions(image: ImageData, watermark: ImageData) -> None:
    if watermark.width > image.width or watermark.height > image.height:
        raise DimensionMismatchError("The watermark's dimensions are larger.")


def parse_yes_no(raw: str) -> YesNo:
    choice = YesNo.from_token(raw.strip())
    if choice is None:
        raise InvalidChoiceError("The answer isn't \"yes\" or \"no\".")
    return choice


def parse_position_method(raw: str) -> PositionMethod:
    method = PositionMethod.from_token(raw.strip())
    if method is None:
        raise InvalidChoiceError("The position method input is invalid.")
    return method


def parse_position(raw: str, max_x: int, max_y: int) -> Point:
    """Позиция "X Y" с x в [0, max_x] и y в [0, max_y]."""
    try:
        x, y = _parse_ints(raw, 2)
    except ValueError:
        raise MalformedInputError("The position input is invalid.") from None
    if not (0 <= x <= max_x and 0 <= y <= max_y):
        raise OutOfRangeError("The position input is out of range.")
    return Point(x, y)


def parse_transparency_color(raw: str) -> Color:
    try:
        channels = _parse_ints(raw, 3)
    except ValueError:
        raise MalformedInputError("The transparency color input is invalid.") from None
    if any(c < 0 or c > MAX_CHANNEL for c in channels):
        raise OutOfRangeError("The transparency color input is out of range.")
    r, g, b = channels
    return Color(r, g, b)


def parse_weight(raw: str) -> int:
    try:
        (weight,) = _parse_ints(raw, 1)
    except ValueError:
        raise MalformedInputError("The transparency percentage isn't an integer number.") from None
    if not 0 <= weight <= MAX_WEIGHT:
        raise OutOfRangeError("The transparency percentage is out of range.")
    return weight


def parse_output_filename(raw: str) -> OutputFormat:
    fmt = OutputFormat.from_filename(raw)
    if fmt is None:
        raise UnsupportedOutputExtensionError("The output file extension isn't \"jpg\" or \"png\".")
    return fmt
