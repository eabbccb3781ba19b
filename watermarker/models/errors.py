"""Ошибки прогона.

`WatermarkError` и наследники описывают ошибки пользовательского ввода: сообщение
печатается один раз, после чего прогон завершается без выходного файла.
`InvariantViolation` означает ошибку программы и никогда не перехватывается.
"""
from __future__ import annotations


class WatermarkError(Exception):
    """Базовая ошибка валидации; `str(err)` готов к показу пользователю."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ImageNotFoundError(WatermarkError):
    pass


class UnreadableImageError(WatermarkError):
    pass


class DimensionMismatchError(WatermarkError):
    pass


class UnsupportedColorDepthError(WatermarkError):
    pass


class UnsupportedBitDepthError(WatermarkError):
    pass


class MalformedInputError(WatermarkError):
    pass


class OutOfRangeError(WatermarkError):
    pass


class InvalidChoiceError(WatermarkError):
    pass


class UnsupportedOutputExtensionError(WatermarkError):
    pass


class InvariantViolation(AssertionError):
    """Нарушен внутренний инвариант (например, координата вне изображения)."""
