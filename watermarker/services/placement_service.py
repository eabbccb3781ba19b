"""Геометрия размещения водяного знака: одиночное и плиткой.

План размещения состоит из двух чистых функций: покрыта ли координата базового
изображения и какая ей соответствует координата водяного знака. Функции
работают и с целыми, и с numpy-массивами координат одинаково.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Tuple

import numpy as np

from watermarker.models.errors import InvariantViolation
from watermarker.models.image_model import Point
from watermarker.models.params import Grid, Placement, Single

logger = logging.getLogger(__name__)

Size = Tuple[int, int]


@dataclass(frozen=True)
class PlacementPlan:
    covers_xy: Callable[[Any, Any], Any]
    map_xy: Callable[[Any, Any], Tuple[Any, Any]]

    def covers(self, point: Point) -> bool:
        return bool(self.covers_xy(point.x, point.y))

    def map_to_watermark(self, point: Point) -> Point:
        x, y = self.map_xy(point.x, point.y)
        return Point(int(x), int(y))


class PlacementService:
    def build_plan(self, placement: Placement, image_size: Size, watermark_size: Size) -> PlacementPlan:
        """Строит план размещения по выбранному методу.

        Args:
            placement: `Single(position)` или `Grid()`.
            image_size: (ширина, высота) базового изображения.
            watermark_size: (ширина, высота) водяного знака.
        """
        wm_w, wm_h = watermark_size
        if isinstance(placement, Single):
            return self._single(placement.position, image_size, watermark_size)
        if isinstance(placement, Grid):
            logger.debug("Grid placement, tile %dx%d", wm_w, wm_h)
            return PlacementPlan(
                covers_xy=lambda x, y: np.ones_like(x, dtype=bool),
                map_xy=lambda x, y: (x % wm_w, y % wm_h),
            )
        raise TypeError(f"Unknown placement: {placement!r}")

    def _single(self, position: Point, image_size: Size, watermark_size: Size) -> PlacementPlan:
        img_w, img_h = image_size
        wm_w, wm_h = watermark_size
        px, py = position.x, position.y
        # позиция уже проверена валидатором
        if not (0 <= px <= img_w - wm_w and 0 <= py <= img_h - wm_h):
            raise InvariantViolation(f"Position {position} doesn't fit the image {img_w}x{img_h}")
        logger.debug("Single placement at %s, window %dx%d", position, wm_w, wm_h)
        return PlacementPlan(
            covers_xy=lambda x, y: (x >= px) & (x < px + wm_w) & (y >= py) & (y < py + wm_h),
            map_xy=lambda x, y: (x - px, y - py),
        )
