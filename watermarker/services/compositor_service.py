"""Полный проход по изображению: размещение + смешивание для каждого пикселя.

Проход векторизован через numpy, но результат тот же, что и у попиксельного
цикла: каждый выходной пиксель зависит только от своей координаты.
"""
from __future__ import annotations

import logging

import numpy as np

from watermarker.models.errors import InvariantViolation
from watermarker.models.params import BlendConfig
from watermarker.services.blend_service import BlendService
from watermarker.services.placement_service import PlacementPlan

logger = logging.getLogger(__name__)


class CompositorService:
    def __init__(self, blend_service: BlendService | None = None) -> None:
        self._blend = blend_service or BlendService()

    def compose(
        self,
        base: np.ndarray,
        watermark: np.ndarray,
        plan: PlacementPlan,
        config: BlendConfig,
    ) -> np.ndarray:
        """Возвращает новое RGB-изображение размера базы.

        Args:
            base: uint8-массив (H, W, 3).
            watermark: uint8-массив (h, w, 4).
            plan: План размещения водяного знака.
            config: Правило прозрачности и вес.

        Raises:
            InvariantViolation: если план отобразил координату за пределы водяного знака.
        """
        height, width = base.shape[:2]
        wm_height, wm_width = watermark.shape[:2]

        ys, xs = np.indices((height, width))
        covered = np.broadcast_to(np.asarray(plan.covers_xy(xs, ys), dtype=bool), (height, width))

        out = base.copy()
        if not covered.any():
            return out

        mx, my = plan.map_xy(xs[covered], ys[covered])
        mx = np.asarray(mx)
        my = np.asarray(my)
        outside = (mx < 0) | (mx >= wm_width) | (my < 0) | (my >= wm_height)
        if outside.any():
            i = int(np.argmax(outside))
            raise InvariantViolation(
                f"Coordinates ({int(mx[i])}, {int(my[i])}) are out of range (0..{wm_width}, 0..{wm_height})"
            )

        out[covered] = self._blend.blend(base[covered], watermark[my, mx], config)
        logger.debug("Composed %d of %d pixels", int(covered.sum()), height * width)
        return out
