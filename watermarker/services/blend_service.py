"""Смешивание пикселя базового изображения с пикселем водяного знака.

Принципы:
- SRP: только арифметика смешивания и решение "смешивать или пропустить".
- Одна реализация для массивов; попиксельный вызов оборачивает её.
"""
from __future__ import annotations

import numpy as np

from watermarker.models.image_model import OPAQUE_ALPHA, Color
from watermarker.models.params import AlphaBinary, BlendConfig, ChromaKey, NoRule, TransparencyRule


class BlendService:
    def needs_blending(self, watermark: np.ndarray, rule: TransparencyRule) -> np.ndarray:
        """
        Маска пикселей водяного знака, которые участвуют в смешивании.
        `watermark` имеет форму (..., 4), альфа в последнем канале.
        """
        if isinstance(rule, NoRule):
            return np.ones(watermark.shape[:-1], dtype=bool)
        if isinstance(rule, AlphaBinary):
            # альфа бинарная: всё, что не 255, считается полностью прозрачным
            return watermark[..., 3] == OPAQUE_ALPHA
        if isinstance(rule, ChromaKey):
            key = np.array(rule.color.rgb, dtype=watermark.dtype)
            return np.any(watermark[..., :3] != key, axis=-1)
        raise TypeError(f"Unknown transparency rule: {rule!r}")

    def mix(self, base: np.ndarray, watermark_rgb: np.ndarray, weight: int) -> np.ndarray:
        """
        Целочисленная смесь по каналам: (w * wm + (100 - w) * base) / 100 с отбрасыванием дробной части.
        """
        b = base.astype(np.int32)
        w = watermark_rgb.astype(np.int32)
        return ((weight * w + (100 - weight) * b) // 100).astype(np.uint8)

    def blend(self, base: np.ndarray, watermark: np.ndarray, config: BlendConfig) -> np.ndarray:
        """
        Смешивает массивы (..., 3) базы и (..., 4) водяного знака.
        Где смешивание не нужно, возвращается пиксель базы без изменений.
        """
        mask = self.needs_blending(watermark, config.rule)
        mixed = self.mix(base, watermark[..., :3], config.weight_percent)
        return np.where(mask[..., None], mixed, base).astype(np.uint8)

    def blend_pixel(self, base: Color, watermark: Color, config: BlendConfig) -> Color:
        base_arr = np.array(base.rgb, dtype=np.uint8)
        wm_arr = np.array(watermark.rgb + (watermark.effective_alpha,), dtype=np.uint8)
        r, g, b = (int(c) for c in self.blend(base_arr, wm_arr, config))
        return Color(r, g, b)
