"""Контроллер приложения: последовательный опрос параметров и запуск наложения.

SOLID:
- SRP: класс управляет порядком вопросов и связью консоли с сервисами (без арифметики пикселей).
- DIP: зависит от сервисов как от ролей; консоль и сервисы можно подменить.
Clean Code:
- Первая же ошибка ввода завершает прогон: сообщение печатается один раз, файл не пишется.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from watermarker.models.errors import WatermarkError
from watermarker.models.image_model import ImageData, ImageKind
from watermarker.models.params import (
    AlphaBinary,
    BlendConfig,
    ChromaKey,
    Grid,
    NoRule,
    Placement,
    PositionMethod,
    Single,
    TransparencyRule,
    YesNo,
)
from watermarker.services import validation_service as validate
from watermarker.services.compositor_service import CompositorService
from watermarker.services.image_service import ImageService
from watermarker.services.placement_service import PlacementService
from watermarker.ui.console import Console

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает консоль с прикладной логикой.

    Ответственности:
    - Загрузка и проверка обоих изображений через `ImageService`.
    - Опрос и валидация параметров в фиксированном порядке.
    - Построение плана размещения и полный проход `CompositorService`.
    - Запись результата и итоговое сообщение.
    """
    console: Console

    _image_service: ImageService = field(default_factory=ImageService)
    _placement_service: PlacementService = field(default_factory=PlacementService)
    _compositor: CompositorService = field(default_factory=CompositorService)

    def run(self) -> Optional[Path]:
        """Выполняет один прогон. Возвращает путь к результату или None при ошибке ввода."""
        try:
            return self._run()
        except WatermarkError as err:
            logger.info("Run aborted: %s", type(err).__name__)
            self.console.say(err.message)
            return None

    def _run(self) -> Path:
        image = self._load_image(ImageKind.IMAGE)
        watermark = self._load_image(ImageKind.WATERMARK)
        validate.check_dimensions(image, watermark)

        rule = self._ask_transparency_rule(watermark)
        weight = validate.parse_weight(
            self.console.ask("Input the watermark transparency percentage (Integer 0-100):")
        )
        config = BlendConfig(rule=rule, weight_percent=weight)
        placement = self._ask_placement(image, watermark)

        output_name = self.console.ask("Input the output image filename (jpg or png extension):")
        fmt = validate.parse_output_filename(output_name)

        plan = self._placement_service.build_plan(
            placement, (image.width, image.height), (watermark.width, watermark.height)
        )
        pixels = self._compositor.compose(
            self._image_service.to_rgb_array(image),
            self._image_service.to_rgba_array(watermark),
            plan,
            config,
        )
        path = self._image_service.save_image(pixels, output_name, fmt)
        self.console.say(f"The watermarked image {output_name} has been created.")
        return path

    # ---- Helpers ----
    def _load_image(self, kind: ImageKind) -> ImageData:
        filename = self.console.ask(f"Input the {kind.description} filename:")
        return self._image_service.load_image(filename, kind)

    def _ask_transparency_rule(self, watermark: ImageData) -> TransparencyRule:
        # альфа предлагается только для полупрозрачного знака, хромакей только для непрозрачного
        if watermark.is_translucent:
            answer = validate.parse_yes_no(self.console.ask("Do you want to use the watermark's Alpha channel?"))
            return AlphaBinary() if answer is YesNo.YES else NoRule()

        answer = validate.parse_yes_no(self.console.ask("Do you want to set a transparency color?"))
        if answer is YesNo.NO:
            return NoRule()
        color = validate.parse_transparency_color(
            self.console.ask("Input a transparency color ([Red] [Green] [Blue]):")
        )
        return ChromaKey(color)

    def _ask_placement(self, image: ImageData, watermark: ImageData) -> Placement:
        method = validate.parse_position_method(self.console.ask("Choose the position method (single, grid):"))
        if method is PositionMethod.GRID:
            return Grid()
        diff_x = image.width - watermark.width
        diff_y = image.height - watermark.height
        position = validate.parse_position(
            self.console.ask(f"Input the watermark position ([x 0-{diff_x}] [y 0-{diff_y}]):"),
            diff_x,
            diff_y,
        )
        return Single(position)
