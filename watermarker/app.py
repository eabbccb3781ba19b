from __future__ import annotations

from pathlib import Path
from typing import Optional

from watermarker.controllers.app_controller import AppController
from watermarker.ui.console import Console


class WatermarkApp:
    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console()
        self._controller = AppController(console=self._console)

    def run(self) -> Optional[Path]:
        return self._controller.run()
