"""Точка входа в приложение."""
from __future__ import annotations

from typing import Optional, Sequence

from watermarker.app import WatermarkApp
from watermarker.config import load_config
from watermarker.logging_setup import setup_logging


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Читает конфигурацию, настраивает логирование и выполняет один прогон."""
    config = load_config(argv)
    setup_logging(config.log_level)
    WatermarkApp().run()


if __name__ == "__main__":
    main()
