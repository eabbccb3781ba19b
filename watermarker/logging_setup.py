from __future__ import annotations

import logging
import sys
from typing import Any


def setup_logging(level: int = logging.WARNING, *, stream: Any | None = None) -> None:
    """Один обработчик на stderr; stdout остаётся за диалогом с пользователем."""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
