from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import pytest
from PIL import Image

from watermarker.ui.console import Console


class ScriptedConsole(Console):
    """Консоль с заранее заданными ответами; всё выведенное копится в `lines`."""

    def __init__(self, answers: Sequence[str]) -> None:
        self._answers = list(answers)
        self.lines: List[str] = []
        super().__init__(read_line=self._next_answer)

    def _next_answer(self) -> str:
        if not self._answers:
            raise EOFError("no more scripted answers")
        return self._answers.pop(0)

    def say(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, size: Tuple[int, int], color, mode: str = "RGB") -> Path:
        path = tmp_path / name
        Image.new(mode, size, color=color).save(path)
        return path

    return _make


@pytest.fixture
def scripted() -> Callable[[Sequence[str]], ScriptedConsole]:
    return ScriptedConsole
