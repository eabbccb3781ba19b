"""Построчный консольный ввод/вывод для диалога с пользователем.

Принципы:
- ISP: контроллеру нужны только `ask` и `say`; тесты подменяют консоль целиком.
"""
from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO


class Console:
    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._read_line = read_line or input
        self._out = out or sys.stdout

    def say(self, message: str) -> None:
        print(message, file=self._out, flush=True)

    def ask(self, prompt: str) -> str:
        """Печатает подсказку и читает одну строку; EOFError пробрасывается."""
        self.say(prompt)
        return self._read_line()
