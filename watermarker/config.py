"""Конфигурация прогона: флаги командной строки с запасным значением из окружения."""
from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

LOG_LEVEL_ENV = "WATERMARK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    log_level: int = logging.WARNING


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="watermarker",
        description="Blend a watermark image onto an image. Parameters are asked interactively.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Diagnostic log level on stderr (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    return parser


def load_config(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    env = os.environ if environ is None else environ
    args = build_parser().parse_args(argv)
    level_name = args.log_level or env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    return AppConfig(log_level=_level_from_name(level_name))
