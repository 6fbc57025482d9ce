# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import logging
import sys
from typing import Union

LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"unknown log level: {level!r} (expected one of {', '.join(LEVEL_NAMES)})")
    return getattr(logging, name)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    logging.basicConfig(
        level=parse_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
