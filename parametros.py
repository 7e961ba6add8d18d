"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

LANE_CODE_LENGTH = 2
DEFAULT_RANKING_SIZE = 3
REPLAY_REQUIRED_HEADERS: tuple[str, ...] = ("accion", "carril")
READ_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "cp1252")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
)
