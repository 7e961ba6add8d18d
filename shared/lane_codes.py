"""Helpers para normalizar y validar codigos de carril."""

from __future__ import annotations

from parametros import LANE_CODE_LENGTH


def normalize_lane_code(value: str) -> str:
    """Normaliza un codigo de carril para usarlo como key."""
    return value.strip().upper()


def is_valid_lane_code(value: str) -> bool:
    """Indica si el codigo tiene formato letra + digito."""
    if len(value) != LANE_CODE_LENGTH:
        return False

    letter, digit = value[0], value[1]
    return letter.isascii() and letter.isalpha() and digit in "0123456789"
