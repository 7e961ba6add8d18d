"""Validaciones para entradas del cliente."""

from __future__ import annotations

from shared.errors import ValidationError
from shared.lane_codes import is_valid_lane_code, normalize_lane_code


def validate_lane_code(raw_value: str) -> str:
    """Valida un codigo de carril ingresado y retorna su forma normalizada."""
    lane_code = raw_value.strip()
    if not lane_code:
        raise ValidationError("El codigo de carril no puede estar vacio.")

    if not is_valid_lane_code(lane_code):
        raise ValidationError(
            f"Codigo de carril invalido: {lane_code}. Usa una letra seguida de un digito."
        )

    return normalize_lane_code(lane_code)


def validate_description(raw_value: str) -> str:
    """Valida que la descripcion del producto no este vacia."""
    description = raw_value.strip()
    if not description:
        raise ValidationError("La descripcion del producto no puede estar vacia.")
    return description


def validate_quantity(quantity: int) -> int:
    """Valida una cantidad de reposicion."""
    if quantity <= 0:
        raise ValidationError("La cantidad debe ser mayor a 0.")
    return quantity
