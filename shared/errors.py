"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class LaneCodeError(ServiceError):
    """Error asociado a un carril puntual de la maquina."""

    def __init__(self, lane_code: str, message: str) -> None:
        super().__init__(message)
        self.lane_code = lane_code


class LaneCodeAlreadyInUseError(LaneCodeError):
    """El carril ya tiene un producto registrado."""

    def __init__(self, lane_code: str) -> None:
        super().__init__(lane_code, f"El carril {lane_code} ya esta en uso.")


class LaneCodeNotRegisteredError(LaneCodeError):
    """El carril no tiene producto registrado."""

    def __init__(self, lane_code: str, message: str | None = None) -> None:
        super().__init__(lane_code, message or f"El carril {lane_code} no esta registrado.")


class ProductUnavailableError(LaneCodeError):
    """No quedan unidades para vender en el carril."""

    def __init__(self, lane_code: str) -> None:
        super().__init__(lane_code, f"No quedan unidades disponibles en el carril {lane_code}.")
