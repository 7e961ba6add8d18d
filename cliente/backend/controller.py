"""Controlador principal del cliente."""

from __future__ import annotations

import logging

from parametros import DEFAULT_RANKING_SIZE
from shared.errors import ProductUnavailableError
from shared.protocol import (
    LaneRequest,
    LaneStatusResponse,
    MachineSummaryResponse,
    RegisterProductRequest,
    UnregisterProductRequest,
)

from .gateway import LocalServerGateway, ServerGateway
from .validators import validate_description, validate_lane_code, validate_quantity

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones del operador y servicios de la maquina."""

    def __init__(self, gateway: ServerGateway | None = None) -> None:
        self._gateway = gateway if gateway is not None else LocalServerGateway()

    def on_register_product(self, lane_code: str, description: str) -> LaneStatusResponse:
        """Valida datos y registra un producto en el carril indicado."""
        lane_key = validate_lane_code(lane_code)
        clean_description = validate_description(description)

        response = self._gateway.register_product(
            RegisterProductRequest(lane_code=lane_key, description=clean_description)
        )
        LOGGER.info(
            "Accion ejecutada: registrar carril=%s, descripcion=%s",
            lane_key,
            clean_description,
        )
        return response

    def on_unregister_product(self, lane_code: str) -> None:
        """Retira el producto registrado en el carril indicado."""
        lane_key = validate_lane_code(lane_code)

        self._gateway.unregister_product(UnregisterProductRequest(lane_code=lane_key))
        LOGGER.info("Accion ejecutada: retirar carril=%s", lane_key)

    def on_restock(self, lane_code: str, quantity: int = 1) -> LaneStatusResponse:
        """Repone una o mas unidades en el carril."""
        lane_key = validate_lane_code(lane_code)
        validate_quantity(quantity)

        response = self._gateway.get_lane_status(LaneRequest(lane_code=lane_key))
        for _ in range(quantity):
            response = self._gateway.add_item(LaneRequest(lane_code=lane_key))

        LOGGER.info(
            "Accion ejecutada: reponer carril=%s, cantidad=%s, stock=%s",
            lane_key,
            quantity,
            response.item_count,
        )
        return response

    def on_buy(self, lane_code: str, quantity: int = 1) -> LaneStatusResponse:
        """Vende una o mas unidades del carril.

        Si el stock no alcanza para toda la cantidad no vende ninguna unidad.
        """
        lane_key = validate_lane_code(lane_code)
        validate_quantity(quantity)

        response = self._gateway.get_lane_status(LaneRequest(lane_code=lane_key))
        if response.item_count < quantity:
            raise ProductUnavailableError(lane_key)

        for _ in range(quantity):
            response = self._gateway.buy_item(LaneRequest(lane_code=lane_key))
        LOGGER.info(
            "Accion ejecutada: comprar carril=%s, stock=%s, ventas=%s",
            lane_key,
            response.item_count,
            response.sale_count,
        )
        return response

    def get_lane_status(self, lane_code: str) -> LaneStatusResponse:
        """Retorna stock y ventas del carril."""
        lane_key = validate_lane_code(lane_code)
        return self._gateway.get_lane_status(LaneRequest(lane_code=lane_key))

    def get_summary(self, ranking_size: int = DEFAULT_RANKING_SIZE) -> MachineSummaryResponse:
        """Retorna el resumen agregado de la maquina."""
        return self._gateway.get_summary(ranking_size=ranking_size)
