"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from parametros import DEFAULT_RANKING_SIZE
from servidor.domain.factory import get_factory
from servidor.domain.models import ProductRecord, VendingMachineProduct
from servidor.services.popularity import find_most_popular, rank_by_sales
from servidor.services.vending_machine import VendingMachine
from shared.errors import ServiceError, ValidationError
from shared.protocol import (
    LaneRequest,
    LaneStatusResponse,
    MachineSummaryResponse,
    RegisterProductRequest,
    UnregisterProductRequest,
)

LOGGER = logging.getLogger(__name__)


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def register_product(self, request: RegisterProductRequest) -> LaneStatusResponse:
        """Solicita registrar un producto en un carril."""

    def unregister_product(self, request: UnregisterProductRequest) -> None:
        """Solicita retirar el producto de un carril."""

    def add_item(self, request: LaneRequest) -> LaneStatusResponse:
        """Solicita reponer una unidad en un carril."""

    def buy_item(self, request: LaneRequest) -> LaneStatusResponse:
        """Solicita vender una unidad de un carril."""

    def get_lane_status(self, request: LaneRequest) -> LaneStatusResponse:
        """Solicita el estado de un carril."""

    def get_summary(self, ranking_size: int = DEFAULT_RANKING_SIZE) -> MachineSummaryResponse:
        """Solicita el resumen agregado de la maquina."""


class LocalServerGateway:
    """Implementacion local del gateway usando una maquina en memoria."""

    def __init__(self, vending_machine: VendingMachine | None = None) -> None:
        if vending_machine is None:
            vending_machine = get_factory().make_vending_machine()
        self._vending_machine = vending_machine

    def register_product(self, request: RegisterProductRequest) -> LaneStatusResponse:
        """Registra el producto delegando en la maquina."""
        product = _build_product(request.lane_code, request.description)
        try:
            self._vending_machine.register_product(product)
            record = self._vending_machine.get_record(request.lane_code)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al registrar producto.")
            raise ServiceError("No fue posible registrar el producto.") from exc

        return _to_status(record)

    def unregister_product(self, request: UnregisterProductRequest) -> None:
        """Retira el producto registrado en el carril."""
        try:
            record = self._vending_machine.get_record(request.lane_code)
            self._vending_machine.unregister_product(record.product)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al retirar producto.")
            raise ServiceError("No fue posible retirar el producto.") from exc

    def add_item(self, request: LaneRequest) -> LaneStatusResponse:
        """Repone una unidad y retorna el estado del carril."""
        try:
            self._vending_machine.add_item(request.lane_code)
            record = self._vending_machine.get_record(request.lane_code)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al reponer carril.")
            raise ServiceError("No fue posible reponer el carril.") from exc

        return _to_status(record)

    def buy_item(self, request: LaneRequest) -> LaneStatusResponse:
        """Vende una unidad y retorna el estado del carril."""
        try:
            self._vending_machine.buy_item(request.lane_code)
            record = self._vending_machine.get_record(request.lane_code)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al vender producto.")
            raise ServiceError("No fue posible completar la venta.") from exc

        return _to_status(record)

    def get_lane_status(self, request: LaneRequest) -> LaneStatusResponse:
        """Retorna el estado actual de un carril."""
        try:
            record = self._vending_machine.get_record(request.lane_code)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al consultar carril.")
            raise ServiceError("No fue posible consultar el carril.") from exc

        return _to_status(record)

    def get_summary(self, ranking_size: int = DEFAULT_RANKING_SIZE) -> MachineSummaryResponse:
        """Construye el resumen agregado desde una sola copia de los registros."""
        records = self._vending_machine.list_records()
        most_popular = find_most_popular(records)

        return MachineSummaryResponse(
            number_of_products=len({record.description for record in records}),
            total_items=sum(record.item_count for record in records),
            total_sales=sum(record.sale_count for record in records),
            most_popular=_to_status(most_popular) if most_popular is not None else None,
            ranking=[_to_status(record) for record in rank_by_sales(records, ranking_size)],
        )


def _build_product(lane_code: str, description: str) -> VendingMachineProduct:
    """Construye el producto con la fabrica o falla si el carril es invalido."""
    product = get_factory().make_vending_machine_product(lane_code, description)
    if product is None:
        raise ValidationError(f"Codigo de carril invalido: {lane_code}")
    return product


def _to_status(record: ProductRecord) -> LaneStatusResponse:
    """Convierte un registro de dominio en DTO de respuesta."""
    return LaneStatusResponse(
        lane_code=record.lane_code,
        description=record.description,
        item_count=record.item_count,
        sale_count=record.sale_count,
    )
