"""Fabrica de productos, registros y maquinas expendedoras."""

from __future__ import annotations

import logging

from servidor.domain.models import ProductRecord, VendingMachineProduct
from servidor.services.vending_machine import VendingMachine
from shared.lane_codes import is_valid_lane_code, normalize_lane_code

LOGGER = logging.getLogger(__name__)


class ProductFactory:
    """Construye objetos de dominio validados desde datos crudos."""

    def make_vending_machine_product(
        self,
        lane_code: str,
        description: str,
    ) -> VendingMachineProduct | None:
        """Crea un producto o retorna None si el carril tiene formato invalido."""
        if not is_valid_lane_code(lane_code):
            LOGGER.warning("Codigo de carril invalido: %r", lane_code)
            return None

        return VendingMachineProduct(
            lane_code=normalize_lane_code(lane_code),
            description=description,
        )

    def make_product_record(self, product: VendingMachineProduct) -> ProductRecord:
        """Crea un registro con contadores en cero."""
        return ProductRecord(product=product)

    def make_vending_machine(self) -> VendingMachine:
        """Crea una maquina vacia."""
        return VendingMachine()


_FACTORY = ProductFactory()


def get_factory() -> ProductFactory:
    """Retorna la fabrica compartida."""
    return _FACTORY
