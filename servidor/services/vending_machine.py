"""Registro en memoria de productos por carril de una maquina expendedora."""

from __future__ import annotations

import logging
from dataclasses import replace
from threading import RLock

from servidor.domain.models import ProductRecord, VendingMachineProduct
from servidor.services.popularity import find_most_popular
from shared.errors import LaneCodeAlreadyInUseError, LaneCodeNotRegisteredError
from shared.lane_codes import normalize_lane_code

LOGGER = logging.getLogger(__name__)


class VendingMachine:
    """Administra registros de producto, stock y ventas por carril.

    Todas las operaciones toman el mismo lock, por lo que las consultas
    agregadas siempre ven un estado consistente.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._records: dict[str, ProductRecord] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, lane_code: object) -> bool:
        if not isinstance(lane_code, str):
            return False
        with self._lock:
            return normalize_lane_code(lane_code) in self._records

    def register_product(self, product: VendingMachineProduct) -> None:
        """Registra un producto en su carril con contadores en cero."""
        lane_key = normalize_lane_code(product.lane_code)
        if product.lane_code != lane_key:
            product = replace(product, lane_code=lane_key)
        with self._lock:
            if lane_key in self._records:
                raise LaneCodeAlreadyInUseError(lane_key)
            self._records[lane_key] = ProductRecord(product=product)

        LOGGER.info("Producto registrado: carril=%s, descripcion=%s", lane_key, product.description)

    def unregister_product(self, product: VendingMachineProduct) -> None:
        """Elimina el registro asociado al carril del producto."""
        lane_key = normalize_lane_code(product.lane_code)
        with self._lock:
            if self._records.pop(lane_key, None) is None:
                raise LaneCodeNotRegisteredError(lane_key)

        LOGGER.info("Producto retirado: carril=%s", lane_key)

    def add_item(self, lane_code: str) -> None:
        """Agrega una unidad al stock del carril."""
        with self._lock:
            record = self._get_record(lane_code)
            record.add_item()
            LOGGER.debug("Reposicion en carril %s: stock=%s", record.lane_code, record.item_count)

    def buy_item(self, lane_code: str) -> None:
        """Vende una unidad del carril."""
        with self._lock:
            record = self._get_record(lane_code)
            record.record_sale()
            LOGGER.debug(
                "Venta en carril %s: stock=%s, ventas=%s",
                record.lane_code,
                record.item_count,
                record.sale_count,
            )

    def get_number_of_products(self) -> int:
        """Cuenta descripciones distintas, no carriles."""
        with self._lock:
            return len({record.description for record in self._records.values()})

    def get_number_of_items(self, lane_code: str) -> int:
        with self._lock:
            return self._get_record(lane_code).item_count

    def get_number_of_sales(self, lane_code: str) -> int:
        with self._lock:
            return self._get_record(lane_code).sale_count

    def get_total_number_of_items(self) -> int:
        with self._lock:
            return sum(record.item_count for record in self._records.values())

    def get_total_number_of_sales(self) -> int:
        with self._lock:
            return sum(record.sale_count for record in self._records.values())

    def get_most_popular(self) -> ProductRecord | None:
        """Retorna copia del registro con mas ventas.

        Retorna None si ningun carril ha vendido y lanza
        LaneCodeNotRegisteredError si la maquina no tiene productos.
        """
        with self._lock:
            if not self._records:
                raise LaneCodeNotRegisteredError(
                    "",
                    "La maquina no tiene productos registrados.",
                )
            best = find_most_popular(self._records.values())
            return best.snapshot() if best is not None else None

    def get_record(self, lane_code: str) -> ProductRecord:
        """Retorna una copia del registro del carril."""
        with self._lock:
            return self._get_record(lane_code).snapshot()

    def list_records(self) -> list[ProductRecord]:
        """Lista copias de los registros en orden de registro."""
        with self._lock:
            return [record.snapshot() for record in self._records.values()]

    def _get_record(self, lane_code: str) -> ProductRecord:
        lane_key = normalize_lane_code(lane_code)
        record = self._records.get(lane_key)
        if record is None:
            raise LaneCodeNotRegisteredError(lane_key)
        return record
