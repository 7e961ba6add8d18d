"""Modelos de dominio de la maquina expendedora."""

from __future__ import annotations

from dataclasses import dataclass

from shared.errors import ProductUnavailableError


@dataclass(frozen=True, slots=True)
class VendingMachineProduct:
    """Identidad inmutable de un producto: carril y descripcion."""

    lane_code: str
    description: str


@dataclass(slots=True)
class ProductRecord:
    """Producto registrado con sus contadores de stock y ventas."""

    product: VendingMachineProduct
    item_count: int = 0
    sale_count: int = 0

    @property
    def lane_code(self) -> str:
        return self.product.lane_code

    @property
    def description(self) -> str:
        return self.product.description

    def add_item(self) -> None:
        """Agrega una unidad al stock."""
        self.item_count += 1

    def record_sale(self) -> None:
        """Descuenta una unidad y suma una venta.

        Si no hay stock no modifica ningun contador.
        """
        if self.item_count <= 0:
            raise ProductUnavailableError(self.lane_code)

        self.item_count -= 1
        self.sale_count += 1

    def snapshot(self) -> ProductRecord:
        """Retorna una copia desacoplada del registro."""
        return ProductRecord(
            product=self.product,
            item_count=self.item_count,
            sale_count=self.sale_count,
        )
