"""Tests del controlador principal del cliente."""

from __future__ import annotations

import unittest
from unittest import mock

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from shared.errors import (
    LaneCodeAlreadyInUseError,
    LaneCodeNotRegisteredError,
    ProductUnavailableError,
    ValidationError,
)


class AppControllerTests(unittest.TestCase):
    """Valida validaciones de entrada y delegacion al gateway."""

    def setUp(self) -> None:
        self.gateway = LocalServerGateway()
        self.controller = AppController(gateway=self.gateway)

    def test_on_register_product_normalizes_input(self) -> None:
        """Debe limpiar carril y descripcion antes de registrar."""
        response = self.controller.on_register_product(" b2 ", "  Irn Bru ")

        self.assertEqual(response.lane_code, "B2")
        self.assertEqual(response.description, "Irn Bru")

    def test_on_register_product_rejects_invalid_input(self) -> None:
        """Debe lanzar ValidationError sin llegar al gateway."""
        with mock.patch.object(self.gateway, "register_product") as spy:
            with self.assertRaises(ValidationError):
                self.controller.on_register_product("", "Irn Bru")
            with self.assertRaises(ValidationError):
                self.controller.on_register_product("2B", "Irn Bru")
            with self.assertRaises(ValidationError):
                self.controller.on_register_product("B2", "   ")

            spy.assert_not_called()

    def test_on_register_product_twice_raises(self) -> None:
        """Debe propagar carril en uso."""
        self.controller.on_register_product("A1", "Haggis Crisps")

        with self.assertRaises(LaneCodeAlreadyInUseError):
            self.controller.on_register_product("a1", "Irn Bru")

    def test_on_restock_adds_quantity(self) -> None:
        """Debe reponer la cantidad indicada."""
        self.controller.on_register_product("A1", "Haggis Crisps")

        response = self.controller.on_restock("A1", quantity=4)

        self.assertEqual(response.item_count, 4)

    def test_on_restock_rejects_non_positive_quantity(self) -> None:
        """Debe rechazar cantidades menores o iguales a 0."""
        self.controller.on_register_product("A1", "Haggis Crisps")

        with self.assertRaises(ValidationError):
            self.controller.on_restock("A1", quantity=0)

    def test_on_restock_unregistered_lane_fails_before_adding(self) -> None:
        """Debe fallar sin reponer si el carril no existe."""
        with self.assertRaises(LaneCodeNotRegisteredError):
            self.controller.on_restock("C3", quantity=2)

    def test_on_buy_and_unregister(self) -> None:
        """Debe vender y luego permitir retirar el carril."""
        self.controller.on_register_product("A1", "Haggis Crisps")
        self.controller.on_restock("A1")

        bought = self.controller.on_buy("a1")
        self.controller.on_unregister_product("A1")

        self.assertEqual((bought.item_count, bought.sale_count), (0, 1))
        with self.assertRaises(LaneCodeNotRegisteredError):
            self.controller.get_lane_status("A1")

    def test_on_buy_without_enough_stock_sells_nothing(self) -> None:
        """Si el stock no cubre la cantidad no debe vender ninguna unidad."""
        self.controller.on_register_product("A1", "Irn Bru")
        self.controller.on_restock("A1")

        with self.assertRaises(ProductUnavailableError):
            self.controller.on_buy("A1", quantity=3)

        status = self.controller.get_lane_status("A1")
        self.assertEqual((status.item_count, status.sale_count), (1, 0))

    def test_on_buy_several_units(self) -> None:
        """Debe vender todas las unidades pedidas cuando hay stock."""
        self.controller.on_register_product("A1", "Irn Bru")
        self.controller.on_restock("A1", quantity=3)

        bought = self.controller.on_buy("A1", quantity=2)

        self.assertEqual((bought.item_count, bought.sale_count), (1, 2))

    def test_get_summary_delegates_to_gateway(self) -> None:
        """Debe pedir el resumen con el tamano de ranking indicado."""
        with mock.patch.object(self.gateway, "get_summary", wraps=self.gateway.get_summary) as spy:
            summary = self.controller.get_summary(ranking_size=5)

        spy.assert_called_once_with(ranking_size=5)
        self.assertEqual(summary.number_of_products, 0)


if __name__ == "__main__":
    unittest.main()
