"""Tests para la fabrica de productos y el formato de carriles."""

from __future__ import annotations

import unittest

from servidor.domain.factory import ProductFactory, get_factory
from servidor.domain.models import ProductRecord, VendingMachineProduct
from servidor.services.vending_machine import VendingMachine
from shared.lane_codes import is_valid_lane_code, normalize_lane_code


class ProductFactoryTests(unittest.TestCase):
    """Valida construccion de productos, registros y maquinas."""

    def setUp(self) -> None:
        self.factory = get_factory()

    def test_get_factory_returns_shared_instance(self) -> None:
        """Debe retornar siempre la misma fabrica."""
        self.assertIsInstance(self.factory, ProductFactory)
        self.assertIs(get_factory(), self.factory)

    def test_make_product_with_valid_lane_codes(self) -> None:
        """Debe aceptar letra + digito sin importar mayusculas."""
        for lane_code in ("A1", "a1", "Z0", "m9"):
            with self.subTest(lane_code=lane_code):
                product = self.factory.make_vending_machine_product(lane_code, "Haggis Crisps")
                self.assertIsNotNone(product)

    def test_make_product_normalizes_lane_code(self) -> None:
        """Debe guardar el carril en mayusculas."""
        product = self.factory.make_vending_machine_product("a1", "Haggis Crisps")

        self.assertEqual(product, VendingMachineProduct(lane_code="A1", description="Haggis Crisps"))

    def test_make_product_with_incorrect_lane_format_returns_none(self) -> None:
        """Debe retornar None si el orden o los caracteres no calzan."""
        for lane_code in ("1A", "AA", "11", "A!", "!A"):
            with self.subTest(lane_code=lane_code):
                with self.assertLogs("servidor.domain.factory", level="WARNING"):
                    product = self.factory.make_vending_machine_product(lane_code, "Haggis Crisps")
                self.assertIsNone(product)

    def test_make_product_with_incorrect_lane_length_returns_none(self) -> None:
        """Debe retornar None si el carril no tiene exactamente 2 caracteres."""
        for lane_code in ("A", "A1A", "", " A1"):
            with self.subTest(lane_code=lane_code):
                with self.assertLogs("servidor.domain.factory", level="WARNING"):
                    product = self.factory.make_vending_machine_product(lane_code, "Haggis Crisps")
                self.assertIsNone(product)

    def test_make_product_record_starts_with_zero_counts(self) -> None:
        """Debe crear registro sin stock ni ventas."""
        product = self.factory.make_vending_machine_product("A1", "Haggis Crisps")
        record = self.factory.make_product_record(product)

        self.assertIsInstance(record, ProductRecord)
        self.assertIs(record.product, product)
        self.assertEqual(record.item_count, 0)
        self.assertEqual(record.sale_count, 0)

    def test_make_vending_machine_returns_empty_machine(self) -> None:
        """Debe crear maquinas nuevas e independientes."""
        first = self.factory.make_vending_machine()
        second = self.factory.make_vending_machine()

        self.assertIsInstance(first, VendingMachine)
        self.assertEqual(len(first), 0)
        self.assertIsNot(first, second)


class LaneCodeHelpersTests(unittest.TestCase):
    """Valida helpers de normalizacion de carriles."""

    def test_normalize_lane_code(self) -> None:
        """Debe limpiar espacios y pasar a mayusculas."""
        self.assertEqual(normalize_lane_code(" b4 "), "B4")

    def test_is_valid_lane_code_rejects_non_ascii_letters(self) -> None:
        """No debe aceptar letras fuera de ASCII ni digitos unicode."""
        self.assertFalse(is_valid_lane_code("Ñ1"))
        self.assertFalse(is_valid_lane_code("A٣"))


if __name__ == "__main__":
    unittest.main()
