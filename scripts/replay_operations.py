"""Reproduce un CSV de operaciones sobre una maquina nueva y muestra un resumen."""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import Sequence, TextIO

from cliente.backend.controller import AppController
from parametros import DEFAULT_RANKING_SIZE, READ_ENCODINGS, REPLAY_REQUIRED_HEADERS
from shared.errors import ServiceError, ValidationError
from shared.protocol import MachineSummaryResponse

LOGGER = logging.getLogger(__name__)

ACTION_REGISTER = "registrar"
ACTION_UNREGISTER = "retirar"
ACTION_RESTOCK = "reponer"
ACTION_BUY = "comprar"
KNOWN_ACTIONS = (ACTION_REGISTER, ACTION_UNREGISTER, ACTION_RESTOCK, ACTION_BUY)


@dataclass(frozen=True)
class Operation:
    """Representa una fila del CSV de operaciones."""

    row_index: int
    action: str
    lane_code: str
    description: str = ""
    quantity_text: str = ""


@dataclass(frozen=True)
class ReplayResult:
    """Resume el resultado de una reproduccion."""

    applied: int
    failed: int
    summary: MachineSummaryResponse


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI."""
    parser = argparse.ArgumentParser(
        description=(
            "Aplica operaciones registrar/retirar/reponer/comprar desde un CSV "
            "y muestra el resumen de la maquina."
        )
    )
    parser.add_argument(
        "csv_path",
        type=Path,
        help="CSV con columnas accion,carril[,descripcion,cantidad].",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_RANKING_SIZE,
        help="Cantidad de carriles a mostrar en el ranking de ventas.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Detiene la reproduccion en la primera operacion fallida.",
    )
    return parser.parse_args(argv)


def configure_logging() -> None:
    """Configura logging para salida en consola."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        force=True,
    )


def read_text_with_fallback(path: Path) -> str:
    """Intenta leer texto con utf-8-sig y fallback cp1252."""
    last_error: UnicodeDecodeError | None = None
    for encoding in READ_ENCODINGS:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError as exc:
            last_error = exc
    if last_error is not None:
        raise last_error
    raise RuntimeError(f"No fue posible leer el archivo: {path}")


def read_operations(path: Path) -> list[Operation]:
    """Lee las filas del CSV de operaciones.

    Solo valida headers; cada fila se valida al aplicarla.
    """
    content = read_text_with_fallback(path)
    reader = csv.DictReader(StringIO(content))
    fieldnames = {(name or "").strip().lower() for name in reader.fieldnames or []}
    missing = [header for header in REPLAY_REQUIRED_HEADERS if header not in fieldnames]
    if missing:
        raise ValidationError(
            "El CSV de operaciones debe contener headers: " + ",".join(REPLAY_REQUIRED_HEADERS)
        )

    operations: list[Operation] = []
    for row_index, raw_row in enumerate(reader, start=2):
        row = {
            (key or "").strip().lower(): (value or "").strip()
            for key, value in raw_row.items()
            if key is not None
        }
        action = row.get("accion", "").lower()
        if not action:
            continue
        operations.append(
            Operation(
                row_index=row_index,
                action=action,
                lane_code=row.get("carril", ""),
                description=row.get("descripcion", ""),
                quantity_text=row.get("cantidad", ""),
            )
        )
    return operations


def apply_operation(controller: AppController, operation: Operation) -> None:
    """Valida y aplica una operacion sobre el controlador."""
    if operation.action not in KNOWN_ACTIONS:
        raise ValidationError(f"Accion desconocida: {operation.action}")

    quantity = _parse_quantity(operation.quantity_text)
    if operation.action == ACTION_REGISTER:
        controller.on_register_product(operation.lane_code, operation.description)
    elif operation.action == ACTION_UNREGISTER:
        controller.on_unregister_product(operation.lane_code)
    elif operation.action == ACTION_RESTOCK:
        controller.on_restock(operation.lane_code, quantity)
    elif operation.action == ACTION_BUY:
        controller.on_buy(operation.lane_code, quantity)


def run_replay(
    csv_path: Path,
    ranking_size: int = DEFAULT_RANKING_SIZE,
    strict: bool = False,
    controller: AppController | None = None,
) -> ReplayResult:
    """Reproduce todas las operaciones y retorna el resumen final."""
    if controller is None:
        controller = AppController()
    operations = read_operations(csv_path)
    LOGGER.info("Operaciones leidas: %s desde %s", len(operations), csv_path)

    applied = 0
    failed = 0
    for operation in operations:
        try:
            apply_operation(controller, operation)
        except (ServiceError, ValidationError) as exc:
            failed += 1
            LOGGER.error(
                "Fila %s (%s %s): %s",
                operation.row_index,
                operation.action,
                operation.lane_code,
                exc,
            )
            if strict:
                break
            continue
        applied += 1

    return ReplayResult(
        applied=applied,
        failed=failed,
        summary=controller.get_summary(ranking_size=ranking_size),
    )


def format_summary(summary: MachineSummaryResponse) -> str:
    """Construye el texto del resumen para consola."""
    lines = [
        f"Productos distintos: {summary.number_of_products}",
        f"Unidades en stock: {summary.total_items}",
        f"Ventas totales: {summary.total_sales}",
    ]
    if summary.most_popular is None:
        lines.append("Mas vendido: sin ventas")
    else:
        lines.append(
            f"Mas vendido: {summary.most_popular.description} "
            f"({summary.most_popular.lane_code}, {summary.most_popular.sale_count} ventas)"
        )

    for position, status in enumerate(summary.ranking, start=1):
        lines.append(f"  {position}. {status.lane_code} {status.description}: {status.sale_count}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None, stdout: TextIO | None = None) -> int:
    """Punto de entrada CLI."""
    configure_logging()
    args = parse_args(argv)
    output = stdout or sys.stdout

    try:
        result = run_replay(args.csv_path, ranking_size=args.top, strict=args.strict)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("No fue posible leer el CSV de operaciones: %s", exc)
        return 2
    except ValidationError as exc:
        LOGGER.error("%s", exc)
        return 2

    output.write(format_summary(result.summary) + "\n")
    LOGGER.info("Operaciones aplicadas: %s, fallidas: %s", result.applied, result.failed)
    if args.strict and result.failed:
        return 1
    return 0


def _parse_quantity(raw_value: str) -> int:
    if not raw_value:
        return 1
    try:
        quantity = int(raw_value)
    except ValueError as exc:
        raise ValidationError(f"Cantidad invalida: {raw_value}") from exc
    if quantity <= 0:
        raise ValidationError(f"Cantidad invalida: {raw_value}")
    return quantity


if __name__ == "__main__":
    raise SystemExit(main())
