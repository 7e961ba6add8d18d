"""Resolucion del producto mas vendido."""

from __future__ import annotations

from collections.abc import Iterable

from servidor.domain.models import ProductRecord


def find_most_popular(records: Iterable[ProductRecord]) -> ProductRecord | None:
    """Retorna el registro con mas ventas o None si nadie ha vendido.

    En empate gana el primero en orden de iteracion: un registro posterior
    solo reemplaza al actual si tiene estrictamente mas ventas.
    """
    best: ProductRecord | None = None
    for record in records:
        if record.sale_count <= 0:
            continue
        if best is None or record.sale_count > best.sale_count:
            best = record
    return best


def rank_by_sales(
    records: Iterable[ProductRecord],
    limit: int | None = None,
) -> list[ProductRecord]:
    """Ordena registros con ventas de mayor a menor, estable ante empates."""
    ranked = sorted(
        (record for record in records if record.sale_count > 0),
        key=lambda record: record.sale_count,
        reverse=True,
    )
    if limit is not None:
        return ranked[: max(limit, 0)]
    return ranked
