"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class RegisterProductRequest:
    """Solicitud para registrar un producto en un carril."""

    lane_code: str
    description: str


@dataclass(slots=True)
class UnregisterProductRequest:
    """Solicitud para retirar el producto de un carril."""

    lane_code: str


@dataclass(slots=True)
class LaneRequest:
    """Solicitud de una operacion sobre un carril."""

    lane_code: str


@dataclass(slots=True)
class LaneStatusResponse:
    """Estado de un carril tras una operacion."""

    lane_code: str
    description: str
    item_count: int
    sale_count: int


@dataclass(slots=True)
class MachineSummaryResponse:
    """Resumen agregado de la maquina."""

    number_of_products: int
    total_items: int
    total_sales: int
    most_popular: LaneStatusResponse | None = None
    ranking: list[LaneStatusResponse] = field(default_factory=list)
