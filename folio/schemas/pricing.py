"""Price quote schemas."""

from __future__ import annotations

from folio.schemas.common import CamelModel


class LocalPrice(CamelModel):
    currency: str
    symbol: str
    amount: int
    display: str


class PriceQuoteResponse(CamelModel):
    package: str
    base_price: int
    surcharge: int
    rush_fee: int
    total_price: int
    deposit_amount: int
    remaining_balance: int
    delivery_estimate: str
    delivery_days: int
    workload_status: str
    is_waitlist: bool
    active_projects: int
    local_total: LocalPrice | None = None
