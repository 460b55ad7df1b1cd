"""Workload-aware pricing for the three website packages.

Everything here is a pure function of its inputs so quotes can be checked
directly against a price table without touching the database.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from folio.core.exceptions import ValidationError
from folio.models.enums import PackageName

BASE_PRICES: dict[str, int] = {
    PackageName.STARTER.value: 600,
    PackageName.STANDARD.value: 900,
    PackageName.PREMIUM.value: 1350,
}

# Marketing copy advertises a $300-$500 range; quotes always use this value.
RUSH_FEE = 400
DEPOSIT_RATE = Decimal("0.5")
WAITLIST_THRESHOLD = 5


@dataclass(frozen=True)
class CurrencyRate:
    code: str
    symbol: str
    rate: Decimal


# Advisory display rates only; nothing is ever charged in these currencies.
LOCALE_CURRENCIES: dict[str, CurrencyRate] = {
    "en-CA": CurrencyRate("CAD", "CA$", Decimal("1.36")),
    "en-GB": CurrencyRate("GBP", "£", Decimal("0.79")),
    "en-AU": CurrencyRate("AUD", "A$", Decimal("1.53")),
    "de-DE": CurrencyRate("EUR", "€", Decimal("0.92")),
    "fr-FR": CurrencyRate("EUR", "€", Decimal("0.92")),
    "ja-JP": CurrencyRate("JPY", "¥", Decimal("149")),
    "zh-CN": CurrencyRate("CNY", "¥", Decimal("7.24")),
    "in-IN": CurrencyRate("INR", "₹", Decimal("83.12")),
}


@dataclass(frozen=True)
class PriceQuote:
    package: str
    active_projects: int
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


@dataclass(frozen=True)
class LocalPrice:
    currency: str
    symbol: str
    amount: int

    @property
    def display(self) -> str:
        return f"{self.symbol}{self.amount:,} {self.currency}"


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _check_workload(active_projects: int) -> None:
    if active_projects < 0:
        raise ValidationError("Active project count must be >= 0.")


def base_price(package: str | PackageName) -> int:
    key = package.value if isinstance(package, PackageName) else str(package)
    try:
        return BASE_PRICES[key]
    except KeyError as exc:
        raise ValidationError(f"Unknown package: {key}") from exc


def workload_surcharge(active_projects: int) -> int:
    if active_projects >= 5:
        return 300
    if active_projects >= 3:
        return 150
    return 0


def delivery_estimate(active_projects: int) -> str:
    # Tiers intentionally differ from the surcharge tiers.
    if active_projects <= 0:
        return "~1 week"
    if active_projects <= 2:
        return "2-3 weeks"
    return "4-6 weeks"


def delivery_days(active_projects: int) -> int:
    if active_projects <= 0:
        return 7
    if active_projects <= 2:
        return 21
    return 42


def workload_status(active_projects: int) -> str:
    if active_projects >= 5:
        return "High Demand"
    if active_projects >= 3:
        return "Moderate"
    return "Available"


def is_waitlist_mode(active_projects: int) -> bool:
    return active_projects >= WAITLIST_THRESHOLD


def deposit_for(total_price: int) -> int:
    return _round_half_up(Decimal(total_price) * DEPOSIT_RATE)


def quote(package: str | PackageName, active_projects: int, rush: bool = False) -> PriceQuote:
    """Price a package for the given workload.

    In waitlist mode neither the rush fee nor a deposit is offered, so the
    whole total stays as the remaining balance.
    """
    _check_workload(active_projects)
    base = base_price(package)
    waitlist = is_waitlist_mode(active_projects)
    surcharge = workload_surcharge(active_projects)
    rush_fee = RUSH_FEE if rush and not waitlist else 0
    total = base + surcharge + rush_fee
    deposit = 0 if waitlist else deposit_for(total)

    return PriceQuote(
        package=package.value if isinstance(package, PackageName) else str(package),
        active_projects=active_projects,
        base_price=base,
        surcharge=surcharge,
        rush_fee=rush_fee,
        total_price=total,
        deposit_amount=deposit,
        remaining_balance=total - deposit,
        delivery_estimate=delivery_estimate(active_projects),
        delivery_days=delivery_days(active_projects),
        workload_status=workload_status(active_projects),
        is_waitlist=waitlist,
    )


def resolve_locale_currency(locale: str | None) -> CurrencyRate | None:
    """Match a browser locale to a display currency, exact tag first."""
    if not locale or locale == "en-US":
        return None
    if locale in LOCALE_CURRENCIES:
        return LOCALE_CURRENCIES[locale]
    prefix = locale.split("-", 1)[0]
    for tag, currency in LOCALE_CURRENCIES.items():
        if tag.startswith(f"{prefix}-"):
            return currency
    return None


def convert_price(amount: int, locale: str | None) -> LocalPrice | None:
    currency = resolve_locale_currency(locale)
    if currency is None:
        return None
    return LocalPrice(
        currency=currency.code,
        symbol=currency.symbol,
        amount=_round_half_up(Decimal(amount) * currency.rate),
    )
