"""
Money formatting.

Amounts travel through the core in minor units (``Money.amount``); this module
is the only place they are scaled to major units, always through Babel's CLDR
currency data so that e.g. JPY (no minor unit) and USD (cents) both come out
right.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from babel.numbers import format_currency, get_currency_precision

from .entities import Money, UnsupportedCurrency
from .enums import RateUnit

logger = logging.getLogger(__name__)

# Fallback strings shown when a price cannot be displayed in the
# storefront's currency.
UNSUPPORTED_PRICE = "({currency})"
UNSUPPORTED_PRICE_TITLE = "Unsupported currency ({currency})"


@dataclass(frozen=True)
class PriceDisplay:
    formatted_price: str
    price_title: str
    unsupported_currency: bool = False


def minor_unit_scale(currency: str) -> int:
    """Number of minor units in one major unit (100 for USD, 1 for JPY)."""
    return 10 ** get_currency_precision(currency.upper())


def to_major_units(amount: Union[int, float, Decimal], currency: str) -> Decimal:
    precision = get_currency_precision(currency.upper())
    return Decimal(str(amount)).scaleb(-precision)


def format_money(money: Money, locale: str) -> str:
    """Format *money* for *locale*, e.g. ``Money(10629, "USD")`` -> ``$106.29``."""
    return format_currency(
        to_major_units(money.amount, money.currency), money.currency, locale=locale
    )


def price_display(
    price: Optional[Money], display_currency: str, locale: str
) -> Optional[PriceDisplay]:
    """Text and title for a listing's price.

    A price in another currency than *display_currency* is not converted;
    it is shown with a fallback string naming its currency instead.
    """
    if price is None:
        return None
    if price.currency == display_currency.upper():
        formatted = format_money(price, locale)
        return PriceDisplay(formatted_price=formatted, price_title=formatted)

    signal = UnsupportedCurrency(price.currency, display_currency.upper())
    logger.info("%s; showing fallback price text", signal)
    return PriceDisplay(
        formatted_price=UNSUPPORTED_PRICE.format(currency=price.currency),
        price_title=UNSUPPORTED_PRICE_TITLE.format(currency=price.currency),
        unsupported_currency=True,
    )


def format_rate_per_km(
    rate: float, currency: str, locale: str, rate_unit: RateUnit = RateUnit.MINOR
) -> str:
    major = Decimal(str(rate))
    if rate_unit == RateUnit.MINOR:
        major = to_major_units(rate, currency)
    return f"{format_currency(major, currency.upper(), locale=locale)}/km"


def format_distance(km: float) -> str:
    return f"{km:.2f} km"
