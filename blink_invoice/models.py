# blink_invoice/models.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Currency(str, Enum):
    BTC = "BTC"
    USD = "USD"


@dataclass(frozen=True)
class CurrencyProfile:
    currency: Currency
    operation:   str   # GraphQL operation name
    mutation:    str   # field on Mutation
    input_type:  str
    amount_name: str   # CLI argument name
    amount_help: str
    notice:      Optional[str] = None


PROFILES = {
    Currency.BTC: CurrencyProfile(
        currency=Currency.BTC,
        operation="LnInvoiceCreate",
        mutation="lnInvoiceCreate",
        input_type="LnInvoiceCreateInput",
        amount_name="amount_sats",
        amount_help="amount in satoshis",
    ),
    Currency.USD: CurrencyProfile(
        currency=Currency.USD,
        operation="LnUsdInvoiceCreate",
        mutation="lnUsdInvoiceCreate",
        input_type="LnUsdInvoiceCreateInput",
        amount_name="amount_cents",
        amount_help="amount in USD cents (e.g. 100 = $1.00)",
        notice="Note: USD invoices expire in ~5 minutes due to exchange rate lock.",
    ),
}


def get_profile(currency) -> CurrencyProfile:
    return PROFILES[Currency(currency)]


def format_usd(cents: int) -> str:
    """Integer cents to ``$d.cc`` without going through floats."""
    sign = "-" if cents < 0 else ""
    cents = abs(cents)
    return f"{sign}${cents // 100}.{cents % 100:02d}"
