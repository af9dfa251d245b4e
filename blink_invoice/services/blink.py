import logging
from typing import Optional

import pydantic
import requests

from blink_invoice.core.config import Settings
from blink_invoice.core.errors import (
    AuthenticationError,
    GraphQLOperationError,
    InvariantViolation,
    NotFoundError,
    ValidationError,
)
from blink_invoice.models import Currency, get_profile
from blink_invoice.schemas import InvoicePayload, InvoiceRequest, InvoiceResult, MeResponse
from blink_invoice.services.graphql import GraphQLClient
from blink_invoice.services.queries import WALLET_QUERY, invoice_mutation

logger = logging.getLogger(__name__)


def validate_amount(amount) -> int:
    # bool is an int subclass
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValidationError(f"amount must be a positive integer, got {amount!r}")
    return amount


def to_currency(currency) -> Currency:
    try:
        return Currency(currency)
    except ValueError:
        raise ValidationError(f"Unsupported wallet currency: {currency!r}")


class BlinkClient:
    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.graphql = GraphQLClient(settings, session=session)

    def resolve_wallet_id(self, currency) -> str:
        """Id of the first wallet in the account listing with this currency."""
        currency = to_currency(currency)
        data = self.graphql.send(WALLET_QUERY)

        # a null `me` is how Blink reports a rejected API key
        if data.get("me") is None:
            raise AuthenticationError("Authentication failed. Check your BLINK_API_KEY.")
        try:
            response = MeResponse.model_validate(data)
        except pydantic.ValidationError as e:
            raise InvariantViolation(f"Unexpected wallet listing shape: {e}") from e

        for wallet in response.me.default_account.wallets:
            if wallet.wallet_currency == currency.value:
                logger.debug(f"→ {currency.value} wallet {wallet.id}")
                return wallet.id
        raise NotFoundError(currency.value)

    def create_invoice(self, amount: int, currency=Currency.BTC, memo: Optional[str] = None) -> InvoiceResult:
        """Mint a new invoice on the wallet of ``currency``.

        ``amount`` is satoshis for BTC and cents for USD. Every successful
        call creates a new invoice, so callers must not blindly retry it.
        """
        # 1) Validate before any network call
        amount = validate_amount(amount)
        profile = get_profile(to_currency(currency))

        # 2) Wallet for the requested currency
        wallet_id = self.resolve_wallet_id(profile.currency)

        # 3) Mutation
        request = InvoiceRequest(wallet_id=wallet_id, amount=amount, memo=memo or None)
        data = self.graphql.send(invoice_mutation(profile), request.to_variables())

        raw = data.get(profile.mutation)
        if raw is None:
            raise InvariantViolation(f"Response carries no {profile.mutation} payload")
        try:
            payload = InvoicePayload.model_validate(raw)
        except pydantic.ValidationError as e:
            raise InvariantViolation(f"Unexpected {profile.mutation} shape: {e}") from e

        # 4) Application errors inside a 200 response
        if payload.errors:
            raise GraphQLOperationError(
                [err.model_dump() for err in payload.errors],
                prefix="Invoice creation failed",
            )
        if payload.invoice is None:
            raise InvariantViolation("Invoice creation returned no invoice and no errors.")

        logger.info(f"✔ Invoice {payload.invoice.payment_hash} created on wallet {wallet_id}")
        return InvoiceResult(
            **payload.invoice.model_dump(),
            wallet_id=wallet_id,
            wallet_currency=profile.currency,
            amount_cents=amount if profile.currency == Currency.USD else None,
        )


def resolve_wallet_id(currency, settings: Optional[Settings] = None) -> str:
    return BlinkClient(settings).resolve_wallet_id(currency)


def create_invoice(amount: int, currency=Currency.BTC, memo: Optional[str] = None,
                   settings: Optional[Settings] = None) -> InvoiceResult:
    return BlinkClient(settings).create_invoice(amount, currency, memo)
