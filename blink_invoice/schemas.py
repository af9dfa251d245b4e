from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from blink_invoice.models import Currency, format_usd


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(populate_by_name=True)


# --- wallet listing ---

class Wallet(ApiModel):
    id: str
    wallet_currency: str = Field(alias="walletCurrency")


class Account(ApiModel):
    wallets: List[Wallet]


class Me(ApiModel):
    default_account: Account = Field(alias="defaultAccount")


class MeResponse(ApiModel):
    me: Optional[Me] = None


# --- invoice creation ---

class InvoiceRequest(ApiModel):
    wallet_id: str = Field(alias="walletId")
    amount: int = Field(gt=0)
    memo: Optional[str] = None

    def to_variables(self) -> Dict[str, Any]:
        return {"input": self.model_dump(by_alias=True, exclude_none=True)}


class OperationError(ApiModel):
    code: Optional[str] = None
    message: str
    path: Optional[List[Any]] = None


class Invoice(ApiModel):
    payment_request: str = Field(alias="paymentRequest")
    payment_hash: str = Field(alias="paymentHash")
    payment_secret: Optional[str] = Field(default=None, alias="paymentSecret")
    satoshis: Optional[int] = None
    payment_status: Optional[str] = Field(default=None, alias="paymentStatus")
    created_at: Optional[Any] = Field(default=None, alias="createdAt")


class InvoicePayload(ApiModel):
    invoice: Optional[Invoice] = None
    errors: Optional[List[OperationError]] = None


class InvoiceResult(ApiModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    payment_request: str = Field(alias="paymentRequest")
    payment_hash: str = Field(alias="paymentHash")
    payment_secret: Optional[str] = Field(default=None, alias="paymentSecret")
    satoshis: Optional[int] = None
    payment_status: Optional[str] = Field(default=None, alias="paymentStatus")
    created_at: Optional[Any] = Field(default=None, alias="createdAt")
    wallet_id: str = Field(alias="walletId")
    wallet_currency: Currency = Field(alias="walletCurrency")
    amount_cents: Optional[int] = Field(default=None, alias="amountCents")

    @property
    def amount_usd(self) -> Optional[str]:
        if self.amount_cents is None:
            return None
        return format_usd(self.amount_cents)

    def to_output(self) -> Dict[str, Any]:
        """Display shape printed by the CLI. The payment secret stays out."""
        out: Dict[str, Any] = {
            "paymentRequest": self.payment_request,
            "paymentHash": self.payment_hash,
            "satoshis": self.satoshis,
        }
        if self.wallet_currency == Currency.USD:
            out["amountCents"] = self.amount_cents
            out["amountUsd"] = self.amount_usd
        out["status"] = self.payment_status
        out["createdAt"] = self.created_at
        out["walletId"] = self.wallet_id
        if self.wallet_currency == Currency.USD:
            out["walletCurrency"] = self.wallet_currency.value
        return out
