"""
Donation button component.

All payment work (creating and capturing orders, payer identity, currency)
happens inside the hosted checkout SDK. The widget only tracks the amount the
user typed, hands it to the SDK when an order is created, and tells the user
how it went.

The SDK is reached through the ``actions`` object passed to each callback,
mirroring the client SDK's ``actions.order.create`` / ``actions.order.capture``.
"""
from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Awaitable, Callable, Protocol

from app.schemas.donation import Amount, CaptureDetails, OrderRequest, PurchaseUnit

log = logging.getLogger(__name__)

DEFAULT_AMOUNT = Decimal("10.00")
DEFAULT_CONTAINER = "#paypal-button-container"
BUTTON_STYLE = {"color": "gold", "shape": "pill", "label": "donate"}
RETRY_MESSAGE = "Something went wrong during checkout. Please try again."

_CENTS = Decimal("0.01")
# leading number the way a browser's parseFloat reads it: "25abc" -> 25, "abc" -> NaN
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class OrderActions(Protocol):
    def create(self, order: dict[str, Any]) -> Awaitable[str]: ...
    def capture(self) -> Awaitable[dict[str, Any]]: ...


class CheckoutActions(Protocol):
    order: OrderActions


Notify = Callable[[str], None]


def parse_amount(raw: str | None) -> Decimal:
    if not raw:
        return Decimal(0)
    m = _LEADING_NUMBER.match(raw)
    if not m:
        return Decimal(0)
    return Decimal(m.group(1))


def format_amount(amount: Decimal) -> str:
    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


class DonationWidget:
    def __init__(self, notify: Notify, amount: Decimal = DEFAULT_AMOUNT):
        self._notify = notify
        self.amount = amount
        self.ordered_amount: str | None = None

    def on_amount_input(self, raw: str | None) -> None:
        # no bounds check: zero and negative amounts go to the SDK as typed
        self.amount = parse_amount(raw)

    def order_request(self) -> OrderRequest:
        return OrderRequest(purchase_units=[PurchaseUnit(amount=Amount(value=format_amount(self.amount)))])

    async def create_order(self, data: Any, actions: CheckoutActions) -> str:
        request = self.order_request()
        self.ordered_amount = request.purchase_units[0].amount.value
        return await actions.order.create(request.model_dump())

    async def on_approve(self, data: Any, actions: CheckoutActions) -> None:
        details = CaptureDetails.model_validate(await actions.order.capture())
        amount = self.ordered_amount or format_amount(self.amount)
        self._notify(
            f"Thank you, {details.payer.name.given_name}! "
            f"Your donation of ${amount} has been received."
        )

    def on_error(self, err: Any) -> None:
        log.error("checkout error: %s", err)
        self._notify(RETRY_MESSAGE)

    def buttons_config(self) -> dict[str, Any]:
        return {
            "style": dict(BUTTON_STYLE),
            "createOrder": self.create_order,
            "onApprove": self.on_approve,
            "onError": self.on_error,
        }

    def render(self, buttons_factory: Callable[[dict[str, Any]], Any], container: str = DEFAULT_CONTAINER) -> Any:
        """Hand the button options to the SDK's ``Buttons`` factory and mount it."""
        return buttons_factory(self.buttons_config()).render(container)
