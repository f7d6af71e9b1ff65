from pydantic import BaseModel, Field


class Amount(BaseModel):
    value: str  # two decimals, e.g. "25.00"


class PurchaseUnit(BaseModel):
    amount: Amount


class OrderRequest(BaseModel):
    purchase_units: list[PurchaseUnit] = Field(min_length=1)


class PayerName(BaseModel):
    given_name: str


class Payer(BaseModel):
    name: PayerName


class CaptureDetails(BaseModel):
    """The slice of the capture result the widget reads; the rest is ignored."""

    payer: Payer
