# invoicing/models/invoices.py

import datetime
from decimal import Decimal
from typing import List, Literal, Union

from pydantic import BaseModel, Field, field_validator

from invoicing.utils import to_cents

# largest amount whose cents fit a 32-bit INTEGER column
MAX_AMOUNT = Decimal("21474836.47")


class LatestInvoice(BaseModel):
    id: str
    name: str
    email: str
    image_url: str
    amount: str  # formatted currency


class InvoiceTableRow(BaseModel):
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: datetime.date
    amount: int  # cents
    status: str

    class Config:
        from_attributes = True


class InvoicesPage(BaseModel):
    query: str
    page: int
    total_pages: int
    pagination: List[Union[int, str]]
    items: List[InvoiceTableRow]


class InvoiceForm(BaseModel):
    """An invoice as loaded into the edit form (amount in dollars)."""

    id: str
    customer_id: str
    amount: Decimal
    status: Literal["pending", "paid"]


class InvoiceFormInput(BaseModel):
    """Fields accepted from the create/edit invoice form."""

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT)
    status: Literal["pending", "paid"]

    @field_validator("amount")
    @classmethod
    def at_least_one_cent(cls, v: Decimal) -> Decimal:
        if to_cents(v) < 1:
            raise ValueError("amount rounds to zero cents")
        return v
