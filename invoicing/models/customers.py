# invoicing/models/customers.py

from pydantic import BaseModel


class CustomerField(BaseModel):
    """A customer as offered in the invoice form's select box."""

    id: str
    name: str


class CustomerTableRow(BaseModel):
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
