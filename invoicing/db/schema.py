# invoicing/db/schema.py

import uuid

from sqlalchemy import (
    MetaData, Table, Column, Integer, Text, String, Float,
    Date, Enum, ForeignKey, CheckConstraint, Index
)

INVOICE_STATUSES = ("pending", "paid")

metadata = MetaData()


def _new_id() -> str:
    return str(uuid.uuid4())


users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("password", Text, nullable=False),  # bcrypt hash
    Index("unique_idx", "email", unique=True),
)

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("image_url", Text, nullable=False),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("customer_id", String(36), ForeignKey("customers.id"), nullable=False),
    Column("amount", Integer, nullable=False),  # cents
    Column(
        "status",
        Enum(*INVOICE_STATUSES, name="status"),
        nullable=False,
        default="pending",
    ),
    Column("date", Date, nullable=False),
    CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
)

revenue = Table(
    "revenue",
    metadata,
    Column("month", Text, primary_key=True),
    Column("revenue", Float, nullable=False),
)
