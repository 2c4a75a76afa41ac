# invoicing/services/queries.py
"""
Read operations behind the dashboard pages.

Every function opens its own connection, runs its statements and maps
rows into display-ready models. Database failures are logged here and
re-raised as FetchError carrying a generic, user-safe message.
"""

import logging
import math
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, List, Optional

from sqlalchemy import Text, case, cast, func, or_, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from invoicing.db.schema import customers, invoices, revenue, users
from invoicing.errors import FetchError
from invoicing.models.customers import CustomerField, CustomerTableRow
from invoicing.models.dashboard import CardData, Revenue
from invoicing.models.invoices import InvoiceForm, InvoiceTableRow, LatestInvoice
from invoicing.models.users import User
from invoicing.utils import format_currency

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5


@contextmanager
def _fetching(operation: str, message: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(
            "Database Error in %s: %s", operation, exc, extra={"operation": operation}
        )
        raise FetchError(operation, message) from exc


def _invoice_search_clause(query: str):
    """Case-insensitive substring match over the columns shown in the table."""
    pattern = f"%{query}%"
    return or_(
        customers.c.name.ilike(pattern),
        customers.c.email.ilike(pattern),
        cast(invoices.c.status, Text).ilike(pattern),
        cast(invoices.c.amount, Text).ilike(pattern),
        cast(invoices.c.date, Text).ilike(pattern),
    )


def _status_total(status: str):
    return func.coalesce(
        func.sum(case((invoices.c.status == status, invoices.c.amount), else_=0)),
        0,
    )


def fetch_revenue(engine: Engine) -> List[Revenue]:
    with _fetching("fetch_revenue", "Failed to fetch revenue data."):
        with engine.connect() as conn:
            rows = conn.execute(select(revenue.c.month, revenue.c.revenue)).mappings().all()

    return [Revenue(month=row["month"], revenue=row["revenue"]) for row in rows]


def fetch_latest_invoices(engine: Engine) -> List[LatestInvoice]:
    """The five most recent invoices, amounts formatted as currency."""
    stmt = (
        select(
            invoices.c.amount,
            customers.c.name,
            invoices.c.id,
            customers.c.email,
            customers.c.image_url,
        )
        .select_from(invoices.join(customers))
        .order_by(invoices.c.date.desc())
        .limit(LATEST_INVOICES_LIMIT)
    )

    with _fetching("fetch_latest_invoices", "Failed to fetch the latest invoices."):
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

    return [
        LatestInvoice(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            amount=format_currency(row["amount"]),
        )
        for row in rows
    ]


def fetch_card_data(engine: Engine) -> CardData:
    with _fetching("fetch_card_data", "Failed to fetch card data."):
        with engine.connect() as conn:
            number_of_invoices = conn.execute(
                select(func.count()).select_from(invoices)
            ).scalar_one()
            number_of_customers = conn.execute(
                select(func.count()).select_from(customers)
            ).scalar_one()
            totals = conn.execute(
                select(
                    _status_total("paid").label("paid"),
                    _status_total("pending").label("pending"),
                ).select_from(invoices)
            ).mappings().one()

    return CardData(
        number_of_customers=number_of_customers,
        number_of_invoices=number_of_invoices,
        total_paid_invoices=format_currency(totals["paid"]),
        total_pending_invoices=format_currency(totals["pending"]),
    )


def fetch_filtered_invoices(
    engine: Engine, query: str, current_page: int
) -> List[InvoiceTableRow]:
    """
    One page of invoices whose customer name/email, status, amount or
    date contains ``query`` (case-insensitive), newest first.
    """
    offset = (max(current_page, 1) - 1) * ITEMS_PER_PAGE

    stmt = (
        select(
            invoices.c.id,
            invoices.c.customer_id,
            invoices.c.amount,
            invoices.c.date,
            invoices.c.status,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
        )
        .select_from(invoices.join(customers))
        .where(_invoice_search_clause(query))
        .order_by(invoices.c.date.desc(), invoices.c.id)
        .limit(ITEMS_PER_PAGE)
        .offset(offset)
    )

    with _fetching("fetch_filtered_invoices", "Failed to fetch invoices."):
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

    return [InvoiceTableRow.model_validate(dict(row)) for row in rows]


def fetch_invoices_pages(engine: Engine, query: str) -> int:
    stmt = (
        select(func.count())
        .select_from(invoices.join(customers))
        .where(_invoice_search_clause(query))
    )

    with _fetching("fetch_invoices_pages", "Failed to fetch total number of invoices."):
        with engine.connect() as conn:
            invoice_count = conn.execute(stmt).scalar_one()

    logger.debug("%s invoices match %r", invoice_count, query)
    return math.ceil(invoice_count / ITEMS_PER_PAGE)


def fetch_invoice_by_id(engine: Engine, invoice_id: str) -> Optional[InvoiceForm]:
    """Load an invoice for editing; returns None when no row matches."""
    stmt = select(
        invoices.c.id,
        invoices.c.customer_id,
        invoices.c.amount,
        invoices.c.status,
    ).where(invoices.c.id == invoice_id)

    with _fetching("fetch_invoice_by_id", "Failed to fetch invoice."):
        with engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()

    if row is None:
        return None

    return InvoiceForm(
        id=row["id"],
        customer_id=row["customer_id"],
        amount=Decimal(row["amount"]) / 100,
        status=row["status"],
    )


def fetch_customers(engine: Engine) -> List[CustomerField]:
    stmt = select(customers.c.id, customers.c.name).order_by(customers.c.name)

    with _fetching("fetch_customers", "Failed to fetch all customers."):
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

    return [CustomerField(id=row["id"], name=row["name"]) for row in rows]


def fetch_filtered_customers(engine: Engine, query: str) -> List[CustomerTableRow]:
    """
    Customers whose name or email contains ``query``, each with invoice
    count and pending/paid totals (zero when they have no invoices).
    """
    pattern = f"%{query}%"

    stmt = (
        select(
            customers.c.id,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
            func.count(invoices.c.id).label("total_invoices"),
            _status_total("pending").label("total_pending"),
            _status_total("paid").label("total_paid"),
        )
        .select_from(customers.outerjoin(invoices))
        .where(
            or_(
                customers.c.name.ilike(pattern),
                customers.c.email.ilike(pattern),
            )
        )
        .group_by(
            customers.c.id,
            customers.c.name,
            customers.c.email,
            customers.c.image_url,
        )
        .order_by(customers.c.name.asc())
    )

    with _fetching("fetch_filtered_customers", "Failed to fetch customer table."):
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

    return [
        CustomerTableRow(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            total_invoices=row["total_invoices"],
            total_pending=format_currency(row["total_pending"]),
            total_paid=format_currency(row["total_paid"]),
        )
        for row in rows
    ]


def get_user(engine: Engine, email: str) -> Optional[User]:
    stmt = select(users).where(users.c.email == email)

    with _fetching("get_user", "Failed to fetch user."):
        with engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()

    return User.model_validate(dict(row)) if row is not None else None
