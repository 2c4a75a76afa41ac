# invoicing/services/actions.py
"""
Invoice mutations: create, update and delete.

Form input arrives as a flat mapping of field name -> string. Validation
problems come back as data (``FormState.errors``), never as exceptions;
database failures come back as a generic message. After a successful
write the invoices path is revalidated on the invalidation bus.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy import delete, insert, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from invoicing.config import get_settings
from invoicing.db.schema import invoices
from invoicing.models.invoices import InvoiceFormInput
from invoicing.models.results import ActionResult, FormState
from invoicing.services.revalidation import InvalidationBus, default_bus
from invoicing.utils import to_cents

logger = logging.getLogger(__name__)

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


def _today() -> date:
    return datetime.now(timezone.utc).date()


def _field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        message = FIELD_MESSAGES.get(field, error["msg"])
        if message not in errors.setdefault(field, []):
            errors[field].append(message)
    return errors


def _validate(form_data: Mapping[str, Any], verb: str):
    """Return (validated input, None) or (None, failed ActionResult)."""
    try:
        return InvoiceFormInput.model_validate(dict(form_data)), None
    except ValidationError as exc:
        state = FormState(
            errors=_field_errors(exc),
            message=f"Missing Fields. Failed to {verb} Invoice.",
        )
        return None, ActionResult(ok=False, state=state)


def _revalidate_invoices(bus: Optional[InvalidationBus]) -> str:
    path = get_settings().invoices_path
    (bus or default_bus).revalidate_path(path)
    return path


def create_invoice(
    engine: Engine,
    form_data: Mapping[str, Any],
    bus: Optional[InvalidationBus] = None,
) -> ActionResult:
    data, failed = _validate(form_data, "Create")
    if failed is not None:
        return failed

    values = {
        "customer_id": data.customer_id,
        "amount": to_cents(data.amount),
        "status": data.status,
        "date": _today(),
    }

    try:
        with engine.begin() as conn:
            conn.execute(insert(invoices).values(**values))
    except SQLAlchemyError as exc:
        logger.error("Failed to create invoice: %s", exc, extra={"operation": "create_invoice"})
        return ActionResult(
            ok=False,
            state=FormState(message="Database Error: Failed to Create Invoice."),
        )

    return ActionResult(ok=True, redirect_to=_revalidate_invoices(bus))


def update_invoice(
    engine: Engine,
    invoice_id: str,
    form_data: Mapping[str, Any],
    bus: Optional[InvalidationBus] = None,
) -> ActionResult:
    """Overwrite customer, amount and status; id and date never change."""
    data, failed = _validate(form_data, "Update")
    if failed is not None:
        return failed

    stmt = (
        update(invoices)
        .where(invoices.c.id == invoice_id)
        .values(
            customer_id=data.customer_id,
            amount=to_cents(data.amount),
            status=data.status,
        )
    )

    try:
        with engine.begin() as conn:
            conn.execute(stmt)
    except SQLAlchemyError as exc:
        logger.error(
            "Failed to update invoice: %s",
            exc,
            extra={"operation": "update_invoice", "invoice_id": invoice_id},
        )
        return ActionResult(
            ok=False,
            state=FormState(message="Database Error: Failed to Update Invoice."),
        )

    return ActionResult(ok=True, redirect_to=_revalidate_invoices(bus))


def delete_invoice(
    engine: Engine,
    invoice_id: str,
    bus: Optional[InvalidationBus] = None,
) -> ActionResult:
    """Delete by id. An id that matches nothing still counts as deleted."""
    try:
        with engine.begin() as conn:
            conn.execute(delete(invoices).where(invoices.c.id == invoice_id))
    except SQLAlchemyError as exc:
        logger.error(
            "Failed to delete invoice: %s",
            exc,
            extra={"operation": "delete_invoice", "invoice_id": invoice_id},
        )
        return ActionResult(
            ok=False,
            state=FormState(message="Database Error: Failed to Delete Invoice."),
        )

    _revalidate_invoices(bus)
    return ActionResult(ok=True, state=FormState(message="Deleted Successfully."))
