# invoicing/api/invoices.py

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.engine import Engine

from invoicing.api.deps import no_store
from invoicing.db.engine import get_engine
from invoicing.models.invoices import InvoiceForm, InvoicesPage
from invoicing.models.results import ActionResult, FormState
from invoicing.services import actions, queries
from invoicing.utils import generate_pagination

router = APIRouter(prefix="/invoices", tags=["invoices"])


def _respond(result: ActionResult):
    if result.ok and result.redirect_to:
        return RedirectResponse(result.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    if result.ok:
        return result.state

    code = (
        status.HTTP_422_UNPROCESSABLE_ENTITY
        if result.state.errors
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(result.state.model_dump(), status_code=code)


@router.get("/", response_model=InvoicesPage, dependencies=[Depends(no_store)])
def list_invoices(
    query: str = Query("", description="Matches customer name/email, status, amount or date"),
    page: int = Query(1, ge=1),
    engine: Engine = Depends(get_engine),
) -> InvoicesPage:
    """
    One page of invoices (newest first) plus the pagination bar labels.
    """
    items = queries.fetch_filtered_invoices(engine, query, page)
    total_pages = queries.fetch_invoices_pages(engine, query)

    return InvoicesPage(
        query=query,
        page=page,
        total_pages=total_pages,
        pagination=generate_pagination(page, total_pages),
        items=items,
    )


@router.get("/pages", dependencies=[Depends(no_store)])
def count_pages(
    query: str = Query(""),
    engine: Engine = Depends(get_engine),
) -> Dict[str, int]:
    return {"total_pages": queries.fetch_invoices_pages(engine, query)}


@router.get("/{invoice_id}", response_model=InvoiceForm, dependencies=[Depends(no_store)])
def get_invoice(invoice_id: str, engine: Engine = Depends(get_engine)) -> InvoiceForm:
    """
    Look up a single invoice for the edit form.
    """
    invoice = queries.fetch_invoice_by_id(engine, invoice_id)
    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.post("/", response_model=FormState)
def create_invoice(
    form_data: Dict[str, Any] = Body(...),
    engine: Engine = Depends(get_engine),
):
    return _respond(actions.create_invoice(engine, form_data))


@router.put("/{invoice_id}", response_model=FormState)
def update_invoice(
    invoice_id: str,
    form_data: Dict[str, Any] = Body(...),
    engine: Engine = Depends(get_engine),
):
    return _respond(actions.update_invoice(engine, invoice_id, form_data))


@router.delete("/{invoice_id}", response_model=FormState)
def delete_invoice(invoice_id: str, engine: Engine = Depends(get_engine)):
    return _respond(actions.delete_invoice(engine, invoice_id))
