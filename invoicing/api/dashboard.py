# invoicing/api/dashboard.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from invoicing.api.deps import no_store
from invoicing.db.engine import get_engine
from invoicing.models.dashboard import CardData, Revenue
from invoicing.models.invoices import LatestInvoice
from invoicing.services import queries

router = APIRouter(prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(no_store)])


@router.get("/revenue", response_model=List[Revenue])
def revenue(engine: Engine = Depends(get_engine)) -> List[Revenue]:
    """
    Monthly revenue figures for the chart.
    """
    return queries.fetch_revenue(engine)


@router.get("/latest-invoices", response_model=List[LatestInvoice])
def latest_invoices(engine: Engine = Depends(get_engine)) -> List[LatestInvoice]:
    return queries.fetch_latest_invoices(engine)


@router.get("/cards", response_model=CardData)
def cards(engine: Engine = Depends(get_engine)) -> CardData:
    """
    Invoice/customer counts and collected/pending totals.
    """
    return queries.fetch_card_data(engine)
