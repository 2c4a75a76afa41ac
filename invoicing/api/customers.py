# invoicing/api/customers.py

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from invoicing.api.deps import no_store
from invoicing.db.engine import get_engine
from invoicing.models.customers import CustomerField, CustomerTableRow
from invoicing.services import queries

router = APIRouter(prefix="/customers", tags=["customers"], dependencies=[Depends(no_store)])


@router.get("/", response_model=List[CustomerField])
def list_customers(engine: Engine = Depends(get_engine)) -> List[CustomerField]:
    """
    All customers (id and name), ordered by name, for the invoice form.
    """
    return queries.fetch_customers(engine)


@router.get("/search", response_model=List[CustomerTableRow])
def search_customers(
    query: str = Query("", description="Case-insensitive match on name or email"),
    engine: Engine = Depends(get_engine),
) -> List[CustomerTableRow]:
    """
    Customers matching ``query`` with invoice count and pending/paid totals.
    """
    return queries.fetch_filtered_customers(engine, query)
