# invoicing/api/auth.py

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from invoicing.db.engine import get_engine
from invoicing.services.auth import authenticate

router = APIRouter(tags=["auth"])


@router.post("/login")
def login(
    form_data: Dict[str, Any] = Body(...),
    engine: Engine = Depends(get_engine),
) -> JSONResponse:
    """
    Check an email/password pair. Session handling is left to the caller.
    """
    message = authenticate(engine, form_data)
    if message is None:
        return JSONResponse({"message": None})

    code = (
        status.HTTP_401_UNAUTHORIZED
        if message == "Invalid credentials."
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse({"message": message}, status_code=code)
