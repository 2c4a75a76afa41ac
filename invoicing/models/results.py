# invoicing/models/results.py

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class FormState(BaseModel):
    """What a form re-renders with after a failed (or finished) action."""

    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


class ActionResult(BaseModel):
    """
    Outcome of an invoice mutation.

    ``redirect_to`` is set when the caller should navigate away
    (successful create/update); the HTTP layer turns it into a 303.
    """

    ok: bool
    state: FormState = Field(default_factory=FormState)
    redirect_to: Optional[str] = None
