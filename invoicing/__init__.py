# invoicing/__init__.py
"""
Package entrypoint for the invoicing dashboard API.

This lets us run:
    uvicorn invoicing:app --reload
"""

from .main import app

__all__ = ["app"]
