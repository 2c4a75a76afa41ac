# invoicing/api/deps.py

from fastapi import Response


def no_store(response: Response) -> None:
    """Read endpoints always hit the database; tell clients not to cache."""
    response.headers["Cache-Control"] = "no-store"
