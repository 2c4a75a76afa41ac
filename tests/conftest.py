"""Shared pytest fixtures and helpers for the invoicing tests."""

from datetime import date
from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.engine import Engine

from invoicing.db.engine import create_db_engine, get_engine
from invoicing.db.schema import customers, invoices, metadata, users
from invoicing.services.auth import hash_password
from invoicing.services.revalidation import InvalidationBus

USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


@pytest.fixture
def engine(tmp_path: Path) -> Engine:
    """SQLite engine on a temp file with all tables created."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'dashboard.db'}")
    metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def broken_engine(tmp_path: Path) -> Engine:
    """Engine whose database has no tables, so every statement fails."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def customer_id(engine: Engine) -> str:
    return insert_customer(engine, "Delba de Oliveira", "delba@oliveira.com")


@pytest.fixture
def user(engine: Engine) -> dict:
    row = {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": USER_EMAIL,
        "password": hash_password(USER_PASSWORD, rounds=4),
    }
    with engine.begin() as conn:
        conn.execute(insert(users).values(**row))
    return row


class RecordingSubscriber:
    def __init__(self) -> None:
        self.paths: List[str] = []

    def __call__(self, path: str) -> None:
        self.paths.append(path)


@pytest.fixture
def recorder() -> RecordingSubscriber:
    return RecordingSubscriber()


@pytest.fixture
def bus(recorder: RecordingSubscriber) -> InvalidationBus:
    bus = InvalidationBus()
    bus.subscribe(recorder)
    return bus


@pytest.fixture
def client(engine: Engine) -> TestClient:
    from invoicing.main import app

    app.dependency_overrides[get_engine] = lambda: engine
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Row helpers
# ---------------------------------------------------------------------------


def insert_customer(engine: Engine, name: str, email: str) -> str:
    slug = name.lower().replace(" ", "-")
    with engine.begin() as conn:
        result = conn.execute(
            insert(customers).values(
                name=name, email=email, image_url=f"/customers/{slug}.png"
            )
        )
    return result.inserted_primary_key[0]


def insert_invoice(
    engine: Engine, customer_id: str, amount: int, status: str, day: date
) -> str:
    with engine.begin() as conn:
        result = conn.execute(
            insert(invoices).values(
                customer_id=customer_id, amount=amount, status=status, date=day
            )
        )
    return result.inserted_primary_key[0]
