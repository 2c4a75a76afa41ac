"""Tests for the placeholder data seed script."""

from scripts.seed import CUSTOMERS, INVOICES, REVENUE, seed
from invoicing.services import auth, queries


def test_seed_loads_placeholder_data(engine) -> None:
    assert seed(engine) is True

    cards = queries.fetch_card_data(engine)
    assert cards.number_of_customers == len(CUSTOMERS)
    assert cards.number_of_invoices == len(INVOICES)
    assert len(queries.fetch_revenue(engine)) == len(REVENUE)
    assert auth.authenticate(engine, {"email": "user@nextmail.com", "password": "123456"}) is None


def test_seed_skips_when_users_exist(engine) -> None:
    seed(engine)
    assert seed(engine) is False
    assert queries.fetch_card_data(engine).number_of_invoices == len(INVOICES)
