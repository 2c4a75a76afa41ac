# scripts/seed.py
"""
Insert placeholder users, customers, invoices and revenue.

Usage (from the project root, after scripts/init_db.py):
    python -m scripts.seed
"""

import logging
from datetime import date

from sqlalchemy import func, select

from invoicing.config import get_settings
from invoicing.db.engine import get_engine
from invoicing.db.schema import customers, invoices, revenue, users
from invoicing.logging_config import setup_logging
from invoicing.services.auth import hash_password

logger = logging.getLogger(__name__)

USERS = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

CUSTOMERS = [
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "3958dc9e-737f-4377-85e9-fec4b6a6442a",
        "name": "Hector Simpson",
        "email": "hector@simpson.com",
        "image_url": "/customers/hector-simpson.png",
    },
    {
        "id": "50ca3e18-62cd-11ee-8c99-0242ac120002",
        "name": "Steven Tey",
        "email": "steven@tey.com",
        "image_url": "/customers/steven-tey.png",
    },
    {
        "id": "3958dc9e-787f-4377-85e9-fec4b6a6442a",
        "name": "Steph Dietz",
        "email": "steph@dietz.com",
        "image_url": "/customers/steph-dietz.png",
    },
    {
        "id": "76d65c26-f784-44a2-ac19-586678f7c2f2",
        "name": "Michael Novotny",
        "email": "michael@novotny.com",
        "image_url": "/customers/michael-novotny.png",
    },
]

# (customer index, amount in cents, status, date)
INVOICES = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (4, 3040, "paid", date(2022, 10, 29)),
    (3, 44800, "paid", date(2023, 9, 10)),
    (5, 34577, "pending", date(2023, 8, 5)),
    (2, 54246, "pending", date(2023, 7, 16)),
    (0, 666, "pending", date(2023, 6, 27)),
    (3, 32545, "paid", date(2023, 6, 9)),
    (4, 1250, "paid", date(2023, 6, 17)),
    (5, 8546, "paid", date(2023, 6, 7)),
    (1, 500, "paid", date(2023, 8, 19)),
    (5, 8945, "paid", date(2023, 6, 3)),
    (2, 1000, "paid", date(2022, 6, 5)),
]

REVENUE = [
    ("Jan", 2000),
    ("Feb", 1800),
    ("Mar", 2200),
    ("Apr", 2500),
    ("May", 2300),
    ("Jun", 3200),
    ("Jul", 3500),
    ("Aug", 3700),
    ("Sep", 2500),
    ("Oct", 2800),
    ("Nov", 3000),
    ("Dec", 4800),
]


def seed(engine) -> bool:
    """Load the placeholder rows; returns False if users already exist."""
    with engine.begin() as conn:
        if conn.execute(select(func.count()).select_from(users)).scalar_one():
            return False

        conn.execute(
            users.insert(),
            [{**u, "password": hash_password(u["password"])} for u in USERS],
        )
        conn.execute(customers.insert(), CUSTOMERS)
        conn.execute(
            invoices.insert(),
            [
                {
                    "customer_id": CUSTOMERS[idx]["id"],
                    "amount": amount,
                    "status": status,
                    "date": day,
                }
                for idx, amount, status, day in INVOICES
            ],
        )
        conn.execute(
            revenue.insert(),
            [{"month": month, "revenue": value} for month, value in REVENUE],
        )

    return True


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if seed(get_engine()):
        logger.info(
            "Seeded %s users, %s customers, %s invoices, %s revenue rows",
            len(USERS), len(CUSTOMERS), len(INVOICES), len(REVENUE),
        )
    else:
        logger.info("Users already present; skipping seed.")


if __name__ == "__main__":
    main()
