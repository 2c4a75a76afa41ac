# invoicing/utils.py

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

CENTS = Decimal("0.01")


def format_currency(amount: Optional[Union[int, float, Decimal]]) -> str:
    """
    Format an amount in cents as US dollars, e.g. 123456 -> "$1,234.56".

    NULL sums (no matching rows) format as "$0.00".
    """
    value = (Decimal(str(amount or 0)) / 100).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def generate_pagination(current_page: int, total_pages: int) -> List[Union[int, str]]:
    """
    Page labels for a pagination bar, with "..." standing in for gaps.

    Seven pages or fewer are listed in full.
    """
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        "...",
        current_page - 1,
        current_page,
        current_page + 1,
        "...",
        total_pages,
    ]
