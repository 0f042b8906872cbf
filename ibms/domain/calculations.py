"""Small monetary and list helpers shared by the mock backend and hooks."""

import math
import random
from datetime import datetime, timezone
from typing import Any, Sequence


def calculate_gst(amount: float, gst_percentage: float) -> float:
    return round(amount * gst_percentage / 100, 2)


def calculate_total(amount: float, gst_percentage: float) -> float:
    return round(amount + calculate_gst(amount, gst_percentage), 2)


def generate_order_number(now: datetime | None = None) -> str:
    """``ORD-<year>-<6 digits>``, unique enough for demo data."""
    now = now or datetime.now(timezone.utc)
    return f"ORD-{now.year}-{random.randint(0, 999_999):06d}"


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def paginate(items: Sequence[Any], page: int = 1, limit: int = 10) -> dict[str, Any]:
    """Slice ``items`` into one page.

    The slice length is ``min(limit, max(0, N - (page - 1) * limit))``;
    pages below 1 are treated as page 1.
    """
    page = max(page, 1)
    limit = max(limit, 1)
    start = (page - 1) * limit
    return {
        "data": list(items[start:start + limit]),
        "total": len(items),
        "page": page,
        "limit": limit,
        "totalPages": total_pages(len(items), limit),
    }
