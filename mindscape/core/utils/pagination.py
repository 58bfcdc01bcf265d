"""Pagination helper for SQLAlchemy queries."""

from __future__ import annotations

from typing import List, Tuple

from sqlalchemy.orm import Query


def paginate(query: Query, page: int = 1, per_page: int = 50) -> Tuple[List, int]:
    page = max(page, 1)
    per_page = max(min(per_page, 200), 1)
    total = query.order_by(None).count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    return items, total


def page_count(total: int, per_page: int) -> int:
    return (total + per_page - 1) // per_page if per_page else 1
