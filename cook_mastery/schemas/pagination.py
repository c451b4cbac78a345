"""Pagination schemas."""

import math

from pydantic import BaseModel


class PaginationMeta(BaseModel):
    """Pagination metadata returned with every list endpoint."""

    page: int
    limit: int
    total_items: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total_items: int) -> "PaginationMeta":
        return cls(
            page=page,
            limit=limit,
            total_items=total_items,
            total_pages=math.ceil(total_items / limit),
        )


def page_offset(page: int, limit: int) -> int:
    """Row offset of a 1-indexed page."""
    return (page - 1) * limit
