"""
Ranking and pagination of scored trails.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence

from core.exceptions import RequestValidationError


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class PageResult:
    items: list
    pagination: Pagination


def rank(items: Sequence) -> List:
    """
    Stable sort by ``score``, highest first. Items without a score count as 0,
    and items with equal scores keep their incoming order.
    """
    return sorted(items, key=lambda item: getattr(item, 'score', None) or 0, reverse=True)


def paginate(items: Sequence, page: int, limit: int) -> PageResult:
    """
    Slices ``items`` into a 1-indexed page.

    Pages past the end come back empty with the real totals; only a page or
    limit below 1 is an error.
    """
    if page < 1:
        raise RequestValidationError('Page must be greater than 0')
    if limit < 1:
        raise RequestValidationError('Limit must be greater than 0')

    total = len(items)
    start = (page - 1) * limit
    end = start + limit

    return PageResult(
        items=list(items[start:end]),
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
            has_next=end < total,
            has_prev=page > 1,
        ),
    )
