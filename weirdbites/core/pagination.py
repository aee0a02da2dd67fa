"""
Helpers for turning page numbers into query offsets and response metadata.
Pages are 1-indexed.
"""
import math
from typing import Optional

from pydantic import BaseModel


class PaginationMeta(BaseModel):
    current_page: int
    page_size: int
    total_items: int
    total_pages: int


def calculate_pagination_offset(page: int, page_size: int) -> tuple[int, int]:
    """
    Return (skip, take) for a page.

    calculate_pagination_offset(2, 12) -> (12, 12)
    """
    skip = (page - 1) * page_size
    take = page_size
    return skip, take


def calculate_pagination_meta(page: int, page_size: int, total_items: int) -> PaginationMeta:
    total_pages = math.ceil(total_items / page_size)

    return PaginationMeta(
        current_page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages
    )


def validate_pagination_params(page, page_size, max_page_size: int = 100) -> Optional[str]:
    """Return an error message for invalid params, None if they are usable."""
    if not isinstance(page, int) or page < 1:
        return "Page must be a number greater than 0"

    if not isinstance(page_size, int) or page_size < 1 or page_size > max_page_size:
        return f"Page size must be between 1 and {max_page_size}"

    return None


def parse_page_params(page: Optional[str], page_size: Optional[str], default_page_size: int, max_page_size: int) -> tuple[int, int]:
    """Parse raw query strings, falling back to page 1 / default size on bad input."""
    try:
        page_int = int(page) if page else 1
    except ValueError:
        page_int = 1
    if page_int < 1:
        page_int = 1

    try:
        size_int = int(page_size) if page_size else default_page_size
    except ValueError:
        size_int = default_page_size
    if size_int < 1 or size_int > max_page_size:
        size_int = default_page_size

    return page_int, size_int
