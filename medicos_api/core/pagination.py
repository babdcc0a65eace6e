"""Pagination: parses raw listing query parameters into a PageRequest.

Invariants:
    - Defaults: page 0, size 10, sorted by nome ascending
    - Malformed input never raises: each bad parameter falls back to its default
    - size is clamped to max_size; page is never negative
    - A page whose offset exceeds MAX_OFFSET falls back to the default page
    - Sort syntax is "field" or "field,direction" (case-insensitive direction)

Design Decisions:
    - Query params arrive as raw strings so FastAPI never rejects a malformed
      page/size with 400: fallback happens here, in pure code
"""

import math
from dataclasses import dataclass

from medicos_api.core.domain_types import SortDirection, SortField

DEFAULT_PAGE = 0
DEFAULT_SIZE = 10
DEFAULT_SORT = SortField.NOME
MAX_PAGE_SIZE = 2000
# Largest OFFSET the database accepts (signed 64-bit)
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """Validated pagination and ordering for a listing query."""
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE
    sort: SortField = DEFAULT_SORT
    direction: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        return self.page * self.size


def parse_page_request(
    page: str | None = None,
    size: str | None = None,
    sort: str | None = None,
    max_size: int = MAX_PAGE_SIZE,
) -> PageRequest:
    """Build a PageRequest from raw query strings, falling back per field."""
    page_number = _parse_int(page)
    if page_number is None or page_number < 0:
        page_number = DEFAULT_PAGE

    page_size = _parse_int(size)
    if page_size is None or page_size < 1:
        page_size = DEFAULT_SIZE
    page_size = min(page_size, max_size)
    if page_number * page_size > MAX_OFFSET:
        page_number = DEFAULT_PAGE

    sort_field, direction = _parse_sort(sort)
    return PageRequest(
        page=page_number, size=page_size, sort=sort_field, direction=direction,
    )


def count_pages(total_elements: int, size: int) -> int:
    """Number of pages needed to hold total_elements (0 when empty)."""
    if total_elements <= 0:
        return 0
    return math.ceil(total_elements / size)


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_sort(raw: str | None) -> tuple[SortField, SortDirection]:
    if not raw or not raw.strip():
        return DEFAULT_SORT, SortDirection.ASC
    parts = [p.strip() for p in raw.split(",")]
    try:
        field = SortField(parts[0])
    except ValueError:
        field = DEFAULT_SORT
    direction = SortDirection.ASC
    if len(parts) > 1:
        try:
            direction = SortDirection(parts[1].lower())
        except ValueError:
            direction = SortDirection.ASC
    return field, direction
