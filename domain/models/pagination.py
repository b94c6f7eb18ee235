"""
Offset/limit pagination shared by every list endpoint.

``PageRequest`` is built from raw query-string values and never fails:
missing, non-numeric or non-positive values fall back to the defaults.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from domain.models.base import DomainModel

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

T = TypeVar("T", bound=DomainModel)


def _parse_positive_int(raw: Any, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


@dataclass(frozen=True)
class PageRequest:
    """A requested page: 1-based ``page`` and ``limit`` items per page."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(cls, page: Optional[Any] = None, limit: Optional[Any] = None) -> "PageRequest":
        """
        Build a page request from query parameters.

        Examples:
            >>> PageRequest.from_query("2", "5").skip
            5
            >>> PageRequest.from_query("abc", None)
            PageRequest(page=1, limit=10)
        """
        return cls(
            page=_parse_positive_int(page, DEFAULT_PAGE),
            limit=_parse_positive_int(limit, DEFAULT_LIMIT),
        )


class Pagination(DomainModel):
    """Pagination envelope returned alongside every list."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, request: PageRequest, total: int) -> "Pagination":
        return cls(
            page=request.page,
            limit=request.limit,
            total=total,
            pages=math.ceil(total / request.limit),
        )


@dataclass
class Page(Generic[T]):
    """One page of items plus its envelope."""

    items: List[T] = field(default_factory=list)
    pagination: Pagination = field(
        default_factory=lambda: Pagination(page=DEFAULT_PAGE, limit=DEFAULT_LIMIT, total=0, pages=0)
    )

    def to_response(self) -> Dict[str, Any]:
        return {
            "items": [item.to_response() for item in self.items],
            "pagination": self.pagination.to_response(),
        }
