"""Page/limit pagination used by every listing endpoint."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size."""

    page: int = 1
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if not 1 <= self.limit <= MAX_LIMIT:
            raise ValueError(f"Limit must be between 1 and {MAX_LIMIT}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(cls, params) -> "PageRequest":
        """Build from query params, falling back to defaults for junk values."""
        page = _positive_int(params.get("page"), 1)
        limit = min(_positive_int(params.get("limit"), DEFAULT_LIMIT), MAX_LIMIT)
        return cls(page=page, limit=limit)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total row count."""

    items: list[T]
    total: int
    request: PageRequest

    def __len__(self) -> int:
        return len(self.items)

    @property
    def pagination(self) -> dict:
        links: dict = {}
        if self.request.offset + self.request.limit < self.total:
            links["next"] = {"page": self.request.page + 1, "limit": self.request.limit}
        if self.request.offset > 0:
            links["prev"] = {"page": self.request.page - 1, "limit": self.request.limit}
        return links


def _positive_int(value, default: int) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default
