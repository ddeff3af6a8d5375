"""
Paging and sorting for list queries.

Sortable columns are enums, one per entity. Free-form ``sortBy`` and
``sortDirection`` strings from the query string are parsed into those
enums (falling back to ``id`` / ``asc``), so only known column names ever
reach an ORDER BY clause.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, Type, TypeVar

from .db import SQL_INT_MAX
from .exceptions import InvalidDataError

T = TypeVar("T")


class _LenientEnum(str, Enum):
    @classmethod
    def default(cls):
        return next(iter(cls))

    @classmethod
    def parse(cls, value: Optional[str]):
        """Case-insensitive lookup; unknown or missing values give default."""
        if value is None:
            return cls.default()
        key = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.default()


class SortDirection(_LenientEnum):
    ASC = "asc"
    DESC = "desc"


class ChefSortField(_LenientEnum):
    ID = "id"
    USERNAME = "username"


class IngredientSortField(_LenientEnum):
    ID = "id"
    NAME = "name"


class RecipeSortField(_LenientEnum):
    ID = "id"
    NAME = "name"


@dataclass(frozen=True)
class PageOptions:
    page_number: int = 1
    page_size: int = 10
    sort_by: Optional[_LenientEnum] = None
    sort_direction: SortDirection = SortDirection.ASC

    def __post_init__(self):
        if self.page_number < 1 or self.page_size < 1:
            raise InvalidDataError(
                "INVALID_PAGE_OPTIONS",
                "page and pageSize must be at least 1",
                page=self.page_number,
                page_size=self.page_size,
            )

    @classmethod
    def parse(
        cls,
        sort_fields: Type[_LenientEnum],
        page: int,
        page_size: int,
        sort_by: Optional[str] = None,
        sort_direction: Optional[str] = None,
    ) -> "PageOptions":
        return cls(
            page_number=page,
            page_size=page_size,
            sort_by=sort_fields.parse(sort_by),
            sort_direction=SortDirection.parse(sort_direction),
        )

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass
class Page(Generic[T]):
    page_number: int
    page_size: int
    total_elements: int
    items: List[T] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        # ceiling division; 0 elements -> 0 pages
        return -(-self.total_elements // self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page_number > 1


def paginate(query, model, options: PageOptions) -> Page:
    """Sort an already-filtered query, then slice out one page.

    The total is counted on the filtered query before any LIMIT/OFFSET is
    applied. Ties on the sort column are broken by ascending id.
    """
    total = query.order_by(None).count()
    if options.offset > SQL_INT_MAX:
        # no row can sit that far out; skip a query that cannot bind
        return Page(
            page_number=options.page_number,
            page_size=options.page_size,
            total_elements=total,
        )
    sort_by = "id" if options.sort_by is None else options.sort_by.value
    column = getattr(model, sort_by)
    if options.sort_direction is SortDirection.DESC:
        order = column.desc()
    else:
        order = column.asc()
    ordering = [order]
    if sort_by != "id":
        ordering.append(model.id.asc())
    items = (
        query.order_by(None)
        .order_by(*ordering)
        .offset(options.offset)
        .limit(min(options.limit, SQL_INT_MAX))
        .all()
    )
    return Page(
        page_number=options.page_number,
        page_size=options.page_size,
        total_elements=total,
        items=items,
    )


def link_header(url, page: Page) -> str:
    """Build an RFC 5988 ``Link`` header for a page.

    ``url`` is a starlette ``URL``; only its ``page`` query parameter is
    rewritten.
    """
    links = []
    last = max(page.total_pages, 1)
    links.append(f'<{url.include_query_params(page=1)}>; rel="first"')
    if page.has_prev:
        prev = min(page.page_number - 1, last)
        links.append(f'<{url.include_query_params(page=prev)}>; rel="prev"')
    if page.has_next:
        nxt = page.page_number + 1
        links.append(f'<{url.include_query_params(page=nxt)}>; rel="next"')
    links.append(f'<{url.include_query_params(page=last)}>; rel="last"')
    return ", ".join(links)
