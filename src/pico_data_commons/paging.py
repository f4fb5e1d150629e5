from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Protocol, TypeVar, runtime_checkable

from . import asserts
from .errors import InvalidArgumentError
from .formatting import render_fields
from .sorting import Orders

T = TypeVar("T")
U = TypeVar("U")


@runtime_checkable
class Pageable(Protocol):
    """Request descriptor: which page, how large, and in what order."""

    @property
    def page_number(self) -> int: ...

    @property
    def page_size(self) -> int: ...

    @property
    def orders(self) -> Optional[Orders]: ...

    @property
    def offset(self) -> int: ...


@runtime_checkable
class Page(Protocol[T]):
    """A materialized page of results plus its paging facts."""

    @property
    def page_number(self) -> int: ...

    @property
    def page_size(self) -> int: ...

    @property
    def orders(self) -> Optional[Orders]: ...

    @property
    def total_page_number(self) -> int: ...

    @property
    def total_elements(self) -> int: ...

    @property
    def content(self) -> list[T]: ...

    @property
    def has_content(self) -> bool: ...

    @property
    def is_first_page(self) -> bool: ...

    @property
    def is_last_page(self) -> bool: ...

    @property
    def has_next_page(self) -> bool: ...

    @property
    def has_previous_page(self) -> bool: ...

    def __iter__(self) -> Iterator[T]: ...


def _check_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class DefaultPageable:
    page_number: int
    page_size: int
    orders: Optional[Orders] = None

    def __post_init__(self) -> None:
        _check_int(self.page_number, "Page number")
        _check_int(self.page_size, "Page size")
        asserts.is_false(self.page_number < 0, "Page number must not be less than zero")
        asserts.is_false(self.page_size < 1, "Page size must not be less than one")
        if self.orders is not None and not isinstance(self.orders, Orders):
            raise InvalidArgumentError(f"orders must be an Orders instance, got {self.orders!r}")

    @classmethod
    def of(cls, page_number: int, page_size: int, orders: Optional[Orders] = None) -> "DefaultPageable":
        return cls(page_number, page_size, orders)

    @property
    def offset(self) -> int:
        """Number of elements to skip before this page starts."""
        return self.page_number * self.page_size

    @property
    def is_sorted(self) -> bool:
        return self.orders is not None

    @property
    def has_previous(self) -> bool:
        return self.page_number > 0

    def next(self) -> "DefaultPageable":
        return replace(self, page_number=self.page_number + 1)

    def previous(self) -> "DefaultPageable":
        asserts.is_false(not self.has_previous, "The first page has no previous page")
        return replace(self, page_number=self.page_number - 1)

    def previous_or_first(self) -> "DefaultPageable":
        return self.previous() if self.has_previous else self

    def first(self) -> "DefaultPageable":
        return replace(self, page_number=0)

    def with_page(self, page_number: int) -> "DefaultPageable":
        return replace(self, page_number=page_number)

    def with_orders(self, orders: Optional[Orders]) -> "DefaultPageable":
        return replace(self, orders=orders)

    def __str__(self) -> str:
        return render_fields(
            ("page_number", self.page_number),
            ("page_size", self.page_size),
            ("orders", self.orders),
        )


class DefaultPage(Generic[T]):
    """Immutable :class:`Page` over a snapshot of the supplied content.

    ``total`` is the grand total across all pages. When it is omitted the
    size of ``content`` is used, which is only accurate for a single page.

    Hashing hashes the content, so it raises ``TypeError`` when the page holds
    unhashable rows such as dicts. Equality works for any content.
    """

    __slots__ = ("_content", "_pageable", "_total")

    def __init__(
        self,
        content: Iterable[T],
        pageable: Optional[Pageable] = None,
        total: Optional[int] = None,
    ):
        asserts.not_none(content, "Content must not be null.")
        if pageable is not None and not isinstance(pageable, Pageable):
            raise InvalidArgumentError(f"pageable must be a Pageable, got {pageable!r}")
        snapshot = tuple(content)
        if total is None:
            total = len(snapshot)
        else:
            _check_int(total, "Total")
            asserts.is_false(
                total < len(snapshot),
                f"Total must not be less than the content size ({total} < {len(snapshot)})",
            )
        object.__setattr__(self, "_content", snapshot)
        object.__setattr__(self, "_pageable", pageable)
        object.__setattr__(self, "_total", total)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._content, self._pageable, self._total))

    @classmethod
    def of(
        cls,
        content: Iterable[T],
        pageable: Optional[Pageable] = None,
        total: Optional[int] = None,
    ) -> "DefaultPage[T]":
        return cls(content, pageable, total)

    @property
    def pageable(self) -> Optional[Pageable]:
        return self._pageable

    @property
    def page_number(self) -> int:
        return 0 if self._pageable is None else self._pageable.page_number

    @property
    def page_size(self) -> int:
        return 0 if self._pageable is None else self._pageable.page_size

    @property
    def orders(self) -> Optional[Orders]:
        return None if self._pageable is None else self._pageable.orders

    @property
    def total_page_number(self) -> int:
        size = self.page_size
        if size <= 0:
            # unpaged: everything sits on a single page
            return 1 if self._total > 0 else 0
        return (self._total + size - 1) // size

    @property
    def total_elements(self) -> int:
        return self._total

    @property
    def content(self) -> list[T]:
        return list(self._content)

    @property
    def number_of_elements(self) -> int:
        return len(self._content)

    @property
    def has_content(self) -> bool:
        return len(self._content) > 0

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 0

    @property
    def has_next_page(self) -> bool:
        if self._pageable is None:
            return False
        return (self.page_number + 1) * self.page_size < self._total

    @property
    def is_first_page(self) -> bool:
        return not self.has_previous_page

    @property
    def is_last_page(self) -> bool:
        return not self.has_next_page

    def next_pageable(self) -> Optional[Pageable]:
        if not self.has_next_page:
            return None
        return DefaultPageable(self.page_number + 1, self.page_size, self.orders)

    def previous_pageable(self) -> Optional[Pageable]:
        if self._pageable is None or not self.has_previous_page:
            return None
        return DefaultPageable(self.page_number - 1, self.page_size, self.orders)

    def map(self, func: Callable[[T], U]) -> "DefaultPage[U]":
        return DefaultPage([func(item) for item in self._content], self._pageable, self._total)

    def __iter__(self) -> Iterator[T]:
        return iter(self._content)

    def __len__(self) -> int:
        return len(self._content)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DefaultPage):
            return NotImplemented
        return (
            self._total == other._total
            and self._pageable == other._pageable
            and self._content == other._content
        )

    def __hash__(self) -> int:
        return hash((self._pageable, self._content, self._total))

    def __repr__(self) -> str:
        return (
            f"DefaultPage(content={list(self._content)!r}, "
            f"pageable={self._pageable!r}, total={self._total!r})"
        )

    def __str__(self) -> str:
        return render_fields(
            ("pageable", self._pageable),
            ("content", list(self._content)),
            ("total", self._total),
        )
