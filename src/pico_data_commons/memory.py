import logging
from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from . import asserts
from .errors import InvalidArgumentError
from .paging import DefaultPage, Pageable
from .sorting import NullHandling, Order, Orders

log = logging.getLogger(__name__)

T = TypeVar("T")

Accessor = Callable[[Any, str], Any]


def _default_accessor(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        try:
            return item[name]
        except KeyError as e:
            raise InvalidArgumentError(f"Invalid sort field: {name}") from e
    try:
        return getattr(item, name)
    except AttributeError as e:
        raise InvalidArgumentError(f"Invalid sort field: {name}") from e


def _nulls_sort_high(order: Order) -> bool:
    # NONE follows the usual SQL default: nulls compare greater than any value.
    if order.null_handling is NullHandling.NONE:
        return True
    if order.null_handling is NullHandling.LAST:
        return order.is_ascending
    return order.is_descending


def sort_items(
    items: Iterable[T],
    orders: Optional[Orders],
    accessor: Optional[Accessor] = None,
) -> list[T]:
    """Return a new list of ``items`` sorted by ``orders``.

    The sort is stable, so elements equal on every key keep their input order.
    """
    asserts.not_none(items, "Items must not be null.")
    result = list(items)
    if orders is None:
        return result
    get = accessor or _default_accessor
    # Stable sorts applied from the least significant key up.
    for order in reversed(tuple(orders)):
        null_flag = 1 if _nulls_sort_high(order) else -1

        def key(item: Any, _order: Order = order, _flag: int = null_flag) -> tuple[int, Any]:
            value = get(item, _order.attribute_name)
            return (_flag, None) if value is None else (0, value)

        try:
            result.sort(key=key, reverse=order.is_descending)
        except TypeError as e:
            raise InvalidArgumentError(
                f"Values of {order.attribute_name!r} are not mutually comparable"
            ) from e
    return result


def paginate_items(
    items: Iterable[T],
    pageable: Pageable,
    accessor: Optional[Accessor] = None,
) -> DefaultPage[T]:
    """Sort and slice ``items`` for ``pageable``; the page carries the full total."""
    asserts.not_none(pageable, "Pageable must not be null.")
    ordered = sort_items(items, pageable.orders, accessor)
    start = pageable.offset
    content = ordered[start:start + pageable.page_size]
    log.debug(
        f"paginate_items: Page {pageable.page_number} holds {len(content)} "
        f"of {len(ordered)} elements."
    )
    return DefaultPage.of(content, pageable, total=len(ordered))
