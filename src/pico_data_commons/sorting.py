from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Union

from . import asserts
from .errors import InvalidArgumentError
from .formatting import render_fields


class _ParsableEnum(Enum):

    @classmethod
    def _lookup(cls, value: str):
        for member in cls:
            if member.name.lower() == value.lower():
                return member
        return None

    @classmethod
    def parse(cls, value: Optional[str]):
        """Interpret ``value`` as a member name, ignoring case."""
        asserts.has_text(value, "The entered value cannot be null or empty")
        member = cls._lookup(value)
        if member is None:
            raise InvalidArgumentError("The entered value is not valid")
        return member

    def __str__(self) -> str:
        return self.name


class Direction(_ParsableEnum):
    """Directions in which query results may be ordered."""

    ASC = "ASC"
    DESC = "DESC"

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self is Direction.DESC


class NullHandling(_ParsableEnum):
    """Placement hints for null sort keys in an ORDER BY clause.

    ``NONE`` leaves the placement to the store.
    """

    NONE = "NONE"
    FIRST = "FIRST"
    LAST = "LAST"


@dataclass(frozen=True)
class Order:
    """A single sort clause: attribute, direction and null placement."""

    attribute_name: str
    direction: Direction
    null_handling: NullHandling = NullHandling.NONE

    def __post_init__(self) -> None:
        if isinstance(self.direction, str):
            object.__setattr__(self, "direction", Direction.parse(self.direction))
        if isinstance(self.null_handling, str):
            object.__setattr__(self, "null_handling", NullHandling.parse(self.null_handling))
        if not isinstance(self.direction, Direction):
            raise InvalidArgumentError(f"Invalid direction: {self.direction!r}")
        if not isinstance(self.null_handling, NullHandling):
            raise InvalidArgumentError(f"Invalid null handling: {self.null_handling!r}")

    @classmethod
    def of(
        cls,
        attribute_name: str,
        direction: Union[Direction, str],
        null_handling: Union[NullHandling, str] = NullHandling.NONE,
    ) -> "Order":
        return cls(attribute_name, direction, null_handling)

    @classmethod
    def asc(
        cls, attribute_name: str, null_handling: Union[NullHandling, str] = NullHandling.NONE
    ) -> "Order":
        return cls(attribute_name, Direction.ASC, null_handling)

    @classmethod
    def desc(
        cls, attribute_name: str, null_handling: Union[NullHandling, str] = NullHandling.NONE
    ) -> "Order":
        return cls(attribute_name, Direction.DESC, null_handling)

    @property
    def is_ascending(self) -> bool:
        return self.direction.is_ascending

    @property
    def is_descending(self) -> bool:
        return self.direction.is_descending

    def with_direction(self, direction: Union[Direction, str]) -> "Order":
        return replace(self, direction=direction)

    def with_null_handling(self, null_handling: Union[NullHandling, str]) -> "Order":
        return replace(self, null_handling=null_handling)

    def reverse(self) -> "Order":
        return self.with_direction(Direction.DESC if self.is_ascending else Direction.ASC)

    def __str__(self) -> str:
        return render_fields(
            ("attribute_name", self.attribute_name),
            ("direction", self.direction),
            ("null_handling", self.null_handling),
        )


@dataclass(frozen=True)
class Orders:
    """Non-empty precedence list of :class:`Order` clauses.

    The first clause is the primary sort key. "No ordering" is expressed by
    having no ``Orders`` at all, never by an empty one.
    """

    order_list: tuple[Order, ...]

    def __post_init__(self) -> None:
        order_list = self.order_list
        if order_list is not None and not isinstance(order_list, tuple):
            order_list = tuple(order_list)
        asserts.has_length(order_list, "The Orders must not be null or empty")
        for order in order_list:
            if not isinstance(order, Order):
                raise InvalidArgumentError(f"Not an Order: {order!r}")
        object.__setattr__(self, "order_list", order_list)

    @classmethod
    def of(cls, *orders) -> "Orders":
        """Build from ``Order`` varargs or from a single iterable of them."""
        if len(orders) == 1 and not isinstance(orders[0], Order):
            return cls(orders[0])
        return cls(orders)

    @classmethod
    def asc(cls, *attribute_names: str) -> "Orders":
        return cls._uniform(attribute_names, Direction.ASC)

    @classmethod
    def desc(cls, *attribute_names: str) -> "Orders":
        return cls._uniform(attribute_names, Direction.DESC)

    @classmethod
    def _uniform(cls, attribute_names: tuple[str, ...], direction: Direction) -> "Orders":
        if len(attribute_names) == 1 and isinstance(attribute_names[0], (list, tuple)):
            attribute_names = tuple(attribute_names[0])
        if len(attribute_names) == 1 and attribute_names[0] is None:
            attribute_names = ()
        asserts.has_length(attribute_names, "The attributeName must not be null or empty")
        for name in attribute_names:
            if not isinstance(name, str):
                raise InvalidArgumentError(f"Attribute name must be a string, got {name!r}")
        return cls(tuple(Order(name, direction) for name in attribute_names))

    @classmethod
    def parse(cls, *expressions: str) -> "Orders":
        """Parse ``attr[,attr...][,direction[,null_handling]]`` expressions.

        ``Orders.parse("name,age,desc", "id,asc,last")`` yields ``name DESC``,
        ``age DESC`` and ``id ASC NULLS LAST`` in that order.
        """
        asserts.has_length(expressions, "The sort expressions must not be null or empty")
        orders: list[Order] = []
        for expression in expressions:
            orders.extend(_parse_expression(expression))
        return cls(tuple(orders))

    @property
    def attribute_names(self) -> list[str]:
        return [order.attribute_name for order in self.order_list]

    def get_order_for(self, attribute_name: str) -> Optional[Order]:
        for order in self.order_list:
            if order.attribute_name == attribute_name:
                return order
        return None

    def and_then(self, other: "Orders") -> "Orders":
        return Orders(self.order_list + tuple(other))

    def ascending(self) -> "Orders":
        return Orders(tuple(o.with_direction(Direction.ASC) for o in self.order_list))

    def descending(self) -> "Orders":
        return Orders(tuple(o.with_direction(Direction.DESC) for o in self.order_list))

    def stream(self) -> Iterator[Order]:
        return iter(self.order_list)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.order_list)

    def __len__(self) -> int:
        return len(self.order_list)

    def __getitem__(self, index: int) -> Order:
        return self.order_list[index]

    def __str__(self) -> str:
        return render_fields(("order_list", self.order_list))


def _parse_expression(expression: str) -> Iterable[Order]:
    asserts.has_text(expression, "The sort expression must not be null or empty")
    tokens = [token.strip() for token in expression.split(",") if token.strip()]
    direction = Direction.ASC
    null_handling = NullHandling.NONE
    if (
        len(tokens) >= 3
        and Direction._lookup(tokens[-2]) is not None
        and NullHandling._lookup(tokens[-1]) is not None
    ):
        null_handling = NullHandling._lookup(tokens.pop())
        direction = Direction._lookup(tokens.pop())
    elif len(tokens) >= 2 and Direction._lookup(tokens[-1]) is not None:
        direction = Direction._lookup(tokens.pop())
    if not tokens:
        raise InvalidArgumentError(f"No attribute name in sort expression: {expression!r}")
    return [Order(name, direction, null_handling) for name in tokens]
