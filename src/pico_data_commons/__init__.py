from .errors import InvalidArgumentError
from .sorting import Direction, NullHandling, Order, Orders
from .paging import Pageable, Page, DefaultPageable, DefaultPage
from .persistable import Persistable
from .memory import sort_items, paginate_items
from .query import order_by_clauses, apply_pageable, count_statement, paginate, apaginate

__all__ = [
    "InvalidArgumentError",
    "Direction",
    "NullHandling",
    "Order",
    "Orders",
    "Pageable",
    "Page",
    "DefaultPageable",
    "DefaultPage",
    "Persistable",
    "sort_items",
    "paginate_items",
    "order_by_clauses",
    "apply_pageable",
    "count_statement",
    "paginate",
    "apaginate",
]
