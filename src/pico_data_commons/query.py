import logging
from typing import Any, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from . import asserts
from .errors import InvalidArgumentError
from .paging import DefaultPage, Pageable
from .sorting import NullHandling, Orders

log = logging.getLogger(__name__)


def _columns(entity: Any) -> Any:
    table = getattr(entity, "__table__", entity)
    columns = getattr(table, "c", None)
    if columns is None:
        raise InvalidArgumentError(f"Cannot resolve columns of {entity!r}")
    return columns


def order_by_clauses(orders: Optional[Orders], entity: Any) -> list[Any]:
    """Translate ``orders`` into ORDER BY clauses over the columns of ``entity``.

    ``entity`` is a mapped class or a ``Table``. Attribute names are checked
    against its columns so that no caller-supplied text reaches the SQL.
    """
    if orders is None:
        return []
    columns = _columns(entity)
    clauses = []
    for order in orders:
        name = order.attribute_name
        if not isinstance(name, str) or name not in columns:
            raise InvalidArgumentError(f"Invalid sort field: {name}")
        column = columns[name]
        clause = column.asc() if order.is_ascending else column.desc()
        if order.null_handling is NullHandling.FIRST:
            clause = clause.nulls_first()
        elif order.null_handling is NullHandling.LAST:
            clause = clause.nulls_last()
        clauses.append(clause)
    return clauses


def apply_pageable(stmt: Select, pageable: Pageable, entity: Any) -> Select:
    asserts.not_none(pageable, "Pageable must not be null.")
    clauses = order_by_clauses(pageable.orders, entity)
    if clauses:
        stmt = stmt.order_by(*clauses)
    return stmt.limit(pageable.page_size).offset(pageable.offset)


def count_statement(stmt: Select) -> Select:
    return select(func.count()).select_from(stmt.order_by(None).subquery())


def _rows(result: Any, scalars: bool) -> list[Any]:
    return list(result.scalars().all()) if scalars else list(result.mappings().all())


def _page(rows: list[Any], pageable: Pageable, total: int) -> DefaultPage[Any]:
    # rows inserted between the count and the fetch must not undercount
    total = max(total, pageable.offset + len(rows)) if rows else total
    return DefaultPage.of(rows, pageable, total=total)


def paginate(
    session: Session,
    stmt: Select,
    pageable: Pageable,
    entity: Any,
    scalars: bool = True,
) -> DefaultPage[Any]:
    """Run ``stmt`` for one page and its total count inside the caller's session."""
    total = session.execute(count_statement(stmt)).scalar_one()
    log.debug(f"paginate: Counted {total} rows, fetching page {pageable.page_number}.")
    result = session.execute(apply_pageable(stmt, pageable, entity))
    return _page(_rows(result, scalars), pageable, total)


async def apaginate(
    session: AsyncSession,
    stmt: Select,
    pageable: Pageable,
    entity: Any,
    scalars: bool = True,
) -> DefaultPage[Any]:
    total = (await session.execute(count_statement(stmt))).scalar_one()
    log.debug(f"apaginate: Counted {total} rows, fetching page {pageable.page_number}.")
    result = await session.execute(apply_pageable(stmt, pageable, entity))
    return _page(_rows(result, scalars), pageable, total)
