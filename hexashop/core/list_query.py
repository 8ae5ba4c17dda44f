"""HexaShop — Generic paginated list query.

One engine shared by every listing endpoint: optional substring search over a
set of searchable fields, ordering restricted to an allow-list of sortable
fields, and page/limit pagination with ``limit=-1`` returning every match.

The engine talks to a ``QueryStore``. ``SqlAlchemyQueryStore`` builds a
``select()`` over an ORM model; ``InMemoryQueryStore`` works over a plain
sequence of records.
"""
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
NO_LIMIT = -1  # sentinel: skip pagination entirely

ASC = "ASC"
DESC = "DESC"


# ── Params / result ──────────────────────────────────────────────────────────

class ListParams(BaseModel):
    """Caller-supplied list options. Nothing is validated here."""

    search: str | None = None
    sort: str | None = None
    order: str | None = None
    page: int | None = None
    limit: int | None = None


class ListMeta(BaseModel):
    page: int
    limit: int
    total: int


class ListResult(BaseModel, Generic[T]):
    """A page of records plus the resolved page/limit and the filtered total."""

    result: list[T]
    meta: ListMeta


@dataclass(frozen=True)
class ListQueryConfig:
    """Per-entity allow-lists, keyed by public field name."""

    searchable_fields: frozenset[str]
    sortable_fields: frozenset[str]


def resolve_direction(order: str | None) -> str:
    """Only an exact ``"ASC"`` sorts ascending."""
    return ASC if order == ASC else DESC


# ── Stores ───────────────────────────────────────────────────────────────────

class QueryStore(Protocol):
    """Query capability the engine consumes."""

    def filter_contains(self, fields: Sequence[str], term: str) -> "QueryStore": ...

    def order_by(self, field: str, direction: str) -> "QueryStore": ...

    def paginate(self, offset: int, limit: int) -> "QueryStore": ...

    async def fetch(self) -> tuple[list[Any], int]: ...


class SqlAlchemyQueryStore:
    """QueryStore over one ORM model.

    ``columns`` maps public field names to model attribute names where they
    differ (``{"createdAt": "created_at"}``).
    """

    def __init__(self, db: AsyncSession, model: type, columns: Mapping[str, str] | None = None):
        self._db = db
        self._model = model
        self._columns = dict(columns or {})
        self._where: list[Any] = []
        self._order: list[Any] = []
        self._offset: int | None = None
        self._limit: int | None = None

    def _column(self, field: str):
        return getattr(self._model, self._columns.get(field, field))

    def filter_contains(self, fields: Sequence[str], term: str) -> "SqlAlchemyQueryStore":
        # autoescape keeps % and _ in the term literal
        self._where.append(or_(*(self._column(f).contains(term, autoescape=True) for f in fields)))
        return self

    def order_by(self, field: str, direction: str) -> "SqlAlchemyQueryStore":
        column = self._column(field)
        self._order.append(column.asc() if direction == ASC else column.desc())
        return self

    def paginate(self, offset: int, limit: int) -> "SqlAlchemyQueryStore":
        self._offset = offset
        self._limit = limit
        return self

    async def fetch(self) -> tuple[list[Any], int]:
        q = select(self._model)
        count_q = select(func.count()).select_from(self._model)
        for clause in self._where:
            q = q.where(clause)
            count_q = count_q.where(clause)
        if self._order:
            q = q.order_by(*self._order)
        if self._limit is not None:
            q = q.offset(self._offset).limit(self._limit)

        count_result = await self._db.execute(count_q)
        total = count_result.scalar_one()

        result = await self._db.execute(q)
        items = list(result.scalars().all())
        return items, total


class InMemoryQueryStore:
    """QueryStore over an in-process sequence of objects or mappings.

    Negative offsets behave like zero and negative limits return every
    remaining row, the same as SQLite.
    """

    def __init__(self, records: Iterable[Any], columns: Mapping[str, str] | None = None):
        self._records = list(records)
        self._columns = dict(columns or {})
        self._predicates: list[Callable[[Any], bool]] = []
        self._order: list[tuple[str, str]] = []
        self._offset: int | None = None
        self._limit: int | None = None

    def _value(self, record: Any, field: str) -> Any:
        name = self._columns.get(field, field)
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name)

    def _sort_key(self, record: Any, field: str) -> tuple[bool, Any]:
        value = self._value(record, field)
        return value is not None, value

    def filter_contains(self, fields: Sequence[str], term: str) -> "InMemoryQueryStore":
        def _matches(record: Any) -> bool:
            for field in fields:
                value = self._value(record, field)
                if value is not None and term in str(value):
                    return True
            return False

        self._predicates.append(_matches)
        return self

    def order_by(self, field: str, direction: str) -> "InMemoryQueryStore":
        self._order.append((field, direction))
        return self

    def paginate(self, offset: int, limit: int) -> "InMemoryQueryStore":
        self._offset = offset
        self._limit = limit
        return self

    async def fetch(self) -> tuple[list[Any], int]:
        rows = [r for r in self._records if all(p(r) for p in self._predicates)]
        total = len(rows)

        # Stable sorts applied last-key-first give multi-column ordering.
        # None sorts lowest, like NULL in SQLite.
        for field, direction in reversed(self._order):
            rows.sort(key=lambda r, f=field: self._sort_key(r, f), reverse=direction == DESC)

        if self._limit is not None:
            start = max(self._offset or 0, 0)
            rows = rows[start:] if self._limit < 0 else rows[start:start + self._limit]
        return rows, total


# ── Engine ───────────────────────────────────────────────────────────────────

async def execute_list_query(
    store: QueryStore,
    params: ListParams,
    config: ListQueryConfig,
    mapper: Callable[[Any], T] | None = None,
) -> ListResult[T]:
    """Run a filtered, sorted, paginated query and count the filtered total.

    Store errors propagate unchanged.
    """
    current_page = params.page if params.page is not None else DEFAULT_PAGE
    current_limit = params.limit if params.limit is not None else DEFAULT_LIMIT

    if params.search:
        store = store.filter_contains(sorted(config.searchable_fields), params.search)

    if params.sort and params.sort in config.sortable_fields:
        store = store.order_by(params.sort, resolve_direction(params.order))

    if current_limit != NO_LIMIT:
        store = store.paginate((current_page - 1) * current_limit, current_limit)

    records, total = await store.fetch()
    result = [mapper(r) for r in records] if mapper else list(records)

    logger.debug(
        "List query: search=%r sort=%r page=%s limit=%s -> %s of %s",
        params.search, params.sort, current_page, current_limit, len(result), total,
    )
    return ListResult(
        result=result,
        meta=ListMeta(page=current_page, limit=current_limit, total=total),
    )
