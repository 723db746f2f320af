"""Thread-safe in-memory storage for all entities."""

from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import TypeVar

from tea_api.models import Brew, BrewQuery, Steep, Tea, Teapot, TeapotQuery, TeaQuery
from tea_api.store.locking import RWLock

T = TypeVar("T")


def _newest_first(records: Iterable[T]) -> list[T]:
    """Sort by created_at descending. Equal timestamps keep table order."""
    return sorted(records, key=lambda r: r.created_at, reverse=True)


def _window(records: list[T], page: int, limit: int) -> tuple[list[T], int]:
    """Slice one page out of an already filtered and sorted list.

    Returns the page and the total before slicing. A page past the end is
    empty but still reports the real total.
    """
    total = len(records)
    start = (page - 1) * limit
    if start >= total:
        return [], total
    end = min(start + limit, total)
    return [replace(r) for r in records[start:end]], total


def _matches(record: object, **filters: object) -> bool:
    """Exact equality on every filter that is set."""
    return all(value is None or getattr(record, name) == value for name, value in filters.items())


class MemoryStore:
    """In-memory tables for teapots, teas, brews and steeps.

    Every method takes the store's reader/writer lock for its whole body
    and never calls another locked method. Records are copied on the way
    in and out, so callers cannot mutate stored state without going
    through an update call.

    The store does no validation and raises no domain errors: absence is
    reported as None or False.
    """

    def __init__(self) -> None:
        self._lock = RWLock()
        self._teapots: dict[str, Teapot] = {}
        self._teas: dict[str, Tea] = {}
        self._brews: dict[str, Brew] = {}
        self._steeps: dict[str, Steep] = {}

    # Generic table operations

    def _get(self, table: dict[str, T], entity_id: str) -> T | None:
        with self._lock.read():
            record = table.get(entity_id)
            return replace(record) if record is not None else None

    def _put(self, table: dict[str, T], entity_id: str, record: T) -> None:
        with self._lock.write():
            table[entity_id] = replace(record)

    def _delete(self, table: dict[str, T], entity_id: str) -> bool:
        with self._lock.write():
            return table.pop(entity_id, None) is not None

    def _list(
        self,
        table: dict[str, T],
        page: int,
        limit: int,
        order: Callable[[Iterable[T]], list[T]] = _newest_first,
        **filters: object,
    ) -> tuple[list[T], int]:
        with self._lock.read():
            filtered = [r for r in table.values() if _matches(r, **filters)]
            return _window(order(filtered), page, limit)

    # Teapots

    def list_teapots(self, query: TeapotQuery) -> tuple[list[Teapot], int]:
        """Return a page of teapots matching the query and the filtered total."""
        return self._list(
            self._teapots,
            query.page,
            query.limit,
            material=query.material,
            style=query.style,
        )

    def create_teapot(self, teapot: Teapot) -> None:
        self._put(self._teapots, teapot.id, teapot)

    def get_teapot(self, teapot_id: str) -> Teapot | None:
        return self._get(self._teapots, teapot_id)

    def update_teapot(self, teapot: Teapot) -> None:
        self._put(self._teapots, teapot.id, teapot)

    def delete_teapot(self, teapot_id: str) -> bool:
        return self._delete(self._teapots, teapot_id)

    # Teas

    def list_teas(self, query: TeaQuery) -> tuple[list[Tea], int]:
        """Return a page of teas matching the query and the filtered total."""
        return self._list(
            self._teas,
            query.page,
            query.limit,
            type=query.type,
            caffeine_level=query.caffeine_level,
        )

    def create_tea(self, tea: Tea) -> None:
        self._put(self._teas, tea.id, tea)

    def get_tea(self, tea_id: str) -> Tea | None:
        return self._get(self._teas, tea_id)

    def update_tea(self, tea: Tea) -> None:
        self._put(self._teas, tea.id, tea)

    def delete_tea(self, tea_id: str) -> bool:
        return self._delete(self._teas, tea_id)

    # Brews

    def list_brews(self, query: BrewQuery) -> tuple[list[Brew], int]:
        """Return a page of brews matching the query and the filtered total."""
        return self._list(
            self._brews,
            query.page,
            query.limit,
            status=query.status,
            teapot_id=query.teapot_id,
            tea_id=query.tea_id,
        )

    def list_brews_by_teapot(self, teapot_id: str, page: int, limit: int) -> tuple[list[Brew], int]:
        """Return a page of the brews made in one teapot."""
        return self._list(self._brews, page, limit, teapot_id=teapot_id)

    def create_brew(self, brew: Brew) -> None:
        self._put(self._brews, brew.id, brew)

    def get_brew(self, brew_id: str) -> Brew | None:
        return self._get(self._brews, brew_id)

    def update_brew(self, brew: Brew) -> None:
        self._put(self._brews, brew.id, brew)

    def delete_brew(self, brew_id: str) -> bool:
        return self._delete(self._brews, brew_id)

    # Steeps

    def list_steeps_by_brew(self, brew_id: str, page: int, limit: int) -> tuple[list[Steep], int]:
        """Return a page of a brew's steeps, ordered by steep number ascending."""
        return self._list(
            self._steeps,
            page,
            limit,
            order=lambda steeps: sorted(steeps, key=lambda s: s.steep_number),
            brew_id=brew_id,
        )

    def count_steeps_by_brew(self, brew_id: str) -> int:
        with self._lock.read():
            return sum(1 for s in self._steeps.values() if s.brew_id == brew_id)

    def create_steep(self, steep: Steep) -> None:
        self._put(self._steeps, steep.id, steep)

    def get_steep(self, steep_id: str) -> Steep | None:
        return self._get(self._steeps, steep_id)

    # Introspection

    def counts(self) -> dict[str, int]:
        """Number of records per table, used by the readiness probe."""
        with self._lock.read():
            return {
                "teapots": len(self._teapots),
                "teas": len(self._teas),
                "brews": len(self._brews),
                "steeps": len(self._steeps),
            }
