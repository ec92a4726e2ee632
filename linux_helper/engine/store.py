"""
linux_helper/engine/store.py
Immutable, ordered record collections.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, Optional, TypeVar, overload

from linux_helper.exceptions.store import DuplicateRecordError, EmptyTitleError

logger = logging.getLogger(__name__)

R = TypeVar("R")


class RecordStore(Sequence, Generic[R]):
    """
    A read-only sequence of records in insertion order.

    Validated once at construction: ids must be unique and the primary
    searchable field (the title) must not be blank.
    """

    __slots__ = ("name", "_records", "_by_id")

    def __init__(self, records: Iterable[R], name: str = ""):
        self.name = name
        self._records: tuple[R, ...] = tuple(records)
        self._by_id: dict[int, R] = {}

        for record in self._records:
            if record.id in self._by_id:
                raise DuplicateRecordError(record.id)
            fields = record.searchable_fields
            if not fields or not fields[0].strip():
                raise EmptyTitleError(record.id)
            self._by_id[record.id] = record

        logger.debug("Built store %r with %d records", name, len(self._records))

    @overload
    def __getitem__(self, index: int) -> R: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[R, ...]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"RecordStore(name={self.name!r}, size={len(self._records)})"

    def get(self, record_id: int) -> Optional[R]:
        return self._by_id.get(record_id)

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(self._by_id)

    @property
    def first_id(self) -> Optional[int]:
        return self._records[0].id if self._records else None

    def as_tuple(self) -> tuple[R, ...]:
        return self._records


def build_store(factory, rows: Iterable[dict], name: str = "") -> RecordStore:
    """Create records from plain rows, numbering them by position."""
    return RecordStore(
        (factory(id=index, **row) for index, row in enumerate(rows)), name=name
    )
