"""
linux_helper/engine/page.py
Per-page binding of a record store, the current query and disclosure state.

Rendering layers read from a PageModel and send it user events; they hold
no state of their own apart from widget bookkeeping.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from linux_helper.models.disclosure import DisclosurePolicy, make_disclosure
from linux_helper.models.records import RecordKey

from .search import filter_records, result_summary
from .store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PageExtra:
    """
    A fixed block of tips shown below a page's records.

    Each row is ``(title, body)`` where body is one paragraph or a tuple of
    steps. Extras are not searched and never collapse.
    """

    heading: str
    rows: tuple[tuple[str, Union[str, tuple[str, ...]]], ...]
    numbered: bool = False

    def items(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        """Rows with every body as a tuple of lines, numbered if requested."""
        out = []
        for title, body in self.rows:
            lines = (body,) if isinstance(body, str) else tuple(body)
            if self.numbered:
                lines = tuple(f"{n}. {line}" for n, line in enumerate(lines, 1))
            out.append((title, lines))
        return tuple(out)


@dataclass(frozen=True, slots=True)
class PageSpec:
    """Static description of a content page."""

    slug: str
    title: str
    blurb: str
    store: Optional[RecordStore] = None
    policy: DisclosurePolicy = DisclosurePolicy.SINGLE_OPEN
    open_first: bool = False
    searchable: bool = False
    noun: str = "result"
    extras: tuple[PageExtra, ...] = ()

    @property
    def has_records(self) -> bool:
        return self.store is not None

    @property
    def empty_message(self) -> str:
        return f"No {self.noun}s found matching your search."


class PageModel:
    """Live state of one page view."""

    def __init__(self, spec: PageSpec):
        if spec.store is None:
            raise ValueError(f"Page {spec.slug!r} has no records")
        self.spec = spec
        self.store = spec.store
        self._query = ""
        self._results = self.store.as_tuple()
        initial = self.store.first_id if spec.open_first else None
        self.disclosure = make_disclosure(spec.policy, initial)

    # --- Query ---

    @property
    def query(self) -> str:
        return self._query

    @property
    def results(self) -> tuple:
        return self._results

    def set_query(self, query: str) -> tuple:
        """Collapse, then re-filter. Called on every keystroke."""
        self._query = query
        self.disclosure.on_query_changed(query)
        self._results = filter_records(self.store, query)
        return self._results

    @property
    def summary(self) -> Optional[str]:
        return result_summary(len(self._results), self._query, self.spec.noun)

    @property
    def is_empty(self) -> bool:
        return not self._results

    # --- Disclosure ---

    def _key(self, record_id: RecordKey) -> RecordKey:
        record = self.store.get(record_id) if isinstance(record_id, int) else None
        if record is None:
            return record_id
        return self.disclosure.key_for(record)

    def toggle(self, record_id: RecordKey) -> None:
        self.disclosure.toggle(self._key(record_id))

    def is_open(self, record_id: RecordKey) -> bool:
        """Raw disclosure state, ignoring whether the record is visible."""
        return self.disclosure.is_open(self._key(record_id))

    def is_expanded(self, record_id: RecordKey) -> bool:
        """Single-open records only count as expanded while they are visible."""
        if not self.is_open(record_id):
            return False
        if self.spec.policy is DisclosurePolicy.SINGLE_OPEN:
            return any(record.id == record_id for record in self._results)
        return True

    @property
    def expanded_record(self):
        if self.spec.policy is not DisclosurePolicy.SINGLE_OPEN:
            return None
        for record in self._results:
            if self.is_open(record.id):
                return record
        return None

    @property
    def progress(self) -> tuple[int, int]:
        """(checked, total) across the whole store."""
        checked = sum(1 for record in self.store if self.is_open(record.id))
        return checked, len(self.store)
