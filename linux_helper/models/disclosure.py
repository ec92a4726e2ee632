"""
linux_helper/models/disclosure.py
Expand/collapse and checked state, as immutable values plus pure transitions.

Two policies share one interface:
- single-open: at most one record expanded (search results, accordions)
- independent-toggle: one boolean per record (checklist)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional, Protocol

from .records import Record, RecordKey

logger = logging.getLogger(__name__)


class DisclosurePolicy(str, Enum):
    SINGLE_OPEN = "single_open"
    INDEPENDENT_TOGGLE = "independent_toggle"


# --- Single-open ---


@dataclass(frozen=True, slots=True)
class SingleOpenState:
    """Either collapsed (``expanded_id is None``) or expanded on one id."""

    expanded_id: Optional[RecordKey] = None

    @property
    def is_collapsed(self) -> bool:
        return self.expanded_id is None


COLLAPSED: Final[SingleOpenState] = SingleOpenState()


def toggle_single(state: SingleOpenState, record_id: RecordKey) -> SingleOpenState:
    """Collapse if ``record_id`` is open, otherwise open it."""
    if state.expanded_id == record_id:
        return COLLAPSED
    return SingleOpenState(record_id)


def collapse_on_query(state: SingleOpenState, query: str) -> SingleOpenState:
    """Any query change collapses, whether or not the open record still matches."""
    return COLLAPSED


# --- Independent toggle ---


@dataclass(frozen=True)
class ToggleState:
    """Sparse ``key -> bool`` map. Absent keys read as ``False``."""

    values: Mapping[RecordKey, bool] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def is_checked(self, key: RecordKey) -> bool:
        return self.values.get(key, False)

    def count_checked(self) -> int:
        return sum(1 for checked in self.values.values() if checked)


def toggle_checked(state: ToggleState, key: RecordKey) -> ToggleState:
    """Flip ``key`` and leave every other entry as it was."""
    values = dict(state.values)
    values[key] = not values.get(key, False)
    return ToggleState(MappingProxyType(values))


# --- Strategy objects ---


class DisclosureManager(Protocol):
    policy: DisclosurePolicy

    def key_for(self, record: Record) -> RecordKey: ...

    def toggle(self, key: RecordKey) -> None: ...

    def on_query_changed(self, query: str) -> None: ...

    def is_open(self, key: RecordKey) -> bool: ...


class SingleOpenDisclosure:
    """Holds a SingleOpenState and applies the single-open transitions."""

    policy = DisclosurePolicy.SINGLE_OPEN

    def __init__(self, initial: SingleOpenState = COLLAPSED):
        self.state = initial

    def key_for(self, record: Record) -> RecordKey:
        return record.id

    def toggle(self, key: RecordKey) -> None:
        self.state = toggle_single(self.state, key)
        logger.debug("Disclosure toggled %r -> %r", key, self.state.expanded_id)

    def on_query_changed(self, query: str) -> None:
        self.state = collapse_on_query(self.state, query)

    def is_open(self, key: RecordKey) -> bool:
        return self.state.expanded_id == key

    @property
    def expanded_id(self) -> Optional[RecordKey]:
        return self.state.expanded_id


class IndependentToggleDisclosure:
    """Holds a ToggleState. Query changes leave checked items alone."""

    policy = DisclosurePolicy.INDEPENDENT_TOGGLE

    def __init__(self, initial: Optional[ToggleState] = None):
        self.state = initial if initial is not None else ToggleState()

    def key_for(self, record: Record) -> RecordKey:
        return record.key

    def toggle(self, key: RecordKey) -> None:
        self.state = toggle_checked(self.state, key)
        logger.debug("Checklist toggled %r -> %s", key, self.state.is_checked(key))

    def on_query_changed(self, query: str) -> None:
        return None

    def is_open(self, key: RecordKey) -> bool:
        return self.state.is_checked(key)


def make_disclosure(
    policy: DisclosurePolicy, initial_id: Optional[RecordKey] = None
) -> DisclosureManager:
    """Build the manager for ``policy``. ``initial_id`` only applies to single-open."""
    if policy is DisclosurePolicy.SINGLE_OPEN:
        return SingleOpenDisclosure(SingleOpenState(initial_id))
    return IndependentToggleDisclosure()
