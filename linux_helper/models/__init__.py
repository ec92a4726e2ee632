"""Record and disclosure model layer."""

from .disclosure import (
    COLLAPSED,
    DisclosureManager,
    DisclosurePolicy,
    IndependentToggleDisclosure,
    SingleOpenDisclosure,
    SingleOpenState,
    ToggleState,
    collapse_on_query,
    make_disclosure,
    toggle_checked,
    toggle_single,
)
from .records import (
    ChecklistItem,
    DetailBlock,
    ErrorEntry,
    GuideSection,
    Record,
    RecordKey,
)

__all__ = [
    "COLLAPSED",
    "ChecklistItem",
    "DetailBlock",
    "DisclosureManager",
    "DisclosurePolicy",
    "ErrorEntry",
    "GuideSection",
    "IndependentToggleDisclosure",
    "Record",
    "RecordKey",
    "SingleOpenDisclosure",
    "SingleOpenState",
    "ToggleState",
    "collapse_on_query",
    "make_disclosure",
    "toggle_checked",
    "toggle_single",
]
