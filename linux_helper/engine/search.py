"""
linux_helper/engine/search.py
Case-insensitive substring filter over a record's searchable fields.
"""

import logging
from collections.abc import Sequence
from typing import Optional, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _normalize(text: str) -> str:
    return text.casefold()


def matches(record, needle: str) -> bool:
    """True if any searchable field contains the already-normalized needle."""
    return any(needle in _normalize(field) for field in record.searchable_fields)


def filter_records(records: Sequence[R], query: str) -> tuple[R, ...]:
    """
    Return the records matching ``query``, in their original order.

    An empty query returns everything. No trimming, ranking or tokenizing.
    """
    if query == "":
        return tuple(records)

    needle = _normalize(query)
    result = tuple(record for record in records if matches(record, needle))
    logger.debug("Filter %r matched %d/%d", query, len(result), len(records))
    return result


def result_summary(count: int, query: str, noun: str = "result") -> Optional[str]:
    """``Found 1 error`` / ``Found 3 errors``; None while the query is empty."""
    if not query:
        return None
    suffix = "" if count == 1 else "s"
    return f"Found {count} {noun}{suffix}"
