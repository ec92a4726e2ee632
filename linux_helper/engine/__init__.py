"""Filter engine, record stores and page models."""

from .page import PageExtra, PageModel, PageSpec
from .search import filter_records, matches, result_summary
from .store import RecordStore, build_store

__all__ = [
    "PageExtra",
    "PageModel",
    "PageSpec",
    "RecordStore",
    "build_store",
    "filter_records",
    "matches",
    "result_summary",
]
