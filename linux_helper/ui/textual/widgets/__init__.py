"""Textual widgets."""

from .code_block import COPIED_LABEL, COPY_LABEL, CodeBlock
from .extras import ExtraSection
from .record_entry import RecordEntry, RecordList

__all__ = [
    "COPIED_LABEL",
    "COPY_LABEL",
    "CodeBlock",
    "ExtraSection",
    "RecordEntry",
    "RecordList",
]
