#!/usr/bin/env python3
"""
Record Store Exception Definitions for Linux Helper

Raised while building a store, never at query time.
"""

from linux_helper.exceptions.base import HelperBaseError


class RecordStoreError(HelperBaseError):
    """Raised when a record collection violates the store invariants."""

    def __init__(self, message, record_id=None):
        super().__init__(message, details={"record_id": record_id})
        self.record_id = record_id


class DuplicateRecordError(RecordStoreError):
    """Two records share the same id."""

    def __init__(self, record_id):
        super().__init__(f"Duplicate record id: {record_id}", record_id=record_id)


class EmptyTitleError(RecordStoreError):
    """A record has an empty primary title field."""

    def __init__(self, record_id):
        super().__init__(
            f"Record {record_id} has an empty title field", record_id=record_id
        )
