# Test suite for record stores and the bundled catalogues

import pytest

from linux_helper.content import CHECKLIST, ERRORS, INSTALLATION, TERMINAL
from linux_helper.engine.store import RecordStore, build_store
from linux_helper.exceptions import DuplicateRecordError, EmptyTitleError
from linux_helper.models.records import ChecklistItem, ErrorEntry, GuideSection

from .conftest import make_error


class TestRecordStore:
    """Construction-time validation and sequence behaviour"""

    def test_duplicate_ids_rejected(self):
        with pytest.raises(DuplicateRecordError) as exc_info:
            RecordStore([make_error(1, "a"), make_error(1, "b")])
        assert exc_info.value.record_id == 1

    def test_blank_title_rejected(self):
        with pytest.raises(EmptyTitleError) as exc_info:
            RecordStore([make_error(0, "ok"), make_error(1, "   ")])
        assert exc_info.value.record_id == 1

    def test_sequence_protocol(self, small_store):
        assert len(small_store) == 3
        assert small_store[1].title == "Permission denied"
        assert [r.id for r in small_store] == [0, 1, 2]
        assert small_store.get(2).title == "disk quota exceeded"
        assert small_store.get(99) is None
        assert small_store.first_id == 0

    def test_empty_store(self):
        store = RecordStore([], name="empty")
        assert len(store) == 0
        assert store.first_id is None

    def test_build_store_numbers_by_position(self):
        rows = [
            {"title": "One", "summary": "first"},
            {"title": "Two", "summary": "second"},
        ]
        store = build_store(GuideSection, rows, name="guide")
        assert store.ids == (0, 1)
        assert store[1].key == "section-1"


class TestCatalogues:
    """Bundled content is well formed"""

    @pytest.mark.parametrize("store", [ERRORS, CHECKLIST, INSTALLATION, TERMINAL])
    def test_ids_are_positions(self, store):
        assert store.ids == tuple(range(len(store)))

    def test_error_catalogue(self):
        assert len(ERRORS) == 10
        assert ERRORS[0].title == "command not found"
        assert ERRORS[1].title == "Permission denied"
        assert all(isinstance(r, ErrorEntry) for r in ERRORS)
        assert all(r.causes and r.solution for r in ERRORS)

    def test_checklist_catalogue(self):
        assert len(CHECKLIST) == 10
        assert all(isinstance(r, ChecklistItem) for r in CHECKLIST)
        assert [r.key for r in CHECKLIST][:3] == ["item-0", "item-1", "item-2"]
        assert all(r.commands for r in CHECKLIST)

    def test_error_detail_blocks(self):
        headings = [block.heading for block in ERRORS[0].detail]
        assert headings == ["Common Causes", "Solution", "Example"]
        example = ERRORS[0].detail[-1]
        assert example.text.startswith("$ ")
