# Test suite for expand/collapse and checklist state

from types import MappingProxyType

import pytest

from linux_helper.models.disclosure import (
    COLLAPSED,
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


class TestSingleOpenTransitions:
    """Pure single-open transitions"""

    def test_toggle_from_collapsed_opens(self):
        assert toggle_single(COLLAPSED, 5) == SingleOpenState(5)

    def test_toggle_same_id_collapses(self):
        """toggle(5) then toggle(5) collapses"""
        state = toggle_single(toggle_single(COLLAPSED, 5), 5)
        assert state.is_collapsed

    def test_toggle_other_id_switches(self):
        """toggle(5) then toggle(7) leaves exactly 7 open"""
        state = toggle_single(toggle_single(COLLAPSED, 5), 7)
        assert state.expanded_id == 7

    def test_toggle_does_not_mutate_input(self):
        state = SingleOpenState(3)
        toggle_single(state, 3)
        assert state.expanded_id == 3

    @pytest.mark.parametrize("query", ["", "x", "perm", "  "])
    def test_query_change_always_collapses(self, query):
        """Any query edit collapses from ExpandedOn(3)"""
        assert collapse_on_query(SingleOpenState(3), query) is COLLAPSED

    def test_id_zero_is_a_real_id(self):
        """Record 0 open is not the same as collapsed"""
        state = toggle_single(COLLAPSED, 0)
        assert not state.is_collapsed
        assert state.expanded_id == 0


class TestToggleTransitions:
    """Pure independent-toggle transitions"""

    def test_unknown_keys_read_false(self):
        assert ToggleState().is_checked("item-9") is False

    def test_toggle_only_touches_its_key(self):
        """Checking item-2 leaves item-0 and item-5 alone"""
        state = ToggleState(MappingProxyType({"item-0": True}))
        result = toggle_checked(state, "item-2")
        assert result.is_checked("item-2")
        assert result.is_checked("item-0")
        assert not result.is_checked("item-5")
        assert result.count_checked() == 2

    def test_toggle_twice_unchecks(self):
        state = toggle_checked(toggle_checked(ToggleState(), "item-1"), "item-1")
        assert not state.is_checked("item-1")
        assert state.count_checked() == 0

    def test_toggle_returns_new_state(self):
        state = ToggleState()
        toggle_checked(state, "item-1")
        assert not state.is_checked("item-1")

    def test_values_are_read_only(self):
        state = toggle_checked(ToggleState(), "item-1")
        with pytest.raises(TypeError):
            state.values["item-1"] = False


class TestDisclosureManagers:
    """Strategy objects used by page models"""

    def test_single_open_manager(self):
        manager = SingleOpenDisclosure()
        manager.toggle(2)
        assert manager.is_open(2)
        assert manager.expanded_id == 2
        manager.on_query_changed("abc")
        assert not manager.is_open(2)
        assert manager.expanded_id is None

    def test_toggle_manager_ignores_queries(self):
        manager = IndependentToggleDisclosure()
        manager.toggle("item-4")
        manager.on_query_changed("anything")
        assert manager.is_open("item-4")

    def test_factory_picks_policy(self):
        single = make_disclosure(DisclosurePolicy.SINGLE_OPEN, 0)
        toggles = make_disclosure(DisclosurePolicy.INDEPENDENT_TOGGLE, 0)
        assert isinstance(single, SingleOpenDisclosure)
        assert single.is_open(0)
        assert isinstance(toggles, IndependentToggleDisclosure)
        assert toggles.state.count_checked() == 0
