"""Unit tests for BankValueViewModel and its pure derivation helpers."""

from typing import List

import pytest

from bank_value.models.item import CachedItem
from bank_value.tui.base import SortOrder
from bank_value.tui.viewmodels.bank_vm import (
    BankDisplayState,
    BankValueViewModel,
    compute_total,
    derive_visible_items,
    toggle_sort,
)


def names(items: List[CachedItem]) -> List[str]:
    return [item.name for item in items]


class TestDeriveVisibleItems:
    """Tests for filtering and ordering."""

    def test_default_state_is_value_descending(self) -> None:
        state = BankDisplayState()
        assert state.sort_order is SortOrder.VALUE
        assert state.ascending is False
        assert state.filter_text == ""

    def test_empty_filter_matches_all(self, bank_items) -> None:
        visible = derive_visible_items(bank_items, BankDisplayState())
        assert sorted(names(visible)) == sorted(names(bank_items))

    @pytest.mark.parametrize("needle", ["a", "RUNE", "whip", "s", "zzz", " "])
    def test_filter_is_case_insensitive_substring(self, bank_items, needle: str) -> None:
        visible = derive_visible_items(bank_items, BankDisplayState(filter_text=needle))

        expected = {item.name for item in bank_items if needle.lower() in item.name.lower()}
        assert set(names(visible)) == expected
        assert all(needle.lower() in item.name.lower() for item in visible)

    def test_sort_by_value_descending(self, bank_items) -> None:
        visible = derive_visible_items(bank_items, BankDisplayState())
        assert names(visible) == ["Law rune", "Dragon bones", "Abyssal whip", "Shark", "Coins"]

    def test_sort_by_count(self, bank_items) -> None:
        state = BankDisplayState(sort_order=SortOrder.COUNT, ascending=True)
        visible = derive_visible_items(bank_items, state)
        assert names(visible) == ["Abyssal whip", "Dragon bones", "Shark", "Law rune", "Coins"]

    def test_sort_by_name(self, bank_items) -> None:
        state = BankDisplayState(sort_order=SortOrder.NAME, ascending=True)
        visible = derive_visible_items(bank_items, state)
        assert names(visible) == ["Abyssal whip", "Coins", "Dragon bones", "Law rune", "Shark"]

    def test_value_sort_uses_stack_value(self) -> None:
        """A cheap large stack outranks a pricier single item."""
        items = [
            CachedItem(name="Rune", value=200, quantity=1),
            CachedItem(name="Feather", value=3, quantity=1000),
        ]
        visible = derive_visible_items(items, BankDisplayState())
        assert names(visible) == ["Feather", "Rune"]

    def test_ascending_is_reverse_of_descending_for_distinct_values(self, bank_items) -> None:
        ascending = derive_visible_items(
            bank_items, BankDisplayState(sort_order=SortOrder.VALUE, ascending=True)
        )
        descending = derive_visible_items(
            bank_items, BankDisplayState(sort_order=SortOrder.VALUE, ascending=False)
        )
        assert names(ascending) == list(reversed(names(descending)))

    def test_ties_keep_input_order_in_both_directions(self) -> None:
        items = [
            CachedItem(name="First", value=10, quantity=1),
            CachedItem(name="Big", value=50, quantity=1),
            CachedItem(name="Second", value=5, quantity=2),
            CachedItem(name="Third", value=1, quantity=10),
        ]
        ascending = derive_visible_items(
            items, BankDisplayState(sort_order=SortOrder.VALUE, ascending=True)
        )
        descending = derive_visible_items(
            items, BankDisplayState(sort_order=SortOrder.VALUE, ascending=False)
        )
        assert names(ascending) == ["First", "Second", "Third", "Big"]
        assert names(descending) == ["Big", "First", "Second", "Third"]

    def test_empty_list(self) -> None:
        assert derive_visible_items([], BankDisplayState(filter_text="a")) == []

    def test_input_not_mutated(self, bank_items) -> None:
        before = list(bank_items)
        derive_visible_items(bank_items, BankDisplayState(sort_order=SortOrder.NAME))
        assert bank_items == before


class TestToggleSort:
    """Tests for the header-click state machine."""

    def test_same_key_flips_direction(self) -> None:
        state = toggle_sort(BankDisplayState(), SortOrder.VALUE)
        assert state.sort_order is SortOrder.VALUE
        assert state.ascending is True

        state = toggle_sort(state, SortOrder.VALUE)
        assert state.ascending is False

    def test_different_key_resets_to_descending(self) -> None:
        state = BankDisplayState(sort_order=SortOrder.VALUE, ascending=True)
        state = toggle_sort(state, SortOrder.NAME)
        assert state.sort_order is SortOrder.NAME
        assert state.ascending is False

    def test_filter_survives_toggle(self) -> None:
        state = toggle_sort(BankDisplayState(filter_text="rune"), SortOrder.COUNT)
        assert state.filter_text == "rune"

    def test_returns_new_state(self) -> None:
        original = BankDisplayState()
        toggle_sort(original, SortOrder.COUNT)
        assert original == BankDisplayState()


class TestTotal:
    """Tests for the bank total."""

    def test_sum_of_stack_values(self, two_items) -> None:
        assert compute_total(two_items) == 40

    def test_empty_total(self) -> None:
        assert compute_total([]) == 0


class TestBankValueViewModel:
    """Tests for the stateful ViewModel."""

    def test_worked_example(self, two_items) -> None:
        vm = BankValueViewModel()
        vm.set_items(two_items)
        assert vm.total == 40

        vm.set_filter("a")
        assert names(vm.visible_items()) == ["A"]

        vm.set_filter("")
        vm.toggle_sort(SortOrder.COUNT)
        assert names(vm.visible_items()) == ["B", "A"]

    def test_total_ignores_filter_and_sort(self, bank_items) -> None:
        vm = BankValueViewModel()
        vm.set_items(bank_items)
        vm.set_filter("shark")
        vm.toggle_sort(SortOrder.NAME)

        assert vm.total == sum(item.value * item.quantity for item in bank_items)
        assert vm.total_label() == "Bank value: 6.03M"

    def test_not_loaded_before_items(self) -> None:
        vm = BankValueViewModel()
        assert vm.total_label() == "Bank value: Not loaded"
        assert vm.compute_display_rows() == []

    def test_replace_with_empty_list(self, bank_items) -> None:
        vm = BankValueViewModel()
        vm.set_items(bank_items)
        vm.set_items([])

        assert vm.visible_items() == []
        assert vm.total_label() == "Bank value: Not loaded"

    def test_items_are_copied(self, two_items) -> None:
        vm = BankValueViewModel()
        vm.set_items(two_items)
        two_items.append(CachedItem(name="C", value=1, quantity=1))
        assert len(vm.items) == 2

    def test_display_rows(self, two_items) -> None:
        vm = BankValueViewModel()
        vm.set_items(two_items)
        vm.toggle_sort(SortOrder.COUNT)

        assert vm.compute_display_rows() == [
            ("item-1", ["B", "4", "20"]),
            ("item-0", ["A", "2", "20"]),
        ]

    def test_duplicate_names_get_distinct_keys(self) -> None:
        vm = BankValueViewModel()
        item = CachedItem(name="Shark", value=800, quantity=1)
        vm.set_items([item, item])

        keys = [key for key, _cells in vm.compute_display_rows()]
        assert keys == ["item-0", "item-1"]

    def test_column_labels_mark_active_sort(self) -> None:
        vm = BankValueViewModel()
        labels = vm.column_labels()
        assert labels[0] == "Name"
        assert labels[1] == "#"
        assert "$ ▼" in labels[2]

        vm.toggle_sort(SortOrder.VALUE)
        assert "$ ▲" in vm.column_labels()[2]

        vm.toggle_sort(SortOrder.NAME)
        labels = vm.column_labels()
        assert "Name ▼" in labels[0]
        assert labels[2] == "$"

    def test_set_state(self) -> None:
        vm = BankValueViewModel()
        state = BankDisplayState(sort_order=SortOrder.NAME, ascending=True, filter_text="x")
        vm.set_state(state)
        assert vm.state == state
