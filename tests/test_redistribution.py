"""Tests for the excess redistribution pass."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import copy

from models.allocation import CartAllocation, ExcessEntry
from models.manifest import FlightManifest, ManifestForm, MealOption
from engine.allocation_engine import calculate_distribution, run_distribution
from engine.redistribution import _round_robin_pass, redistribute_excess
from data.sample_data import generate_sample_form
from config.defaults import MAX_CART_CAPACITY, SPECIALS_LABEL


def make_cart(index, general, special=0):
    return CartAllocation(
        cart_index=index,
        special=special,
        general_by_option=list(general),
        total=special + sum(general),
    )


def make_excess(*quantities, specials=0):
    entries = [ExcessEntry(SPECIALS_LABEL, specials)]
    for i, qty in enumerate(quantities):
        entries.append(ExcessEntry(f"Option {i + 1}", qty, option_index=i))
    return entries


class TestRedistributeExcess:
    def test_equalizes_lowest_carts_first(self):
        carts = [make_cart(1, [5, 0]), make_cart(2, [3, 0]), make_cart(3, [4, 36])]
        result = redistribute_excess(carts, make_excess(3, 0))

        adjusted = result.adjusted_allocation
        assert [c.general_by_option for c in adjusted] == [[6, 0], [5, 0], [4, 36]]
        assert [c.total for c in adjusted] == [6, 5, 40]
        assert result.updated_excess[1].quantity == 0
        assert result.placed_by_option == {0: 3}

    def test_full_cart_cannot_take_more(self):
        manifest = FlightManifest(50, 0, 1, (MealOption("Chicken", 50), MealOption("Beef", 0)))
        initial = run_distribution(manifest, {})
        result = redistribute_excess(initial.allocation, initial.excess)

        assert result.adjusted_allocation[0].total == MAX_CART_CAPACITY
        assert result.updated_excess[1].quantity == 10
        assert "10 still to distribute manually" in result.explanation_steps[0]

    def test_categories_share_capacity_in_order(self):
        carts = [make_cart(1, [19, 19])]
        result = redistribute_excess(carts, make_excess(1, 2))

        assert result.adjusted_allocation[0].general_by_option == [20, 20]
        assert result.adjusted_allocation[0].total == MAX_CART_CAPACITY
        assert result.updated_excess[1].quantity == 0
        assert result.updated_excess[2].quantity == 1

    def test_specials_and_deficits_are_left_alone(self):
        carts = [make_cart(1, [2, 2], special=1)]
        excess = make_excess(-1, 0, specials=4)
        result = redistribute_excess(carts, excess)

        assert result.adjusted_allocation[0].general_by_option == [2, 2]
        assert [e.quantity for e in result.updated_excess] == [4, -1, 0]
        assert result.explanation_steps == ["No general excess to redistribute."]

    def test_original_inputs_untouched(self):
        carts = [make_cart(1, [5, 5]), make_cart(2, [5, 5])]
        excess = make_excess(4, 2)
        carts_before = copy.deepcopy(carts)
        excess_before = copy.deepcopy(excess)

        result = redistribute_excess(carts, excess)

        assert carts == carts_before
        assert excess == excess_before
        assert result.adjusted_allocation != carts

    def test_idempotent_once_excess_is_zero(self):
        carts = [make_cart(1, [5, 5]), make_cart(2, [8, 5])]
        first = redistribute_excess(carts, make_excess(6, 1))
        assert all(e.quantity == 0 for e in first.updated_excess)

        second = redistribute_excess(first.adjusted_allocation, first.updated_excess)
        assert second.adjusted_allocation == first.adjusted_allocation
        assert second.updated_excess == first.updated_excess

    def test_exhausted_budget_stops_silently(self):
        carts = [make_cart(1, [5, 5])]
        result = redistribute_excess(carts, make_excess(3, 0), rule_config={"redistribution_attempt_factor": 0})

        assert result.adjusted_allocation == carts
        assert result.updated_excess[1].quantity == 3

    def test_no_carts(self):
        result = redistribute_excess([], make_excess(5, 0))
        assert result.adjusted_allocation == []
        assert result.updated_excess[1].quantity == 5

    def test_uses_position_not_name(self):
        carts = [make_cart(1, [1, 1])]
        excess = [
            ExcessEntry(SPECIALS_LABEL, 0),
            ExcessEntry("Pasta", 0, option_index=0),
            ExcessEntry("Pasta", 2, option_index=1),
        ]
        result = redistribute_excess(carts, excess)
        assert result.adjusted_allocation[0].general_by_option == [1, 3]

    def test_round_robin_fallback_skips_full_carts(self):
        carts = [make_cart(1, [5, 5]), make_cart(2, [20, 20]), make_cart(3, [1, 1])]
        assert _round_robin_pass(carts, 0, 5, MAX_CART_CAPACITY) == 2
        assert [c.general_by_option[0] for c in carts] == [6, 20, 2]

        assert _round_robin_pass(carts, 1, 1, MAX_CART_CAPACITY) == 1
        assert [c.general_by_option[1] for c in carts] == [6, 20, 1]
        assert [c.total for c in carts] == [12, 40, 3]


class TestRedistributionProperties:
    def test_totals_never_drop_or_exceed_capacity_and_meals_are_conserved(self):
        forms = [generate_sample_form(seed=s, num_carts=n) for s in range(4) for n in (2, 5, 9)]
        forms.append(ManifestForm(
            passengers="300", total_special_meals="0", num_carts="4",
            option_quantities=["90", "50", "10"],
        ))
        forms.append(ManifestForm(
            passengers="400", total_special_meals="6", num_carts="3",
            option_quantities=["200", "150", "50"], special_meals_per_cart={2: "6"},
        ))
        for form in forms:
            initial = calculate_distribution(form)
            result = redistribute_excess(initial.allocation, initial.excess)

            for before, after in zip(initial.allocation, result.adjusted_allocation):
                assert after.total >= before.total
                assert after.total <= MAX_CART_CAPACITY
                assert after.total == after.special + sum(after.general_by_option)

            for entry in result.updated_excess:
                if entry.is_general:
                    placed = sum(c.general_by_option[entry.option_index] for c in result.adjusted_allocation)
                    assert placed + entry.quantity == int(form.option_quantities[entry.option_index])

    def test_nothing_to_place_leaves_allocation_unchanged(self):
        form = ManifestForm(
            passengers="100", total_special_meals="0", num_carts="2",
            num_general_options=2, option_quantities=["30", "10"],
        )
        initial = calculate_distribution(form)
        # 40 meals over 2 carts -> 20 each, nothing left to place
        assert all(e.quantity == 0 for e in initial.excess)
        result = redistribute_excess(initial.allocation, initial.excess)
        assert result.adjusted_allocation == initial.allocation


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
