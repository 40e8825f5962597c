"""Tests for the styled result tables."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from components import tables
from config.defaults import MAX_CART_CAPACITY

FULL_CART = "#d4edda"
SURPLUS = "#fff3cd"
DEFICIT = "#cc0000"


@pytest.fixture
def shown(monkeypatch):
    frames = []
    monkeypatch.setattr(tables.st, "dataframe", lambda data, **kwargs: frames.append(data))
    return frames


class TestDistributionTable:
    def test_full_carts_are_highlighted(self, shown):
        df = pd.DataFrame({"Cart No.": ["Cart 1", "Cart 2"], "Total Meals": [MAX_CART_CAPACITY, 12]})
        tables.render_distribution_table(df, MAX_CART_CAPACITY)

        html = shown[0].to_html()
        assert html.count(FULL_CART) == 1

    def test_missing_total_column_shows_plain_frame(self, shown):
        df = pd.DataFrame({"Cart No.": ["Cart 1"]})
        tables.render_distribution_table(df, MAX_CART_CAPACITY)
        assert shown[0] is df


class TestExcessTable:
    def test_surplus_and_deficit_colours(self, shown):
        df = pd.DataFrame({
            "Category": ["Specials", "Chicken", "Beef"],
            "Quantity to Distribute": [0, 5, -1],
        })
        tables.render_excess_table(df)

        html = shown[0].to_html()
        assert html.count(SURPLUS) == 1
        assert html.count(DEFICIT) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
