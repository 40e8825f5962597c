"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd


def render_distribution_table(df: pd.DataFrame, max_capacity: int, total_column: str = "Total Meals"):
    """Render the per-cart table, highlighting carts that are full."""
    def color_total(val):
        try:
            if int(val) >= max_capacity:
                return "background-color: #d4edda; color: #155724; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if total_column in df.columns:
        styled = df.style.map(color_total, subset=[total_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)


def render_excess_table(df: pd.DataFrame, quantity_column: str = "Quantity to Distribute"):
    """Render excess quantities: surplus in amber, deficit in red."""
    def color_quantity(val):
        try:
            v = float(val)
            if v > 0:
                return "background-color: #fff3cd; color: #856404; font-weight: bold"
            elif v < 0:
                return "color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if quantity_column in df.columns:
        styled = df.style.map(color_quantity, subset=[quantity_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
