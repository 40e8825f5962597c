"""Reusable KPI metric card widgets."""

import streamlit as st

from models.allocation import MealShortage


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            delta = m.get("delta")
            delta_color = m.get("delta_color", "normal")
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=delta,
                delta_color=delta_color,
            )


def render_meal_alert(shortage: MealShortage):
    """Show the meal quantity status. A shortage is a warning, never a blocker."""
    if shortage.is_short:
        st.error(shortage.message, icon="🔴")
    else:
        st.success(shortage.message)
