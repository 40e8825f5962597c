"""Tab 1: Initial Distribution. Per-cart allocation, meal alert and excess."""

import streamlit as st

from data.session_store import get_distribution_result, get_show_excess_notes, set_show_excess_notes
from data.exporter import allocation_to_dataframe, excess_to_dataframe
from components.metrics_cards import render_metric_row, render_meal_alert
from components.tables import render_distribution_table, render_excess_table
from components.charts import cart_load_bar, capacity_donut
from config.defaults import EXCESS_NOTES, MAX_CART_CAPACITY


def option_names_from(result) -> list:
    """Option labels as they were when the distribution was calculated."""
    return [e.option_label for e in result.excess if e.is_general]


def render(sidebar_state):
    """Render the Initial Distribution tab."""
    st.header("Initial Distribution")

    result = get_distribution_result()
    if result is None:
        st.info("Enter the flight details in the sidebar and press **Calculate Distribution**.")
        return

    if not result.valid:
        st.error("Please correct the input errors before calculating.")
        for message in result.validation.cross_field_errors.values():
            st.warning(message)
        if result.validation.field_errors:
            n = len(result.validation.field_errors)
            st.caption(f"{n} field error{'s' if n != 1 else ''} shown next to the inputs in the sidebar.")
        return

    render_meal_alert(result.shortage)

    allocation = result.allocation
    option_names = option_names_from(result)
    loaded = sum(c.total for c in allocation)
    unplaced = sum(e.quantity for e in result.excess if e.quantity > 0)

    render_metric_row([
        {"label": "General Meals", "value": f"{result.aux.total_general:,}"},
        {"label": "Carts", "value": str(len(allocation))},
        {"label": "Meals Loaded", "value": f"{loaded:,}"},
        {"label": "Meals Not Placed", "value": f"{unplaced:,}",
         "delta": f"{unplaced:+,}" if unplaced else "None",
         "delta_color": "inverse" if unplaced else "off"},
    ])

    st.divider()

    if not allocation:
        st.info("No carts configured, nothing to distribute.")
    else:
        st.subheader("Distribution by Cart")
        render_distribution_table(allocation_to_dataframe(allocation, option_names), MAX_CART_CAPACITY)

        col1, col2 = st.columns([3, 2])
        with col1:
            st.plotly_chart(cart_load_bar(allocation, option_names, MAX_CART_CAPACITY), use_container_width=True)
        with col2:
            st.plotly_chart(capacity_donut(loaded, MAX_CART_CAPACITY * len(allocation)), use_container_width=True)

    st.divider()

    # --- Excess ---
    st.subheader("Meals to Distribute Manually (Excess)")
    render_excess_table(excess_to_dataframe(result.excess))
    if any(e.quantity < 0 for e in result.excess):
        st.warning("Negative quantities mean more meals were placed than were supplied. Check the totals.")

    show_notes = st.toggle("Show notes on excess meals", value=get_show_excess_notes())
    set_show_excess_notes(show_notes)
    if show_notes:
        for note in EXCESS_NOTES:
            st.caption(note)

    if allocation:
        with st.expander("How each cart was filled"):
            for cart in allocation:
                st.markdown(f"**{cart.cart_name}**")
                for step in cart.explanation_steps:
                    st.text(step)
