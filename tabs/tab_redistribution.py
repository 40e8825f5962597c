"""Tab 2: Redistribution. Push general excess into free cart space, then export."""

import streamlit as st

from data.session_store import (
    get_distribution_result, get_redistribution_result, set_redistribution_result,
    get_show_excess_notes,
)
from data.exporter import allocation_to_dataframe, excess_to_dataframe, build_results_text
from engine.redistribution import redistribute_excess
from components.metrics_cards import render_metric_row
from components.tables import render_distribution_table, render_excess_table
from components.charts import cart_load_bar
from tabs.tab_distribution import option_names_from
from config.defaults import MAX_CART_CAPACITY


def render(sidebar_state):
    """Render the Redistribution tab."""
    st.header("Redistribution")

    result = get_distribution_result()
    if result is None or not result.valid:
        st.info("Calculate a valid initial distribution first.")
        return

    option_names = option_names_from(result)
    general_excess = sum(e.quantity for e in result.excess if e.is_general and e.quantity > 0)
    free_space = sum(max(0, c.free_space(MAX_CART_CAPACITY)) for c in result.allocation)

    render_metric_row([
        {"label": "General Excess", "value": f"{general_excess:,}"},
        {"label": "Free Cart Space", "value": f"{free_space:,}"},
    ])

    if general_excess == 0:
        st.success("No general excess to redistribute.")
    elif free_space == 0:
        st.warning("All carts are full. Remaining excess must be handled manually.")

    if st.button("Redistribute Excess General Meals", type="primary",
                 disabled=general_excess == 0 or not result.allocation):
        set_redistribution_result(redistribute_excess(result.allocation, result.excess))
        st.toast("Excess general meals redistributed!")

    redistribution = get_redistribution_result()

    if redistribution is not None:
        st.divider()
        st.subheader("Adjusted Distribution by Cart")
        render_distribution_table(
            allocation_to_dataframe(redistribution.adjusted_allocation, option_names), MAX_CART_CAPACITY,
        )
        st.plotly_chart(
            cart_load_bar(redistribution.adjusted_allocation, option_names, MAX_CART_CAPACITY,
                          title="Meals per Cart (Adjusted)"),
            use_container_width=True,
        )

        st.subheader("Remaining Excess")
        render_excess_table(excess_to_dataframe(redistribution.updated_excess))
        for step in redistribution.explanation_steps:
            st.caption(step)

    # --- Export ---
    st.divider()
    st.subheader("Export Results")

    if redistribution is not None:
        allocation, excess, adjusted = redistribution.adjusted_allocation, redistribution.updated_excess, True
    else:
        allocation, excess, adjusted = result.allocation, result.excess, False

    text = build_results_text(
        allocation, excess, option_names,
        shortage=result.shortage, adjusted=adjusted, show_notes=get_show_excess_notes(),
    )
    st.download_button(
        "Download Results",
        data=text,
        file_name="meal_distribution.txt",
        mime="text/plain",
    )
    with st.expander("Preview"):
        st.code(text, language=None)
