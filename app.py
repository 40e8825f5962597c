"""Flight Meal Distribution Calculator: Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state, set_distribution_result
from engine.allocation_engine import calculate_distribution
from tabs import tab_distribution, tab_redistribution
from config.defaults import LOG_LEVEL, LOG_FORMAT

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)


def main():
    st.set_page_config(
        page_title="Flight Meal Distribution",
        page_icon="✈️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    if sidebar_state.calculate_requested:
        set_distribution_result(calculate_distribution(sidebar_state.form))
        st.rerun()  # so the sidebar shows the new field errors

    tab1, tab2 = st.tabs([
        "🍽️ Initial Distribution",
        "🔁 Redistribution & Export",
    ])

    with tab1:
        tab_distribution.render(sidebar_state)
    with tab2:
        tab_redistribution.render(sidebar_state)


if __name__ == "__main__":
    main()
