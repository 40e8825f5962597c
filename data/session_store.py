"""Typed wrapper around st.session_state for form input and calculation results."""

import streamlit as st
from typing import Optional

from models.manifest import ManifestForm
from models.results import DistributionResult, RedistributionResult


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "form": ManifestForm(),
        "distribution_result": None,
        "redistribution_result": None,
        "show_excess_notes": False,
        "form_version": 0,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_form() -> ManifestForm:
    return st.session_state.get("form", ManifestForm())


def get_distribution_result() -> Optional[DistributionResult]:
    return st.session_state.get("distribution_result")


def get_redistribution_result() -> Optional[RedistributionResult]:
    return st.session_state.get("redistribution_result")


def get_show_excess_notes() -> bool:
    return st.session_state.get("show_excess_notes", False)


def get_form_version() -> int:
    """Bumped whenever the form is replaced, so input widgets pick up the new values."""
    return st.session_state.get("form_version", 0)


# --- Setters ---

def set_form(form: ManifestForm):
    st.session_state["form"] = form


def replace_form(form: ManifestForm):
    """Swap in a whole new form (sample or cleared) and drop stale results."""
    st.session_state["form"] = form
    st.session_state["form_version"] = get_form_version() + 1
    clear_results()


def set_distribution_result(result: DistributionResult):
    st.session_state["distribution_result"] = result
    # A new initial distribution invalidates any earlier redistribution
    st.session_state["redistribution_result"] = None


def set_redistribution_result(result: RedistributionResult):
    st.session_state["redistribution_result"] = result


def set_show_excess_notes(show: bool):
    st.session_state["show_excess_notes"] = show


def clear_results():
    st.session_state["distribution_result"] = None
    st.session_state["redistribution_result"] = None
    st.session_state["show_excess_notes"] = False
