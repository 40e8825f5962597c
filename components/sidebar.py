"""Sidebar form for flight, meal option and per-cart special meal input."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional

from models.manifest import ManifestForm, RawValue
from data.session_store import (
    get_form, get_form_version, get_distribution_result, set_form, replace_form,
)
from data.sample_data import generate_sample_form
from data.validator import cart_field, option_field, to_int
from config.defaults import (
    DEFAULT_GENERAL_OPTIONS, GENERAL_OPTION_COUNTS, MAX_CART_CAPACITY, MAX_NUMBER_OF_CARTS,
)


@dataclass
class SidebarState:
    form: ManifestForm
    calculate_requested: bool


def _field_error(key: str) -> Optional[str]:
    """Error from the last calculation attempt for this field, if it was rejected."""
    result = get_distribution_result()
    if result is None or result.valid:
        return None
    return result.validation.field_errors.get(key)


def _text_field(label: str, value: RawValue, widget_key: str, error_key: str, placeholder: str = "") -> str:
    raw = st.text_input(
        label,
        value="" if value is None else str(value),
        key=widget_key,
        placeholder=placeholder,
    )
    error = _field_error(error_key)
    if error:
        st.caption(f":red[{error}]")
    return raw


def render_sidebar() -> SidebarState:
    """Render the input form and return the form as currently typed."""
    form = get_form()
    version = get_form_version()

    with st.sidebar:
        st.title("✈️ Flight Meals")
        st.caption(f"Cart capacity: {MAX_CART_CAPACITY} meals")

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Load sample flight", use_container_width=True):
                replace_form(generate_sample_form())
                st.rerun()
        with col2:
            if st.button("Clear parameters", use_container_width=True):
                replace_form(ManifestForm())
                st.rerun()

        st.divider()

        # Flight totals
        st.subheader("Flight")
        passengers = _text_field("Total Passengers", form.passengers, f"passengers_{version}", "passengers")
        total_special = _text_field(
            "Total Special Meals", form.total_special_meals,
            f"total_special_{version}", "total_special_meals",
        )
        num_carts = _text_field(
            "Number of Carts", form.num_carts, f"num_carts_{version}", "num_carts",
            placeholder=f"Up to {MAX_NUMBER_OF_CARTS}",
        )

        st.divider()

        # General meal options
        st.subheader("General Meal Options")
        num_options = st.selectbox(
            "Number of General Options",
            options=GENERAL_OPTION_COUNTS,
            index=GENERAL_OPTION_COUNTS.index(form.num_general_options),
            key=f"num_options_{version}",
        )

        names = list(form.option_names)
        quantities = list(form.option_quantities)
        for index in range(DEFAULT_GENERAL_OPTIONS):
            if index >= num_options:
                continue  # hidden slots keep their last values
            name_col, qty_col = st.columns([3, 2])
            with name_col:
                names[index] = st.text_input(
                    f"Option {index + 1} Name", value=names[index], key=f"option_name_{index}_{version}",
                )
            with qty_col:
                quantities[index] = _text_field(
                    "Quantity", quantities[index],
                    f"option_qty_{index}_{version}", option_field(index),
                )

        st.divider()

        # Manual specials per cart
        st.subheader("Special Meals per Cart")
        specials = dict(form.special_meals_per_cart)
        cart_count = min(max(to_int(num_carts), 0), MAX_NUMBER_OF_CARTS)
        if cart_count == 0:
            st.caption("Enter the number of carts to assign special meals.")
        for cart in range(1, cart_count + 1):
            specials[cart] = _text_field(
                f"Cart {cart}", specials.get(cart, ""), f"cart_special_{cart}_{version}", cart_field(cart),
            )

        new_form = ManifestForm(
            passengers=passengers,
            total_special_meals=total_special,
            num_carts=num_carts,
            num_general_options=num_options,
            option_names=names,
            option_quantities=quantities,
            special_meals_per_cart=specials,
        )
        set_form(new_form)

        st.divider()
        calculate = st.button("Calculate Distribution", type="primary", use_container_width=True)

    return SidebarState(form=new_form, calculate_requested=calculate)
