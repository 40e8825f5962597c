"""Plotly chart builders for the Flight Meal Distribution Calculator."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from models.allocation import CartAllocation
from data.validator import option_label


def cart_load_bar(
    allocation: List[CartAllocation],
    option_names: List[str],
    max_capacity: int,
    title: str = "Meals per Cart",
) -> go.Figure:
    """Stacked bar of specials and each general option per cart, with the capacity line."""
    labels = [option_label(option_names, i) for i in range(len(option_names))]
    rows = []
    for cart in allocation:
        rows.append({"Cart": cart.cart_name, "Meal": "Specials", "Meals": cart.special})
        for label, qty in zip(labels, cart.general_by_option):
            rows.append({"Cart": cart.cart_name, "Meal": label, "Meals": qty})
    df = pd.DataFrame(rows, columns=["Cart", "Meal", "Meals"])

    fig = px.bar(
        df, x="Cart", y="Meals", color="Meal",
        barmode="stack",
        title=title,
        color_discrete_sequence=["#7B61FF", "#4A90D9", "#E8734A", "#F5C542"],
    )
    fig.add_hline(
        y=max_capacity, line_dash="dash", line_color="#cc0000",
        annotation_text=f"Capacity ({max_capacity})", annotation_position="top left",
    )
    fig.update_layout(legend_title_text="", height=400, yaxis_range=[0, max_capacity * 1.1])
    return fig


def capacity_donut(used: int, total: int, title: str = "Cart Capacity Used") -> go.Figure:
    """Donut chart of occupied vs free cart slots."""
    free = max(0, total - used)
    fig = go.Figure(data=[go.Pie(
        labels=["Loaded", "Free"],
        values=[used, free],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
