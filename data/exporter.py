"""Tabular views of results and the plain-text export offered for download."""

from typing import List, Optional

import pandas as pd

from models.allocation import CartAllocation, ExcessEntry, MealShortage
from data.validator import option_label
from config.defaults import EXCESS_NOTES, EXPORT_TITLE


def allocation_to_dataframe(allocation: List[CartAllocation], option_names: List[str]) -> pd.DataFrame:
    """One row per cart: specials, each general option, and the cart total."""
    labels = [option_label(option_names, i) for i in range(len(option_names))]
    columns = ["Cart No.", "Specials"] + labels + ["Total Meals"]
    rows = [
        [cart.cart_name, cart.special] + list(cart.general_by_option) + [cart.total]
        for cart in allocation
    ]
    return pd.DataFrame(rows, columns=columns)


def excess_to_dataframe(excess: List[ExcessEntry], include_zero: bool = True) -> pd.DataFrame:
    rows = [
        {"Meal Type": e.option_label, "Quantity to Distribute": e.quantity}
        for e in excess
        if include_zero or e.quantity != 0
    ]
    return pd.DataFrame(rows, columns=["Meal Type", "Quantity to Distribute"])


def _to_tsv(df: pd.DataFrame) -> str:
    return df.to_csv(sep="\t", index=False, lineterminator="\n")


def build_results_text(
    allocation: List[CartAllocation],
    excess: List[ExcessEntry],
    option_names: List[str],
    shortage: Optional[MealShortage] = None,
    adjusted: bool = False,
    show_notes: bool = False,
) -> str:
    """Tab-separated summary of a calculation, ready to paste into a spreadsheet.

    `allocation` is the adjusted distribution when `adjusted` is True, the initial one otherwise.
    Only non-zero excess rows are listed.
    """
    text = EXPORT_TITLE + "\n\n"

    if shortage is not None:
        text += f"Meal Alert: {shortage.message}\n\n"

    if allocation:
        title = "Adjusted Distribution by Cart:" if adjusted else "Initial Distribution by Cart:"
        text += title + "\n"
        text += _to_tsv(allocation_to_dataframe(allocation, option_names))
        text += "\n"

    if excess:
        text += "Meals to Distribute Manually (Remaining Excesses):\n"
        text += _to_tsv(excess_to_dataframe(excess, include_zero=False))
        text += "\n"

    if show_notes:
        text += "--- Notes on Excess Meals ---\n"
        for note in EXCESS_NOTES:
            text += note + "\n"
        text += "\n"

    return text
