"""Input validation for the flight meal form, the gate in front of the allocator."""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd

from models.manifest import (
    CartSpecialInput, FlightManifest, ManifestForm, MealOption, RawValue,
)
from config.defaults import (
    GENERAL_OPTION_COUNTS, MAX_CART_CAPACITY, MAX_NUMBER_OF_CARTS, MAX_PASSENGERS,
)

logger = logging.getLogger(__name__)

# Cross-field error keys
SPECIAL_MEALS_TOTAL_VS_CART_SUM = "special_meals_total_vs_cart_sum"
SPECIAL_MEALS_VS_PASSENGERS = "special_meals_vs_passengers"

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


@dataclass
class ValidationResult:
    is_valid: bool = True
    field_errors: Dict[str, str] = field(default_factory=dict)        # single-field problems
    cross_field_errors: Dict[str, str] = field(default_factory=dict)  # form-level consistency problems

    @property
    def errors(self) -> List[str]:
        return list(self.field_errors.values()) + list(self.cross_field_errors.values())

    def add_field_error(self, key: str, message: str):
        self.is_valid = False
        self.field_errors[key] = message

    def add_cross_field_error(self, key: str, message: str):
        self.is_valid = False
        self.cross_field_errors[key] = message


def option_field(index: int) -> str:
    return f"option_quantities[{index}]"


def cart_field(cart_number: int) -> str:
    return f"special_meals_per_cart[{cart_number}]"


def option_label(option_names: List[str], index: int) -> str:
    """Display label for a general option, falling back to its position."""
    name = option_names[index] if index < len(option_names) else ""
    name = (name or "").strip()
    return name or f"Option {index + 1}"


def _is_blank(value: RawValue) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _parse_number(value: RawValue) -> Optional[Union[int, float]]:
    """Parse a raw value into a number, or None when it is not a finite number.

    Whole-number input comes back as an exact ``int`` at any size; anything
    else goes through ``pd.to_numeric`` and comes back as a float.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        value = value.strip()
        if _INTEGER_PATTERN.match(value):
            return int(value)
    num = pd.to_numeric(value, errors="coerce")
    if pd.isna(num) or not math.isfinite(num):
        return None
    return float(num)


def to_number(value: RawValue) -> Union[int, float]:
    """Convert a raw form value to a number; empty or unparsable input counts as 0."""
    if _is_blank(value):
        return 0
    num = _parse_number(value)
    return 0 if num is None else num


def to_int(value: RawValue) -> int:
    num = to_number(value)
    return num if isinstance(num, int) else int(num)


def validate_number_input(
    value: RawValue,
    label: str,
    limit: Optional[int] = None,
    limit_message: Optional[str] = None,
) -> str:
    """Validate one numeric field. Returns an error message, or "" when the value is acceptable.

    Empty input is accepted here and computed as 0.
    """
    if _is_blank(value):
        return ""
    num = _parse_number(value)
    if num is None:
        return f"Please enter a valid number for {label}."
    if num < 0:
        return f"Please enter a positive quantity for {label}."
    if isinstance(num, float) and not num.is_integer():
        return f"Please enter a whole number for {label}."
    if limit is not None and num > limit:
        return limit_message or f"{label} cannot exceed {limit}."
    return ""


def _check_field(
    result: ValidationResult,
    key: str,
    value: RawValue,
    label: str,
    limit: Optional[int] = None,
    limit_message: Optional[str] = None,
):
    message = validate_number_input(value, label, limit, limit_message)
    if message:
        result.add_field_error(key, message)


def _cart_entries(form: ManifestForm) -> List[Tuple[int, RawValue]]:
    """Per-cart special inputs restricted to the carts that exist on this flight."""
    num_carts = to_int(form.num_carts)
    return [
        (cart, form.special_meals_per_cart[cart])
        for cart in sorted(form.special_meals_per_cart)
        if 1 <= cart <= num_carts
    ]


def validate_form(form: ManifestForm, rule_config: Optional[dict] = None) -> ValidationResult:
    """Run every field and cross-field rule. Any error blocks the allocation."""
    cfg = rule_config or {}
    max_carts = cfg.get("max_number_of_carts", MAX_NUMBER_OF_CARTS)
    max_passengers = cfg.get("max_passengers", MAX_PASSENGERS)
    max_capacity = cfg.get("max_cart_capacity", MAX_CART_CAPACITY)

    if form.num_general_options not in GENERAL_OPTION_COUNTS:
        raise ValueError(
            f"Unsupported number of general options: {form.num_general_options}. "
            f"Use one of {GENERAL_OPTION_COUNTS}."
        )

    result = ValidationResult()

    # Single-field rules
    _check_field(result, "passengers", form.passengers, "Total Passengers",
                 max_passengers, f"Total passengers cannot exceed {max_passengers}.")
    _check_field(result, "total_special_meals", form.total_special_meals, "Total Special Meals")
    _check_field(result, "num_carts", form.num_carts, "Number of Carts",
                 max_carts, f"Number of carts cannot exceed {max_carts}.")

    for index in range(form.num_general_options):
        qty = form.option_quantities[index] if index < len(form.option_quantities) else ""
        label = f"{option_label(form.option_names, index)} Quantity"
        _check_field(result, option_field(index), qty, label)

    cart_entries = _cart_entries(form)
    for cart, raw in cart_entries:
        _check_field(result, cart_field(cart), raw, f"Cart {cart} Special Meals",
                     max_capacity, f"Cart {cart} special meals cannot exceed {max_capacity}.")

    # Cross-field rules
    total_special = to_number(form.total_special_meals)
    if sum(to_number(raw) for _, raw in cart_entries) > total_special:
        result.add_cross_field_error(
            SPECIAL_MEALS_TOTAL_VS_CART_SUM,
            "Sum of special meals per cart exceeds total special meals available.",
        )
    if total_special > to_number(form.passengers):
        result.add_cross_field_error(
            SPECIAL_MEALS_VS_PASSENGERS,
            "Total special meals cannot exceed total passengers.",
        )

    if not result.is_valid:
        logger.info("Form rejected with %d error(s)", len(result.errors))
    return result


def validate_manifest(
    manifest: FlightManifest,
    cart_specials: CartSpecialInput,
    rule_config: Optional[dict] = None,
) -> ValidationResult:
    """Apply the form rules to already-structured input."""
    return validate_form(ManifestForm.from_manifest(manifest, cart_specials), rule_config)


def build_manifest(form: ManifestForm) -> Tuple[FlightManifest, CartSpecialInput]:
    """Convert a validated form into a FlightManifest and its per-cart special input."""
    options = tuple(
        MealOption(
            name=option_label(form.option_names, index),
            quantity=to_int(form.option_quantities[index]) if index < len(form.option_quantities) else 0,
        )
        for index in range(form.num_general_options)
    )
    manifest = FlightManifest(
        total_passengers=to_int(form.passengers),
        total_special_meals=to_int(form.total_special_meals),
        num_carts=to_int(form.num_carts),
        general_options=options,
    )
    cart_specials = {cart: to_int(raw) for cart, raw in _cart_entries(form)}
    return manifest, cart_specials
