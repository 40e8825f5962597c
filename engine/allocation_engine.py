"""Rule-based meal allocation: the core calculation pipeline."""

import logging
import math
from typing import List, Optional

from models.manifest import CartSpecialInput, FlightManifest, ManifestForm
from models.allocation import AuxiliaryValues, CartAllocation, ExcessEntry, MealShortage
from models.results import DistributionResult
from data.validator import ValidationResult, build_manifest, validate_form, validate_manifest
from engine.explainer import explain_cart_allocation
from config.defaults import MAX_CART_CAPACITY, SPECIALS_LABEL

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


def largest_share_index(option_shares: List[float]) -> int:
    """Index of the option with the largest share; earlier options win ties."""
    best = 0
    for index in range(1, len(option_shares)):
        if option_shares[index] > option_shares[best]:
            best = index
    return best


def compute_auxiliary_values(manifest: FlightManifest) -> AuxiliaryValues:
    """Derive totals, per-cart base capacity and option shares from the manifest."""
    quantities = manifest.option_quantities
    total_general = sum(quantities)
    num_carts = manifest.num_carts

    base_capacity = 0 if num_carts == 0 else total_general // num_carts
    remainder_carts = total_general - base_capacity * num_carts
    option_shares = [0.0 if total_general == 0 else q / total_general for q in quantities]

    return AuxiliaryValues(
        total_general=total_general,
        base_capacity_per_cart=base_capacity,
        remainder_carts=remainder_carts,
        option_shares=option_shares,
    )


def distribute_meals_per_cart(
    manifest: FlightManifest,
    cart_specials: CartSpecialInput,
    aux: AuxiliaryValues,
    rule_config: Optional[dict] = None,
) -> List[CartAllocation]:
    """Assign special and general meals to each cart, in cart order."""
    cfg = rule_config or {}
    max_capacity = cfg.get("max_cart_capacity", MAX_CART_CAPACITY)

    results = []
    if manifest.num_carts == 0:
        return results

    labels = manifest.option_names
    recipient = largest_share_index(aux.option_shares)

    for cart_index in range(1, manifest.num_carts + 1):
        # Step 1: General capacity for this cart
        gets_extra_slot = cart_index <= aux.remainder_carts
        general_capacity = min(
            max_capacity,
            aux.base_capacity_per_cart + (1 if gets_extra_slot else 0),
        )

        # Step 2: Manual specials take their space first
        special = cart_specials.get(cart_index, 0)
        available = max(0, general_capacity - special)

        # Step 3: Proportional split; each option is capped by what earlier options left
        assigned = []
        remaining = available
        for share in aux.option_shares:
            qty = round_half_up(min(remaining, available * share))
            assigned.append(qty)
            remaining -= qty
        candidates = list(assigned)

        # Step 4: Rounding shortfall goes to the largest share
        shortfall = available - sum(assigned)
        if shortfall > 0:
            assigned[recipient] += shortfall

        total = special + sum(assigned)
        cart_name = f"Cart {cart_index}"
        explanation = explain_cart_allocation(
            cart_name=cart_name,
            base_capacity=aux.base_capacity_per_cart,
            gets_extra_slot=gets_extra_slot,
            general_capacity=general_capacity,
            max_capacity=max_capacity,
            special=special,
            available_general=available,
            option_labels=labels,
            option_shares=aux.option_shares,
            candidates=candidates,
            shortfall=shortfall,
            shortfall_index=recipient,
            final_assigned=assigned,
            total=total,
        )

        logger.debug("%s: special=%d general=%s total=%d", cart_name, special, assigned, total)
        results.append(CartAllocation(
            cart_index=cart_index,
            special=special,
            general_by_option=assigned,
            total=total,
            general_capacity=general_capacity,
            explanation_steps=explanation,
        ))

    return results


def compute_excesses(
    manifest: FlightManifest,
    allocation: List[CartAllocation],
) -> List[ExcessEntry]:
    """Supplied minus placed, per category. Negative values are reported, not clamped."""
    placed_special = sum(cart.special for cart in allocation)
    results = [ExcessEntry(SPECIALS_LABEL, manifest.total_special_meals - placed_special)]

    for index, option in enumerate(manifest.general_options):
        placed = sum(cart.general_by_option[index] for cart in allocation)
        results.append(ExcessEntry(option.name, option.quantity - placed, option_index=index))
    return results


def compute_meal_shortage(manifest: FlightManifest, aux: AuxiliaryValues) -> MealShortage:
    """Compare the meals on board against the passenger count."""
    available = aux.total_general + manifest.total_special_meals
    needed = manifest.total_passengers
    coverage = available / needed * 100 if needed > 0 else 100.0

    if available < needed:
        return MealShortage(is_short=True, missing=needed - available, coverage_percent=coverage)
    return MealShortage(is_short=False, missing=0, coverage_percent=coverage)


def _run_pipeline(
    manifest: FlightManifest,
    cart_specials: CartSpecialInput,
    validation: ValidationResult,
    rule_config: Optional[dict],
) -> DistributionResult:
    aux = compute_auxiliary_values(manifest)
    allocation = distribute_meals_per_cart(manifest, cart_specials, aux, rule_config)
    excess = compute_excesses(manifest, allocation)
    shortage = compute_meal_shortage(manifest, aux)

    logger.info(
        "Distributed %d general meals across %d carts (short=%s)",
        aux.total_general, manifest.num_carts, shortage.is_short,
    )
    return DistributionResult(
        valid=True,
        validation=validation,
        allocation=allocation,
        excess=excess,
        shortage=shortage,
        aux=aux,
    )


def run_distribution(
    manifest: FlightManifest,
    cart_specials: CartSpecialInput,
    rule_config: Optional[dict] = None,
) -> DistributionResult:
    """Full pipeline for structured input: validate, then distribute and report excess."""
    validation = validate_manifest(manifest, cart_specials, rule_config)
    if not validation.is_valid:
        return DistributionResult(valid=False, validation=validation)
    return _run_pipeline(manifest, cart_specials, validation, rule_config)


def calculate_distribution(
    form: ManifestForm,
    rule_config: Optional[dict] = None,
) -> DistributionResult:
    """Full pipeline for raw form input. Nothing is calculated while any error remains."""
    validation = validate_form(form, rule_config)
    if not validation.is_valid:
        return DistributionResult(valid=False, validation=validation)
    manifest, cart_specials = build_manifest(form)
    return _run_pipeline(manifest, cart_specials, validation, rule_config)
