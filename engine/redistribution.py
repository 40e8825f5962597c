"""Greedy redistribution of general-meal excess into spare cart capacity."""

import copy
import logging
from typing import List, Optional

from models.allocation import CartAllocation, ExcessEntry
from models.results import RedistributionResult
from engine.explainer import explain_redistribution
from config.defaults import MAX_CART_CAPACITY, REDISTRIBUTION_ATTEMPT_FACTOR

logger = logging.getLogger(__name__)


def _place_one(cart: CartAllocation, option_index: int):
    cart.general_by_option[option_index] += 1
    cart.total += 1


def _equalize_pass(
    carts: List[CartAllocation],
    option_index: int,
    remaining: int,
    max_capacity: int,
) -> int:
    """Top up every cart holding the fewest units of this option. Returns units placed."""
    with_space = [c for c in carts if c.free_space(max_capacity) > 0]
    if not with_space:
        return 0
    minimum = min(c.general_by_option[option_index] for c in with_space)

    placed = 0
    for cart in carts:
        if remaining - placed <= 0:
            break
        if cart.free_space(max_capacity) > 0 and cart.general_by_option[option_index] == minimum:
            _place_one(cart, option_index)
            placed += 1
    return placed


# Fallback only: _equalize_pass places a unit whenever any cart has space, so it normally pre-empts this.
def _round_robin_pass(
    carts: List[CartAllocation],
    option_index: int,
    remaining: int,
    max_capacity: int,
) -> int:
    """One unit to every cart that still has space. Returns units placed."""
    placed = 0
    for cart in carts:
        if remaining - placed <= 0:
            break
        if cart.free_space(max_capacity) > 0:
            _place_one(cart, option_index)
            placed += 1
    return placed


def _redistribute_option(
    carts: List[CartAllocation],
    option_index: int,
    excess: int,
    max_capacity: int,
    max_attempts: int,
) -> int:
    """Push one option's excess into the working carts. Returns the unplaced remainder."""
    remaining = excess
    attempts = 0
    while remaining > 0 and attempts < max_attempts:
        attempts += 1

        placed = _equalize_pass(carts, option_index, remaining, max_capacity)
        remaining -= placed
        if placed == 0 and remaining > 0:
            placed = _round_robin_pass(carts, option_index, remaining, max_capacity)
            remaining -= placed
            if placed == 0:
                break  # every cart is full

    if remaining > 0 and attempts >= max_attempts:
        logger.debug("Option %d: attempt budget %d exhausted, %d left", option_index, max_attempts, remaining)
    return remaining


def redistribute_excess(
    allocation: List[CartAllocation],
    excess: List[ExcessEntry],
    rule_config: Optional[dict] = None,
) -> RedistributionResult:
    """Fill spare cart capacity with positive general-meal excess.

    Works on copies: the initial allocation and excess lists are left untouched.
    Options are processed in excess-list order and share the same working carts,
    so space taken by an earlier option is no longer free for later ones.
    """
    cfg = rule_config or {}
    max_capacity = cfg.get("max_cart_capacity", MAX_CART_CAPACITY)
    attempt_factor = cfg.get("redistribution_attempt_factor", REDISTRIBUTION_ATTEMPT_FACTOR)

    working = copy.deepcopy(allocation)
    updated_excess = copy.deepcopy(excess)
    max_attempts = max_capacity * len(working) * attempt_factor

    labels = {}
    placed_by_option = {}
    remaining_by_option = {}
    for entry in updated_excess:
        if not entry.is_general or entry.quantity <= 0:
            continue
        remaining = _redistribute_option(
            working, entry.option_index, entry.quantity, max_capacity, max_attempts,
        )
        labels[entry.option_index] = entry.option_label
        placed_by_option[entry.option_index] = entry.quantity - remaining
        remaining_by_option[entry.option_index] = remaining
        entry.quantity = remaining

    logger.info(
        "Redistributed %d general meals, %d left over",
        sum(placed_by_option.values()), sum(remaining_by_option.values()),
    )
    return RedistributionResult(
        adjusted_allocation=working,
        updated_excess=updated_excess,
        placed_by_option=placed_by_option,
        explanation_steps=explain_redistribution(labels, placed_by_option, remaining_by_option),
    )
