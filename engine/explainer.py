"""Generates human-readable explanations for cart allocations and redistribution."""

from typing import Dict, List


def explain_cart_allocation(
    cart_name: str,
    base_capacity: int,
    gets_extra_slot: bool,
    general_capacity: int,
    max_capacity: int,
    special: int,
    available_general: int,
    option_labels: List[str],
    option_shares: List[float],
    candidates: List[int],
    shortfall: int,
    shortfall_index: int,
    final_assigned: List[int],
    total: int,
) -> List[str]:
    """Produce step-by-step explanation for one cart's initial distribution."""
    steps = []

    extra = " + 1 extra" if gets_extra_slot else ""
    uncapped = base_capacity + (1 if gets_extra_slot else 0)
    capped = f" (capped at {max_capacity})" if uncapped > general_capacity else ""
    steps.append(
        f"Step 1 - Capacity: {cart_name} base {base_capacity}{extra} "
        f"=> general capacity {general_capacity}{capped}"
    )

    steps.append(
        f"Step 2 - Specials: {special} manual special meals "
        f"=> {available_general} slots left for general meals"
    )

    parts = [
        f"{label} {share:.1%} -> {qty}"
        for label, share, qty in zip(option_labels, option_shares, candidates)
    ]
    steps.append(f"Step 3 - Proportional split: {', '.join(parts)}")

    if shortfall > 0:
        steps.append(
            f"Step 4 - Rounding: {shortfall} unassigned slot{'s' if shortfall != 1 else ''} "
            f"added to {option_labels[shortfall_index]} (largest share)"
        )

    breakdown = " + ".join(str(q) for q in final_assigned)
    steps.append(f"Total: {special} specials + {breakdown} general = {total} meals")

    return steps


def explain_redistribution(
    option_labels: Dict[int, str],
    placed_by_option: Dict[int, int],
    remaining_by_option: Dict[int, int],
) -> List[str]:
    """Summarize what the redistribution pass placed for each general option."""
    steps = []
    for index, label in option_labels.items():
        placed = placed_by_option.get(index, 0)
        remaining = remaining_by_option.get(index, 0)
        line = f"{label}: placed {placed} into carts with free space"
        if remaining > 0:
            line += f", {remaining} still to distribute manually"
        steps.append(line)
    if not steps:
        steps.append("No general excess to redistribute.")
    return steps
