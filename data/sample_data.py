"""Generate sample flights for the Flight Meal Distribution Calculator."""

import random

from models.manifest import ManifestForm
from config.defaults import DEFAULT_OPTION_NAMES, MAX_CART_CAPACITY


def generate_sample_form(seed: int = 42, num_carts: int = 6) -> ManifestForm:
    """A plausible, valid flight: three general options, a few specials spread over the first carts."""
    rng = random.Random(seed)

    passengers = rng.randint(num_carts * 25, num_carts * MAX_CART_CAPACITY - 10)
    total_special = rng.randint(3, 12)

    # Split the general meals roughly 45/35/20 with some noise, leaving a small surplus
    general_needed = passengers - total_special + rng.randint(0, 8)
    weights = [0.45 + rng.uniform(-0.05, 0.05), 0.35 + rng.uniform(-0.05, 0.05)]
    first = round(general_needed * weights[0])
    second = round(general_needed * weights[1])
    third = general_needed - first - second

    # Specials go to the front carts, two or three per cart
    specials_per_cart = {}
    left = total_special
    cart = 1
    while left > 0 and cart <= num_carts:
        count = min(left, rng.randint(2, 3))
        specials_per_cart[cart] = str(count)
        left -= count
        cart += 1

    return ManifestForm(
        passengers=str(passengers),
        total_special_meals=str(total_special - left),
        num_carts=str(num_carts),
        num_general_options=3,
        option_names=list(DEFAULT_OPTION_NAMES),
        option_quantities=[str(first), str(second), str(third)],
        special_meals_per_cart=specials_per_cart,
    )
