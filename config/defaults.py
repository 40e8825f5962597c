"""Default configuration constants for the Flight Meal Distribution Calculator."""

import os

# Cart limits
MAX_CART_CAPACITY = 40      # Fixed maximum number of meals per cart
MAX_NUMBER_OF_CARTS = 12    # Upper bound for the number of carts on a flight

# Flight limits
MAX_PASSENGERS = 600

# General meal options
DEFAULT_GENERAL_OPTIONS = 3
GENERAL_OPTION_COUNTS = [2, 3]
DEFAULT_OPTION_NAMES = ["Chicken", "Beef", "Vegetarian"]

# Label used for the special meal category in excess reports
SPECIALS_LABEL = "Specials"

# Redistribution safety bound: attempts = capacity x carts x factor
REDISTRIBUTION_ATTEMPT_FACTOR = 3

# Export / notes text
EXPORT_TITLE = "--- Flight Meal Distribution Results ---"
EXCESS_NOTES = [
    f"The excess meals indicated above should be distributed among the different carts "
    f"if their individual capacity (maximum {MAX_CART_CAPACITY} units) still allows it.",
    "If the carts have already reached their maximum capacity or there is not enough space, "
    "these meals must be managed manually or assigned to an auxiliary cart if the operation requires it.",
]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
