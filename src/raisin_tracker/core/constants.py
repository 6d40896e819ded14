"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_RATE_PER_KG = 3
DEFAULT_CURRENCY_SYMBOL = "₹"
DAYS_PER_WEEK = 7
MONEY_PLACES = 2
# Largest value a DECIMAL(10,2) column holds
MAX_AMOUNT = 99_999_999.99
