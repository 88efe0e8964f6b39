"""
Markup resolver — sliding-scale retail multipliers.

Each table is a sorted list of (upper_bound, multiplier) bands. The first
band whose upper bound is >= the metric wins, so a metric sitting exactly on
a bound gets that band's (cheaper-tier) multiplier. The last band is open
ended, which makes every lookup total.

Markup falls as the unit price or the piece size goes up.
"""

import math

# Frame moulding, keyed on catalog price per linear foot
FRAME_MARKUP_TIERS = [
    (1.99, 4.5),       # $0.99-$1.99 budget moulding
    (2.99, 4.0),       # $2.00-$2.99
    (3.99, 3.5),       # $3.00-$3.99
    (4.99, 3.0),       # $4.00-$4.99 premium
    (math.inf, 2.5),   # $5.00+ luxury
]

# Mat board, keyed on united inches of the artwork plus mat border
MAT_MARKUP_TIERS = [
    (32, 2.0),
    (60, 1.8),
    (80, 1.6),
    (math.inf, 1.4),
]

# Glazing, keyed on united inches of the glazing sheet
GLAZING_MARKUP_TIERS = [
    (40, 2.0),
    (60, 1.75),
    (80, 1.5),
    (math.inf, 1.25),
]

TIER_TABLES = {
    "frame": FRAME_MARKUP_TIERS,
    "mat": MAT_MARKUP_TIERS,
    "glazing": GLAZING_MARKUP_TIERS,
}

TIER_METRICS = {
    "frame": "price_per_foot",
    "mat": "united_inches",
    "glazing": "glazing_united_inches",
}


def resolve_tier(tiers: list, metric: float) -> float:
    """Multiplier of the first band whose upper bound is >= metric."""
    for upper_bound, multiplier in tiers:
        if metric <= upper_bound:
            return multiplier
    # NaN compares false against every bound, so it gets the open band
    return tiers[-1][1]


def get_tier_table(category: str) -> list:
    """Returns the tier table for a category, or raises ValueError."""
    if category not in TIER_TABLES:
        raise ValueError(
            f"No markup tiers for category: {category}. "
            f"Available: {list(TIER_TABLES.keys())}"
        )
    return TIER_TABLES[category]


def frame_markup_factor(price_per_foot: float) -> float:
    return resolve_tier(FRAME_MARKUP_TIERS, price_per_foot)


def mat_markup_factor(united_inches: float) -> float:
    return resolve_tier(MAT_MARKUP_TIERS, united_inches)


def glazing_markup_factor(glazing_united_inches: float) -> float:
    return resolve_tier(GLAZING_MARKUP_TIERS, glazing_united_inches)


def describe_tiers() -> dict:
    """Tier tables in a JSON-friendly shape for the quote screen."""
    described = {}
    for category, tiers in TIER_TABLES.items():
        described[category] = {
            "metric": TIER_METRICS[category],
            "bands": [
                {
                    "up_to": None if math.isinf(bound) else bound,
                    "multiplier": multiplier,
                }
                for bound, multiplier in tiers
            ],
        }
    return described
