"""
Component pricer — one material line (frame, mat or glazing) at a time.

Wholesale mode passes the raw material cost through with no markup.
Retail mode applies the sliding-scale markup, then a market adjustment for
frame and glazing that pulls the theoretical retail price down to what the
local market actually pays. Mat retail is markup only.

Prices returned here are unrounded; rounding happens once, when the
breakdown is assembled.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .dimensions import (
    frame_perimeter_inches,
    glazing_united_inches,
    glazing_dimensions,
    united_inches,
)
from .markup import (
    frame_markup_factor,
    get_tier_table,
    glazing_markup_factor,
    mat_markup_factor,
    resolve_tier,
)

WHOLESALE = "wholesale"
RETAIL = "retail"

# Float noise below this is not a real fraction of a dollar
_CEIL_TOLERANCE_PLACES = 6


@dataclass(frozen=True)
class ComponentPrice:
    """Unrounded price of one line plus the factors that produced it."""
    price: float = 0.0
    markup_factor: float = 1.0
    market_adjustment: float = 1.0


NOT_SELECTED = ComponentPrice()


def ceil_to_whole_unit(amount: float) -> float:
    """Round a raw material cost UP to the next whole dollar. inf and nan pass through."""
    if not math.isfinite(amount):
        return amount
    return float(math.ceil(round(amount, _CEIL_TOLERANCE_PLACES)))


def price_frame(item, width: float, height: float, mat_width: float,
                mode: str = RETAIL, market_adjustment: float = 1.0) -> ComponentPrice:
    """
    Frame moulding priced by the foot around the matted artwork.

    Retail: ceil(perimeter_ft × price/ft) × tier markup × market adjustment.
    """
    if item is None:
        return NOT_SELECTED
    price_per_foot = item.base_price
    # inches × $/ft / 12 keeps whole-foot perimeters exact
    raw_cost = frame_perimeter_inches(width, height, mat_width) * price_per_foot / 12.0
    if mode == WHOLESALE:
        return ComponentPrice(price=raw_cost)

    markup = frame_markup_factor(price_per_foot)
    wholesale_cost = ceil_to_whole_unit(raw_cost)
    return ComponentPrice(
        price=wholesale_cost * markup * market_adjustment,
        markup_factor=markup,
        market_adjustment=market_adjustment,
    )


def price_mat(item, width: float, height: float, mat_width: float,
              mode: str = RETAIL) -> ComponentPrice:
    """Mat board is a flat catalog price; retail marks it up by united inches."""
    if item is None:
        return NOT_SELECTED
    if mode == WHOLESALE:
        return ComponentPrice(price=item.base_price)

    markup = mat_markup_factor(united_inches(width, height, mat_width))
    return ComponentPrice(price=item.base_price * markup, markup_factor=markup)


def price_glazing(item, width: float, height: float, mat_width: float,
                  mode: str = RETAIL, market_adjustment: float = 1.0) -> ComponentPrice:
    """
    Glazing priced by the square foot of the matted opening.

    The retail tier is keyed on the glazing sheet's own united inches,
    not the artwork's.
    """
    if item is None:
        return NOT_SELECTED
    outer_w, outer_h = glazing_dimensions(width, height, mat_width)
    raw_cost = outer_w * outer_h * item.base_price / 144.0
    if mode == WHOLESALE:
        return ComponentPrice(price=raw_cost)

    markup = glazing_markup_factor(glazing_united_inches(width, height, mat_width))
    return ComponentPrice(
        price=raw_cost * markup * market_adjustment,
        markup_factor=markup,
        market_adjustment=market_adjustment,
    )


def net_retail_factor(category: str, metric: float,
                      market_adjustment: Optional[float] = None) -> float:
    """
    Markup × market adjustment for one tier — how far retail sits from raw cost.

    metric is price per foot for frame, united inches for mat and glazing.
    Values under 1.0 mean retail can come in below wholesale.
    """
    markup = resolve_tier(get_tier_table(category), metric)
    if category == "mat" or market_adjustment is None:
        market_adjustment = 1.0
    return markup * market_adjustment
