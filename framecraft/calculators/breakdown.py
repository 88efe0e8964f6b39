"""
Breakdown assembler — the one place money gets rounded.

Every monetary field is rounded to cents independently, from the unrounded
values the composer and adjustment layer produced. Never sum rounded
component prices — the subtotal can land a cent off.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from ..schemas import PriceBreakdown, PricingCalculations, PricingMode
from .components import ComponentPrice
from .totals import Adjustments

CENTS = Decimal("0.01")


def round_money(value: float) -> float:
    """
    Two decimal places, halves rounded away from zero.

    inf and nan come back unchanged. Very large values keep every integer
    digit; the context precision grows with the magnitude.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    # repr() gives the shortest string that round-trips, so 102.375 stays 102.375
    amount = Decimal(repr(value))
    context = Context(prec=max(28, amount.adjusted() + 4))
    return float(amount.quantize(CENTS, rounding=ROUND_HALF_UP, context=context))


def round_metric(value: float) -> float:
    """Display rounding for perimeter and area."""
    return round_money(value)


def assemble_breakdown(mode: PricingMode, frame: ComponentPrice, mat: ComponentPrice,
                       glazing: ComponentPrice, labor_cost: float, overhead_cost: float,
                       subtotal: float, adjustments: Adjustments, united_inches: float,
                       frame_perimeter_feet: float, glazing_area_sqft: float,
                       glazing_united_inches: float) -> PriceBreakdown:
    return PriceBreakdown(
        mode=mode,
        frame_price=round_money(frame.price),
        mat_price=round_money(mat.price),
        glazing_price=round_money(glazing.price),
        labor_cost=round_money(labor_cost),
        overhead_cost=round_money(overhead_cost),
        subtotal=round_money(subtotal),
        discount_amount=round_money(adjustments.discount_amount),
        discounted_subtotal=round_money(adjustments.discounted_subtotal),
        tax_amount=round_money(adjustments.tax_amount),
        total=round_money(adjustments.total),
        united_inches=united_inches,
        calculations=PricingCalculations(
            frame_perimeter_feet=round_metric(frame_perimeter_feet),
            glazing_area_sqft=round_metric(glazing_area_sqft),
            glazing_united_inches=glazing_united_inches,
            frame_markup_factor=frame.markup_factor,
            mat_markup_factor=mat.markup_factor,
            glazing_markup_factor=glazing.markup_factor,
            frame_market_adjustment=frame.market_adjustment,
            glazing_market_adjustment=glazing.market_adjustment,
        ),
    )


def empty_breakdown(mode: PricingMode = PricingMode.RETAIL) -> PriceBreakdown:
    """Result for a zero or missing dimension — all zeros, never an exception."""
    return PriceBreakdown(mode=mode)
