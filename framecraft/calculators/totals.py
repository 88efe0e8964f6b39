"""
Price composer and adjustment layer.

Everything here works on unrounded values — rounding is the breakdown
assembler's job. Discount and tax rates are taken as given; keeping them
in range is the caller's responsibility.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Adjustments:
    discount_amount: float
    discounted_subtotal: float
    tax_amount: float
    total: float


def compose_subtotal(frame_price: float, mat_price: float, glazing_price: float,
                     labor_cost: float, overhead_cost: float) -> float:
    """Component prices plus flat labor and overhead (neither is marked up)."""
    return frame_price + mat_price + glazing_price + labor_cost + overhead_cost


def apply_adjustments(subtotal: float, discount_percentage: float,
                      tax_rate: float) -> Adjustments:
    """Percentage discount first, then flat tax on the discounted subtotal."""
    discount_amount = subtotal * (discount_percentage / 100.0)
    discounted_subtotal = subtotal - discount_amount
    tax_amount = discounted_subtotal * tax_rate
    return Adjustments(
        discount_amount=discount_amount,
        discounted_subtotal=discounted_subtotal,
        tax_amount=tax_amount,
        total=discounted_subtotal + tax_amount,
    )


def balance_due(total: float, deposit: Optional[float] = None) -> float:
    """What the customer still owes once the deposit is taken."""
    return total - (deposit or 0.0)
