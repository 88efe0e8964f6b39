"""
Framing Pricing Engine.

Turns artwork dimensions and the selected frame / mat / glazing into an
itemized PriceBreakdown:

    dimensions → (markup → component price) × {frame, mat, glazing}
               → subtotal → discount → tax → rounded breakdown

Pure math — no database, no network, no shared mutable state. Safe to call
concurrently and on every keystroke of the order form.
"""

import logging
from typing import Optional, Union

from .calculators.breakdown import assemble_breakdown, empty_breakdown
from .calculators.components import price_frame, price_glazing, price_mat
from .calculators.dimensions import (
    Dimensions,
    ParseFailure,
    frame_perimeter_feet,
    glazing_area_sqft,
    glazing_united_inches,
    resolve_dimensions,
    united_inches,
)
from .calculators.totals import apply_adjustments, compose_subtotal
from .config import settings
from .schemas import PriceBreakdown, PricingConfig, PricingRequest

logger = logging.getLogger(__name__)

QuoteResult = Union[PriceBreakdown, ParseFailure]


def _or_default(value: Optional[float], default: float) -> float:
    return default if value is None else value


class PricingEngine:
    """
    Stateless quote calculator bound to one PricingConfig.

    The config is frozen, so one engine can be shared between threads.
    """

    def __init__(self, config: PricingConfig = None):
        self.config = config or PricingConfig.from_settings(settings)

    def calculate(self, request: PricingRequest) -> PriceBreakdown:
        """
        Price one request.

        A zero, negative or missing width / height / mat width returns the
        empty breakdown. An unselected component prices at exactly 0.
        """
        cfg = self.config
        size = Dimensions(
            width=_or_default(request.artwork_width, 0.0),
            height=_or_default(request.artwork_height, 0.0),
        )
        width, height = size.width, size.height
        mat_width = _or_default(request.mat_width, cfg.mat_width)
        mode = request.mode

        if size.is_degenerate or not mat_width > 0:
            logger.debug("Degenerate size %sx%s mat %s, empty breakdown", width, height, mat_width)
            return empty_breakdown(mode)

        frame = price_frame(request.frame_item, width, height, mat_width,
                            mode, cfg.frame_market_adjustment)
        mat = price_mat(request.mat_item, width, height, mat_width, mode)
        glazing = price_glazing(request.glazing_item, width, height, mat_width,
                                mode, cfg.glazing_market_adjustment)

        labor_cost = _or_default(request.labor_cost, cfg.labor_cost)
        overhead_cost = _or_default(request.overhead_cost, cfg.overhead_cost)
        tax_rate = _or_default(request.tax_rate, cfg.tax_rate)

        subtotal = compose_subtotal(frame.price, mat.price, glazing.price,
                                    labor_cost, overhead_cost)
        adjustments = apply_adjustments(subtotal, request.discount_percentage, tax_rate)

        # Sizing metrics are only reported for the lines that use them
        perimeter_ft = 0.0
        if request.frame_item is not None:
            perimeter_ft = frame_perimeter_feet(width, height, mat_width)
        area_sqft = 0.0
        glazing_ui = 0.0
        if request.glazing_item is not None:
            area_sqft = glazing_area_sqft(width, height, mat_width)
            glazing_ui = glazing_united_inches(width, height, mat_width)

        breakdown = assemble_breakdown(
            mode=mode,
            frame=frame,
            mat=mat,
            glazing=glazing,
            labor_cost=labor_cost,
            overhead_cost=overhead_cost,
            subtotal=subtotal,
            adjustments=adjustments,
            united_inches=united_inches(width, height, mat_width),
            frame_perimeter_feet=perimeter_ft,
            glazing_area_sqft=area_sqft,
            glazing_united_inches=glazing_ui,
        )
        logger.debug("Priced %sx%s (%s): total %.2f", width, height, mode.value, breakdown.total)
        return breakdown

    def quote_from_spec(self, size_text: str, **fields) -> QuoteResult:
        """
        Price a quote whose size is free text from the order form.

        Returns ParseFailure instead of a price when the size can't be read.
        Remaining keyword arguments are PricingRequest fields.
        """
        dims = resolve_dimensions(spec=size_text)
        if isinstance(dims, ParseFailure):
            logger.warning("Could not parse dimensions %r", dims.raw)
            return dims
        return self.calculate(self._request_for(dims, fields))

    @staticmethod
    def _request_for(dims: Dimensions, fields: dict) -> PricingRequest:
        return PricingRequest(artwork_width=dims.width, artwork_height=dims.height, **fields)


def calculate_framing_price(config: PricingConfig = None, **fields) -> PriceBreakdown:
    """One-shot helper: build a PricingRequest from keyword fields and price it."""
    return PricingEngine(config).calculate(PricingRequest(**fields))


def example_calculation() -> PriceBreakdown:
    """
    Reference quote used on the pricing screen: 16x20 art, 2" mat,
    $18/ft moulding, $17 conservation mat, $39/sqft museum glass.
    """
    return calculate_framing_price(
        config=PricingConfig(),
        artwork_width=16,
        artwork_height=20,
        mat_width=2,
        frame_item={"category": "frame", "name": "Larson Academie", "base_price": 18},
        mat_item={"category": "mat", "name": "White Conservation", "base_price": 17},
        glazing_item={"category": "glazing", "name": "Museum Glass", "base_price": 39},
        labor_cost=38,
        overhead_cost=54,
        discount_percentage=0,
        tax_rate=0.0825,
        mode="retail",
    )
