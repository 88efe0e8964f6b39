from pydantic import AliasChoices, BaseModel, Field, model_validator
from typing import Optional, List
from datetime import datetime
import enum


class MaterialCategory(str, enum.Enum):
    FRAME = "frame"
    MAT = "mat"
    GLAZING = "glazing"
    LABOR = "labor"


class PricingMode(str, enum.Enum):
    WHOLESALE = "wholesale"   # raw catalog cost, internal accounting
    RETAIL = "retail"         # customer-facing quote


# --- Engine boundary types ---

class MaterialCatalogItem(BaseModel):
    """
    One catalog entry as the engine sees it.

    base_price is per linear foot for frames, per square foot for glazing,
    flat for mats and labor. Catalog exports that still say basePrice/price
    are accepted; anything that isn't a finite non-negative number is rejected.
    """
    category: MaterialCategory
    name: str = Field(min_length=1)
    base_price: float = Field(
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("base_price", "basePrice", "price"),
    )

    class Config:
        frozen = True
        populate_by_name = True


_SLOT_CATEGORIES = (
    ("frame_item", MaterialCategory.FRAME),
    ("mat_item", MaterialCategory.MAT),
    ("glazing_item", MaterialCategory.GLAZING),
)


class PricingRequest(BaseModel):
    """
    Everything one calculation needs. Built fresh per quote.

    Unset mat_width / tax_rate / labor_cost / overhead_cost fall back to the
    PricingConfig in use. discount_percentage and tax_rate are NOT range
    checked — out-of-range values flow straight through the math.
    """
    artwork_width: Optional[float] = Field(default=None, allow_inf_nan=False)
    artwork_height: Optional[float] = Field(default=None, allow_inf_nan=False)
    mat_width: Optional[float] = Field(default=None, allow_inf_nan=False)
    frame_item: Optional[MaterialCatalogItem] = None
    mat_item: Optional[MaterialCatalogItem] = None
    glazing_item: Optional[MaterialCatalogItem] = None
    mode: PricingMode = PricingMode.RETAIL
    discount_percentage: float = Field(default=0.0, allow_inf_nan=False)
    tax_rate: Optional[float] = Field(default=None, allow_inf_nan=False)
    labor_cost: Optional[float] = Field(default=None, allow_inf_nan=False)
    overhead_cost: Optional[float] = Field(default=None, allow_inf_nan=False)

    @model_validator(mode="after")
    def _items_match_slots(self):
        for slot, expected in _SLOT_CATEGORIES:
            item = getattr(self, slot)
            if item is not None and item.category != expected:
                raise ValueError(
                    f"{slot} must be a {expected.value} item, got {item.category.value}"
                )
        return self


class PricingConfig(BaseModel):
    """Shop-level pricing defaults. No engine constant lives anywhere else."""
    labor_cost: float = 38.00
    overhead_cost: float = 54.00
    tax_rate: float = 0.0825
    mat_width: float = 2.0
    frame_market_adjustment: float = 0.1667
    glazing_market_adjustment: float = 0.45

    class Config:
        frozen = True

    @classmethod
    def from_settings(cls, settings) -> "PricingConfig":
        return cls(
            labor_cost=settings.LABOR_COST_DEFAULT,
            overhead_cost=settings.OVERHEAD_COST_DEFAULT,
            tax_rate=settings.TAX_RATE_DEFAULT,
            mat_width=settings.MAT_WIDTH_DEFAULT,
            frame_market_adjustment=settings.FRAME_MARKET_ADJUSTMENT,
            glazing_market_adjustment=settings.GLAZING_MARKET_ADJUSTMENT,
        )


class PricingCalculations(BaseModel):
    frame_perimeter_feet: float = 0.0
    glazing_area_sqft: float = 0.0
    glazing_united_inches: float = 0.0
    frame_markup_factor: float = 1.0
    mat_markup_factor: float = 1.0
    glazing_markup_factor: float = 1.0
    frame_market_adjustment: float = 1.0
    glazing_market_adjustment: float = 1.0


class PriceBreakdown(BaseModel):
    """Itemized quote. Money fields are rounded to cents; nothing else is."""
    mode: PricingMode = PricingMode.RETAIL
    frame_price: float = 0.0
    mat_price: float = 0.0
    glazing_price: float = 0.0
    labor_cost: float = 0.0
    overhead_cost: float = 0.0
    subtotal: float = 0.0
    discount_amount: float = 0.0
    discounted_subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0
    united_inches: float = 0.0
    calculations: PricingCalculations = Field(default_factory=PricingCalculations)


# --- Persistence-facing schemas ---

class PriceStructureBase(BaseModel):
    category: MaterialCategory
    subcategory: Optional[str] = None
    item_name: str
    unit_type: str
    base_price: float
    notes: Optional[str] = None


class PriceStructure(PriceStructureBase):
    id: int
    updated_at: datetime
    class Config:
        from_attributes = True


class OrderPriceRequest(BaseModel):
    mode: PricingMode = PricingMode.RETAIL
    discount_percentage: float = 0.0
    tax_rate: Optional[float] = None


class OrderPriceResult(BaseModel):
    order_id: int
    order_number: str
    total_amount: float
    deposit_amount: float
    balance_due: float
    missing_items: List[str] = []
    breakdown: PriceBreakdown
