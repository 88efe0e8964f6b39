from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from pydantic import BaseModel
from .. import models, schemas
from ..calculators.dimensions import ParseFailure, resolve_dimensions, united_inches
from ..calculators.markup import describe_tiers
from ..catalog import CatalogLookup, seed_catalog
from ..database import get_db
from ..pricing_engine import PricingEngine, example_calculation

router = APIRouter(prefix="/pricing", tags=["pricing"])

pricing_engine = PricingEngine()


class CalculateRequest(schemas.PricingRequest):
    """
    PricingRequest plus the order-form conveniences: a free-text size and
    catalog item names. Explicit items win over names.
    """
    dimensions: Optional[str] = None
    frame_name: Optional[str] = None
    mat_name: Optional[str] = None
    glazing_name: Optional[str] = None


class CalculateResponse(BaseModel):
    breakdown: schemas.PriceBreakdown
    missing_items: List[str] = []


class DimensionsRequest(BaseModel):
    dimensions: str
    mat_width: Optional[float] = None


@router.post("/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest, db: Session = Depends(get_db)):
    update = {}
    if req.dimensions is not None and (req.artwork_width is None or req.artwork_height is None):
        dims = resolve_dimensions(spec=req.dimensions)
        if isinstance(dims, ParseFailure):
            raise HTTPException(status_code=422, detail=dims.message)
        update = {"artwork_width": dims.width, "artwork_height": dims.height}

    missing = []
    if req.frame_name or req.mat_name or req.glazing_name:
        catalog = CatalogLookup.from_db(db)
        selected, missing = catalog.select(
            frame=None if req.frame_item else req.frame_name,
            mat=None if req.mat_item else req.mat_name,
            glazing=None if req.glazing_item else req.glazing_name,
        )
        for slot, item in selected.items():
            if getattr(req, slot) is None:
                update[slot] = item

    breakdown = pricing_engine.calculate(req.model_copy(update=update))
    return {"breakdown": breakdown, "missing_items": missing}


@router.post("/parse-dimensions")
def parse_dimensions(req: DimensionsRequest):
    """Validate a free-text size for the order form. Never errors on bad input."""
    dims = resolve_dimensions(spec=req.dimensions)
    if isinstance(dims, ParseFailure):
        return {"valid": False, "message": dims.message, "raw": dims.raw}
    mat_width = req.mat_width if req.mat_width is not None else pricing_engine.config.mat_width
    return {
        "valid": True,
        "width": dims.width,
        "height": dims.height,
        "united_inches": united_inches(dims.width, dims.height, mat_width),
    }


@router.get("/tiers")
def list_tiers():
    return describe_tiers()


@router.get("/example", response_model=schemas.PriceBreakdown)
def reference_example():
    return example_calculation()


@router.get("/catalog/seed")
def seed(db: Session = Depends(get_db)):
    """Seed the default catalog. Safe to run multiple times — skips existing."""
    seeded = seed_catalog(db)
    return {"ok": True, "seeded": seeded}


@router.get("/catalog", response_model=List[schemas.PriceStructure])
def list_catalog(category: Optional[schemas.MaterialCategory] = None, db: Session = Depends(get_db)):
    query = db.query(models.PriceStructure)
    if category is not None:
        query = query.filter(models.PriceStructure.category == category.value)
    return query.order_by(models.PriceStructure.category, models.PriceStructure.base_price).all()
