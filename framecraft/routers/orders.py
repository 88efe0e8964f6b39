from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging
from .. import models, schemas
from ..calculators.breakdown import round_money
from ..calculators.dimensions import ParseFailure
from ..calculators.totals import balance_due
from ..catalog import CatalogLookup
from ..database import get_db
from .pricing import pricing_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/{order_id}/price", response_model=schemas.OrderPriceResult)
def price_order(order_id: int, req: schemas.OrderPriceRequest, db: Session = Depends(get_db)):
    """
    Price a stored order from its size text and selected catalog items,
    then write the total back onto the order.
    """
    order = db.query(models.Order).filter(models.Order.id == order_id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    catalog = CatalogLookup.from_db(db)
    items, missing = catalog.select(
        frame=order.frame_style, mat=order.mat_color, glazing=order.glazing,
    )
    result = pricing_engine.quote_from_spec(
        order.dimensions,
        mode=req.mode,
        discount_percentage=req.discount_percentage,
        tax_rate=req.tax_rate,
        **items,
    )
    if isinstance(result, ParseFailure):
        raise HTTPException(status_code=422, detail=f"{result.message}: {result.raw!r}")

    if missing:
        logger.warning("Order %s priced without %s", order.order_number, ", ".join(missing))

    order.total_amount = result.total
    db.commit()
    db.refresh(order)

    deposit = order.deposit_amount or 0.0
    return {
        "order_id": order.id,
        "order_number": order.order_number,
        "total_amount": order.total_amount,
        "deposit_amount": deposit,
        "balance_due": round_money(balance_due(order.total_amount, deposit)),
        "missing_items": missing,
        "breakdown": result,
    }
