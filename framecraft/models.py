from sqlalchemy import Column, Integer, String, Float, DateTime, Text
from datetime import datetime
from .database import Base
import enum


class UnitType(str, enum.Enum):
    LINEAR_FOOT = "linear_foot"   # frame moulding
    SQUARE_FOOT = "square_foot"   # glazing
    EACH = "each"                 # mats, labor


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    MEASURING = "measuring"
    PRODUCTION = "production"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PriceStructure(Base):
    """Catalog snapshot the pricing engine reads. Never written by the engine."""
    __tablename__ = "price_structure"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String, nullable=False, index=True)  # 'frame' | 'mat' | 'glazing' | 'labor'
    subcategory = Column(String, nullable=True)
    item_name = Column(String, nullable=False)
    unit_type = Column(String, nullable=False, default=UnitType.EACH.value)
    base_price = Column(Float, nullable=False, default=0.0)
    notes = Column(Text, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Order(Base):
    """Framing order. Only the fields the pricing flow reads or writes."""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    dimensions = Column(String, nullable=True)      # free text, e.g. '16x20'
    frame_style = Column(String, nullable=True)     # catalog item_name
    mat_color = Column(String, nullable=True)       # catalog item_name
    glazing = Column(String, nullable=True)         # catalog item_name
    total_amount = Column(Float, default=0.0)
    deposit_amount = Column(Float, nullable=True)
    status = Column(String, default=OrderStatus.PENDING.value)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
