"""
Catalog lookup for the pricing engine.

Resolves (category, item name) to a validated MaterialCatalogItem from either
the price_structure table or the built-in DEFAULT_CATALOG. A name that isn't
in the catalog resolves to None and is priced like "nothing selected": the
line contributes $0 and the miss is logged.

Base prices: frame per linear foot, glazing per square foot, mat and labor flat.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from . import models
from .schemas import MaterialCatalogItem, MaterialCategory

logger = logging.getLogger(__name__)

# Seed catalog: Houston Heights shop wholesale costs
DEFAULT_CATALOG = [
    # Frame moulding ($/linear ft)
    {"category": "frame", "subcategory": "metal", "item_name": "Black Metal Gallery", "unit_type": "linear_foot", "base_price": 1.85},
    {"category": "frame", "subcategory": "wood", "item_name": 'Basic Wood Frame 1"', "unit_type": "linear_foot", "base_price": 3.50},
    {"category": "frame", "subcategory": "metal", "item_name": "Aluminum Frame Silver", "unit_type": "linear_foot", "base_price": 4.75},
    {"category": "frame", "subcategory": "metal", "item_name": "Steel Frame Black", "unit_type": "linear_foot", "base_price": 6.25},
    {"category": "frame", "subcategory": "wood", "item_name": 'Premium Oak Frame 1.5"', "unit_type": "linear_foot", "base_price": 8.25},
    {"category": "frame", "subcategory": "wood", "item_name": 'Cherry Wood Frame 2"', "unit_type": "linear_foot", "base_price": 12.50},
    {"category": "frame", "subcategory": "wood", "item_name": "Larson Academie", "unit_type": "linear_foot", "base_price": 18.00},
    # Glazing ($/sq ft)
    {"category": "glazing", "subcategory": "standard_glass", "item_name": "Standard Picture Glass", "unit_type": "square_foot", "base_price": 3.25},
    {"category": "glazing", "subcategory": "acrylic", "item_name": "Standard Acrylic", "unit_type": "square_foot", "base_price": 4.25},
    {"category": "glazing", "subcategory": "standard_glass", "item_name": "Non-Glare Glass", "unit_type": "square_foot", "base_price": 5.50},
    {"category": "glazing", "subcategory": "acrylic", "item_name": "Non-Glare Acrylic", "unit_type": "square_foot", "base_price": 6.75},
    {"category": "glazing", "subcategory": "acrylic", "item_name": "UV Filtering Acrylic", "unit_type": "square_foot", "base_price": 7.50},
    {"category": "glazing", "subcategory": "conservation_glass", "item_name": "UV Protection Glass", "unit_type": "square_foot", "base_price": 8.75},
    {"category": "glazing", "subcategory": "acrylic", "item_name": "Museum Acrylic (99% UV)", "unit_type": "square_foot", "base_price": 12.50},
    {"category": "glazing", "subcategory": "conservation_glass", "item_name": "Museum Glass", "unit_type": "square_foot", "base_price": 39.00},
    # Mat board (flat, per opening)
    {"category": "mat", "subcategory": "standard", "item_name": "Standard Mat Board", "unit_type": "each", "base_price": 9.00},
    {"category": "mat", "subcategory": "conservation", "item_name": "White Conservation", "unit_type": "each", "base_price": 17.00},
    # Labor (flat)
    {"category": "labor", "subcategory": "cutting", "item_name": "Frame Cutting & Assembly", "unit_type": "each", "base_price": 25.00},
]


def _key(category, name: str) -> Tuple[str, str]:
    category = category.value if isinstance(category, MaterialCategory) else str(category)
    return category.strip().lower(), name.strip().lower()


def _item_from_record(record: dict) -> Optional[MaterialCatalogItem]:
    """Validate one catalog row. Bad rows are dropped with a warning."""
    try:
        return MaterialCatalogItem(
            category=record.get("category"),
            name=record.get("item_name") or record.get("name"),
            base_price=record.get("base_price"),
        )
    except ValidationError as e:
        logger.warning("Skipping invalid catalog row %r: %s", record.get("item_name"), e)
        return None


class CatalogLookup:
    """
    Read-only catalog snapshot keyed by (category, item name).

    Names match case-insensitively. Built once per request (from the DB) or
    once per process (defaults); never mutated after construction.
    """

    def __init__(self, items: List[MaterialCatalogItem] = None):
        self._items: Dict[Tuple[str, str], MaterialCatalogItem] = {}
        for item in items or []:
            self._items[_key(item.category, item.name)] = item

    @classmethod
    def from_records(cls, records: list) -> "CatalogLookup":
        items = [_item_from_record(r) for r in records]
        return cls([i for i in items if i is not None])

    @classmethod
    def from_db(cls, db) -> "CatalogLookup":
        rows = db.query(models.PriceStructure).all()
        return cls.from_records([
            {"category": r.category, "item_name": r.item_name, "base_price": r.base_price}
            for r in rows
        ])

    @classmethod
    def defaults(cls) -> "CatalogLookup":
        return cls.from_records(DEFAULT_CATALOG)

    def __len__(self) -> int:
        return len(self._items)

    def lookup(self, category, name: Optional[str]) -> Optional[MaterialCatalogItem]:
        """Returns the item, or None when nothing was selected or the name is unknown."""
        if not name or not str(name).strip():
            return None
        item = self._items.get(_key(category, str(name)))
        if item is None:
            logger.warning("Catalog item not found: %s / %r, pricing line at $0", _key(category, "")[0], name)
        return item

    def select(self, frame: Optional[str] = None, mat: Optional[str] = None,
               glazing: Optional[str] = None) -> Tuple[dict, List[str]]:
        """
        Resolve the three selectable lines at once.

        Returns (PricingRequest item kwargs, names that were asked for but missing).
        """
        selected = {}
        missing = []
        for category, name in ((MaterialCategory.FRAME, frame),
                               (MaterialCategory.MAT, mat),
                               (MaterialCategory.GLAZING, glazing)):
            item = self.lookup(category, name)
            selected[f"{category.value}_item"] = item
            if item is None and name and str(name).strip():
                missing.append(f"{category.value}: {name}")
        return selected, missing

    def snapshot(self) -> Mapping[Tuple[str, str], MaterialCatalogItem]:
        """Read-only view for sharing across worker threads."""
        return MappingProxyType(self._items)

    def items(self, category=None) -> List[MaterialCatalogItem]:
        if category is None:
            return list(self._items.values())
        wanted = _key(category, "")[0]
        return [i for i in self._items.values() if i.category.value == wanted]


def seed_catalog(db) -> int:
    """Insert DEFAULT_CATALOG rows that aren't there yet. Safe to run repeatedly."""
    seeded = 0
    for record in DEFAULT_CATALOG:
        existing = db.query(models.PriceStructure).filter(
            models.PriceStructure.category == record["category"],
            models.PriceStructure.item_name == record["item_name"],
        ).first()
        if not existing:
            db.add(models.PriceStructure(**record))
            seeded += 1
    db.commit()
    if seeded:
        logger.info("Seeded %d catalog items", seeded)
    return seeded
