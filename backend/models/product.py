# backend/models/product.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, Integer, Float, Boolean, DateTime, Enum, CheckConstraint, func
)
from sqlalchemy.orm import relationship
from database import Base


class ProductUnit(str, enum.Enum):
    PIECE = "piece"
    KILOGRAM = "kilogram"
    LITER = "liter"
    METER = "meter"
    BOX = "box"
    CARTON = "carton"


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Model Product
# A sellable inventory item: catalog data, sell and cost prices,
# stock levels with reorder/capacity thresholds and an optional category.
class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)

    # Indexed but not unique: duplicates are tolerated by the catalog
    sku = Column(String, nullable=False, index=True)

    price = Column(Float, CheckConstraint("price >= 0"), nullable=False)
    cost_price = Column(Float, CheckConstraint("cost_price >= 0"), nullable=False, default=0)

    # Stock levels
    stock_quantity = Column(Integer, CheckConstraint("stock_quantity >= 0"), nullable=False)
    min_stock_level = Column(Integer, CheckConstraint("min_stock_level >= 0"), nullable=False, default=5)
    max_stock_level = Column(Integer, CheckConstraint("max_stock_level >= 0"), nullable=False, default=1000)

    unit = Column(Enum(ProductUnit), nullable=False, default=ProductUnit.PIECE)
    is_active = Column(Boolean, nullable=False, default=True)
    barcode = Column(String, nullable=True)
    weight = Column(Float, CheckConstraint("weight >= 0"), nullable=True, default=0)

    # No ForeignKey: deleting a category leaves this id dangling
    category_id = Column(String(36), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now(), onupdate=_utcnow, nullable=False)

    category = relationship(
        "Category",
        primaryjoin="foreign(Product.category_id) == Category.id",
        lazy="joined",
        uselist=False,
        viewonly=True,
    )
