# backend/schemas/product.py
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List

from models.product import ProductUnit


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Shared attributes for product payloads
class ProductBase(ORMBase):
    name: str = Field(..., min_length=1)
    sku: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    cost_price: float = Field(0, ge=0)
    stock_quantity: int = Field(..., ge=0)
    min_stock_level: int = Field(5, ge=0)
    max_stock_level: int = Field(1000, ge=0)
    unit: ProductUnit = ProductUnit.PIECE
    is_active: bool = True
    barcode: Optional[str] = None
    weight: Optional[float] = Field(0, ge=0)
    category_id: Optional[str] = None


# Schema for creating a new product
class ProductCreate(ProductBase):
    pass


# PUT replaces every field, so it takes the full create payload
class ProductUpdate(ProductBase):
    pass


class CategoryRef(ORMBase):
    id: str
    name: str
    color: str


# Full product representation with the joined category
class ProductOut(ProductBase):
    id: str
    created_at: datetime
    updated_at: datetime
    category: Optional[CategoryRef] = None


# List row: product plus the two-level stock badge
class ProductListItem(ProductOut):
    stock_status: str
    stock_variant: str
    needs_restock: bool


class ProductListPage(ORMBase):
    items: List[ProductListItem]
    total: int


# Detail view: three-level stock status and profit margin
class ProductDetails(ProductOut):
    stock_status: str
    stock_variant: str
    stock_percentage: float
    needs_restock: bool
    profit_margin: float
