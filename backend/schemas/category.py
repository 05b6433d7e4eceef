# backend/schemas/category.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.category import CategoryIcon, PREDEFINED_COLORS


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    color: str = Field(PREDEFINED_COLORS[0], pattern=r"^#[0-9A-Fa-f]{6}$")
    icon: CategoryIcon = CategoryIcon.PACKAGE


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


class CategoryOut(CategoryBase):
    id: str
    created_at: datetime
    product_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class CategoryProductCount(BaseModel):
    category_id: str
    product_count: int


# Deleting a category does not touch its products
class CategoryDeleteResult(BaseModel):
    detail: str
    orphaned_products: int


class CategoryOptions(BaseModel):
    colors: List[str]
    icons: List[CategoryIcon]
