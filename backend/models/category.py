# backend/models/category.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Enum, func
from database import Base


class CategoryIcon(str, enum.Enum):
    PACKAGE = "package"
    SMARTPHONE = "smartphone"
    SHIRT = "shirt"
    SOFA = "sofa"
    BOOK = "book"
    DUMBBELL = "dumbbell"
    MONITOR = "monitor"
    HEADPHONES = "headphones"
    CAR = "car"
    HOME = "home"
    UTENSILS = "utensils"
    GAMEPAD = "gamepad"


# Palette offered by the category editor
PREDEFINED_COLORS = [
    "#3B82F6", "#6366F1", "#8B5CF6", "#10B981", "#F59E0B",
    "#EF4444", "#06B6D4", "#F97316", "#EC4899", "#6B7280",
]


# Grouping label for products. product_count is computed on read.
class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    color = Column(String(7), nullable=False, default=PREDEFINED_COLORS[0])
    icon = Column(Enum(CategoryIcon), nullable=False, default=CategoryIcon.PACKAGE)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.now(), nullable=False)
