# backend/routes/stats.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import List

from config import settings
from database import get_db
from models.product import Product
from models.category import Category
from schemas.navigation import NavigationCommand
from utils.errors import fetch_failed
from utils.navigation import QUICK_ACTIONS, resolve_quick_action
from utils.stock_rules import build_dashboard_stats, simple_stock_status

router = APIRouter(
    prefix="/stats",
    tags=["Stats"]
)

# === Pydantic Response Schemas ===

class DashboardStats(BaseModel):
    total_products: int
    total_categories: int
    low_stock_products: int
    total_value: float
    average_price: float

class RecentProduct(BaseModel):
    id: str
    name: str
    sku: str
    stock_quantity: int
    min_stock_level: int
    price: float
    stock_status: str
    stock_variant: str

class QuickAction(BaseModel):
    action: str
    command: NavigationCommand

class DashboardSummary(BaseModel):
    stats: DashboardStats
    recent_products: List[RecentProduct]
    quick_actions: List[QuickAction]


def _recent(p: Product) -> RecentProduct:
    status = simple_stock_status(p.stock_quantity, p.min_stock_level)
    return RecentProduct(
        id=p.id,
        name=p.name,
        sku=p.sku,
        stock_quantity=p.stock_quantity,
        min_stock_level=p.min_stock_level,
        price=p.price,
        stock_status=status.status,
        stock_variant=status.variant,
    )


# === Endpoint 1: Dashboard Summary ===

@router.get("/summary", response_model=DashboardSummary)
def get_stats_summary(db: Session = Depends(get_db)):
    try:
        products = db.query(Product).order_by(Product.created_at.desc()).all()
        categories = db.query(Category.id).all()
    except SQLAlchemyError:
        raise fetch_failed(db, "dashboard")

    stats = build_dashboard_stats(products, categories)

    return DashboardSummary(
        stats=DashboardStats(**stats),
        recent_products=[_recent(p) for p in products[:settings.RECENT_PRODUCTS_LIMIT]],
        quick_actions=[QuickAction(action=a, command=c) for a, c in QUICK_ACTIONS.items()],
    )

# === Endpoint 2: Quick action resolution ===

@router.get("/quick-actions/{action}", response_model=NavigationCommand)
def get_quick_action(action: str):
    command = resolve_quick_action(action)
    if command is None:
        raise HTTPException(status_code=404, detail=f"Unknown action: {action}")
    return command
