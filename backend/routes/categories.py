# backend/routes/categories.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.category import Category, CategoryIcon, PREDEFINED_COLORS
from models.product import Product
from utils.errors import fetch_failed, log_success, mutation_failed
from utils.stock_rules import matches_query
import schemas.category as category_schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])


def _client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def _get_or_404(db: Session, category_id: str) -> Category:
    try:
        category = db.query(Category).filter(Category.id == category_id).first()
    except SQLAlchemyError:
        raise fetch_failed(db, "categories")
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


def _count_products(db: Session, category_id: str) -> int:
    return db.query(Product).filter(Product.category_id == category_id).count()


def _out(category: Category, product_count: int) -> category_schemas.CategoryOut:
    return category_schemas.CategoryOut(
        id=category.id,
        name=category.name,
        description=category.description,
        color=category.color,
        icon=category.icon,
        created_at=category.created_at,
        product_count=product_count,
    )


@router.get("", response_model=List[category_schemas.CategoryOut])
def list_categories(
    q: Optional[str] = Query(None, description="Search name or description"),
    order_by: str = Query("name", pattern="^(name|created_at)$"),
    db: Session = Depends(get_db),
):
    sort_col = Category.name.asc() if order_by == "name" else Category.created_at.desc()
    try:
        rows = db.query(Category).order_by(sort_col).all()
        counts = dict(
            db.query(Product.category_id, func.count(Product.id))
            .filter(Product.category_id.isnot(None))
            .group_by(Product.category_id)
            .all()
        )
    except SQLAlchemyError:
        raise fetch_failed(db, "categories")

    return [_out(c, counts.get(c.id, 0)) for c in rows if matches_query(q, c)]


@router.get("/options", response_model=category_schemas.CategoryOptions)
def get_category_options():
    return {"colors": PREDEFINED_COLORS, "icons": list(CategoryIcon)}


@router.get("/{category_id}", response_model=category_schemas.CategoryOut)
def get_category(category_id: str, db: Session = Depends(get_db)):
    category = _get_or_404(db, category_id)
    try:
        count = _count_products(db, category.id)
    except SQLAlchemyError:
        raise fetch_failed(db, "categories")
    return _out(category, count)


@router.get("/{category_id}/product-count", response_model=category_schemas.CategoryProductCount)
def count_products_by_category(category_id: str, db: Session = Depends(get_db)):
    # Counting does not require the category to exist
    try:
        count = _count_products(db, category_id)
    except SQLAlchemyError:
        raise fetch_failed(db, "products")
    return {"category_id": category_id, "product_count": count}


@router.post("", response_model=category_schemas.CategoryOut, status_code=201)
def create_category(
    payload: category_schemas.CategoryCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    try:
        category = Category(**payload.model_dump())
        db.add(category)
        db.commit()
        db.refresh(category)
    except SQLAlchemyError:
        raise mutation_failed(db, "categories", "CATEGORY_CREATE", meta={"name": payload.name})

    log_success(
        db, action="CATEGORY_CREATE", resource="categories",
        ip=_client_ip(request), meta={"id": category.id, "name": category.name},
    )
    return _out(category, 0)


@router.put("/{category_id}", response_model=category_schemas.CategoryOut)
def update_category(
    category_id: str,
    payload: category_schemas.CategoryUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    category = _get_or_404(db, category_id)

    try:
        for key, value in payload.model_dump().items():
            setattr(category, key, value)
        db.commit()
        db.refresh(category)
        count = _count_products(db, category.id)
    except SQLAlchemyError:
        raise mutation_failed(db, "categories", "CATEGORY_UPDATE", meta={"id": category_id})

    log_success(
        db, action="CATEGORY_UPDATE", resource="categories",
        ip=_client_ip(request), meta={"id": category.id},
    )
    return _out(category, count)


@router.delete("/{category_id}", response_model=category_schemas.CategoryDeleteResult)
def delete_category(category_id: str, request: Request, db: Session = Depends(get_db)):
    category = _get_or_404(db, category_id)
    cid, cname = category.id, category.name

    try:
        orphaned = _count_products(db, cid)
        db.delete(category)
        db.commit()
    except SQLAlchemyError:
        raise mutation_failed(db, "categories", "CATEGORY_DELETE", meta={"id": cid})

    if orphaned:
        logger.warning("Category %s deleted while %d products still reference it", cid, orphaned)

    log_success(
        db, action="CATEGORY_DELETE", resource="categories",
        ip=_client_ip(request), meta={"id": cid, "orphaned_products": orphaned},
    )
    return {"detail": f"Category '{cname}' deleted", "orphaned_products": orphaned}
