# backend/routes/products.py
import logging
from typing import Optional, List

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from utils.errors import fetch_failed, log_success, mutation_failed
from utils.stock_rules import (
    matches_query, needs_restock, profit_margin, simple_stock_status, stock_status
)
from models.product import Product
from models.category import Category  # noqa: F401  (mapper for Product.category)
import schemas.product as product_schemas

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])


# ---- HELPERS ----
def _client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def _get_or_404(db: Session, product_id: str) -> Product:
    try:
        product = db.query(Product).filter(Product.id == product_id).first()
    except SQLAlchemyError:
        raise fetch_failed(db, "products")
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def _list_item(p: Product) -> product_schemas.ProductListItem:
    status = simple_stock_status(p.stock_quantity, p.min_stock_level)
    data = product_schemas.ProductOut.model_validate(p).model_dump()
    return product_schemas.ProductListItem(
        **data,
        stock_status=status.status,
        stock_variant=status.variant,
        needs_restock=needs_restock(p.stock_quantity, p.min_stock_level),
    )


# =========================
# PRODUCT LIST
# =========================
@router.get("/products", response_model=product_schemas.ProductListPage)
def list_products(
    q: Optional[str] = Query(None, description="Search name, SKU or description"),
    category_id: Optional[str] = Query(None),
    is_active: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
):
    query = db.query(Product)
    if category_id:
        query = query.filter(Product.category_id == category_id)
    if is_active is not None:
        query = query.filter(Product.is_active == is_active)

    try:
        rows: List[Product] = query.order_by(Product.created_at.desc()).all()
    except SQLAlchemyError:
        raise fetch_failed(db, "products")

    # Free-text search runs over the fetched rows
    items = [_list_item(p) for p in rows if matches_query(q, p)]
    return {"items": items, "total": len(items)}


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/products/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    return _get_or_404(db, product_id)


@router.get("/products/{product_id}/details", response_model=product_schemas.ProductDetails)
def get_product_details(product_id: str, db: Session = Depends(get_db)):
    p = _get_or_404(db, product_id)

    status = stock_status(p.stock_quantity, p.min_stock_level, p.max_stock_level)
    data = product_schemas.ProductOut.model_validate(p).model_dump()
    return product_schemas.ProductDetails(
        **data,
        stock_status=status.status,
        stock_variant=status.variant,
        stock_percentage=status.percentage,
        needs_restock=needs_restock(p.stock_quantity, p.min_stock_level),
        profit_margin=round(profit_margin(p.price, p.cost_price or 0), 1),
    )


# =========================
# CREATE
# =========================
@router.post("/products", response_model=product_schemas.ProductOut, status_code=201)
def add_product(
    payload: product_schemas.ProductCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    try:
        new_product = Product(**payload.model_dump())
        db.add(new_product)
        db.commit()
        db.refresh(new_product)
    except SQLAlchemyError:
        raise mutation_failed(db, "products", "PRODUCT_CREATE", meta={"sku": payload.sku})

    log_success(
        db, action="PRODUCT_CREATE", resource="products",
        ip=_client_ip(request), meta={"id": new_product.id, "sku": new_product.sku},
    )
    logger.info("Created product %s (%s)", new_product.id, new_product.sku)
    return new_product


# =========================
# UPDATE (PUT - full replace)
# =========================
@router.put("/products/{product_id}", response_model=product_schemas.ProductOut)
def update_product(
    product_id: str,
    payload: product_schemas.ProductUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    product = _get_or_404(db, product_id)

    try:
        for key, value in payload.model_dump().items():
            setattr(product, key, value)
        db.commit()
        db.refresh(product)
    except SQLAlchemyError:
        raise mutation_failed(db, "products", "PRODUCT_UPDATE", meta={"id": product_id})

    log_success(
        db, action="PRODUCT_UPDATE", resource="products",
        ip=_client_ip(request), meta={"id": product.id},
    )
    return product


# =========================
# DELETE
# =========================
@router.delete("/products/{product_id}")
def delete_product(product_id: str, request: Request, db: Session = Depends(get_db)):
    product = _get_or_404(db, product_id)
    pid, pname = product.id, product.name

    try:
        db.delete(product)
        db.commit()
    except SQLAlchemyError:
        raise mutation_failed(db, "products", "PRODUCT_DELETE", meta={"id": pid})

    log_success(
        db, action="PRODUCT_DELETE", resource="products",
        ip=_client_ip(request), meta={"id": pid},
    )
    return {"detail": f"Product '{pname}' deleted"}
