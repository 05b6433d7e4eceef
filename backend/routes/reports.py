# routes/reports.py
import json
from urllib.parse import quote
from datetime import date
from typing import Optional, List

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from schemas.reports import (
    LowStockPage, LowStockItem,
    MockStatistics, MonthlySales, CategoryShare, ReportSummary, ReportExport,
)
from utils.errors import fetch_failed
from utils.stock_rules import matches_query

router = APIRouter(prefix="/reports", tags=["Reports"])

# -----------------------------
# Placeholder report data
# -----------------------------
MOCK_STATISTICS = MockStatistics(
    total_sales=125000,
    total_products=45,
    low_stock=8,
    profit_margin=23.5,
    sales_change=12.3,
    product_change=5.2,
)

SALES_SERIES = [
    MonthlySales(month="January", sales=12000, profit=2400),
    MonthlySales(month="February", sales=19000, profit=3800),
    MonthlySales(month="March", sales=15000, profit=3000),
    MonthlySales(month="April", sales=25000, profit=5000),
    MonthlySales(month="May", sales=22000, profit=4400),
    MonthlySales(month="June", sales=30000, profit=6000),
]

CATEGORY_SHARES = [
    CategoryShare(name="Electronics", value=35, color="hsl(240 100% 67%)"),
    CategoryShare(name="Clothing", value=25, color="hsl(270 89% 65%)"),
    CategoryShare(name="Books", value=20, color="hsl(25 95% 53%)"),
    CategoryShare(name="Other", value=20, color="hsl(142 71% 45%)"),
]


@router.get("/summary", response_model=ReportSummary)
def report_summary():
    return ReportSummary(statistics=MOCK_STATISTICS, sales=SALES_SERIES, categories=CATEGORY_SHARES)


def build_report_export(report_type: str, today: Optional[date] = None) -> ReportExport:
    return ReportExport(
        report_date=today or date.today(),
        report_type=report_type,
        total_sales=MOCK_STATISTICS.total_sales,
        total_products=MOCK_STATISTICS.total_products,
        low_stock=MOCK_STATISTICS.low_stock,
        profit_margin=MOCK_STATISTICS.profit_margin,
        sales=SALES_SERIES,
    )


def _content_disposition(filename: str) -> str:
    # Header values are latin-1; non-ASCII names travel in filename*
    fallback = filename.encode("ascii", "ignore").decode("ascii").replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quote(filename)}"


@router.get("/export/{report_type}")
def export_report(report_type: str):
    report = build_report_export(report_type)
    body = json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False)
    filename = f"report_{report_type}_{report.report_date.isoformat()}.json"
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": _content_disposition(filename)},
    )

# -----------------------------
# Low stock (live data)
# -----------------------------
@router.get("/low-stock", response_model=LowStockPage)
def report_low_stock(
    q: Optional[str] = Query(None, description="Search name, SKU or description"),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    try:
        rows = (db.query(Product)
                .filter(Product.stock_quantity <= Product.min_stock_level)
                .order_by(Product.stock_quantity.asc(), Product.name.asc())
                .all())
    except SQLAlchemyError:
        raise fetch_failed(db, "products")

    matched = [p for p in rows if matches_query(q, p)]
    start = (page - 1) * page_size

    items: List[LowStockItem] = [
        LowStockItem(
            product_id=p.id,
            name=p.name,
            sku=p.sku,
            stock_quantity=p.stock_quantity or 0,
            min_stock_level=p.min_stock_level or 0,
        )
        for p in matched[start:start + page_size]
    ]
    return {"items": items, "total": len(matched), "page": page, "page_size": page_size}
