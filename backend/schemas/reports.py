# schemas/reports.py
from datetime import date
from typing import List, Optional
from pydantic import BaseModel

# Schemas for low stock alerting
class LowStockItem(BaseModel):
    product_id: str
    name: str
    sku: str
    stock_quantity: int
    min_stock_level: int

class LowStockPage(BaseModel):
    items: List[LowStockItem]
    total: int
    page: int
    page_size: int

# Placeholder figures; not derived from products or categories
class MockStatistics(BaseModel):
    total_sales: float
    total_products: int
    low_stock: int
    profit_margin: float
    sales_change: float
    product_change: float

class MonthlySales(BaseModel):
    month: str
    sales: float
    profit: float

class CategoryShare(BaseModel):
    name: str
    value: float
    color: str

class ReportSummary(BaseModel):
    statistics: MockStatistics
    sales: List[MonthlySales]
    categories: List[CategoryShare]

class ReportExport(BaseModel):
    report_date: date
    report_type: str
    total_sales: float
    total_products: int
    low_stock: int
    profit_margin: float
    sales: List[MonthlySales]
