# backend/utils/stock_rules.py
"""Inventory rules shared by the product, dashboard and report endpoints.

Everything here is a pure function of the values passed in. Records can be
ORM objects or plain mappings, so the same rules run over query results and
over request payloads.
"""
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

OUT_OF_STOCK = "out_of_stock"
LOW_STOCK = "low_stock"
OVERSTOCKED = "overstocked"
IN_STOCK = "in_stock"

# Badge variant the dashboard renders next to each status
STATUS_VARIANTS = {
    OUT_OF_STOCK: "destructive",
    LOW_STOCK: "warning",
    OVERSTOCKED: "success",
    IN_STOCK: "success",
}

# Fixed progress value shown for low stock, not proportional to quantity
LOW_STOCK_PERCENTAGE = 25.0


@dataclass(frozen=True)
class StockStatus:
    status: str
    percentage: Optional[float] = None

    @property
    def variant(self) -> str:
        return STATUS_VARIANTS[self.status]


def _field(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def stock_status(quantity: float, min_level: float, max_level: float) -> StockStatus:
    """Classify stock for the product detail view.

    First match wins: out of stock, low stock, overstocked, in stock.
    A quantity equal to both thresholds classifies as low stock.
    """
    if quantity == 0:
        return StockStatus(OUT_OF_STOCK, 0.0)
    if quantity <= min_level:
        return StockStatus(LOW_STOCK, LOW_STOCK_PERCENTAGE)
    if quantity >= max_level:
        return StockStatus(OVERSTOCKED, 100.0)
    return StockStatus(IN_STOCK, min(quantity / max_level * 100, 100.0))


def simple_stock_status(quantity: float, min_level: float) -> StockStatus:
    """Two-threshold variant used by list views: no overstock, no percentage."""
    if quantity == 0:
        return StockStatus(OUT_OF_STOCK)
    if quantity <= min_level:
        return StockStatus(LOW_STOCK)
    return StockStatus(IN_STOCK)


def needs_restock(quantity: float, min_level: float) -> bool:
    return quantity <= min_level


def profit_margin(price: float, cost_price: float) -> float:
    """Margin over cost in percent. A zero cost yields 0."""
    if cost_price == 0:
        return 0.0
    return (price - cost_price) / cost_price * 100


def is_low_stock(product: Any) -> bool:
    return needs_restock(_field(product, "stock_quantity", 0), _field(product, "min_stock_level", 0))


def build_dashboard_stats(products: Iterable[Any], categories: Iterable[Any]) -> dict:
    total_products = 0
    low_stock_products = 0
    total_value = 0.0
    price_sum = 0.0

    for p in products:
        price = _field(p, "price", 0)
        quantity = _field(p, "stock_quantity", 0)
        total_products += 1
        if is_low_stock(p):
            low_stock_products += 1
        total_value += price * quantity
        price_sum += price

    return {
        "total_products": total_products,
        "total_categories": sum(1 for _ in categories),
        "low_stock_products": low_stock_products,
        "total_value": total_value,
        "average_price": price_sum / total_products if total_products > 0 else 0.0,
    }


def matches_query(query: Optional[str], record: Any) -> bool:
    """Case-insensitive substring search over name, sku and description."""
    if not query or not query.strip():
        return True
    needle = query.strip().lower()
    for name in ("name", "sku", "description"):
        value = _field(record, name)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False
