import pytest

from utils.stock_rules import (
    IN_STOCK, LOW_STOCK, OUT_OF_STOCK, OVERSTOCKED,
    build_dashboard_stats, matches_query, needs_restock, profit_margin,
    simple_stock_status, stock_status,
)


@pytest.mark.parametrize("quantity,min_level,max_level,expected,percentage", [
    (0, 0, 0, OUT_OF_STOCK, 0),
    (0, 5, 100, OUT_OF_STOCK, 0),
    (3, 5, 100, LOW_STOCK, 25),
    (5, 5, 100, LOW_STOCK, 25),
    (100, 5, 100, OVERSTOCKED, 100),
    (150, 5, 100, OVERSTOCKED, 100),
    (50, 5, 100, IN_STOCK, 50),
    (6, 5, 1000, IN_STOCK, 0.6),
])
def test_stock_status(quantity, min_level, max_level, expected, percentage):
    result = stock_status(quantity, min_level, max_level)
    assert result.status == expected
    assert result.percentage == pytest.approx(percentage)


def test_stock_status_always_one_of_four():
    allowed = {OUT_OF_STOCK, LOW_STOCK, OVERSTOCKED, IN_STOCK}
    for max_level in range(0, 6):
        for min_level in range(0, max_level + 1):
            for quantity in range(0, 8):
                result = stock_status(quantity, min_level, max_level)
                assert result.status in allowed
                assert 0 <= result.percentage <= 100
                if quantity == 0:
                    assert result.status == OUT_OF_STOCK


def test_quantity_equal_to_both_thresholds_is_low_stock():
    assert stock_status(7, 7, 7).status == LOW_STOCK


def test_simple_stock_status_has_no_overstock():
    assert simple_stock_status(0, 5).status == OUT_OF_STOCK
    assert simple_stock_status(5, 5).status == LOW_STOCK
    result = simple_stock_status(5000, 5)
    assert result.status == IN_STOCK
    assert result.percentage is None


def test_classifiers_can_disagree():
    assert stock_status(200, 5, 100).status == OVERSTOCKED
    assert simple_stock_status(200, 5).status == IN_STOCK


def test_status_variants():
    assert stock_status(0, 5, 10).variant == "destructive"
    assert stock_status(2, 5, 10).variant == "warning"
    assert stock_status(20, 5, 10).variant == "success"


def test_needs_restock():
    assert needs_restock(0, 0)
    assert needs_restock(5, 5)
    assert not needs_restock(6, 5)


@pytest.mark.parametrize("price,cost,expected", [
    (150, 100, 50),
    (100, 100, 0),
    (80, 100, -20),
    (99, 0, 0),
    (0, 0, 0),
])
def test_profit_margin(price, cost, expected):
    assert profit_margin(price, cost) == pytest.approx(expected)


def test_dashboard_stats_empty():
    assert build_dashboard_stats([], []) == {
        "total_products": 0,
        "total_categories": 0,
        "low_stock_products": 0,
        "total_value": 0,
        "average_price": 0,
    }


def test_dashboard_stats_example():
    products = [
        {"price": 10, "stock_quantity": 5, "min_stock_level": 2},
        {"price": 20, "stock_quantity": 0, "min_stock_level": 1},
    ]
    stats = build_dashboard_stats(products, [{"id": "a"}])
    assert stats["total_products"] == 2
    assert stats["total_categories"] == 1
    assert stats["low_stock_products"] == 1
    assert stats["total_value"] == 50
    assert stats["average_price"] == 15


def test_dashboard_stats_tolerates_missing_fields():
    stats = build_dashboard_stats([{"price": None}, {}], [])
    assert stats["total_products"] == 2
    # Missing stock and minimum both read as 0, which counts as low stock
    assert stats["low_stock_products"] == 2
    assert stats["total_value"] == 0
    assert stats["average_price"] == 0


def test_dashboard_stats_is_idempotent():
    products = [
        {"price": 3.5, "stock_quantity": 4, "min_stock_level": 1},
        {"price": 12, "stock_quantity": 1, "min_stock_level": 3},
    ]
    categories = [{"id": "x"}, {"id": "y"}]
    assert build_dashboard_stats(products, categories) == build_dashboard_stats(products, categories)


def test_matches_query():
    product = {"name": "Product A", "sku": "SKU-77", "description": None}
    assert matches_query("Pro", product)
    assert matches_query("pRODUCT", product)
    assert matches_query("sku-7", product)
    assert not matches_query("xyz", product)
    assert matches_query("", product)
    assert matches_query(None, {"name": "anything"})
    assert matches_query("   ", product)
    assert matches_query("\t\n", {"name": "anything"})


def test_matches_query_on_description():
    category = {"name": "Books", "description": "Printed novels"}
    assert matches_query("novel", category)
    assert not matches_query("novel", {"name": "Books"})
