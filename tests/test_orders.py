from __future__ import annotations

import pytest

from fabric_dashboard.models.order import FabricOrder
from fabric_dashboard.orders.queries import classify_status, compute_stats, search_orders
from fabric_dashboard.orders.sample_data import SAMPLE_ORDERS


def test_empty_search_returns_everything():
    assert search_orders(SAMPLE_ORDERS, "") == SAMPLE_ORDERS


def test_search_is_case_insensitive_across_fields():
    assert [o.model_name for o in search_orders(SAMPLE_ORDERS, "light green")] == ["LORES", "BEGOR"]
    assert [o.id for o in search_orders(SAMPLE_ORDERS, "802482")] == ["4"]


def test_search_matches_numeric_fields_as_text():
    assert [o.id for o in search_orders(SAMPLE_ORDERS, "161.5")] == ["4"]


def test_whole_number_fields_match_without_decimal_suffix():
    assert [o.id for o in search_orders(SAMPLE_ORDERS, "266")] == ["1"]
    assert search_orders(SAMPLE_ORDERS, "266.0") == []
    assert search_orders(SAMPLE_ORDERS, "161.0") == []


def test_search_without_match():
    assert search_orders(SAMPLE_ORDERS, "kadife") == []


@pytest.mark.parametrize(
    ("status", "kind"),
    [
        ("OK", "ok"),
        ("PP İŞLEMDE", "in_progress"),
        ("12.03 PP YAPILACAK", "pending"),
        ("", "other"),
        ("ok", "other"),
    ],
)
def test_classify_status(status, kind):
    assert classify_status(status) == kind


def test_stats_over_sample_orders():
    stats = compute_stats(SAMPLE_ORDERS)
    assert stats.total_orders == 5
    assert stats.total_requirement_kg == 1827
    assert stats.unique_fabrics == 5
    assert stats.average_price == pytest.approx(156.9)


def test_average_price_ignores_unpriced_orders():
    unpriced = SAMPLE_ORDERS[0].model_copy(update={"id": "9", "price": None})
    stats = compute_stats([SAMPLE_ORDERS[2], unpriced])
    assert stats.average_price == 138


def test_stats_without_prices():
    order = FabricOrder(
        id="1",
        model_name="X",
        order_no="1",
        order_deadline="",
        season="S1",
        quality="KADİFE DÜZ BOYA",
        usage_area="ANA BEDEN",
        color="RED",
        fabric_code="1",
        order_quantity=10,
        requirement_kg=2.5,
        supplier="BOYBO",
    )
    stats = compute_stats([order])
    assert stats.average_price is None
    assert stats.total_requirement_kg == 2.5
