import math

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st
from loguru import logger

from storefront.data.indexing import aggregate, build_primary_index, group_count, group_sum
from storefront.data.models import Order, Payment

group_keys = st.one_of(st.integers(min_value=-5, max_value=5), st.sampled_from(["Open", "Closed", "In Progress"]))
amounts = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.lists(st.integers(), unique=True))
def test_primary_index_round_trip(keys):
    """Every unique key resolves to its own record; other keys resolve to nothing."""
    records = [{"id": k, "payload": str(k)} for k in keys]
    index = build_primary_index(records, "id")
    for record in records:
        assert index[record["id"]] is record
    missing = max(keys, default=0) + 1
    assert index.get(missing) is None


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.lists(st.fixed_dictionaries({"group": group_keys})))
def test_count_totals_match_input_length(records):
    counts = aggregate(records, "group")
    assert sum(counts.values()) == len(records)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.lists(st.fixed_dictionaries({"group": group_keys, "amount": amounts})))
def test_sum_totals_match_input_total(records):
    sums = aggregate(records, "group", "amount")
    expected = math.fsum(r["amount"] for r in records)
    assert sum(sums.values()) == pytest.approx(expected, rel=1e-9, abs=1e-3)


def test_aggregate_preserves_first_appearance_order():
    records = [{"s": "Shipped"}, {"s": "Delivered"}, {"s": "Shipped"}, {"s": "Cancelled"}, {"s": "Delivered"}]
    counts = group_count(records, "s")
    assert list(counts) == ["Shipped", "Delivered", "Cancelled"]
    assert counts == {"Shipped": 2, "Delivered": 2, "Cancelled": 1}


def test_group_sum_over_models():
    payments = [
        Payment(OrderID=1, PaymentMethod="Credit Card", Amount=100.5),
        Payment(OrderID=2, PaymentMethod="Bank Transfer", Amount=50),
        Payment(OrderID=3, PaymentMethod="Credit Card", Amount=20),
    ]
    assert group_sum(payments, "payment_method", "amount") == {"Credit Card": 120.5, "Bank Transfer": 50.0}


def test_aggregate_returns_python_scalars():
    orders = [Order(OrderID=1, StoreID=3), Order(OrderID=2, StoreID=3), Order(OrderID=3, StoreID=4)]
    counts = group_count(orders, "store_id")
    assert counts == {3: 2, 4: 1}
    assert all(type(k) is int and type(v) is int for k, v in counts.items())


def test_aggregate_missing_group_value_collects_under_none():
    orders = [Order(OrderID=1, Status="Delivered"), Order(OrderID=2), Order(OrderID=3)]
    assert group_count(orders, "status") == {"Delivered": 1, None: 2}


def test_aggregate_raw_records_without_group_field():
    rows = [{"Status": "Open"}, {"ServiceID": 2}, {"Status": "Open", "Cost": 10}, {"Cost": 5}]
    assert group_count(rows, "Status") == {"Open": 2, None: 2}
    assert group_sum(rows, "Status", "Cost") == {"Open": 10.0, None: 5.0}


def test_aggregate_empty_input():
    assert aggregate([], "group") == {}
    assert aggregate([], "group", "value") == {}


def test_duplicate_keys_last_write_wins_and_warns():
    messages = []
    sink_id = logger.add(messages.append, level="WARNING")
    try:
        first = {"id": 1, "name": "first"}
        second = {"id": 1, "name": "second"}
        index = build_primary_index([first, second], "id")
    finally:
        logger.remove(sink_id)
    assert index == {1: second}
    assert any("duplicate" in str(m) for m in messages)
