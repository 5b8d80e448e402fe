#!/usr/bin/env python3
"""
seed_data.py

Generates fake storefront data as JSON arrays under a local folder (default: data).
Field names follow the published dataset format (PascalCase), so the output
can be served as-is by the file or HTTP data sources.

Entities:
- customers, products, orders, order_items, payments, deliveries, service_requests

Run:
  python -m storefront.data.seed_data --scale small --seed 42
"""

from __future__ import annotations
import argparse
import json
import os
import random
import string
import sys
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from ..config import get_config
from ..logging_config import get_logger

logger = get_logger(__name__)

# -----------------------------
# Config & helper structures
# -----------------------------

CITIES = ["İstanbul", "Ankara", "İzmir", "Bursa", "Antalya", "Konya", "Adana", "Eskişehir", "Trabzon", "Kayseri"]

FIRST_NAMES = ["Ayşe", "Mehmet", "Fatma", "Ahmet", "Zeynep", "Mustafa", "Elif", "Emre", "Selin", "Burak", "Deniz", "Can"]
LAST_NAMES = ["Yılmaz", "Kaya", "Demir", "Şahin", "Çelik", "Yıldız", "Aydın", "Öztürk", "Arslan", "Doğan"]

MODELS_BY_BRAND = {
    "Arçelik": ["Buzdolabı 570", "Çamaşır Makinesi 9120", "Bulaşık Makinesi 6344"],
    "Vestel": ["Smart TV 55U", "Buzdolabı NF600", "Klima Flexy 12"],
    "Samsung": ["Galaxy S24", "QLED Q80", "Bespoke Jet"],
    "Apple": ["iPhone 15", "MacBook Air 13", "iPad Air"],
    "Bosch": ["Serie 6 Fırın", "Serie 4 Kurutucu", "Unlimited 7"],
    "Philips": ["Airfryer XXL", "Series 7000 Tıraş", "Hue Starter Kit"],
}
WARRANTY_MONTHS = [12, 24, 24, 36]

ORDER_STATUSES = ["Pending", "Processing", "Shipped", "Delivered", "Cancelled"]
ORDER_STATUS_WEIGHTS = [0.08, 0.12, 0.2, 0.52, 0.08]
PAYMENT_METHODS = ["Credit Card", "Bank Transfer", "Cash on Delivery", "Debit Card"]
SHIPPING_COMPANIES = ["Yurtiçi Kargo", "Aras Kargo", "MNG Kargo", "PTT Kargo", "Sürat Kargo"]
SERVICE_STATUSES = ["Open", "In Progress", "Closed"]
ISSUES = [
    "Device does not power on",
    "Screen flickers after a few minutes",
    "Unusual noise during operation",
    "Water leaking from the bottom",
    "Battery drains quickly",
    "Remote control not responding",
    "Door seal damaged on arrival",
]

@dataclass
class Scale:
    customers: int
    stores: int
    orders: int
    service_requests: int

SCALES: Dict[str, Scale] = {
    "small":  Scale(50,    5,    200,    60),
    "medium": Scale(1_000, 25,  5_000,  1_200),
    "large":  Scale(10_000, 80, 50_000, 12_000),
}

DATASETS = ["customers", "products", "orders", "order_items", "payments", "deliveries", "service_requests"]


# -----------------------------
# Utility functions
# -----------------------------

def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def price_round(p: float) -> float:
    return round(max(p, 0.01), 2)

def tracking_number(rnd: random.Random) -> str:
    return "TR" + "".join(rnd.choices(string.digits, k=10))


# -----------------------------
# Core generators
# -----------------------------

def gen_customers(n: int, rnd: random.Random) -> List[Dict]:
    return [
        {
            "CustomerID": i,
            "CustomerName": f"{rnd.choice(FIRST_NAMES)} {rnd.choice(LAST_NAMES)}",
            "City": rnd.choice(CITIES),
        }
        for i in range(1, n + 1)
    ]

def gen_products(rnd: random.Random) -> Tuple[List[Dict], Dict[int, float]]:
    """One product per brand/model pair; also returns list prices by ProductID."""
    products = []
    prices: Dict[int, float] = {}
    product_id = 1
    for brand, models in MODELS_BY_BRAND.items():
        for model in models:
            products.append({
                "ProductID": product_id,
                "Brand": brand,
                "Model": model,
                "WarrantyPeriod": rnd.choice(WARRANTY_MONTHS),
            })
            prices[product_id] = price_round(rnd.uniform(1_500, 65_000))
            product_id += 1
    return products, prices

def gen_orders_and_items(
    n: int,
    stores: int,
    customers: List[Dict],
    prices: Dict[int, float],
    start_d: date,
    days: int,
    rnd: random.Random,
) -> Tuple[List[Dict], List[Dict]]:
    orders: List[Dict] = []
    items: List[Dict] = []
    product_ids = list(prices)

    for order_id in range(1, n + 1):
        order_date = start_d + timedelta(days=rnd.randint(0, max(0, days - 1)))
        basket = rnd.sample(product_ids, k=min(len(product_ids), 1 + int(abs(rnd.gauss(0.5, 1.0)))))

        total = 0.0
        for pid in basket:
            qty = 1 if rnd.random() < 0.8 else rnd.randint(2, 3)
            unit_price = prices[pid]
            items.append({
                "OrderID": order_id,
                "ProductID": pid,
                "Quantity": qty,
                "UnitPrice": unit_price,
            })
            total += unit_price * qty

        orders.append({
            "OrderID": order_id,
            "CustomerID": rnd.choice(customers)["CustomerID"],
            "StoreID": rnd.randint(1, stores),
            "OrderDate": order_date.isoformat(),
            "Status": rnd.choices(ORDER_STATUSES, weights=ORDER_STATUS_WEIGHTS)[0],
            "TotalAmount": price_round(total),
        })
    return orders, items

def gen_payments(orders: List[Dict], rnd: random.Random) -> List[Dict]:
    # Pending and cancelled orders carry no payment
    return [
        {
            "OrderID": o["OrderID"],
            "PaymentMethod": rnd.choices(PAYMENT_METHODS, weights=[0.6, 0.15, 0.1, 0.15])[0],
            "Amount": o["TotalAmount"],
        }
        for o in orders
        if o["Status"] not in ("Pending", "Cancelled")
    ]

def gen_deliveries(orders: List[Dict], rnd: random.Random) -> List[Dict]:
    deliveries = []
    for o in orders:
        if o["Status"] == "Shipped":
            status = "In Transit"
        elif o["Status"] == "Delivered":
            status = "Delivered"
        else:
            continue
        deliveries.append({
            "OrderID": o["OrderID"],
            "ShippingCompany": rnd.choice(SHIPPING_COMPANIES),
            "TrackingNumber": tracking_number(rnd),
            "Status": status,
        })
    return deliveries

def gen_service_requests(
    n: int,
    orders: List[Dict],
    items: List[Dict],
    end_d: date,
    rnd: random.Random,
) -> List[Dict]:
    """Service requests for products customers actually bought."""
    customer_by_order = {o["OrderID"]: o["CustomerID"] for o in orders if o["Status"] == "Delivered"}
    purchases = [(customer_by_order[i["OrderID"]], i["ProductID"]) for i in items if i["OrderID"] in customer_by_order]
    if not purchases:
        return []

    requests = []
    for service_id in range(1, n + 1):
        customer_id, product_id = rnd.choice(purchases)
        requests.append({
            "ServiceID": service_id,
            "CustomerID": customer_id,
            "ProductID": product_id,
            "Status": rnd.choices(SERVICE_STATUSES, weights=[0.3, 0.25, 0.45])[0],
            "RequestDate": (end_d - timedelta(days=rnd.randint(0, 30))).isoformat(),
            "IssueDescription": rnd.choice(ISSUES),
        })
    return requests


def generate(scale: Scale, seed: int, start_d: date, days: int) -> Dict[str, List[Dict]]:
    """Build every dataset in memory; deterministic for a given seed and window."""
    rnd = random.Random(seed)
    customers = gen_customers(scale.customers, rnd)
    products, prices = gen_products(rnd)
    orders, items = gen_orders_and_items(scale.orders, scale.stores, customers, prices, start_d, days, rnd)
    end_d = start_d + timedelta(days=days - 1)
    return {
        "customers": customers,
        "products": products,
        "orders": orders,
        "order_items": items,
        "payments": gen_payments(orders, rnd),
        "deliveries": gen_deliveries(orders, rnd),
        "service_requests": gen_service_requests(scale.service_requests, orders, items, end_d, rnd),
    }


# -----------------------------
# JSON writer
# -----------------------------

def write_json(path: str, rows: List[Dict]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(rows, f, ensure_ascii=False, indent=2)


# -----------------------------
# Main
# -----------------------------

def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Generate fake storefront datasets as JSON.")
    parser.add_argument("--scale", choices=SCALES.keys(), default=config.default_seed_scale)
    parser.add_argument("--days", type=int, default=config.default_seed_days, help="Number of days of order history.")
    parser.add_argument("--start-date", type=str, default=None, help="YYYY-MM-DD (defaults to today - days + 1)")
    parser.add_argument("--output-dir", type=str, default=config.data_dir)
    parser.add_argument("--seed", type=int, default=config.default_seed_value)
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if JSON files already exist.")
    args = parser.parse_args(argv)

    if args.days < 1:
        parser.error("--days must be at least 1")

    outdir = args.output_dir
    ensure_dir(outdir)

    files = {name: os.path.join(outdir, f"{name}.json") for name in DATASETS}
    if args.no_overwrite:
        for p in files.values():
            if os.path.exists(p):
                print(f"Refusing to overwrite existing file: {p}", file=sys.stderr)
                return 2

    if args.start_date:
        start_d = date.fromisoformat(args.start_date)
    else:
        start_d = datetime.now(timezone.utc).date() - timedelta(days=args.days - 1)

    datasets = generate(SCALES[args.scale], args.seed, start_d, args.days)
    for name, rows in datasets.items():
        write_json(files[name], rows)

    logger.info(f"Generated data in {outdir}")
    logger.info(" | ".join(f"{name}: {len(rows)}" for name, rows in datasets.items()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
