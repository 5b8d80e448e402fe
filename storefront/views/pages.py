"""
Page render functions.

Each page has a pure `*_fragments` builder that turns loaded records into
`{container_id: html}` and an async `render_*` entry point that loads the
datasets, builds the fragments and only then writes them, so a failed load
or an unknown entity leaves every container untouched.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from ..data.indexing import build_primary_index, group_count, group_sum
from ..data.interface import DataSource
from ..data.joins import filter_by, find_first, join_one, lookup
from ..data.loader import load_datasets
from ..data.models import (
    Customer,
    Delivery,
    Order,
    OrderItem,
    Payment,
    Product,
    ServiceRequest,
)
from ..logging_config import get_logger
from .formatting import (
    customer_label,
    escape_html,
    format_try,
    parse_route_id,
    product_label,
    product_label_with_id,
    product_label_with_warranty,
)
from .renderer import Renderer

logger = get_logger(__name__)

Fragments = Dict[str, str]


def detail_href(page: str, entity_id: int) -> str:
    """Link to a detail page, escaped for use in an attribute."""
    return escape_html(f"?page={page}&id={entity_id}")


def _link(page: str, entity_id: int) -> str:
    return f'<a href="{detail_href(page, entity_id)}" target="_self">{escape_html(entity_id)}</a>'


def _write(renderer: Renderer, fragments: Fragments) -> None:
    for container_id, html in fragments.items():
        renderer.set_content(container_id, html)


# ---------- sales dashboard ----------

def dashboard_fragments(
    orders: Sequence[Order],
    payments: Sequence[Payment],
    deliveries: Sequence[Delivery],
) -> Fragments:
    revenue = sum(p.amount or 0 for p in payments)
    delivered = sum(1 for o in orders if o.status == "Delivered")
    in_transit = sum(1 for d in deliveries if d.status == "In Transit")

    status_counts = group_count(orders, "status")
    payment_sums = group_sum(payments, "payment_method", "amount")

    return {
        "totalOrders": str(len(orders)),
        "totalRevenue": format_try(revenue),
        "deliveredOrders": str(delivered),
        "inTransit": str(in_transit),
        "orderStatusList": "".join(
            f"<li>{escape_html(status)}: <strong>{count}</strong></li>"
            for status, count in status_counts.items()
        ),
        "paymentMethodList": "".join(
            f"<li>{escape_html(method)}: <strong>{format_try(amount)}</strong></li>"
            for method, amount in payment_sums.items()
        ),
    }


async def render_dashboard(source: DataSource, renderer: Renderer, params: Mapping[str, str]) -> None:
    orders, payments, deliveries = await load_datasets(source, "orders", "payments", "deliveries")
    _write(renderer, dashboard_fragments(orders, payments, deliveries))


# ---------- orders list ----------

def orders_fragments(orders: Sequence[Order], customers: Sequence[Customer]) -> Fragments:
    customer_by_id = build_primary_index(customers, "customer_id")
    rows = []
    for order, customer in join_one(orders, customer_by_id, "customer_id"):
        rows.append(
            "<tr>"
            f"<td>{_link('order', order.order_id)}</td>"
            f"<td>{customer_label(customer, order.customer_id)}</td>"
            f"<td>#{escape_html(order.store_id)}</td>"
            f"<td>{escape_html(order.order_date)}</td>"
            f"<td>{escape_html(order.status)}</td>"
            f'<td class="right">{format_try(order.total_amount)}</td>'
            "</tr>"
        )
    return {"ordersBody": "".join(rows)}


async def render_orders(source: DataSource, renderer: Renderer, params: Mapping[str, str]) -> None:
    orders, customers = await load_datasets(source, "orders", "customers")
    _write(renderer, orders_fragments(orders, customers))


# ---------- order detail ----------

def order_detail_fragments(
    order_id: int,
    orders: Sequence[Order],
    items: Sequence[OrderItem],
    payments: Sequence[Payment],
    deliveries: Sequence[Delivery],
    customers: Sequence[Customer],
    products: Sequence[Product],
) -> Optional[Fragments]:
    """Fragments for one order, or None when the order does not exist."""
    order = find_first(orders, "order_id", order_id)
    if order is None:
        return None

    customer_by_id = build_primary_index(customers, "customer_id")
    product_by_id = build_primary_index(products, "product_id")
    customer = lookup(customer_by_id, order.customer_id)

    info = (
        f"<h3>Order #{escape_html(order.order_id)}</h3>"
        f"<p>Status: <strong>{escape_html(order.status)}</strong></p>"
        f"<p>Customer: {customer_label(customer, order.customer_id)}</p>"
        f"<p>Total: <strong>{format_try(order.total_amount)}</strong></p>"
    )

    lines = []
    for item, product in join_one(filter_by(items, "order_id", order_id), product_by_id, "product_id"):
        label = product_label_with_id(product, item.product_id)
        lines.append(f"<li>{label} — {escape_html(item.quantity)} × {format_try(item.unit_price)}</li>")

    payment = find_first(payments, "order_id", order_id)
    if payment is not None:
        payment_html = (
            "<h3>Payment</h3>"
            f"<p>{escape_html(payment.payment_method)} — {format_try(payment.amount)}</p>"
        )
    else:
        payment_html = '<h3>Payment</h3><p class="muted">No payment record</p>'

    delivery = find_first(deliveries, "order_id", order_id)
    if delivery is not None:
        delivery_html = (
            "<h3>Delivery</h3>"
            f"<p>{escape_html(delivery.shipping_company)}</p>"
            f"<p>Tracking: {escape_html(delivery.tracking_number)}</p>"
            f"<p>Status: {escape_html(delivery.status)}</p>"
        )
    else:
        delivery_html = '<h3>Delivery</h3><p class="muted">No delivery record</p>'

    return {
        "orderInfo": info,
        "itemsList": "".join(lines),
        "paymentInfo": payment_html,
        "deliveryInfo": delivery_html,
    }


async def render_order_detail(source: DataSource, renderer: Renderer, params: Mapping[str, str]) -> None:
    order_id = parse_route_id(params.get("id"))
    if order_id is None:
        logger.debug("Order detail requested without a valid id")
        return

    datasets = await load_datasets(
        source, "orders", "order_items", "payments", "deliveries", "customers", "products"
    )
    fragments = order_detail_fragments(order_id, *datasets)
    if fragments is None:
        logger.debug(f"Order {order_id} not found")
        return
    _write(renderer, fragments)


# ---------- after-sales dashboard ----------

def service_dashboard_fragments(services: Sequence[ServiceRequest], products: Sequence[Product]) -> Fragments:
    product_by_id = build_primary_index(products, "product_id")
    by_product = group_count(services, "product_id")

    items: List[str] = []
    for product_id, count in by_product.items():
        label = product_label_with_id(lookup(product_by_id, product_id), product_id, fallback_prefix="Product #")
        items.append(f"<li>{label}: <strong>{count}</strong> request(s)</li>")

    return {
        "totalServices": str(len(services)),
        "openServices": str(sum(1 for s in services if s.status == "Open")),
        "progressServices": str(sum(1 for s in services if s.status == "In Progress")),
        "closedServices": str(sum(1 for s in services if s.status == "Closed")),
        "serviceByProduct": "".join(items),
    }


async def render_service_dashboard(source: DataSource, renderer: Renderer, params: Mapping[str, str]) -> None:
    services, products = await load_datasets(source, "service_requests", "products")
    _write(renderer, service_dashboard_fragments(services, products))


# ---------- service requests list ----------

def service_requests_fragments(
    services: Sequence[ServiceRequest],
    customers: Sequence[Customer],
    products: Sequence[Product],
) -> Fragments:
    customer_by_id = build_primary_index(customers, "customer_id")
    product_by_id = build_primary_index(products, "product_id")

    rows = []
    for s in services:
        customer = lookup(customer_by_id, s.customer_id)
        product = lookup(product_by_id, s.product_id)
        rows.append(
            "<tr>"
            f"<td>{_link('service', s.service_id)}</td>"
            f"<td>{customer_label(customer, s.customer_id, with_city=False)}</td>"
            f"<td>{product_label(product, s.product_id)}</td>"
            f"<td>{escape_html(s.request_date)}</td>"
            f"<td>{escape_html(s.status)}</td>"
            "</tr>"
        )
    return {"servicesBody": "".join(rows)}


async def render_service_requests(source: DataSource, renderer: Renderer, params: Mapping[str, str]) -> None:
    services, customers, products = await load_datasets(source, "service_requests", "customers", "products")
    _write(renderer, service_requests_fragments(services, customers, products))


# ---------- service detail ----------

def service_detail_fragments(
    service_id: int,
    services: Sequence[ServiceRequest],
    customers: Sequence[Customer],
    products: Sequence[Product],
) -> Optional[Fragments]:
    s = find_first(services, "service_id", service_id)
    if s is None:
        return None

    customer = lookup(build_primary_index(customers, "customer_id"), s.customer_id)
    product = lookup(build_primary_index(products, "product_id"), s.product_id)

    return {
        "serviceInfo": (
            f"<h3>Service Request #{escape_html(s.service_id)}</h3>"
            f"<p>Status: <strong>{escape_html(s.status)}</strong></p>"
            f"<p>Customer: {customer_label(customer, s.customer_id)}</p>"
            f"<p>Product: {product_label_with_warranty(product, s.product_id)}</p>"
            f"<p>Date: {escape_html(s.request_date)}</p>"
            '<h4 style="margin-top:14px;">Issue Description</h4>'
            f"<p>{escape_html(s.issue_description)}</p>"
        )
    }


async def render_service_detail(source: DataSource, renderer: Renderer, params: Mapping[str, str]) -> None:
    service_id = parse_route_id(params.get("id"))
    if service_id is None:
        logger.debug("Service detail requested without a valid id")
        return

    services, customers, products = await load_datasets(source, "service_requests", "customers", "products")
    fragments = service_detail_fragments(service_id, services, customers, products)
    if fragments is None:
        logger.debug(f"Service request {service_id} not found")
        return
    _write(renderer, fragments)
