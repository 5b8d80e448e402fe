"""
Display helpers: Turkish lira amounts, HTML escaping, composite entity labels
and route parameter parsing.

Every label helper returns HTML-safe text.
"""

from __future__ import annotations

import html
import re
from typing import Any, Optional

from ..data.models import Customer, Product

CURRENCY_SYMBOL = "₺"
MISSING = "–"
_ROUTE_ID = re.compile(r"[+-]?\d+(\.0*)?", re.ASCII)


def escape_html(value: Any) -> str:
    """Escape & < > " ' for interpolation into markup. None renders empty."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def format_try(value: Optional[float]) -> str:
    """Format an amount the way the tr-TR locale renders TRY: ₺1.234,50."""
    if value is None or isinstance(value, bool):
        return MISSING
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return MISSING
    if numeric != numeric:
        return MISSING

    formatted = f"{abs(numeric):,.2f}"
    # swap separators: 1,234.50 -> 1.234,50
    formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if numeric < 0 and formatted.strip("0.,") else ""
    return f"{sign}{CURRENCY_SYMBOL}{formatted}"


def placeholder(key: Any, prefix: str = "#") -> str:
    return f"{prefix}{escape_html(key)}"


def customer_label(customer: Optional[Customer], customer_id: Any, with_city: bool = True) -> str:
    if customer is None:
        return placeholder(customer_id)
    if with_city:
        return f"{escape_html(customer.customer_name)} ({escape_html(customer.city)})"
    return escape_html(customer.customer_name)


def _brand_model(product: Product) -> str:
    return f"{escape_html(product.brand)} {escape_html(product.model)}"


def product_label(product: Optional[Product], product_id: Any) -> str:
    if product is None:
        return placeholder(product_id)
    return _brand_model(product)


def product_label_with_id(product: Optional[Product], product_id: Any, fallback_prefix: str = "Product ") -> str:
    if product is None:
        return placeholder(product_id, prefix=fallback_prefix)
    return f"{_brand_model(product)} (ID {escape_html(product_id)})"


def product_label_with_warranty(product: Optional[Product], product_id: Any) -> str:
    if product is None:
        return placeholder(product_id)
    return f"{_brand_model(product)} (Warranty: {escape_html(product.warranty_period)} mo)"


def parse_route_id(raw: Optional[str]) -> Optional[int]:
    """Parse the `id` query parameter. Absent, blank, zero or non-numeric -> None.

    Only ASCII digits are accepted; a zero fraction such as "1.0" is allowed.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not _ROUTE_ID.fullmatch(text):
        return None
    return int(text.split(".")[0]) or None
