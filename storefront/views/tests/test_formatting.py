import pytest

from storefront.data.models import Customer, Product
from storefront.views.formatting import (
    customer_label,
    escape_html,
    format_try,
    parse_route_id,
    product_label,
    product_label_with_id,
    product_label_with_warranty,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234.5, "₺1.234,50"),
        (100, "₺100,00"),
        (0, "₺0,00"),
        (1234567.891, "₺1.234.567,89"),
        (-42.5, "-₺42,50"),
    ],
)
def test_format_try(amount, expected):
    assert format_try(amount) == expected


def test_format_try_missing_values():
    assert format_try(None) == "–"
    assert format_try("abc") == "–"
    assert format_try(float("nan")) == "–"


def test_escape_html_covers_reserved_characters():
    escaped = escape_html("""<script>alert("x") & 'y'</script>""")
    assert "<" not in escaped and ">" not in escaped
    assert '"' not in escaped and "'" not in escaped
    assert escaped.startswith("&lt;script&gt;")
    assert "&amp;" in escaped
    assert escape_html(None) == ""
    assert escape_html(42) == "42"


def test_customer_label():
    customer = Customer(CustomerID=1, CustomerName="Ayşe & Co", City="İzmir")
    assert customer_label(customer, 1) == "Ayşe &amp; Co (İzmir)"
    assert customer_label(customer, 1, with_city=False) == "Ayşe &amp; Co"
    assert customer_label(None, 999) == "#999"


def test_product_labels():
    product = Product(ProductID=10, Brand="Vestel", Model="Smart TV 55U", WarrantyPeriod=24)
    assert product_label(product, 10) == "Vestel Smart TV 55U"
    assert product_label(None, 10) == "#10"
    assert product_label_with_id(product, 10) == "Vestel Smart TV 55U (ID 10)"
    assert product_label_with_id(None, 10) == "Product 10"
    assert product_label_with_id(None, 10, fallback_prefix="Product #") == "Product #10"
    assert product_label_with_warranty(product, 10) == "Vestel Smart TV 55U (Warranty: 24 mo)"
    assert product_label_with_warranty(None, 10) == "#10"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1), (" 42 ", 42), ("1.0", 1), ("+7", 7),
        (None, None), ("", None), ("0", None), ("0.0", None), ("abc", None), ("1.5", None),
        ("1_0", None), ("\u0661", None), ("1e0", None),
    ],
)
def test_parse_route_id(raw, expected):
    assert parse_route_id(raw) == expected
