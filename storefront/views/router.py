from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Mapping, Optional, Tuple

from ..data.interface import DataSource
from ..logging_config import get_logger
from . import pages
from .renderer import Renderer

logger = get_logger(__name__)

RenderFn = Callable[[DataSource, Renderer, Mapping[str, str]], Awaitable[None]]


def _kpi(label: str) -> str:
    return f'<div class="kpi"><div class="muted">{label}</div><div class="value">{{content}}</div></div>'


def _table(*headers: str) -> str:
    head = "".join(f"<th>{h}</th>" for h in headers)
    return f'<table class="data"><thead><tr>{head}</tr></thead><tbody>{{content}}</tbody></table>'


def _list(title: str) -> str:
    return f"<h3>{title}</h3><ul>{{content}}</ul>"


@dataclass(frozen=True)
class Page:
    """A routable page: its render function and the containers its layout defines.

    `containers` maps container id -> wrapper markup with a `{content}` slot.
    """
    name: str
    title: str
    render: RenderFn
    containers: Dict[str, str] = field(default_factory=dict)
    in_navigation: bool = True

    @property
    def container_ids(self) -> Tuple[str, ...]:
        return tuple(self.containers)


PAGES: Dict[str, Page] = {
    "dashboard": Page(
        name="dashboard",
        title="Sales Dashboard",
        render=pages.render_dashboard,
        containers={
            "totalOrders": _kpi("Total orders"),
            "totalRevenue": _kpi("Revenue"),
            "deliveredOrders": _kpi("Delivered orders"),
            "inTransit": _kpi("In transit"),
            "orderStatusList": _list("Orders by status"),
            "paymentMethodList": _list("Revenue by payment method"),
        },
    ),
    "orders": Page(
        name="orders",
        title="Orders",
        render=pages.render_orders,
        containers={
            "ordersBody": _table("Order", "Customer", "Store", "Date", "Status", "Total"),
        },
    ),
    "order": Page(
        name="order",
        title="Order Detail",
        render=pages.render_order_detail,
        containers={
            "orderInfo": "{content}",
            "itemsList": _list("Items"),
            "paymentInfo": "{content}",
            "deliveryInfo": "{content}",
        },
        in_navigation=False,
    ),
    "service-dashboard": Page(
        name="service-dashboard",
        title="After-Sales Dashboard",
        render=pages.render_service_dashboard,
        containers={
            "totalServices": _kpi("Service requests"),
            "openServices": _kpi("Open"),
            "progressServices": _kpi("In progress"),
            "closedServices": _kpi("Closed"),
            "serviceByProduct": _list("Requests by product"),
        },
    ),
    "service-requests": Page(
        name="service-requests",
        title="Service Requests",
        render=pages.render_service_requests,
        containers={
            "servicesBody": _table("Request", "Customer", "Product", "Date", "Status"),
        },
    ),
    "service": Page(
        name="service",
        title="Service Request Detail",
        render=pages.render_service_detail,
        containers={"serviceInfo": "{content}"},
        in_navigation=False,
    ),
}


def resolve_page(name: Optional[str], default: str = "dashboard") -> Optional[Page]:
    return PAGES.get(name or default)


async def dispatch(
    page_name: Optional[str],
    source: DataSource,
    renderer: Renderer,
    params: Optional[Mapping[str, str]] = None,
    default: str = "dashboard",
) -> bool:
    """Run the render function of one page. Returns False for unknown pages."""
    page = resolve_page(page_name, default)
    if page is None:
        logger.debug(f"No page registered as '{page_name}'")
        return False
    logger.info(f"Rendering page '{page.name}'")
    await page.render(source, renderer, params or {})
    return True
