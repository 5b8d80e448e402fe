from .orders import Order
from .order_items import OrderItem
from .payments import Payment
from .deliveries import Delivery
from .customers import Customer
from .products import Product
from .service_requests import ServiceRequest

# Resource name (data/<name>.json) -> record model
DATASET_MODELS = {
    "orders": Order,
    "order_items": OrderItem,
    "payments": Payment,
    "deliveries": Delivery,
    "customers": Customer,
    "products": Product,
    "service_requests": ServiceRequest,
}

__all__ = [
    "Order",
    "OrderItem",
    "Payment",
    "Delivery",
    "Customer",
    "Product",
    "ServiceRequest",
    "DATASET_MODELS",
]
