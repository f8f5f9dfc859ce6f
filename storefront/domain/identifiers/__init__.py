"""識別子モジュール."""
from .order_id import OrderId
from .product_id import ProductId
from .user_id import UserId

__all__ = [
    "OrderId",
    "ProductId",
    "UserId",
]
