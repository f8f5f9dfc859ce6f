"""ドメインサービスモジュール."""
from .cart_ledger import CartLedger
from .cart_serializer import CartHydrationError, CartSerializer
from .cart_to_order_converter import CartToOrderConverter

__all__ = [
    "CartHydrationError",
    "CartLedger",
    "CartSerializer",
    "CartToOrderConverter",
]
