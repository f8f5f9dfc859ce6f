"""エンティティモジュール."""
from .cart import Cart
from .cart_line import CartLine
from .checkout_attempt import CheckoutAttempt
from .order_summary import OrderLine, OrderSummary
from .product import Product

__all__ = [
    "Cart",
    "CartLine",
    "CheckoutAttempt",
    "OrderLine",
    "OrderSummary",
    "Product",
]
