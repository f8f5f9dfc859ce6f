"""ユースケースモジュール."""
from .add_to_cart import AddToCartResult, AddToCartUseCase, InvalidQuantityError
from .cart_update_result import CartUpdateResult
from .checkout import CheckoutResult, CheckoutUseCase
from .clear_cart import ClearCartUseCase
from .get_cart import CartLineDTO, GetCartResult, GetCartUseCase
from .get_order_history import (
    AuthenticationRequiredError,
    GetOrderHistoryUseCase,
    OrderHistoryUnavailableError,
)
from .get_product_detail import GetProductDetailUseCase, ProductNotFoundError
from .get_products import GetProductsUseCase
from .remove_from_cart import RemoveFromCartUseCase
from .update_cart_quantity import UpdateCartQuantityUseCase

__all__ = [
    "AddToCartResult",
    "AddToCartUseCase",
    "AuthenticationRequiredError",
    "CartLineDTO",
    "CartUpdateResult",
    "CheckoutResult",
    "CheckoutUseCase",
    "ClearCartUseCase",
    "GetCartResult",
    "GetCartUseCase",
    "GetOrderHistoryUseCase",
    "GetProductDetailUseCase",
    "GetProductsUseCase",
    "InvalidQuantityError",
    "OrderHistoryUnavailableError",
    "ProductNotFoundError",
    "RemoveFromCartUseCase",
    "UpdateCartQuantityUseCase",
]
