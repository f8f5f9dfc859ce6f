"""値オブジェクトモジュール."""
from .card_input import CardInput, CardInputHandle
from .cart_totals import CartTotals
from .identity import Identity
from .money import Money
from .order_request import OrderRequest, OrderRequestItem
from .order_submission import OrderSubmission
from .payment_method_ref import PaymentMethodRef

__all__ = [
    "CardInput",
    "CardInputHandle",
    "CartTotals",
    "Identity",
    "Money",
    "OrderRequest",
    "OrderRequestItem",
    "OrderSubmission",
    "PaymentMethodRef",
]
