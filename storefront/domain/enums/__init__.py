"""列挙型モジュール."""
from .checkout_outcome import CheckoutOutcome
from .checkout_stage import CheckoutStage
from .order_status import OrderStatus
from .role import Role

__all__ = [
    "CheckoutOutcome",
    "CheckoutStage",
    "OrderStatus",
    "Role",
]
