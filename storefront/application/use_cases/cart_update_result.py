"""カート更新系ユースケースの共通結果."""
from dataclasses import dataclass

from storefront.domain.entities import Cart
from storefront.domain.services import CartLedger
from storefront.domain.value_objects import Money


@dataclass(frozen=True)
class CartUpdateResult:
    """カート更新結果."""

    line_count: int
    total_items: int
    total_price: Money
    is_empty: bool

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartUpdateResult":
        """更新後のカートから生成する."""
        totals = CartLedger.totals(cart)
        return cls(
            line_count=cart.get_line_count(),
            total_items=totals.total_items,
            total_price=totals.total_price,
            is_empty=cart.is_empty(),
        )
