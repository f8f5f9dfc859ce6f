"""カート取得ユースケース."""
from dataclasses import dataclass

from storefront.application.cart_store import PersistentCartStore
from storefront.domain.value_objects import CartTotals, Money


@dataclass(frozen=True)
class CartLineDTO:
    """カート明細DTO."""

    product_id: int | str
    name: str
    unit_price: Money
    quantity: int
    quantity_available: int
    subtotal: Money
    can_decrement: bool

    def format_subtotal(self) -> str:
        """表示用の小計."""
        return self.subtotal.format()


@dataclass(frozen=True)
class GetCartResult:
    """カート取得結果."""

    lines: list[CartLineDTO]
    totals: CartTotals
    is_empty: bool


class GetCartUseCase:
    """カート取得ユースケース."""

    def __init__(self, cart_store: PersistentCartStore) -> None:
        """初期化.

        Args:
            cart_store: 永続カートストア
        """
        self._cart_store = cart_store

    def execute(self) -> GetCartResult:
        """現在のカートと合計を取得する.

        Returns:
            カート取得結果
        """
        cart = self._cart_store.cart
        lines = [
            CartLineDTO(
                product_id=line.product_id.value,
                name=line.name,
                unit_price=line.unit_price,
                quantity=line.quantity,
                quantity_available=line.quantity_available,
                subtotal=line.subtotal(),
                can_decrement=line.quantity > 1,
            )
            for line in cart.get_lines()
        ]
        return GetCartResult(
            lines=lines,
            totals=self._cart_store.totals(),
            is_empty=cart.is_empty(),
        )
