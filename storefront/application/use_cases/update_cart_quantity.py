"""カート数量変更ユースケース."""
from storefront.application.cart_store import PersistentCartStore
from storefront.domain.identifiers import ProductId

from .cart_update_result import CartUpdateResult


class UpdateCartQuantityUseCase:
    """カート明細の数量を変更するユースケース."""

    def __init__(self, cart_store: PersistentCartStore) -> None:
        """初期化."""
        self._cart_store = cart_store

    def execute(self, product_id: ProductId, new_quantity: int) -> CartUpdateResult:
        """数量を変更する.

        1未満の数量は1に丸める。明細の削除は RemoveFromCartUseCase で行う。
        """
        cart = self._cart_store.update_quantity(product_id, new_quantity)
        return CartUpdateResult.from_cart(cart)

    def increment(self, product_id: ProductId) -> CartUpdateResult:
        """数量を1増やす."""
        line = self._cart_store.cart.get_line(product_id)
        if line is None:
            return CartUpdateResult.from_cart(self._cart_store.cart)
        return self.execute(product_id, line.quantity + 1)

    def decrement(self, product_id: ProductId) -> CartUpdateResult:
        """数量を1減らす（1より小さくはならない）."""
        line = self._cart_store.cart.get_line(product_id)
        if line is None:
            return CartUpdateResult.from_cart(self._cart_store.cart)
        return self.execute(product_id, line.quantity - 1)
