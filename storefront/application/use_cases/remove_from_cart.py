"""カート明細削除ユースケース."""
from storefront.application.cart_store import PersistentCartStore
from storefront.domain.identifiers import ProductId

from .cart_update_result import CartUpdateResult


class RemoveFromCartUseCase:
    """カートから明細を削除するユースケース."""

    def __init__(self, cart_store: PersistentCartStore) -> None:
        """初期化."""
        self._cart_store = cart_store

    def execute(self, product_id: ProductId) -> CartUpdateResult:
        """明細を削除する（カートにない商品なら何もしない）."""
        cart = self._cart_store.remove_item(product_id)
        return CartUpdateResult.from_cart(cart)
