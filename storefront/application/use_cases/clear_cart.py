"""カートクリアユースケース."""
import logging

from storefront.application.cart_store import PersistentCartStore

from .cart_update_result import CartUpdateResult

logger = logging.getLogger(__name__)


class ClearCartUseCase:
    """カートを全クリアするユースケース."""

    def __init__(self, cart_store: PersistentCartStore) -> None:
        """初期化.

        Args:
            cart_store: 永続カートストア
        """
        self._cart_store = cart_store

    def execute(self) -> CartUpdateResult:
        """カートを全クリアする.

        Returns:
            クリア結果
        """
        cleared_lines = self._cart_store.cart.get_line_count()
        cart = self._cart_store.clear()
        logger.info(f"Cart cleared ({cleared_lines} line(s) removed)")
        return CartUpdateResult.from_cart(cart)
