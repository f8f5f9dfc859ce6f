"""カート追加ユースケース."""
import logging
from dataclasses import dataclass

from storefront.application.cart_store import PersistentCartStore
from storefront.domain.entities import Product

from .cart_update_result import CartUpdateResult

logger = logging.getLogger(__name__)


class InvalidQuantityError(ValueError):
    """追加数量が正の整数でないエラー."""

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be a positive integer: {quantity}")


@dataclass(frozen=True)
class AddToCartResult(CartUpdateResult):
    """カート追加結果."""

    line_quantity: int = 0
    exceeds_stock: bool = False


class AddToCartUseCase:
    """カートに商品を追加するユースケース."""

    def __init__(self, cart_store: PersistentCartStore) -> None:
        """初期化.

        Args:
            cart_store: 永続カートストア
        """
        self._cart_store = cart_store

    def execute(self, product: Product, quantity: int = 1) -> AddToCartResult:
        """商品をカートに追加する.

        在庫スナップショットを超える数量も受け付け、exceeds_stock で知らせる。
        在庫の最終判定はバックエンドが行う。

        Args:
            product: 追加する商品
            quantity: 追加数量

        Returns:
            カート追加結果

        Raises:
            InvalidQuantityError: 数量が1未満の場合
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantityError(quantity)

        cart = self._cart_store.add_item(product, quantity)
        line = cart.get_line(product.product_id)
        base = CartUpdateResult.from_cart(cart)
        logger.info(f"Added product {product.product_id} x{quantity} to cart")

        return AddToCartResult(
            line_count=base.line_count,
            total_items=base.total_items,
            total_price=base.total_price,
            is_empty=base.is_empty,
            line_quantity=line.quantity if line else 0,
            exceeds_stock=line.exceeds_stock() if line else False,
        )
