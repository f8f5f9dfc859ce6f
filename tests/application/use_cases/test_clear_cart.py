"""ClearCartUseCaseのテスト."""
import json

from storefront.application.cart_store import PersistentCartStore
from storefront.application.use_cases import ClearCartUseCase
from storefront.domain.entities import Product
from storefront.domain.identifiers import ProductId
from storefront.domain.value_objects import CartTotals, Money


class TestClearCartUseCase:
    """ClearCartUseCaseの単体テスト."""

    def test_カートを全クリアできる(self, storage, cart_store: PersistentCartStore) -> None:
        """カートを全クリアできることを確認."""
        for product_id in (1, 2):
            cart_store.add_item(
                Product(ProductId(product_id), "Item", "", Money.of("3.00"), 1), 2
            )

        result = ClearCartUseCase(cart_store).execute()

        assert result.is_empty is True
        assert result.line_count == 0
        assert cart_store.totals() == CartTotals.empty()
        assert json.loads(storage.read("cartItems")) == []

    def test_空のカートをクリアしても空のまま(self, cart_store: PersistentCartStore) -> None:
        result = ClearCartUseCase(cart_store).execute()
        assert result.is_empty is True
        assert result.total_price == Money.of("0.00")
