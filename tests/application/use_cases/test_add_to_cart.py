"""AddToCartUseCaseのテスト."""
import pytest

from storefront.application.cart_store import PersistentCartStore
from storefront.application.use_cases import AddToCartUseCase, InvalidQuantityError
from storefront.domain.entities import Product
from storefront.domain.identifiers import ProductId
from storefront.domain.value_objects import Money


def _make_product(product_id: int = 1, price: str = "10.00", stock: int = 5) -> Product:
    return Product(
        product_id=ProductId(product_id),
        name="Wireless Mouse",
        description="2.4GHz",
        price=Money.of(price),
        stock_quantity=stock,
    )


class TestAddToCartUseCase:
    """AddToCartUseCaseの単体テスト."""

    def test_空のカートに商品を追加できる(self, cart_store: PersistentCartStore) -> None:
        """空のカートに商品を追加できることを確認."""
        use_case = AddToCartUseCase(cart_store)

        result = use_case.execute(_make_product(), 2)

        assert result.line_count == 1
        assert result.total_items == 2
        assert result.total_price == Money.of("20.00")
        assert result.is_empty is False
        assert result.line_quantity == 2

    def test_同じ商品は数量が合算される(self, cart_store: PersistentCartStore) -> None:
        use_case = AddToCartUseCase(cart_store)
        use_case.execute(_make_product(), 1)

        result = use_case.execute(_make_product(), 3)

        assert result.line_count == 1
        assert result.line_quantity == 4

    def test_数量の既定値は1(self, cart_store: PersistentCartStore) -> None:
        result = AddToCartUseCase(cart_store).execute(_make_product())
        assert result.line_quantity == 1

    def test_在庫を超えても追加され警告フラグが立つ(self, cart_store: PersistentCartStore) -> None:
        result = AddToCartUseCase(cart_store).execute(_make_product(stock=2), 3)
        assert result.line_quantity == 3
        assert result.exceeds_stock is True

    def test_在庫内なら警告フラグは立たない(self, cart_store: PersistentCartStore) -> None:
        result = AddToCartUseCase(cart_store).execute(_make_product(stock=2), 2)
        assert result.exceeds_stock is False

    @pytest.mark.parametrize("quantity", [0, -1, True, 1.5, "2"])
    def test_正の整数以外の数量はエラー(
        self, cart_store: PersistentCartStore, quantity: object
    ) -> None:
        """1未満や整数以外の数量ではInvalidQuantityErrorになることを確認."""
        use_case = AddToCartUseCase(cart_store)

        with pytest.raises(InvalidQuantityError):
            use_case.execute(_make_product(), quantity)  # type: ignore[arg-type]

        assert cart_store.cart.is_empty() is True

    def test_追加はストレージに保存される(self, storage, cart_store: PersistentCartStore) -> None:
        AddToCartUseCase(cart_store).execute(_make_product(), 1)
        assert storage.read("cartItems") is not None
