"""商品一覧取得ユースケース."""
from storefront.domain.entities import Product
from storefront.domain.ports import CommerceBackend


class GetProductsUseCase:
    """商品一覧取得ユースケース."""

    def __init__(self, commerce_backend: CommerceBackend) -> None:
        """初期化."""
        self._commerce_backend = commerce_backend

    def execute(self) -> list[Product]:
        """カタログの商品一覧を取得する."""
        return self._commerce_backend.list_products()
