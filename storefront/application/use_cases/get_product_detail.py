"""商品詳細取得ユースケース."""
from storefront.domain.entities import Product
from storefront.domain.identifiers import ProductId
from storefront.domain.ports import CommerceBackend, NotFoundError


class ProductNotFoundError(Exception):
    """商品が見つからないエラー."""

    def __init__(self, product_id: ProductId) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class GetProductDetailUseCase:
    """商品詳細取得ユースケース."""

    def __init__(self, commerce_backend: CommerceBackend) -> None:
        """初期化.

        Args:
            commerce_backend: コマースバックエンド
        """
        self._commerce_backend = commerce_backend

    def execute(self, product_id: ProductId) -> Product:
        """商品を1件取得する.

        Args:
            product_id: 商品ID

        Returns:
            商品

        Raises:
            ProductNotFoundError: 商品が存在しない場合
        """
        try:
            return self._commerce_backend.get_product(product_id)
        except NotFoundError as e:
            raise ProductNotFoundError(product_id) from e
