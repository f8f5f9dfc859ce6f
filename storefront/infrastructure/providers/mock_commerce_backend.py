"""コマースバックエンドのモック実装."""
from storefront.domain.entities import OrderSummary, Product
from storefront.domain.identifiers import ProductId
from storefront.domain.ports import CommerceBackend, NotFoundError
from storefront.domain.value_objects import OrderRequest, OrderSubmission


class MockCommerceBackend(CommerceBackend):
    """コマースバックエンドのモック実装（テスト用、応答・エラー設定可能）."""

    def __init__(self, products: list[Product] | None = None) -> None:
        """初期化."""
        self._products: dict[ProductId, Product] = {
            product.product_id: product for product in products or []
        }
        self._orders: list[OrderSummary] = []
        self._order_response = OrderSubmission(http_status=201, order_status="PAID")
        self._order_error: Exception | None = None
        self._list_error: Exception | None = None
        self.submitted_orders: list[OrderRequest] = []

    def add_product(self, product: Product) -> None:
        """商品を登録する."""
        self._products[product.product_id] = product

    def add_order(self, order: OrderSummary) -> None:
        """注文履歴を登録する."""
        self._orders.append(order)

    def set_order_response(self, http_status: int, order_status: str | None) -> None:
        """注文作成時の応答を設定する."""
        body = {"status": order_status} if order_status is not None else {}
        self._order_response = OrderSubmission(
            http_status=http_status, order_status=order_status, body=body
        )

    def set_order_error(self, error: Exception) -> None:
        """注文作成時にエラーを発生させる設定."""
        self._order_error = error

    def set_list_error(self, error: Exception) -> None:
        """一覧取得時にエラーを発生させる設定."""
        self._list_error = error

    def list_products(self) -> list[Product]:
        """商品一覧を取得する."""
        if self._list_error:
            raise self._list_error
        return list(self._products.values())

    def get_product(self, product_id: ProductId) -> Product:
        """商品を1件取得する."""
        product = self._products.get(product_id)
        if product is None:
            raise NotFoundError(f"Product not found: {product_id}", status_code=404)
        return product

    def create_order(self, request: OrderRequest) -> OrderSubmission:
        """注文を作成する（エラー設定時は例外送出）."""
        self.submitted_orders.append(request)
        if self._order_error:
            raise self._order_error
        return self._order_response

    def list_my_orders(self) -> list[OrderSummary]:
        """注文履歴を取得する."""
        if self._list_error:
            raise self._list_error
        return list(self._orders)
