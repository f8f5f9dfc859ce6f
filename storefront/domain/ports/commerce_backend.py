"""コマースバックエンドインターフェース."""
from abc import ABC, abstractmethod
from typing import Any

from ..entities import OrderSummary, Product
from ..identifiers import ProductId
from ..value_objects import OrderRequest, OrderSubmission


class CommerceBackendError(Exception):
    """バックエンドが2xx以外を返したエラー."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class AuthError(CommerceBackendError):
    """認証・認可エラー（401/403）."""

    pass


class NotFoundError(CommerceBackendError):
    """リソースが見つからないエラー（404）."""

    pass


class NetworkError(Exception):
    """応答を得られなかった通信エラー."""

    pass


class CommerceBackend(ABC):
    """コマースバックエンドREST APIのインターフェース."""

    @abstractmethod
    def list_products(self) -> list[Product]:
        """商品一覧を取得する."""
        pass

    @abstractmethod
    def get_product(self, product_id: ProductId) -> Product:
        """商品を1件取得する."""
        pass

    @abstractmethod
    def create_order(self, request: OrderRequest) -> OrderSubmission:
        """注文を作成する."""
        pass

    @abstractmethod
    def list_my_orders(self) -> list[OrderSummary]:
        """ログインユーザーの注文履歴を取得する."""
        pass
