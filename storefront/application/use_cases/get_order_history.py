"""注文履歴取得ユースケース."""
import logging

from storefront.domain.entities import OrderSummary
from storefront.domain.ports import (
    AuthError,
    CommerceBackend,
    CommerceBackendError,
    IdentityProvider,
    NetworkError,
)

logger = logging.getLogger(__name__)


class AuthenticationRequiredError(Exception):
    """未ログインエラー."""

    pass


class OrderHistoryUnavailableError(Exception):
    """注文履歴を取得できないエラー."""

    pass


class GetOrderHistoryUseCase:
    """ログインユーザーの注文履歴を取得するユースケース."""

    def __init__(
        self,
        commerce_backend: CommerceBackend,
        identity_provider: IdentityProvider,
    ) -> None:
        """初期化."""
        self._commerce_backend = commerce_backend
        self._identity_provider = identity_provider

    def execute(self) -> list[OrderSummary]:
        """注文履歴を新しい順で取得する.

        Raises:
            AuthenticationRequiredError: 未ログインの場合
            AuthError: バックエンドが401/403を返した場合
            OrderHistoryUnavailableError: その他の取得失敗
        """
        identity = self._identity_provider.current_identity()
        if identity is None:
            raise AuthenticationRequiredError("Please log in to view your order history.")

        try:
            orders = self._commerce_backend.list_my_orders()
        except AuthError:
            raise
        except (CommerceBackendError, NetworkError) as e:
            logger.error(f"Failed to fetch order history for user {identity.user_id}: {e}")
            raise OrderHistoryUnavailableError(
                "Failed to fetch order history. Please try again."
            ) from e

        return sorted(orders, key=lambda order: order.order_date, reverse=True)
