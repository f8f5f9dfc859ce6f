"""CommerceBackend ファクトリ."""
import logging
import os

from storefront.domain.ports import CommerceBackend, IdentityProvider

logger = logging.getLogger(__name__)


def create_commerce_backend(identity_provider: IdentityProvider) -> CommerceBackend:
    """環境変数に基づいてCommerceBackendを生成する.

    COMMERCE_BACKEND:
        "mock" → MockCommerceBackend（ローカル開発・テスト用）
        "http" → HttpCommerceBackend
        未設定  → HttpCommerceBackend（デフォルト）
    """
    backend_type = os.environ.get("COMMERCE_BACKEND")
    if backend_type == "mock":
        from storefront.infrastructure.providers.mock_commerce_backend import (
            MockCommerceBackend,
        )

        return MockCommerceBackend()

    if backend_type and backend_type != "http":
        logger.warning("Unknown COMMERCE_BACKEND=%s, falling back to http", backend_type)

    from storefront.infrastructure.providers.http_commerce_backend import (
        HttpCommerceBackend,
    )

    return HttpCommerceBackend(token_provider=identity_provider.get_token)
