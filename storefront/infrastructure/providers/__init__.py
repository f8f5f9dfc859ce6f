"""プロバイダモジュール."""
from .mock_commerce_backend import MockCommerceBackend
from .mock_payment_tokenizer import MockPaymentTokenizer
from .static_identity_provider import StaticIdentityProvider
from .stored_session_identity_provider import StoredSessionIdentityProvider

__all__ = [
    "MockCommerceBackend",
    "MockPaymentTokenizer",
    "StaticIdentityProvider",
    "StoredSessionIdentityProvider",
]
