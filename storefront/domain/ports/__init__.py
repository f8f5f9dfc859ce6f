"""ポートモジュール."""
from .commerce_backend import (
    AuthError,
    CommerceBackend,
    CommerceBackendError,
    NetworkError,
    NotFoundError,
)
from .identity_provider import IdentityProvider
from .key_value_storage import KeyValueStorage, PersistenceError
from .payment_tokenizer import PaymentTokenizer, TokenizationError, TokenizerUnavailableError

__all__ = [
    "AuthError",
    "CommerceBackend",
    "CommerceBackendError",
    "IdentityProvider",
    "KeyValueStorage",
    "NetworkError",
    "NotFoundError",
    "PaymentTokenizer",
    "PersistenceError",
    "TokenizationError",
    "TokenizerUnavailableError",
]
