"""インフラストラクチャ層モジュール."""
from .providers import (
    MockCommerceBackend,
    MockPaymentTokenizer,
    StaticIdentityProvider,
    StoredSessionIdentityProvider,
)
from .storage import FileKeyValueStorage, InMemoryKeyValueStorage

__all__ = [
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
    "MockCommerceBackend",
    "MockPaymentTokenizer",
    "StaticIdentityProvider",
    "StoredSessionIdentityProvider",
]
