"""ユースケーステスト共通のフィクスチャ."""
import pytest

from storefront.application.cart_store import PersistentCartStore
from storefront.infrastructure.storage import InMemoryKeyValueStorage


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def cart_store(storage: InMemoryKeyValueStorage) -> PersistentCartStore:
    return PersistentCartStore(storage)
