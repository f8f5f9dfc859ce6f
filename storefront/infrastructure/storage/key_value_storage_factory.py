"""KeyValueStorage ファクトリ."""
import logging
import os

from storefront.domain.ports import KeyValueStorage

logger = logging.getLogger(__name__)


def create_key_value_storage() -> KeyValueStorage:
    """環境変数に基づいてKeyValueStorageを生成する.

    STOREFRONT_STORAGE:
        "memory"   → InMemoryKeyValueStorage（テスト用、再起動で消える）
        "dynamodb" → DynamoDBKeyValueStorage
        "file"     → FileKeyValueStorage
        未設定      → FileKeyValueStorage（デフォルト）
    """
    storage_type = os.environ.get("STOREFRONT_STORAGE")
    if storage_type == "memory":
        from storefront.infrastructure.storage.in_memory_key_value_storage import (
            InMemoryKeyValueStorage,
        )

        return InMemoryKeyValueStorage()

    if storage_type == "dynamodb":
        from storefront.infrastructure.storage.dynamodb_key_value_storage import (
            DynamoDBKeyValueStorage,
        )

        return DynamoDBKeyValueStorage()

    if storage_type and storage_type != "file":
        logger.warning("Unknown STOREFRONT_STORAGE=%s, falling back to file", storage_type)

    from storefront.infrastructure.storage.file_key_value_storage import FileKeyValueStorage

    return FileKeyValueStorage()
