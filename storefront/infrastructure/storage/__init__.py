"""ストレージモジュール."""
# DynamoDBKeyValueStorage は boto3 のリソースを生成するため、必要な時に
# storefront.infrastructure.storage.dynamodb_key_value_storage から直接インポートする
from .file_key_value_storage import FileKeyValueStorage
from .in_memory_key_value_storage import InMemoryKeyValueStorage

__all__ = [
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
]
