"""KeyValueStorage ファクトリのテスト."""
from unittest.mock import patch

from storefront.infrastructure.storage.key_value_storage_factory import (
    create_key_value_storage,
)


class TestCreateKeyValueStorage:

    def test_環境変数memoryでInMemoryを返す(self):
        with patch.dict("os.environ", {"STOREFRONT_STORAGE": "memory"}):
            from storefront.infrastructure.storage import InMemoryKeyValueStorage

            assert isinstance(create_key_value_storage(), InMemoryKeyValueStorage)

    def test_環境変数未設定でファイル実装を返す(self, tmp_path):
        """デフォルトはFileKeyValueStorage."""
        with patch.dict("os.environ", {"STOREFRONT_PROFILE_DIR": str(tmp_path)}, clear=True):
            from storefront.infrastructure.storage import FileKeyValueStorage

            storage = create_key_value_storage()
            assert isinstance(storage, FileKeyValueStorage)
            assert storage.path.parent == tmp_path

    def test_環境変数dynamodbでDynamoDB実装を返す(self):
        with patch.dict("os.environ", {"STOREFRONT_STORAGE": "dynamodb"}), patch(
            "storefront.infrastructure.storage.dynamodb_key_value_storage.boto3.resource"
        ):
            from storefront.infrastructure.storage.dynamodb_key_value_storage import (
                DynamoDBKeyValueStorage,
            )

            assert isinstance(create_key_value_storage(), DynamoDBKeyValueStorage)
