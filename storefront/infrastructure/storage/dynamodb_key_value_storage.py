"""キーバリューストレージのDynamoDB実装."""
import os
from datetime import datetime, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from storefront.domain.ports import KeyValueStorage, PersistenceError

DEFAULT_PROFILE_ID = "default"


class DynamoDBKeyValueStorage(KeyValueStorage):
    """プロファイルIDとキーで1アイテムを持つDynamoDB実装."""

    def __init__(self, table_name: str | None = None, profile_id: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "STOREFRONT_TABLE_NAME", "storefront-local-storage"
        )
        self._profile_id = profile_id or os.environ.get("STOREFRONT_PROFILE_ID", DEFAULT_PROFILE_ID)
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def read(self, key: str) -> str | None:
        """値を読み込む."""
        try:
            response = self._table.get_item(Key=self._key(key))
        except (BotoCoreError, ClientError) as e:
            raise PersistenceError(f"Failed to read {key} from DynamoDB: {e}") from e
        item = response.get("Item")
        if item is None:
            return None
        return item.get("value")

    def write(self, key: str, value: str) -> None:
        """値を書き込む."""
        item = {
            **self._key(key),
            "value": value,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            self._table.put_item(Item=item)
        except (BotoCoreError, ClientError) as e:
            raise PersistenceError(f"Failed to write {key} to DynamoDB: {e}") from e

    def remove(self, key: str) -> None:
        """値を削除する."""
        try:
            self._table.delete_item(Key=self._key(key))
        except (BotoCoreError, ClientError) as e:
            raise PersistenceError(f"Failed to delete {key} from DynamoDB: {e}") from e

    def _key(self, key: str) -> dict[str, str]:
        return {"profile_id": self._profile_id, "storage_key": key}
