"""キーバリューストレージのインメモリ実装."""
from storefront.domain.ports import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """キーバリューストレージのインメモリ実装."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """初期化."""
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        """値を読み込む."""
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        """値を書き込む."""
        self._values[key] = value

    def remove(self, key: str) -> None:
        """値を削除する."""
        self._values.pop(key, None)
