"""キーバリューストレージインターフェース."""
from abc import ABC, abstractmethod


class PersistenceError(Exception):
    """ストレージの読み書きエラー."""

    pass


class KeyValueStorage(ABC):
    """ブラウザプロファイル相当の永続キーバリューストレージ."""

    @abstractmethod
    def read(self, key: str) -> str | None:
        """値を読み込む（未保存ならNone）."""
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """値を書き込む."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """値を削除する（未保存でもエラーにしない）."""
        pass
