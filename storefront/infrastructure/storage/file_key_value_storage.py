"""キーバリューストレージのファイル実装.

プロファイルディレクトリ内の1つのJSONファイルに全キーを保存する。
書き込みは一時ファイル経由で置き換える。
"""
import json
import logging
import os
import tempfile
from pathlib import Path

from storefront.domain.ports import KeyValueStorage, PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_DIR = "~/.storefront"
STORAGE_FILE_NAME = "local_storage.json"


class FileKeyValueStorage(KeyValueStorage):
    """キーバリューストレージのファイル実装."""

    def __init__(self, profile_dir: str | Path | None = None) -> None:
        """初期化."""
        directory = profile_dir or os.environ.get("STOREFRONT_PROFILE_DIR", DEFAULT_PROFILE_DIR)
        self._path = Path(directory).expanduser() / STORAGE_FILE_NAME

    @property
    def path(self) -> Path:
        """保存先ファイル."""
        return self._path

    def read(self, key: str) -> str | None:
        """値を読み込む."""
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise PersistenceError(f"Stored value for {key} is not a string")
        return value

    def write(self, key: str, value: str) -> None:
        """値を書き込む."""
        values = self._read_all()
        values[key] = value
        self._write_all(values)

    def remove(self, key: str) -> None:
        """値を削除する."""
        values = self._read_all()
        if key in values:
            del values[key]
            self._write_all(values)

    def _read_all(self) -> dict:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise PersistenceError(f"Failed to read {self._path}: {e}") from e

        try:
            data = json.loads(text)
        except ValueError as e:
            raise PersistenceError(f"Storage file {self._path} is corrupt: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"Storage file {self._path} is not a JSON object")
        return data

    def _write_all(self, values: dict) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(values, f, ensure_ascii=False)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(f"Failed to write {self._path}: {e}") from e
