"""FileKeyValueStorage のテスト."""
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from storefront.domain.ports import PersistenceError
from storefront.infrastructure.storage import FileKeyValueStorage


class TestFileKeyValueStorage:
    """FileKeyValueStorageの単体テスト."""

    def test_ファイルがなければNone(self, tmp_path: Path) -> None:
        storage = FileKeyValueStorage(tmp_path / "profile")
        assert storage.read("cartItems") is None

    def test_書き込んだ値を読み込める(self, tmp_path: Path) -> None:
        storage = FileKeyValueStorage(tmp_path / "profile")

        storage.write("cartItems", "[]")
        storage.write("jwtToken", "abc")

        assert storage.read("cartItems") == "[]"
        assert FileKeyValueStorage(tmp_path / "profile").read("jwtToken") == "abc"
        assert json.loads(storage.path.read_text(encoding="utf-8")) == {
            "cartItems": "[]",
            "jwtToken": "abc",
        }

    def test_削除(self, tmp_path: Path) -> None:
        storage = FileKeyValueStorage(tmp_path)
        storage.write("a", "1")
        storage.remove("a")
        storage.remove("missing")
        assert storage.read("a") is None

    def test_一時ファイルを残さない(self, tmp_path: Path) -> None:
        storage = FileKeyValueStorage(tmp_path)
        storage.write("a", "1")
        assert [p.name for p in tmp_path.iterdir()] == ["local_storage.json"]

    def test_壊れたファイルはPersistenceError(self, tmp_path: Path) -> None:
        (tmp_path / "local_storage.json").write_text("{oops", encoding="utf-8")
        with pytest.raises(PersistenceError):
            FileKeyValueStorage(tmp_path).read("cartItems")

    def test_オブジェクト以外はPersistenceError(self, tmp_path: Path) -> None:
        (tmp_path / "local_storage.json").write_text("[]", encoding="utf-8")
        with pytest.raises(PersistenceError):
            FileKeyValueStorage(tmp_path).read("cartItems")

    def test_文字列以外の値はPersistenceError(self, tmp_path: Path) -> None:
        (tmp_path / "local_storage.json").write_text('{"cartItems": [1]}', encoding="utf-8")
        with pytest.raises(PersistenceError):
            FileKeyValueStorage(tmp_path).read("cartItems")

    def test_書き込み失敗はPersistenceError(self, tmp_path: Path) -> None:
        storage = FileKeyValueStorage(tmp_path)
        with patch(
            "storefront.infrastructure.storage.file_key_value_storage.os.replace",
            side_effect=OSError("read-only file system"),
        ):
            with pytest.raises(PersistenceError):
                storage.write("a", "1")
        assert list(tmp_path.iterdir()) == []

    def test_環境変数のプロファイルディレクトリを使う(self, tmp_path: Path) -> None:
        with patch.dict("os.environ", {"STOREFRONT_PROFILE_DIR": str(tmp_path)}):
            storage = FileKeyValueStorage()
        assert storage.path == tmp_path / "local_storage.json"
