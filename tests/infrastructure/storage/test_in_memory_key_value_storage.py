"""InMemoryKeyValueStorage のテスト."""
from storefront.infrastructure.storage import InMemoryKeyValueStorage


class TestInMemoryKeyValueStorage:
    """InMemoryKeyValueStorageの単体テスト."""

    def test_読み書きと削除(self) -> None:
        storage = InMemoryKeyValueStorage()
        assert storage.read("k") is None

        storage.write("k", "v")
        assert storage.read("k") == "v"

        storage.remove("k")
        storage.remove("k")
        assert storage.read("k") is None

    def test_初期値はコピーされる(self) -> None:
        initial = {"k": "v"}
        storage = InMemoryKeyValueStorage(initial)
        storage.write("k", "changed")
        assert initial == {"k": "v"}
