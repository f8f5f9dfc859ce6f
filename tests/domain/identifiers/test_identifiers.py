"""識別子のテスト."""
import pytest

from storefront.domain.identifiers import OrderId, ProductId, UserId


class TestUserId:
    """UserIdの単体テスト."""

    def test_正常な値で生成できる(self) -> None:
        assert UserId("user-1").value == "user-1"

    def test_空文字はエラー(self) -> None:
        with pytest.raises(ValueError):
            UserId("")

    def test_文字列表現(self) -> None:
        assert str(UserId("user-1")) == "user-1"

    def test_空白のみはエラー(self) -> None:
        with pytest.raises(ValueError):
            UserId("   ")

    def test_文字列以外はエラー(self) -> None:
        with pytest.raises(TypeError):
            UserId(42)  # type: ignore[arg-type]

    def test_セッションの数値IDを文字列にする(self) -> None:
        assert UserId.from_session(42) == UserId("42")
        assert UserId.from_session(" u-7 ") == UserId("u-7")

    @pytest.mark.parametrize("raw", [True, None, 1.5, [1]])
    def test_セッションの不正なIDはエラー(self, raw: object) -> None:
        with pytest.raises(ValueError):
            UserId.from_session(raw)  # type: ignore[arg-type]


class TestProductId:
    """ProductIdの単体テスト."""

    def test_数値IDを保持できる(self) -> None:
        assert ProductId(1).value == 1

    def test_文字列IDを保持できる(self) -> None:
        assert ProductId("sku-1").value == "sku-1"

    def test_同じ値は等しい(self) -> None:
        assert ProductId(1) == ProductId(1)
        assert ProductId(1) != ProductId(2)

    def test_空はエラー(self) -> None:
        with pytest.raises(ValueError):
            ProductId("")
        with pytest.raises(ValueError):
            ProductId(None)

    def test_真偽値はエラー(self) -> None:
        with pytest.raises(ValueError):
            ProductId(True)


class TestOrderId:
    """OrderIdの単体テスト."""

    def test_文字列表現(self) -> None:
        assert str(OrderId(42)) == "42"
