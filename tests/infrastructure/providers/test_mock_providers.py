"""モック実装のテスト."""
import pytest

from storefront.domain.entities import Product
from storefront.domain.identifiers import ProductId, UserId
from storefront.domain.ports import NotFoundError, TokenizationError
from storefront.domain.value_objects import (
    CardInput,
    Identity,
    Money,
    OrderRequest,
    PaymentMethodRef,
)
from storefront.infrastructure.providers import (
    MockCommerceBackend,
    MockPaymentTokenizer,
    StaticIdentityProvider,
)


class TestMockCommerceBackend:
    """MockCommerceBackendの単体テスト."""

    def test_既定の注文応答は201_PAID(self) -> None:
        backend = MockCommerceBackend()
        request = OrderRequest(items=(), payment_method_ref=PaymentMethodRef("pm_1"))

        submission = backend.create_order(request)

        assert submission.is_created() is True
        assert submission.order_status == "PAID"
        assert backend.submitted_orders == [request]

    def test_注文応答を設定できる(self) -> None:
        backend = MockCommerceBackend()
        backend.set_order_response(201, "REQUIRES_ACTION")
        submission = backend.create_order(
            OrderRequest(items=(), payment_method_ref=PaymentMethodRef("pm_1"))
        )
        assert submission.body == {"status": "REQUIRES_ACTION"}

    def test_登録した商品を取得できる(self) -> None:
        backend = MockCommerceBackend()
        backend.add_product(Product(ProductId(3), "Pen", "", Money.of("1.00"), 10))
        assert backend.get_product(ProductId(3)).name == "Pen"
        with pytest.raises(NotFoundError):
            backend.get_product(ProductId(4))


class TestMockPaymentTokenizer:
    """MockPaymentTokenizerの単体テスト."""

    def test_決済手段参照を返す(self) -> None:
        tokenizer = MockPaymentTokenizer()
        handle = tokenizer.collect_card_input(
            CardInput(number="4242424242424242", exp_month=1, exp_year=2099, cvc="123")
        )

        ref = tokenizer.create_payment_method(handle)

        assert ref.value.startswith("pm_mock_")
        assert tokenizer.tokenize_calls == 1

    def test_エラーを設定できる(self) -> None:
        tokenizer = MockPaymentTokenizer(ready=False)
        tokenizer.set_tokenize_error(TokenizationError("declined"))
        handle = tokenizer.collect_card_input(
            CardInput(number="4000000000000002", exp_month=1, exp_year=2099, cvc="123")
        )

        assert tokenizer.is_ready() is False
        with pytest.raises(TokenizationError):
            tokenizer.create_payment_method(handle)


class TestStaticIdentityProvider:
    """StaticIdentityProviderの単体テスト."""

    def test_与えたユーザーとトークンを返す(self) -> None:
        identity = Identity(user_id=UserId("1"), username="dave")
        provider = StaticIdentityProvider(identity, token="t")
        assert provider.current_identity() == identity
        assert provider.get_token() == "t"

        provider.set_identity(None)
        assert provider.current_identity() is None
