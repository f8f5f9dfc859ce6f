"""PaymentTokenizer ファクトリ."""
import logging
import os

from storefront.domain.ports import PaymentTokenizer

logger = logging.getLogger(__name__)


def create_payment_tokenizer() -> PaymentTokenizer:
    """環境変数に基づいてPaymentTokenizerを生成する.

    PAYMENT_TOKENIZER:
        "mock"   → MockPaymentTokenizer（ローカル開発・テスト用）
        "stripe" → StripePaymentTokenizer
        未設定    → StripePaymentTokenizer（デフォルト）
    """
    tokenizer_type = os.environ.get("PAYMENT_TOKENIZER")
    if tokenizer_type == "mock":
        from storefront.infrastructure.providers.mock_payment_tokenizer import (
            MockPaymentTokenizer,
        )

        return MockPaymentTokenizer()

    if tokenizer_type and tokenizer_type != "stripe":
        logger.warning("Unknown PAYMENT_TOKENIZER=%s, falling back to stripe", tokenizer_type)

    from storefront.infrastructure.providers.stripe_payment_tokenizer import (
        StripePaymentTokenizer,
    )

    return StripePaymentTokenizer()
