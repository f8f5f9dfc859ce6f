"""決済トークン化サービスのモック実装."""
import uuid

from storefront.domain.ports import PaymentTokenizer
from storefront.domain.value_objects import CardInput, CardInputHandle, PaymentMethodRef


class MockPaymentTokenizer(PaymentTokenizer):
    """決済トークン化サービスのモック実装（テスト用、エラー設定可能）."""

    def __init__(self, ready: bool = True) -> None:
        """初期化."""
        self._ready = ready
        self._tokenize_error: Exception | None = None
        self.tokenize_calls = 0

    def set_ready(self, ready: bool) -> None:
        """初期化状態を設定する."""
        self._ready = ready

    def set_tokenize_error(self, error: Exception) -> None:
        """トークン化時にエラーを発生させる設定."""
        self._tokenize_error = error

    def is_ready(self) -> bool:
        """初期化済みか."""
        return self._ready

    def collect_card_input(self, card_input: CardInput) -> CardInputHandle:
        """カード入力をそのままハンドルに包む."""
        return CardInputHandle(handle_id=uuid.uuid4().hex, card=card_input)

    def create_payment_method(self, handle: CardInputHandle) -> PaymentMethodRef:
        """決済手段参照を返す（エラー設定時は例外送出）."""
        self.tokenize_calls += 1
        if self._tokenize_error:
            raise self._tokenize_error
        return PaymentMethodRef(f"pm_mock_{handle.handle_id[:12]}")
