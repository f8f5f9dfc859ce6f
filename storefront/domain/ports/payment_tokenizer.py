"""決済トークン化サービスインターフェース."""
from abc import ABC, abstractmethod

from ..value_objects import CardInput, CardInputHandle, PaymentMethodRef


class TokenizationError(Exception):
    """カード入力が受け付けられなかったエラー（利用者向けメッセージを持つ）."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class TokenizerUnavailableError(Exception):
    """トークン化サービスに到達できない、または未設定のエラー."""

    pass


class PaymentTokenizer(ABC):
    """カード入力を不透明な決済手段参照に交換するサービス."""

    @abstractmethod
    def is_ready(self) -> bool:
        """初期化済みで利用可能か判定する."""
        pass

    @abstractmethod
    def collect_card_input(self, card_input: CardInput) -> CardInputHandle:
        """カード入力を収集してハンドルを返す."""
        pass

    @abstractmethod
    def create_payment_method(self, handle: CardInputHandle) -> PaymentMethodRef:
        """ハンドルを決済手段参照に交換する."""
        pass
