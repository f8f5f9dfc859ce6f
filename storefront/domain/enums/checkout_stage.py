"""チェックアウト状態機械の列挙型."""
from __future__ import annotations

from enum import Enum

from .checkout_outcome import CheckoutOutcome


class CheckoutStage(Enum):
    """1回のチェックアウト試行の状態.

    IDLE → TOKENIZING → SUBMITTING → (PAID | REQUIRES_ACTION | UNKNOWN_STATUS)
    の順に進み、途中の失敗は TOKENIZE_FAILED / SUBMIT_FAILED で終端する。
    """

    IDLE = "idle"
    TOKENIZING = "tokenizing"
    SUBMITTING = "submitting"
    PAID = "paid"
    REQUIRES_ACTION = "requires_action"
    TOKENIZE_FAILED = "tokenize_failed"
    SUBMIT_FAILED = "submit_failed"
    UNKNOWN_STATUS = "unknown_status"
    NOT_READY = "not_ready"
    CANCELLED = "cancelled"

    def is_in_flight(self) -> bool:
        """ネットワーク呼び出し中か判定する."""
        return self in (CheckoutStage.TOKENIZING, CheckoutStage.SUBMITTING)

    def is_terminal(self) -> bool:
        """終端状態か判定する."""
        return self not in (
            CheckoutStage.IDLE,
            CheckoutStage.TOKENIZING,
            CheckoutStage.SUBMITTING,
        )

    def to_outcome(self) -> CheckoutOutcome:
        """画面向けの結果区分に変換する."""
        if self == CheckoutStage.PAID:
            return CheckoutOutcome.SUCCEEDED
        if self == CheckoutStage.REQUIRES_ACTION:
            return CheckoutOutcome.REQUIRES_ACTION
        if self.is_terminal():
            return CheckoutOutcome.FAILED
        return CheckoutOutcome.PENDING
