"""チェックアウト試行エンティティ."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..enums import CheckoutOutcome, CheckoutStage, OrderStatus
from ..value_objects import PaymentMethodRef
from .cart import Cart


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CheckoutAttempt:
    """1回のチェックアウト呼び出しの間だけ存在する試行（永続化しない）."""

    attempt_id: str
    line_snapshot: Cart
    stage: CheckoutStage = CheckoutStage.IDLE
    payment_method_ref: Optional[PaymentMethodRef] = None
    order_status: Optional[OrderStatus] = None
    message: Optional[str] = None
    started_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def start(cls, cart: Cart) -> CheckoutAttempt:
        """カートのスナップショットから試行を開始する."""
        now = _now()
        return cls(
            attempt_id=uuid.uuid4().hex,
            line_snapshot=cart,
            started_at=now,
            updated_at=now,
        )

    @property
    def outcome(self) -> CheckoutOutcome:
        """現在の結果区分."""
        return self.stage.to_outcome()

    def _transition(self, stage: CheckoutStage, message: Optional[str] = None) -> None:
        if self.stage.is_terminal():
            raise ValueError(f"Attempt already finished: {self.stage.value}")
        self.stage = stage
        if message is not None:
            self.message = message
        self.updated_at = _now()

    def mark_tokenizing(self) -> None:
        """トークン化中に変更する."""
        self._transition(CheckoutStage.TOKENIZING)

    def mark_tokenized(self, payment_method_ref: PaymentMethodRef) -> None:
        """決済手段参照を記録する."""
        self.payment_method_ref = payment_method_ref
        self.updated_at = _now()

    def mark_submitting(self) -> None:
        """注文送信中に変更する."""
        if self.payment_method_ref is None:
            raise ValueError("Cannot submit without a payment method")
        self._transition(CheckoutStage.SUBMITTING)

    def mark_paid(self, message: str) -> None:
        """支払い完了に変更する."""
        self._transition(CheckoutStage.PAID, message)
        self.order_status = OrderStatus.PAID

    def mark_requires_action(self, message: str) -> None:
        """追加認証待ちに変更する."""
        self._transition(CheckoutStage.REQUIRES_ACTION, message)
        self.order_status = OrderStatus.REQUIRES_ACTION

    def mark_tokenize_failed(self, message: str) -> None:
        """トークン化失敗に変更する."""
        self._transition(CheckoutStage.TOKENIZE_FAILED, message)

    def mark_submit_failed(self, message: str) -> None:
        """注文送信失敗に変更する."""
        self._transition(CheckoutStage.SUBMIT_FAILED, message)

    def mark_unknown_status(self, message: str, order_status: Optional[OrderStatus] = None) -> None:
        """想定外のステータスに変更する."""
        self._transition(CheckoutStage.UNKNOWN_STATUS, message)
        self.order_status = order_status

    def mark_cancelled(self, message: str) -> None:
        """呼び出し元の中断に変更する."""
        self._transition(CheckoutStage.CANCELLED, message)
