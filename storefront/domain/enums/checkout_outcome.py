"""チェックアウト結果の列挙型."""
from enum import Enum


class CheckoutOutcome(Enum):
    """画面に伝えるチェックアウトの結果区分."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    REQUIRES_ACTION = "requires_action"
    FAILED = "failed"
