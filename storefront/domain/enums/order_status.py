"""注文ステータスの列挙型."""
from __future__ import annotations

from enum import Enum


class OrderStatus(Enum):
    """バックエンドが返す注文ステータス."""

    PAID = "PAID"
    PENDING = "PENDING"
    FAILED = "FAILED"
    REQUIRES_ACTION = "REQUIRES_ACTION"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_value(cls, value: str | None) -> OrderStatus:
        """文字列から変換する（未知の値はUNKNOWN）."""
        for status in cls:
            if status.value == value:
                return status
        return cls.UNKNOWN

    def get_display_name(self) -> str:
        """表示名を返す."""
        names = {
            OrderStatus.PAID: "Paid",
            OrderStatus.PENDING: "Pending",
            OrderStatus.FAILED: "Failed",
            OrderStatus.REQUIRES_ACTION: "Requires action",
            OrderStatus.UNKNOWN: "Unknown",
        }
        return names[self]
