"""決済手段参照の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentMethodRef:
    """トークン化サービスが発行した決済手段ID（例: "pm_..."）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("PaymentMethodRef cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
