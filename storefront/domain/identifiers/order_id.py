"""注文識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderId:
    """バックエンドが採番した注文ID."""

    value: int | str

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.value is None or self.value == "":
            raise ValueError("OrderId cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return str(self.value)
