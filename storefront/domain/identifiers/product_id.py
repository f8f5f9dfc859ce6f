"""商品識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductId:
    """カタログ上の商品ID（バックエンドの値をそのまま保持する）."""

    value: int | str

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.value is None or self.value == "":
            raise ValueError("ProductId cannot be empty")
        if isinstance(self.value, bool):
            raise ValueError("ProductId cannot be a boolean")

    def __str__(self) -> str:
        """文字列表現."""
        return str(self.value)
