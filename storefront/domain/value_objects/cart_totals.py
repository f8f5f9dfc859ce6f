"""カート集計値の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from .money import Money


@dataclass(frozen=True)
class CartTotals:
    """カートから導出される合計（保存はしない）."""

    total_items: int
    total_price: Money

    @classmethod
    def empty(cls) -> CartTotals:
        """空カートの集計値."""
        return cls(total_items=0, total_price=Money.zero().rounded())

    def format_total_price(self) -> str:
        """表示用の合計金額."""
        return self.total_price.format()
