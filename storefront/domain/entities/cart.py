"""カートエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import ProductId
from .cart_line import CartLine


@dataclass(frozen=True)
class Cart:
    """カート明細の順序付きコレクション（不変値）.

    商品IDごとに明細は最大1つ。変更は CartLedger 経由で新しい値を作る。
    """

    lines: tuple[CartLine, ...] = ()

    @classmethod
    def empty(cls) -> Cart:
        """空のカートを生成する."""
        return cls(lines=())

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self.lines) == 0

    def get_lines(self) -> list[CartLine]:
        """明細のリストを取得（防御的コピー）."""
        return list(self.lines)

    def get_line(self, product_id: ProductId) -> CartLine | None:
        """指定商品の明細を取得する."""
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def contains(self, product_id: ProductId) -> bool:
        """指定商品が入っているか判定する."""
        return self.get_line(product_id) is not None

    def product_ids(self) -> list[ProductId]:
        """商品IDを追加順で返す."""
        return [line.product_id for line in self.lines]

    def get_line_count(self) -> int:
        """明細数を取得する."""
        return len(self.lines)
