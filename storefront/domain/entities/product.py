"""商品エンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..identifiers import ProductId
from ..value_objects import Money


@dataclass(frozen=True)
class Product:
    """カタログAPIから取得した商品."""

    product_id: ProductId
    name: str
    description: str
    price: Money
    stock_quantity: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        """APIレスポンスの辞書から生成する."""
        return cls(
            product_id=ProductId(data["productId"]),
            name=data["name"],
            description=data.get("description") or "",
            price=Money.of(data["price"]),
            stock_quantity=int(data.get("stockQuantity") or 0),
        )

    def is_in_stock(self) -> bool:
        """在庫があるか判定する."""
        return self.stock_quantity > 0
