"""カート明細エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace

from ..identifiers import ProductId
from ..value_objects import Money
from .product import Product


@dataclass(frozen=True)
class CartLine:
    """カート内の1商品分の明細.

    name / unit_price / quantity_available は追加時点のスナップショットで、
    カタログと再同期しない。
    """

    product_id: ProductId
    name: str
    unit_price: Money
    quantity_available: int
    quantity: int

    @classmethod
    def from_product(cls, product: Product, quantity: int) -> CartLine:
        """商品のスナップショットから明細を作成する."""
        return cls(
            product_id=product.product_id,
            name=product.name,
            unit_price=product.price,
            quantity_available=product.stock_quantity,
            quantity=quantity,
        )

    def with_quantity(self, quantity: int) -> CartLine:
        """数量を差し替えた明細を返す."""
        return replace(self, quantity=quantity)

    def subtotal(self) -> Money:
        """小計（丸めなし）."""
        return self.unit_price.multiply(self.quantity)

    def exceeds_stock(self) -> bool:
        """在庫スナップショットを超えているか（参考情報）."""
        return self.quantity > self.quantity_available
