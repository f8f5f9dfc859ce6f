"""注文送信リクエストの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..identifiers import ProductId
from .payment_method_ref import PaymentMethodRef


@dataclass(frozen=True)
class OrderRequestItem:
    """注文明細（商品IDと数量のみ）."""

    product_id: ProductId
    quantity: int


@dataclass(frozen=True)
class OrderRequest:
    """POST /orders に送る注文内容."""

    items: tuple[OrderRequestItem, ...]
    payment_method_ref: PaymentMethodRef

    def to_payload(self) -> dict[str, Any]:
        """バックエンドのJSON形式に変換する."""
        return {
            "items": [
                {"productId": item.product_id.value, "quantity": item.quantity}
                for item in self.items
            ],
            "paymentMethodId": self.payment_method_ref.value,
        }
