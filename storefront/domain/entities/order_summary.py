"""注文履歴エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from ..enums import OrderStatus
from ..identifiers import OrderId
from ..value_objects import Money


def _money_or_zero(value: Any) -> Money:
    if value is None:
        return Money.zero()
    return Money.of(value)


@dataclass(frozen=True)
class OrderLine:
    """注文履歴の明細."""

    order_item_id: int | str
    product_name: str
    quantity: int
    unit_price: Money

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderLine:
        """APIレスポンスの辞書から生成する."""
        return cls(
            order_item_id=data["orderItemId"],
            product_name=data.get("productName") or "",
            quantity=int(data.get("quantity") or 0),
            unit_price=_money_or_zero(data.get("unitPrice")),
        )

    def subtotal(self) -> Money:
        """小計."""
        return self.unit_price.multiply(self.quantity)


@dataclass(frozen=True)
class OrderSummary:
    """GET /orders/me が返す1注文."""

    order_id: OrderId
    order_date: datetime
    total_amount: Money
    status: OrderStatus
    raw_status: str
    payment_intent_id: Optional[str] = None
    items: list[OrderLine] = field(default_factory=list)

    def __post_init__(self) -> None:
        """オフセットのない注文日時はUTCとみなす."""
        if self.order_date.tzinfo is None:
            object.__setattr__(self, "order_date", self.order_date.replace(tzinfo=timezone.utc))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderSummary:
        """APIレスポンスの辞書から生成する."""
        raw_status = data.get("status") or ""
        return cls(
            order_id=OrderId(data["orderId"]),
            order_date=datetime.fromisoformat(data["orderDate"]),
            total_amount=_money_or_zero(data.get("totalAmount")),
            status=OrderStatus.from_value(raw_status),
            raw_status=raw_status,
            payment_intent_id=data.get("paymentIntentId"),
            items=[OrderLine.from_dict(item) for item in data.get("items") or []],
        )

    def get_item_count(self) -> int:
        """商品点数を取得する."""
        return sum(item.quantity for item in self.items)
