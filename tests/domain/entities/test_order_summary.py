"""OrderSummaryのテスト."""
from datetime import datetime, timedelta, timezone

from storefront.domain.entities import OrderSummary
from storefront.domain.enums import OrderStatus
from storefront.domain.identifiers import OrderId
from storefront.domain.value_objects import Money


class TestOrderSummary:
    """OrderSummaryの単体テスト."""

    def test_from_dictでAPIレスポンスから生成(self) -> None:
        order = OrderSummary.from_dict(
            {
                "orderId": 10,
                "orderDate": "2025-03-01T12:30:00",
                "totalAmount": 25.5,
                "status": "PAID",
                "paymentIntentId": "pi_123",
                "items": [
                    {"orderItemId": 1, "productName": "Mouse", "quantity": 2, "unitPrice": 10.0},
                    {"orderItemId": 2, "productName": "Pad", "quantity": 1, "unitPrice": 5.5},
                ],
            }
        )
        assert order.order_id == OrderId(10)
        assert order.order_date == datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
        assert order.total_amount == Money.of("25.5")
        assert order.status == OrderStatus.PAID
        assert order.payment_intent_id == "pi_123"
        assert order.get_item_count() == 3
        assert order.items[0].subtotal() == Money.of(20)

    def test_未知のステータスと欠損値(self) -> None:
        order = OrderSummary.from_dict(
            {
                "orderId": 11,
                "orderDate": "2025-03-02T08:00:00",
                "totalAmount": None,
                "status": "SHIPPED",
                "items": [{"orderItemId": 3, "productName": "Cable", "quantity": 1, "unitPrice": None}],
            }
        )
        assert order.status == OrderStatus.UNKNOWN
        assert order.raw_status == "SHIPPED"
        assert order.total_amount == Money.zero()
        assert order.payment_intent_id is None
        assert order.items[0].unit_price == Money.zero()

    def test_オフセット付きの日時はそのまま保持(self) -> None:
        order = OrderSummary.from_dict(
            {"orderId": 12, "orderDate": "2025-03-02T21:00:00+09:00", "status": "PAID"}
        )
        assert order.order_date.utcoffset() == timedelta(hours=9)
        assert order.order_date == datetime(2025, 3, 2, 12, 0, tzinfo=timezone.utc)

    def test_直接生成でもオフセットなしはUTC(self) -> None:
        order = OrderSummary(
            order_id=OrderId(13),
            order_date=datetime(2025, 3, 3, 9, 0),
            total_amount=Money.zero(),
            status=OrderStatus.PAID,
            raw_status="PAID",
        )
        assert order.order_date.tzinfo == timezone.utc
