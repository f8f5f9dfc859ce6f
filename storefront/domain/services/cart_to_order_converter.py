"""カートから注文リクエストへの変換ドメインサービス."""
from ..entities import Cart
from ..value_objects import OrderRequest, OrderRequestItem, PaymentMethodRef


class CartToOrderConverter:
    """カートのスナップショットを OrderRequest に変換するサービス."""

    @staticmethod
    def convert(cart: Cart, payment_method_ref: PaymentMethodRef) -> OrderRequest:
        """明細を (商品ID, 数量) の並びに変換する."""
        items = tuple(
            OrderRequestItem(product_id=line.product_id, quantity=line.quantity)
            for line in cart.lines
        )
        return OrderRequest(items=items, payment_method_ref=payment_method_ref)
