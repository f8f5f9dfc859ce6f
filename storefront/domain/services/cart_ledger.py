"""カートの状態遷移を行うドメインサービス."""
from ..entities import Cart, CartLine, Product
from ..identifiers import ProductId
from ..value_objects import CartTotals, Money


class CartLedger:
    """Cart値に対する副作用のない遷移.

    どの操作も入力のCartを変更せず、新しいCartを返す。
    数量の正値チェックや在庫上限チェックは呼び出し側の責務。
    """

    @staticmethod
    def add_item(cart: Cart, product: Product, quantity: int = 1) -> Cart:
        """商品を追加する（既存明細があれば数量を加算）."""
        lines = list(cart.lines)
        for i, line in enumerate(lines):
            if line.product_id == product.product_id:
                # 追加時のスナップショットを優先し、価格や名前は更新しない
                lines[i] = line.with_quantity(line.quantity + quantity)
                return Cart(lines=tuple(lines))
        lines.append(CartLine.from_product(product, quantity))
        return Cart(lines=tuple(lines))

    @staticmethod
    def remove_item(cart: Cart, product_id: ProductId) -> Cart:
        """明細を削除する（存在しなければ何もしない）."""
        if not cart.contains(product_id):
            return cart
        return Cart(lines=tuple(line for line in cart.lines if line.product_id != product_id))

    @staticmethod
    def update_quantity(cart: Cart, product_id: ProductId, new_quantity: int) -> Cart:
        """数量を設定する（1未満は1に丸め、明細は削除しない）."""
        if not cart.contains(product_id):
            return cart
        quantity = max(1, new_quantity)
        return Cart(
            lines=tuple(
                line.with_quantity(quantity) if line.product_id == product_id else line
                for line in cart.lines
            )
        )

    @staticmethod
    def clear(cart: Cart) -> Cart:
        """空のカートを返す."""
        return Cart.empty()

    @staticmethod
    def totals(cart: Cart) -> CartTotals:
        """合計点数と合計金額を算出する."""
        total_items = 0
        total_price = Money.zero()
        for line in cart.lines:
            total_items += line.quantity
            total_price = total_price.add(line.subtotal())
        return CartTotals(total_items=total_items, total_price=total_price.rounded())
