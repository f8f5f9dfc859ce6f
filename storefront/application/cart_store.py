"""永続カートストア.

カート値の唯一の所有者。変更はすべて CartLedger を通し、
変更のたびに同期的に保存して購読者へ通知する。
複数プロセス（タブ）間の同時書き込みは調停しない（最後の保存が勝つ）。
"""
import logging
from typing import Callable

from storefront.domain.entities import Cart, Product
from storefront.domain.identifiers import ProductId
from storefront.domain.ports import KeyValueStorage, PersistenceError
from storefront.domain.services import CartHydrationError, CartLedger, CartSerializer
from storefront.domain.value_objects import CartTotals

logger = logging.getLogger(__name__)

DEFAULT_CART_KEY = "cartItems"

CartListener = Callable[[Cart], None]


class PersistentCartStore:
    """カートを永続ストレージと同期させるストア."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_CART_KEY) -> None:
        """初期化.

        Args:
            storage: 永続キーバリューストレージ
            key: カートを保存するキー
        """
        self._storage = storage
        self._key = key
        self._cart = Cart.empty()
        self._listeners: list[CartListener] = []

    @property
    def cart(self) -> Cart:
        """現在のカート（このセッションでの正）."""
        return self._cart

    def load(self) -> Cart:
        """保存済みカートを読み込む.

        未保存・破損・読み込み失敗のいずれも空カートとして扱い、例外は送出しない。
        """
        try:
            raw = self._storage.read(self._key)
        except PersistenceError as e:
            logger.warning(f"Failed to read stored cart, starting empty: {e}")
            return Cart.empty()

        if raw is None:
            return Cart.empty()

        try:
            return CartSerializer.loads(raw)
        except CartHydrationError as e:
            logger.warning(f"Failed to parse stored cart, starting empty: {e}")
            return Cart.empty()

    def save(self, cart: Cart) -> None:
        """カート全体を書き込む（失敗はログに残して握りつぶす）."""
        try:
            self._storage.write(self._key, CartSerializer.dumps(cart))
        except PersistenceError as e:
            logger.error(f"Failed to save cart, keeping in-memory state only: {e}")

    def hydrate(self) -> Cart:
        """セッション開始時に保存済みカートを現在値として取り込む."""
        self._cart = self.load()
        logger.info(f"Cart hydrated with {self._cart.get_line_count()} line(s)")
        self._notify()
        return self._cart

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """カート変更の購読を登録し、解除関数を返す."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_item(self, product: Product, quantity: int = 1) -> Cart:
        """商品を追加する."""
        return self._apply(CartLedger.add_item(self._cart, product, quantity))

    def remove_item(self, product_id: ProductId) -> Cart:
        """明細を削除する."""
        return self._apply(CartLedger.remove_item(self._cart, product_id))

    def update_quantity(self, product_id: ProductId, new_quantity: int) -> Cart:
        """数量を変更する."""
        return self._apply(CartLedger.update_quantity(self._cart, product_id, new_quantity))

    def clear(self) -> Cart:
        """カートを空にする."""
        return self._apply(CartLedger.clear(self._cart))

    def totals(self) -> CartTotals:
        """現在のカートの合計."""
        return CartLedger.totals(self._cart)

    def _apply(self, cart: Cart) -> Cart:
        self._cart = cart
        self.save(cart)
        self._notify()
        return cart

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._cart)
            except Exception:
                logger.exception("Cart listener failed")
