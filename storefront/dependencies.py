"""依存性注入コンテナ."""
from storefront.application.cart_store import PersistentCartStore
from storefront.application.use_cases.add_to_cart import AddToCartUseCase
from storefront.application.use_cases.checkout import CheckoutUseCase
from storefront.application.use_cases.clear_cart import ClearCartUseCase
from storefront.application.use_cases.get_cart import GetCartUseCase
from storefront.application.use_cases.get_order_history import GetOrderHistoryUseCase
from storefront.application.use_cases.get_product_detail import GetProductDetailUseCase
from storefront.application.use_cases.get_products import GetProductsUseCase
from storefront.application.use_cases.remove_from_cart import RemoveFromCartUseCase
from storefront.application.use_cases.update_cart_quantity import UpdateCartQuantityUseCase
from storefront.domain.ports import (
    CommerceBackend,
    IdentityProvider,
    KeyValueStorage,
    PaymentTokenizer,
)
from storefront.infrastructure.providers.commerce_backend_factory import create_commerce_backend
from storefront.infrastructure.providers.payment_tokenizer_factory import (
    create_payment_tokenizer,
)
from storefront.infrastructure.providers.stored_session_identity_provider import (
    StoredSessionIdentityProvider,
)
from storefront.infrastructure.storage.key_value_storage_factory import create_key_value_storage


class Dependencies:
    """依存性を管理するコンテナ.

    アダプタの種類は環境変数で切り替える
    （STOREFRONT_STORAGE / COMMERCE_BACKEND / PAYMENT_TOKENIZER）。
    カートストアは1プロセスに1つで、初回取得時に保存済みカートを読み込む。
    """

    _storage: KeyValueStorage | None = None
    _identity_provider: IdentityProvider | None = None
    _commerce_backend: CommerceBackend | None = None
    _payment_tokenizer: PaymentTokenizer | None = None
    _cart_store: PersistentCartStore | None = None
    _checkout_use_case: CheckoutUseCase | None = None

    @classmethod
    def get_storage(cls) -> KeyValueStorage:
        """キーバリューストレージを取得する."""
        if cls._storage is None:
            cls._storage = create_key_value_storage()
        return cls._storage

    @classmethod
    def set_storage(cls, storage: KeyValueStorage) -> None:
        """キーバリューストレージを設定する（テスト用）."""
        cls._storage = storage

    @classmethod
    def get_identity_provider(cls) -> IdentityProvider:
        """セッション・IDプロバイダを取得する."""
        if cls._identity_provider is None:
            cls._identity_provider = StoredSessionIdentityProvider(cls.get_storage())
        return cls._identity_provider

    @classmethod
    def set_identity_provider(cls, provider: IdentityProvider) -> None:
        """セッション・IDプロバイダを設定する（テスト用）."""
        cls._identity_provider = provider

    @classmethod
    def get_commerce_backend(cls) -> CommerceBackend:
        """コマースバックエンドを取得する."""
        if cls._commerce_backend is None:
            cls._commerce_backend = create_commerce_backend(cls.get_identity_provider())
        return cls._commerce_backend

    @classmethod
    def set_commerce_backend(cls, backend: CommerceBackend) -> None:
        """コマースバックエンドを設定する（テスト用）."""
        cls._commerce_backend = backend

    @classmethod
    def get_payment_tokenizer(cls) -> PaymentTokenizer:
        """決済トークン化サービスを取得する."""
        if cls._payment_tokenizer is None:
            cls._payment_tokenizer = create_payment_tokenizer()
        return cls._payment_tokenizer

    @classmethod
    def set_payment_tokenizer(cls, tokenizer: PaymentTokenizer) -> None:
        """決済トークン化サービスを設定する（テスト用）."""
        cls._payment_tokenizer = tokenizer

    @classmethod
    def get_cart_store(cls) -> PersistentCartStore:
        """カートストアを取得する（初回のみ保存済みカートを読み込む）."""
        if cls._cart_store is None:
            store = PersistentCartStore(cls.get_storage())
            store.hydrate()
            cls._cart_store = store
        return cls._cart_store

    @classmethod
    def get_add_to_cart_use_case(cls) -> AddToCartUseCase:
        """カート追加ユースケースを取得する."""
        return AddToCartUseCase(cls.get_cart_store())

    @classmethod
    def get_remove_from_cart_use_case(cls) -> RemoveFromCartUseCase:
        """カート明細削除ユースケースを取得する."""
        return RemoveFromCartUseCase(cls.get_cart_store())

    @classmethod
    def get_update_cart_quantity_use_case(cls) -> UpdateCartQuantityUseCase:
        """カート数量変更ユースケースを取得する."""
        return UpdateCartQuantityUseCase(cls.get_cart_store())

    @classmethod
    def get_clear_cart_use_case(cls) -> ClearCartUseCase:
        """カートクリアユースケースを取得する."""
        return ClearCartUseCase(cls.get_cart_store())

    @classmethod
    def get_cart_use_case(cls) -> GetCartUseCase:
        """カート取得ユースケースを取得する."""
        return GetCartUseCase(cls.get_cart_store())

    @classmethod
    def get_products_use_case(cls) -> GetProductsUseCase:
        """商品一覧取得ユースケースを取得する."""
        return GetProductsUseCase(cls.get_commerce_backend())

    @classmethod
    def get_product_detail_use_case(cls) -> GetProductDetailUseCase:
        """商品詳細取得ユースケースを取得する."""
        return GetProductDetailUseCase(cls.get_commerce_backend())

    @classmethod
    def get_order_history_use_case(cls) -> GetOrderHistoryUseCase:
        """注文履歴取得ユースケースを取得する."""
        return GetOrderHistoryUseCase(cls.get_commerce_backend(), cls.get_identity_provider())

    @classmethod
    def get_checkout_use_case(cls) -> CheckoutUseCase:
        """チェックアウトユースケースを取得する.

        同時実行ガードを共有するため、同じインスタンスを返す。
        """
        if cls._checkout_use_case is None:
            cls._checkout_use_case = CheckoutUseCase(
                cart_store=cls.get_cart_store(),
                payment_tokenizer=cls.get_payment_tokenizer(),
                commerce_backend=cls.get_commerce_backend(),
                identity_provider=cls.get_identity_provider(),
            )
        return cls._checkout_use_case

    @classmethod
    def reset(cls) -> None:
        """キャッシュをリセットする（テスト用）."""
        cls._storage = None
        cls._identity_provider = None
        cls._commerce_backend = None
        cls._payment_tokenizer = None
        cls._cart_store = None
        cls._checkout_use_case = None
