"""チェックアウト実行ユースケース.

カートのスナップショットを取り、
トークン化 → 注文送信 → サーバーステータス解釈 → カート反映
の順に進める。想定内の失敗は例外ではなく CheckoutResult で返す。
"""
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from storefront.application.cart_store import PersistentCartStore
from storefront.domain.entities import CheckoutAttempt
from storefront.domain.enums import CheckoutOutcome, CheckoutStage, OrderStatus
from storefront.domain.ports import (
    AuthError,
    CommerceBackend,
    CommerceBackendError,
    IdentityProvider,
    NetworkError,
    PaymentTokenizer,
    TokenizationError,
    TokenizerUnavailableError,
)
from storefront.domain.services import CartToOrderConverter
from storefront.domain.value_objects import CardInputHandle

logger = logging.getLogger(__name__)

MESSAGE_PAID = "Payment successful! Your order has been placed."
MESSAGE_REQUIRES_ACTION = (
    "Payment requires additional action. Please check your email or order history."
)
MESSAGE_IN_FLIGHT = "A checkout is already in progress."
MESSAGE_TOKENIZER_NOT_READY = "Payment form is not ready yet."
MESSAGE_NOT_LOGGED_IN = "Please log in to complete your purchase."
MESSAGE_EMPTY_CART = "Your cart is empty."
MESSAGE_TOKENIZER_UNAVAILABLE = "Payment service is unavailable. Please try again."
MESSAGE_AUTH_FAILED = "Your session has expired. Please log in again."
MESSAGE_CANCELLED = "Checkout was cancelled before the order was submitted."


@dataclass(frozen=True)
class CheckoutResult:
    """チェックアウト結果."""

    stage: CheckoutStage
    message: str
    attempt_id: Optional[str] = None
    order_status: Optional[OrderStatus] = None
    error: Optional[Exception] = None

    @property
    def outcome(self) -> CheckoutOutcome:
        """画面向けの結果区分."""
        return self.stage.to_outcome()

    @property
    def is_success(self) -> bool:
        """支払いが完了したか."""
        return self.stage == CheckoutStage.PAID

    @classmethod
    def not_ready(cls, message: str) -> "CheckoutResult":
        """ネットワーク呼び出し前に中止した結果."""
        return cls(stage=CheckoutStage.NOT_READY, message=message)

    @classmethod
    def from_attempt(
        cls, attempt: CheckoutAttempt, error: Optional[Exception] = None
    ) -> "CheckoutResult":
        """終端した試行から生成する."""
        return cls(
            stage=attempt.stage,
            message=attempt.message or "",
            attempt_id=attempt.attempt_id,
            order_status=attempt.order_status,
            error=error,
        )


class CheckoutUseCase:
    """チェックアウトを実行するユースケース.

    インスタンス1つが画面1つ分にあたり、同時に進行できる試行は1つだけ。
    進行中に再度呼ばれた場合は待たずに NOT_READY を返す。
    """

    def __init__(
        self,
        cart_store: PersistentCartStore,
        payment_tokenizer: PaymentTokenizer,
        commerce_backend: CommerceBackend,
        identity_provider: IdentityProvider,
    ) -> None:
        """初期化.

        Args:
            cart_store: 永続カートストア
            payment_tokenizer: 決済トークン化サービス
            commerce_backend: コマースバックエンド
            identity_provider: セッション・IDプロバイダ
        """
        self._cart_store = cart_store
        self._payment_tokenizer = payment_tokenizer
        self._commerce_backend = commerce_backend
        self._identity_provider = identity_provider
        self._in_flight = threading.Lock()

    def is_processing(self) -> bool:
        """試行が進行中か判定する."""
        return self._in_flight.locked()

    def execute(
        self,
        card_handle: Optional[CardInputHandle],
        cancel_event: Optional[threading.Event] = None,
    ) -> CheckoutResult:
        """チェックアウトを実行する.

        Args:
            card_handle: トークン化サービスが収集したカード入力
            cancel_event: セットされていれば注文送信前に中止する

        Returns:
            チェックアウト結果
        """
        if not self._in_flight.acquire(blocking=False):
            logger.warning("Checkout rejected: another attempt is in flight")
            return CheckoutResult.not_ready(MESSAGE_IN_FLIGHT)
        try:
            return self._run(card_handle, cancel_event)
        finally:
            self._in_flight.release()

    def _run(
        self,
        card_handle: Optional[CardInputHandle],
        cancel_event: Optional[threading.Event],
    ) -> CheckoutResult:
        # ガード: ネットワーク呼び出し前に判定できるものはここで止める
        if card_handle is None or not self._payment_tokenizer.is_ready():
            return CheckoutResult.not_ready(MESSAGE_TOKENIZER_NOT_READY)

        identity = self._identity_provider.current_identity()
        if identity is None:
            return CheckoutResult.not_ready(MESSAGE_NOT_LOGGED_IN)

        snapshot = self._cart_store.cart
        if snapshot.is_empty():
            return CheckoutResult.not_ready(MESSAGE_EMPTY_CART)

        attempt = CheckoutAttempt.start(snapshot)
        log_prefix = f"[Checkout: {attempt.attempt_id}]"
        logger.info(
            f"{log_prefix} Started for user {identity.user_id} "
            f"with {snapshot.get_line_count()} line(s)"
        )

        # 1. トークン化
        attempt.mark_tokenizing()
        try:
            payment_method_ref = self._payment_tokenizer.create_payment_method(card_handle)
        except TokenizationError as e:
            logger.warning(f"{log_prefix} Tokenization rejected: {e.message}")
            attempt.mark_tokenize_failed(e.message)
            return CheckoutResult.from_attempt(attempt, error=e)
        except TokenizerUnavailableError as e:
            logger.error(f"{log_prefix} Tokenization service unavailable: {e}")
            attempt.mark_tokenize_failed(MESSAGE_TOKENIZER_UNAVAILABLE)
            return CheckoutResult.from_attempt(attempt, error=e)
        attempt.mark_tokenized(payment_method_ref)

        if cancel_event is not None and cancel_event.is_set():
            logger.info(f"{log_prefix} Cancelled before order submission")
            attempt.mark_cancelled(MESSAGE_CANCELLED)
            return CheckoutResult.from_attempt(attempt)

        # 2. 注文送信（開始時のスナップショットから組み立てる）
        request = CartToOrderConverter.convert(attempt.line_snapshot, payment_method_ref)
        attempt.mark_submitting()
        try:
            submission = self._commerce_backend.create_order(request)
        except AuthError as e:
            logger.warning(f"{log_prefix} Order rejected by auth (HTTP {e.status_code})")
            attempt.mark_submit_failed(MESSAGE_AUTH_FAILED)
            return CheckoutResult.from_attempt(attempt, error=e)
        except CommerceBackendError as e:
            logger.error(f"{log_prefix} Order placement failed (HTTP {e.status_code}): {e.message}")
            attempt.mark_submit_failed(f"Order placement failed: {e.message}")
            return CheckoutResult.from_attempt(attempt, error=e)
        except NetworkError as e:
            logger.error(f"{log_prefix} Order placement failed: {e}")
            attempt.mark_submit_failed(f"Order placement failed: {e}")
            return CheckoutResult.from_attempt(attempt, error=e)

        # 3. サーバーステータスの解釈
        status = OrderStatus.from_value(submission.order_status)
        if submission.is_created() and status == OrderStatus.PAID:
            attempt.mark_paid(MESSAGE_PAID)
            self._cart_store.clear()
            logger.info(f"{log_prefix} Paid; cart cleared")
        elif submission.is_created() and status == OrderStatus.REQUIRES_ACTION:
            attempt.mark_requires_action(MESSAGE_REQUIRES_ACTION)
            logger.info(f"{log_prefix} Payment requires further action; cart kept")
        else:
            attempt.mark_unknown_status(
                f"Order failed. Status: {submission.order_status or 'Unknown'}.",
                order_status=status,
            )
            logger.error(
                f"{log_prefix} Unexpected order response "
                f"(HTTP {submission.http_status}, status={submission.order_status})"
            )
        return CheckoutResult.from_attempt(attempt)
