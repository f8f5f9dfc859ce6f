"""Stripe 決済トークン化の実装.

公開可能キーで POST /v1/payment_methods を呼び、カード入力を
PaymentMethod ID（"pm_..."）に交換する。カード番号はログに出さない。
"""
import logging
import os
import re
import uuid
from datetime import date

import requests

from storefront.domain.ports import (
    PaymentTokenizer,
    TokenizationError,
    TokenizerUnavailableError,
)
from storefront.domain.value_objects import CardInput, CardInputHandle, PaymentMethodRef

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.stripe.com"
API_TIMEOUT_SECONDS = 30

_CARD_NUMBER = re.compile(r"^\d{12,19}$")
_CVC = re.compile(r"^\d{3,4}$")


class StripePaymentTokenizer(PaymentTokenizer):
    """Stripe API を使う決済トークン化サービス."""

    def __init__(
        self,
        publishable_key: str | None = None,
        api_base_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """初期化."""
        self._publishable_key = publishable_key or os.environ.get("STRIPE_PUBLISHABLE_KEY", "")
        self._api_base_url = (
            api_base_url or os.environ.get("STRIPE_API_URL", DEFAULT_API_BASE_URL)
        ).rstrip("/")
        self._session = session or requests.Session()

    def is_ready(self) -> bool:
        """公開可能キーが設定されているか."""
        return bool(self._publishable_key)

    def collect_card_input(self, card_input: CardInput) -> CardInputHandle:
        """カード入力の形式を確認してハンドルを返す."""
        number = card_input.number.replace(" ", "").replace("-", "")
        if not _CARD_NUMBER.match(number):
            raise TokenizationError("Your card number is incomplete.", code="incomplete_number")
        if not 1 <= card_input.exp_month <= 12:
            raise TokenizationError(
                "Your card's expiration date is invalid.", code="invalid_expiry_month"
            )
        today = date.today()
        if (card_input.exp_year, card_input.exp_month) < (today.year, today.month):
            raise TokenizationError(
                "Your card's expiration year is in the past.", code="invalid_expiry_year"
            )
        if not _CVC.match(card_input.cvc):
            raise TokenizationError("Your card's security code is incomplete.", code="incomplete_cvc")

        normalized = CardInput(
            number=number,
            exp_month=card_input.exp_month,
            exp_year=card_input.exp_year,
            cvc=card_input.cvc,
        )
        return CardInputHandle(handle_id=uuid.uuid4().hex, card=normalized)

    def create_payment_method(self, handle: CardInputHandle) -> PaymentMethodRef:
        """カード入力をPaymentMethodに交換する.

        Raises:
            TokenizationError: カードが拒否された場合（メッセージはStripeのもの）
            TokenizerUnavailableError: 未設定・通信失敗・想定外の応答の場合
        """
        if not self.is_ready():
            raise TokenizerUnavailableError("Stripe publishable key is not configured")

        card = handle.card
        data = {
            "type": "card",
            "card[number]": card.number,
            "card[exp_month]": str(card.exp_month),
            "card[exp_year]": str(card.exp_year),
            "card[cvc]": card.cvc,
        }
        try:
            response = self._session.post(
                f"{self._api_base_url}/v1/payment_methods",
                data=data,
                headers={"Authorization": f"Bearer {self._publishable_key}"},
                timeout=API_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            logger.error(f"Failed to reach Stripe: {e}")
            raise TokenizerUnavailableError(f"Failed to reach Stripe: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code == 200 and body.get("id"):
            logger.info(f"Created payment method for card ending {card.last4}")
            return PaymentMethodRef(body["id"])

        error = body.get("error")
        if not isinstance(error, dict):
            error = {}
        if error.get("type") == "card_error" or response.status_code == 402:
            raise TokenizationError(
                error.get("message") or "Your card was declined.",
                code=error.get("code"),
            )
        if error.get("type") == "invalid_request_error" and (error.get("param") or "").startswith("card"):
            raise TokenizationError(
                error.get("message") or "Your card details are invalid.",
                code=error.get("code"),
            )

        logger.error(
            f"Unexpected Stripe response (HTTP {response.status_code}): {error.get('message')}"
        )
        raise TokenizerUnavailableError(
            f"Stripe returned HTTP {response.status_code}: {error.get('message')}"
        )
