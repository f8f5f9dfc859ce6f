"""コマースバックエンドのHTTP実装.

REST API (/products, /orders, /orders/me) を requests で呼び出す。
Bearerトークンはリクエストごとに IdentityProvider から取得して付与する。
"""
import logging
import os
from typing import Any, Callable, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from storefront.domain.entities import OrderSummary, Product
from storefront.domain.identifiers import ProductId
from storefront.domain.ports import (
    AuthError,
    CommerceBackend,
    CommerceBackendError,
    NetworkError,
    NotFoundError,
)
from storefront.domain.value_objects import OrderRequest, OrderSubmission

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8080/api"

TokenProvider = Callable[[], Optional[str]]


def _no_token() -> None:
    return None


class HttpCommerceBackend(CommerceBackend):
    """requests によるコマースバックエンドクライアント."""

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        base_url: str | None = None,
        token_provider: TokenProvider | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """初期化."""
        self._base_url = (
            base_url or os.environ.get("COMMERCE_API_URL", DEFAULT_API_BASE_URL)
        ).rstrip("/")
        self._token_provider = token_provider or _no_token
        self._timeout = timeout or float(
            os.environ.get("COMMERCE_API_TIMEOUT", self.DEFAULT_TIMEOUT)
        )
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """GETのみリトライするHTTPセッションを作成する.

        POST /orders は二重注文を避けるためリトライしない。
        """
        session = requests.Session()
        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[502, 503, 504],
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({"Content-Type": "application/json"})
        return session

    def list_products(self) -> list[Product]:
        """商品一覧を取得する."""
        data = self._request("GET", "/products")
        return [Product.from_dict(item) for item in data or []]

    def get_product(self, product_id: ProductId) -> Product:
        """商品を1件取得する."""
        data = self._request("GET", f"/products/{product_id.value}")
        return Product.from_dict(data)

    def create_order(self, request: OrderRequest) -> OrderSubmission:
        """注文を作成する."""
        response = self._send("POST", "/orders", json=request.to_payload())
        body = self._json_or_empty(response)
        order_status = body.get("status") if isinstance(body, dict) else None
        return OrderSubmission(
            http_status=response.status_code,
            order_status=order_status,
            body=body if isinstance(body, dict) else {},
        )

    def list_my_orders(self) -> list[OrderSummary]:
        """ログインユーザーの注文履歴を取得する."""
        data = self._request("GET", "/orders/me")
        try:
            return [OrderSummary.from_dict(item) for item in data or []]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"GET /orders/me returned an unreadable order: {e!r}")
            raise CommerceBackendError(f"Unreadable order history response: {e!r}") from e

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._send(method, path, **kwargs)
        return self._json_or_empty(response)

    def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        headers = {}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._session.request(
                method,
                f"{self._base_url}{path}",
                headers=headers,
                timeout=self._timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise NetworkError(f"Could not reach commerce backend: {e}") from e

        if 200 <= response.status_code < 300:
            return response

        message = self._extract_error_message(response)
        if response.status_code in (401, 403):
            logger.warning(f"Authentication or authorization error: {response.status_code}")
            raise AuthError(message, status_code=response.status_code, body=response.text)
        if response.status_code == 404:
            raise NotFoundError(message, status_code=404, body=response.text)
        logger.error(f"{method} {path} returned HTTP {response.status_code}: {message}")
        raise CommerceBackendError(message, status_code=response.status_code, body=response.text)

    @staticmethod
    def _json_or_empty(response: requests.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _extract_error_message(response: requests.Response) -> str:
        """エラーレスポンスから利用者向けメッセージを取り出す."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if body.get("message"):
                return str(body["message"])
            if isinstance(error, str) and error:
                return error
        elif isinstance(body, str) and body:
            return body

        text = (response.text or "").strip()
        if text:
            return text
        return f"HTTP {response.status_code}"
