"""注文送信結果の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

HTTP_CREATED = 201


@dataclass(frozen=True)
class OrderSubmission:
    """注文作成エンドポイントの2xx応答."""

    http_status: int
    order_status: str | None
    body: dict[str, Any] = field(default_factory=dict)

    def is_created(self) -> bool:
        """HTTP 201 で受け付けられたか判定する."""
        return self.http_status == HTTP_CREATED
