"""カード入力を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CardInput:
    """トークン化前の生のカード入力.

    カード番号とCVCはreprに含めない。
    """

    number: str = field(repr=False)
    exp_month: int
    exp_year: int
    cvc: str = field(repr=False)

    @property
    def last4(self) -> str:
        """カード番号の下4桁."""
        return self.number[-4:]

    def masked_number(self) -> str:
        """マスク済みカード番号."""
        return f"**** **** **** {self.last4}"


@dataclass(frozen=True)
class CardInputHandle:
    """トークン化サービスが収集したカード入力への不透明なハンドル."""

    handle_id: str
    card: CardInput = field(repr=False)
