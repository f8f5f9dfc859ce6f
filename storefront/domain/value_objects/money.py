"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（ドル）を表現する値オブジェクト.

    内部は Decimal で保持し、加算・乗算では丸めない。
    丸めは表示時の rounded() / format() でのみ行う。
    """

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, Decimal):
            raise TypeError("Money value must be a Decimal; use Money.of()")
        if not self.value.is_finite():
            raise ValueError("Money value must be finite")
        if self.value < 0:
            raise ValueError("Money value cannot be negative")

    @classmethod
    def of(cls, value: int | float | str | Decimal) -> Money:
        """数値からMoneyを生成する（floatは文字列経由で変換）."""
        if isinstance(value, bool):
            raise TypeError("Money value cannot be a boolean")
        if isinstance(value, float):
            value = str(value)
        try:
            return cls(Decimal(value))
        except InvalidOperation as e:
            raise ValueError(f"Invalid money value: {value!r}") from e

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def rounded(self) -> Money:
        """小数点以下2桁に丸めたMoneyを返す."""
        return Money(self.value.quantize(_CENT, rounding=ROUND_HALF_UP))

    def to_float(self) -> float:
        """JSON送信用のfloat値."""
        return float(self.value)

    def format(self) -> str:
        """表示用フォーマット（例: "$1,234.50"）."""
        return f"${self.rounded().value:,.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
