"""カートの永続化形式への変換ドメインサービス.

保存形式は明細のJSON配列:
    [{"productId": 1, "name": "...", "price": 10.0, "stockQuantity": 5, "quantity": 2}]
"""
import json
from decimal import Decimal
from typing import Any

from ..entities import Cart, CartLine
from ..identifiers import ProductId
from ..value_objects import Money


class CartHydrationError(ValueError):
    """保存済みカートを復元できないエラー."""

    pass


class CartSerializer:
    """CartとJSON文字列の相互変換."""

    @staticmethod
    def dumps(cart: Cart) -> str:
        """CartをJSON文字列に変換する."""
        return json.dumps([CartSerializer._line_to_dict(line) for line in cart.lines])

    @staticmethod
    def loads(raw: str) -> Cart:
        """JSON文字列からCartを復元する.

        Raises:
            CartHydrationError: JSONが壊れている、または明細の形式が不正な場合
        """
        try:
            data = json.loads(raw, parse_float=Decimal)
        except (TypeError, ValueError) as e:
            raise CartHydrationError(f"Stored cart is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise CartHydrationError("Stored cart must be a JSON array")

        lines: list[CartLine] = []
        seen: set[ProductId] = set()
        for entry in data:
            line = CartSerializer._line_from_dict(entry)
            if line.product_id in seen:
                raise CartHydrationError(f"Duplicate product in stored cart: {line.product_id}")
            seen.add(line.product_id)
            lines.append(line)
        return Cart(lines=tuple(lines))

    @staticmethod
    def _line_to_dict(line: CartLine) -> dict[str, Any]:
        return {
            "productId": line.product_id.value,
            "name": line.name,
            "price": line.unit_price.to_float(),
            "stockQuantity": line.quantity_available,
            "quantity": line.quantity,
        }

    @staticmethod
    def _line_from_dict(entry: Any) -> CartLine:
        if not isinstance(entry, dict):
            raise CartHydrationError("Stored cart line must be a JSON object")
        try:
            quantity = entry["quantity"]
            if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
                raise CartHydrationError(f"Invalid quantity in stored cart: {quantity!r}")
            return CartLine(
                product_id=ProductId(entry["productId"]),
                name=str(entry["name"]),
                unit_price=Money.of(entry["price"]),
                quantity_available=int(entry.get("stockQuantity") or 0),
                quantity=quantity,
            )
        except KeyError as e:
            raise CartHydrationError(f"Missing field in stored cart line: {e}") from e
        except CartHydrationError:
            raise
        except (TypeError, ValueError) as e:
            raise CartHydrationError(f"Invalid stored cart line: {e}") from e
