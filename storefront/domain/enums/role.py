"""ユーザーロールの列挙型."""
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """バックエンドが付与するロール."""

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"

    @classmethod
    def from_value(cls, value: str) -> Role | None:
        """文字列から変換する（未知のロールはNone）."""
        for role in cls:
            if role.value == value:
                return role
        return None
