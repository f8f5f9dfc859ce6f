"""ログインユーザー識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """セッションに保存されたユーザーID.

    バックエンドは数値IDを返すが、比較とログ出力のため文字列で保持する。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str):
            raise TypeError("UserId value must be a string; use UserId.from_session()")
        if not self.value.strip():
            raise ValueError("UserId cannot be blank")

    @classmethod
    def from_session(cls, raw: int | str) -> UserId:
        """保存済みユーザー情報の "id" から生成する."""
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise ValueError(f"Invalid user id in session: {raw!r}")
        return cls(str(raw).strip())

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
