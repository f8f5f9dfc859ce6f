"""ログインユーザーの識別情報."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..enums import Role
from ..identifiers import UserId


@dataclass(frozen=True)
class Identity:
    """セッションから得られるユーザー情報（参照のみ、変更しない）."""

    user_id: UserId
    username: str
    email: str | None = None
    roles: frozenset[Role] = field(default_factory=frozenset)

    def has_role(self, role: Role) -> bool:
        """指定ロールを持つか判定する."""
        return role in self.roles

    def is_admin(self) -> bool:
        """管理者か判定する."""
        return self.has_role(Role.ADMIN)
