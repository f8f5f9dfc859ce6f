"""保存済みセッションからユーザー情報を提供する実装.

ログイン処理が保存する "jwtToken" と "user" の2キーを読む。
トークンの検証は行わない（バックエンドが401/403で判定する）。
"""
import json
import logging

from storefront.domain.enums import Role
from storefront.domain.identifiers import UserId
from storefront.domain.ports import IdentityProvider, KeyValueStorage, PersistenceError
from storefront.domain.value_objects import Identity

logger = logging.getLogger(__name__)

TOKEN_KEY = "jwtToken"
USER_KEY = "user"


class StoredSessionIdentityProvider(IdentityProvider):
    """キーバリューストレージに保存されたセッションを読むプロバイダ."""

    def __init__(self, storage: KeyValueStorage) -> None:
        """初期化."""
        self._storage = storage

    def get_token(self) -> str | None:
        """Bearerトークンを取得する."""
        try:
            return self._storage.read(TOKEN_KEY) or None
        except PersistenceError as e:
            logger.warning(f"Failed to read session token: {e}")
            return None

    def current_identity(self) -> Identity | None:
        """ログイン中のユーザーを取得する.

        トークンがない、またはユーザー情報が壊れている場合は未ログインとみなす。
        """
        if self.get_token() is None:
            return None
        try:
            raw = self._storage.read(USER_KEY)
        except PersistenceError as e:
            logger.warning(f"Failed to read session user: {e}")
            return None
        if raw is None:
            return None

        try:
            data = json.loads(raw)
            roles = frozenset(
                role
                for role in (Role.from_value(value) for value in data.get("roles") or [])
                if role is not None
            )
            return Identity(
                user_id=UserId.from_session(data["id"]),
                username=data.get("username") or "",
                email=data.get("email"),
                roles=roles,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Stored session user is invalid, treating as signed out: {e}")
            return None

    def sign_in(self, token: str, identity: Identity) -> None:
        """ログイン結果を保存する."""
        user = {
            "id": identity.user_id.value,
            "username": identity.username,
            "email": identity.email,
            "roles": sorted(role.value for role in identity.roles),
        }
        self._storage.write(TOKEN_KEY, token)
        self._storage.write(USER_KEY, json.dumps(user))

    def sign_out(self) -> None:
        """セッションを削除する."""
        self._storage.remove(TOKEN_KEY)
        self._storage.remove(USER_KEY)
