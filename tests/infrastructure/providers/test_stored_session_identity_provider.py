"""StoredSessionIdentityProvider のテスト."""
import json
from unittest.mock import MagicMock

from storefront.domain.enums import Role
from storefront.domain.identifiers import UserId
from storefront.domain.ports import KeyValueStorage, PersistenceError
from storefront.domain.value_objects import Identity
from storefront.infrastructure.providers import StoredSessionIdentityProvider
from storefront.infrastructure.storage import InMemoryKeyValueStorage


def _stored_user(**overrides) -> str:
    user = {"id": 42, "username": "alice", "email": "alice@example.com", "roles": ["ROLE_USER"]}
    user.update(overrides)
    return json.dumps(user)


class TestStoredSessionIdentityProvider:
    """StoredSessionIdentityProviderの単体テスト."""

    def test_保存済みセッションからユーザーを取得(self) -> None:
        storage = InMemoryKeyValueStorage({"jwtToken": "jwt", "user": _stored_user()})
        provider = StoredSessionIdentityProvider(storage)

        identity = provider.current_identity()

        assert identity.user_id == UserId("42")
        assert identity.username == "alice"
        assert identity.has_role(Role.USER) is True
        assert identity.is_admin() is False
        assert provider.get_token() == "jwt"

    def test_未知のロールは無視する(self) -> None:
        storage = InMemoryKeyValueStorage(
            {"jwtToken": "jwt", "user": _stored_user(roles=["ROLE_ADMIN", "ROLE_MODERATOR"])}
        )
        identity = StoredSessionIdentityProvider(storage).current_identity()
        assert identity.roles == frozenset({Role.ADMIN})

    def test_トークンがなければ未ログイン(self) -> None:
        storage = InMemoryKeyValueStorage({"user": _stored_user()})
        provider = StoredSessionIdentityProvider(storage)
        assert provider.current_identity() is None
        assert provider.get_token() is None

    def test_ユーザー情報が壊れていれば未ログイン(self) -> None:
        storage = InMemoryKeyValueStorage({"jwtToken": "jwt", "user": "not json"})
        assert StoredSessionIdentityProvider(storage).current_identity() is None

    def test_ユーザーIDがなければ未ログイン(self) -> None:
        storage = InMemoryKeyValueStorage({"jwtToken": "jwt", "user": '{"username": "bob"}'})
        assert StoredSessionIdentityProvider(storage).current_identity() is None

    def test_読み込み失敗は未ログイン(self) -> None:
        storage = MagicMock(spec=KeyValueStorage)
        storage.read.side_effect = PersistenceError("disk error")
        provider = StoredSessionIdentityProvider(storage)
        assert provider.get_token() is None
        assert provider.current_identity() is None

    def test_sign_inとsign_out(self) -> None:
        storage = InMemoryKeyValueStorage()
        provider = StoredSessionIdentityProvider(storage)
        identity = Identity(
            user_id=UserId("7"),
            username="carol",
            email=None,
            roles=frozenset({Role.USER, Role.ADMIN}),
        )

        provider.sign_in("token-7", identity)

        assert provider.current_identity() == identity
        assert json.loads(storage.read("user"))["roles"] == ["ROLE_ADMIN", "ROLE_USER"]

        provider.sign_out()

        assert provider.current_identity() is None
        assert storage.read("user") is None

    def test_ユーザーIDが真偽値なら未ログイン(self) -> None:
        storage = InMemoryKeyValueStorage({"jwtToken": "jwt", "user": _stored_user(id=True)})
        assert StoredSessionIdentityProvider(storage).current_identity() is None
