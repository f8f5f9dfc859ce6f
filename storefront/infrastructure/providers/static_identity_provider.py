"""固定のユーザー情報を返すプロバイダ（テスト用）."""
from storefront.domain.ports import IdentityProvider
from storefront.domain.value_objects import Identity


class StaticIdentityProvider(IdentityProvider):
    """コンストラクタで与えたユーザーとトークンを返す."""

    def __init__(self, identity: Identity | None = None, token: str | None = None) -> None:
        """初期化."""
        self._identity = identity
        self._token = token

    def set_identity(self, identity: Identity | None) -> None:
        """ユーザーを差し替える."""
        self._identity = identity

    def current_identity(self) -> Identity | None:
        """ユーザーを返す."""
        return self._identity

    def get_token(self) -> str | None:
        """トークンを返す."""
        return self._token
