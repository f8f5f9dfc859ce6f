"""セッション・ID プロバイダインターフェース."""
from abc import ABC, abstractmethod

from ..value_objects import Identity


class IdentityProvider(ABC):
    """現在のユーザー情報と認証トークンを提供する外部コラボレータ."""

    @abstractmethod
    def current_identity(self) -> Identity | None:
        """ログイン中のユーザーを取得する（未ログインならNone）."""
        pass

    @abstractmethod
    def get_token(self) -> str | None:
        """Bearerトークンを取得する."""
        pass
