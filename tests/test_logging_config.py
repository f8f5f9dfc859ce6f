"""ログ設定のテスト."""
import logging
from unittest.mock import patch

import pytest

from storefront.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """setup_loggingの単体テスト."""

    def test_既定はINFO(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_環境変数でレベルを変更できる(self) -> None:
        with patch.dict("os.environ", {"STOREFRONT_LOG_LEVEL": "debug"}):
            setup_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_引数のレベルが優先される(self) -> None:
        with patch.dict("os.environ", {"STOREFRONT_LOG_LEVEL": "DEBUG"}):
            setup_logging(logging.ERROR)
        assert logging.getLogger().level == logging.ERROR

    def test_不明なレベルはINFO(self) -> None:
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_外部ライブラリのログは抑える(self) -> None:
        setup_logging("DEBUG")
        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("botocore").level == logging.WARNING
