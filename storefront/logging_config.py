"""ログ設定.

アプリケーション全体のログ出力形式とレベルを一か所で設定する。
各モジュールは logging.getLogger(__name__) で取得したロガーを使う。
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_NOISY_LOGGERS = ("urllib3", "botocore", "boto3")


def setup_logging(level: str | int | None = None) -> None:
    """ルートロガーを設定する.

    Args:
        level: ログレベル（未指定なら STOREFRONT_LOG_LEVEL、既定は INFO）
    """
    resolved = level or os.environ.get("STOREFRONT_LOG_LEVEL", "INFO")
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # 外部ライブラリのログを抑える
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
