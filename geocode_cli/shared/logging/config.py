"""ロギング設定

標準出力はリクエスト・レスポンスの表示に使うため、ログはすべて標準エラー出力へ書き出す。
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# WARNING 未満を出さないサードパーティロガー
_QUIET_LOGGERS = ("urllib3", "googlemaps", "google")

_logger_configured = False


def _cloud_logging_handler(project_id: Optional[str]) -> Optional[logging.Handler]:
    """Cloud Logging ハンドラーを作成（失敗時はNone）"""
    try:
        from google.cloud import logging as cloud_logging

        client = cloud_logging.Client(project=project_id)
        return cloud_logging.handlers.CloudLoggingHandler(client)
    except Exception as e:
        logging.getLogger(__name__).warning(f"Failed to enable Cloud Logging: {e}")
        return None


def setup_logging(
    level: str = "WARNING",
    enable_cloud_logging: bool = False,
    project_id: Optional[str] = None,
) -> None:
    """
    ルートロガーを設定（2回目以降の呼び出しは無視）

    Args:
        level: ログレベル名。未知の名前は WARNING として扱う
        enable_cloud_logging: Cloud Loggingにも送るか
        project_id: Cloud Logging の送信先GCPプロジェクト
    """
    global _logger_configured

    if _logger_configured:
        return

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    if enable_cloud_logging:
        handler = _cloud_logging_handler(project_id)
        if handler is not None:
            handler.setLevel(log_level)
            logging.getLogger().addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    _logger_configured = True
    logging.getLogger(__name__).debug(f"Logging configured with level: {level}")


def reset_logging() -> None:
    """設定済みフラグを戻す（テスト用）"""
    global _logger_configured
    _logger_configured = False


def get_logger(name: str) -> logging.Logger:
    """指定名のロガーを取得（通常は __name__ を渡す）"""
    return logging.getLogger(name)
