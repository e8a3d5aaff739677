"""HTTPクライアント（Geocoding APIのトランスポート）"""

from typing import Any, Optional

import requests

from ..logging.config import get_logger

logger = get_logger(__name__)


class HTTPClient:
    """
    googlemaps.Client に渡すHTTPセッションを保持するクラス

    リトライアダプタはマウントしない（失敗はそのまま呼び出し元へ伝播する）
    """

    def __init__(self, proxy_url: Optional[str] = None):
        """
        Args:
            proxy_url: HTTPSプロキシのURL（未指定時は環境変数に従う）
        """
        self.proxy_url = proxy_url
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()

        if self.proxy_url:
            session.proxies.update({"https": self.proxy_url})
            logger.debug(f"Using HTTPS proxy: {self.proxy_url}")

        return session

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
