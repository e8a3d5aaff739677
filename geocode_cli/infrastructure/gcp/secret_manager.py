"""GCP Secret Manager連携（Google Maps API Key の取得）"""
from typing import Optional

from google.cloud import secretmanager

from ..config.settings import Settings
from ...shared.exceptions.errors import ConfigurationError
from ...shared.logging.config import get_logger

logger = get_logger(__name__)


class SecretManagerClient:
    """API Key を保持するシークレットを読むクライアント"""

    def __init__(self, project_id: str, secret_name: str):
        """
        Args:
            project_id: GCPプロジェクトID
            secret_name: API Key を保持するシークレット名
        """
        self.secret_path = f"projects/{project_id}/secrets/{secret_name}"
        self.client = secretmanager.SecretManagerServiceClient()

    def fetch(self, version: str = "latest") -> str:
        """
        シークレットの値を取得（前後の空白・改行は除去）

        Raises:
            ConfigurationError: 取得失敗時
        """
        name = f"{self.secret_path}/versions/{version}"
        logger.debug(f"Fetching API key from {name}")

        try:
            response = self.client.access_secret_version(request={"name": name})
        except Exception as e:
            raise ConfigurationError(f"Failed to fetch secret {self.secret_path}: {e}") from e

        return response.payload.data.decode("UTF-8").strip()

    def fetch_or_none(self, version: str = "latest") -> Optional[str]:
        """取得に失敗した場合は警告を出してNoneを返す"""
        try:
            return self.fetch(version) or None
        except ConfigurationError as e:
            logger.warning(str(e))
            return None


def has_api_key_source(key: str, settings: Settings) -> bool:
    """API Key の取得元（フラグ・設定・Secret Manager）が1つでもあるか"""
    return bool(key or settings.google_maps_api_key or settings.gcp_project_id)


def resolve_api_key(key: str, settings: Settings) -> Optional[str]:
    """
    API Keyを解決する

    優先順位: -key フラグ > GOOGLE_MAPS_API_KEY > Secret Manager

    Args:
        key: -key フラグの値（未指定時は空文字）
        settings: アプリケーション設定

    Returns:
        Optional[str]: API Key（どこにも見つからない場合はNone）
    """
    if key:
        return key

    if settings.google_maps_api_key:
        return settings.google_maps_api_key

    if settings.gcp_project_id:
        return SecretManagerClient(
            settings.gcp_project_id, settings.google_maps_api_key_secret_name
        ).fetch_or_none()

    return None
