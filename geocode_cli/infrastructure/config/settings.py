"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocoding
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="Google Maps API Key（-key 未指定時に使用）",
    )
    google_maps_api_key_secret_name: str = Field(
        default="google-maps-api-key",
        description="Google Maps API KeyのSecret Manager名",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        description="リクエストのタイムアウト（秒）。未設定の場合はタイムアウトなし",
    )
    https_proxy_url: Optional[str] = Field(
        default=None,
        description="Geocoding APIへの接続に使うHTTPSプロキシ",
    )

    # GCP
    gcp_project_id: Optional[str] = Field(
        default=None,
        description="GCPプロジェクトID。設定された場合はSecret ManagerからAPI Keyを取得",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    gcp_logging_enabled: bool = Field(
        default=False,
        description="Cloud Loggingを有効にするか",
    )
