"""Google Maps Geocoding API実装"""
from typing import Optional

import googlemaps
import requests

from ..domain.models import GeocodingRequest, GeocodingResponse
from ....shared.exceptions.errors import GeocodingError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class GoogleMapsGeocoder:
    """Google Maps Geocoding API実装"""

    def __init__(
        self,
        api_key: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            api_key: Google Maps API キー
            timeout: リクエストのタイムアウト（秒）。Noneの場合はタイムアウトなし
            session: リクエストに使うHTTPセッション
        """
        try:
            self.client = googlemaps.Client(
                key=api_key,
                timeout=timeout,
                retry_over_query_limit=False,
                requests_session=session,
            )
            logger.info("GoogleMapsGeocoder initialized")
        except Exception as e:
            raise GeocodingError(f"Failed to initialize Google Maps client: {e}") from e

    def submit(self, request: GeocodingRequest) -> GeocodingResponse:
        """
        リクエストを送信（latlng が設定されていれば逆ジオコーディング）

        Args:
            request: 組み立て済みのリクエスト

        Returns:
            GeocodingResponse: APIの返却値

        Raises:
            GeocodingError: APIリクエストに失敗した場合
        """
        try:
            if request.is_reverse:
                results = self._reverse_geocode(request)
            else:
                results = self._geocode(request)

        except googlemaps.exceptions.ApiError as e:
            raise GeocodingError(f"Google Maps API error: {e}") from e
        except googlemaps.exceptions.TransportError as e:
            raise GeocodingError(f"Google Maps transport error: {e}") from e
        except googlemaps.exceptions.Timeout as e:
            raise GeocodingError(f"Google Maps request timed out: {e}") from e
        except Exception as e:
            raise GeocodingError(f"Unexpected error during geocoding: {e}") from e

        logger.info(f"Received {len(results)} geocoding result(s)")
        return GeocodingResponse(results=results)

    def _geocode(self, request: GeocodingRequest) -> list[dict]:
        """住所・コンポーネントによるジオコーディング"""
        if request.result_type or request.location_type:
            logger.warning("result_type/location_type are ignored for forward geocoding")

        logger.debug(f"Geocoding address: {request.address!r}")

        return self.client.geocode(
            address=request.address or None,
            components=request.component_params() or None,
            bounds=request.bounds.to_dict() if request.bounds else None,
            region=request.region or None,
            language=request.language or None,
        )

    def _reverse_geocode(self, request: GeocodingRequest) -> list[dict]:
        """座標から住所を取得（逆ジオコーディング）"""
        if request.address or request.components or request.bounds or request.region:
            logger.warning("address/components/bounds/region are ignored for reverse geocoding")

        latlng = request.latlng.to_tuple()
        logger.debug(f"Reverse geocoding: {latlng}")

        return self.client.reverse_geocode(
            latlng,
            result_type=request.result_type or None,
            location_type=[location_type.value for location_type in request.location_type]
            or None,
            language=request.language or None,
        )
