"""フラグ値からジオコーディングリクエストを組み立てるサービス"""

from typing import Protocol

from ..domain.models import GeocodingRequest
from ..parsers.request_parser import (
    parse_bounds,
    parse_components,
    parse_latlng,
    parse_location_type,
    parse_result_type,
)
from ....shared.exceptions.errors import UsageError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class RequestOptions(Protocol):
    """リクエスト組み立てに必要なフラグ値"""

    address: str
    components: str
    bounds: str
    language: str
    region: str
    latlng: str
    result_type: str
    location_type: str


def require_address_or_components(options: RequestOptions) -> None:
    """
    address と components のどちらも空であれば UsageError を送出

    Raises:
        UsageError: どちらも指定されていない場合
    """
    if not options.address and not options.components:
        raise UsageError("Please specify an Address or Components")


def build_request(options: RequestOptions) -> GeocodingRequest:
    """
    フラグ値からジオコーディングリクエストを組み立てる

    Args:
        options: フラグ値

    Returns:
        GeocodingRequest: 組み立てたリクエスト

    Raises:
        RequestParseError: 数値の解析に失敗した場合
    """
    request = GeocodingRequest(
        address=options.address,
        language=options.language,
        region=options.region,
    )

    request.components = parse_components(options.components)
    request.bounds = parse_bounds(options.bounds)
    request.latlng = parse_latlng(options.latlng)
    request.result_type = parse_result_type(options.result_type)
    request.location_type = parse_location_type(options.location_type)

    logger.debug(
        f"Built request: reverse={request.is_reverse}, "
        f"components={len(request.components)}, bounds={request.bounds is not None}"
    )

    return request
