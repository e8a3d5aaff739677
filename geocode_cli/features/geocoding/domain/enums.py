"""ジオコーディング機能のEnum定義"""
from enum import Enum
from typing import Optional


class Component(str, Enum):
    """コンポーネントフィルタの種類"""

    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"

    @classmethod
    def lookup(cls, kind: str) -> Optional["Component"]:
        """
        フラグ上の名前からコンポーネント種別を取得

        Returns:
            Optional[Component]: 未知の種別の場合はNone
        """
        return _COMPONENTS.get(kind)


class LocationType(str, Enum):
    """ジオコーディング結果の位置精度"""

    ROOFTOP = "ROOFTOP"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    APPROXIMATE = "APPROXIMATE"

    @classmethod
    def lookup(cls, tag: str) -> Optional["LocationType"]:
        """
        タグ文字列から位置精度を取得（大文字小文字は区別する）

        Returns:
            Optional[LocationType]: 未知のタグの場合はNone
        """
        return _LOCATION_TYPES.get(tag)


_COMPONENTS = {component.value: component for component in Component}
_LOCATION_TYPES = {location_type.value: location_type for location_type in LocationType}
