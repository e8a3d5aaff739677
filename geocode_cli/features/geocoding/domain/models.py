"""ジオコーディング機能のドメインモデル"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import Component, LocationType


@dataclass(frozen=True)
class LatLng:
    """緯度・経度"""

    lat: float  # 緯度
    lng: float  # 経度

    def to_tuple(self) -> tuple[float, float]:
        """(緯度, 経度)のタプルとして返す"""
        return (self.lat, self.lng)


@dataclass(frozen=True)
class LatLngBounds:
    """バウンディングボックス（南西端・北東端）"""

    southwest: LatLng
    northeast: LatLng

    def to_dict(self) -> dict[str, tuple[float, float]]:
        """googlemaps.Client が受け付ける形式に変換"""
        return {
            "southwest": self.southwest.to_tuple(),
            "northeast": self.northeast.to_tuple(),
        }


@dataclass(frozen=True)
class ComponentFilter:
    """コンポーネントフィルタ（種別, 値）"""

    kind: Component
    value: str


@dataclass
class GeocodingRequest:
    """
    Geocoding APIへのリクエスト

    address と components の少なくとも一方が指定されている前提で組み立てる。
    latlng が設定されている場合は逆ジオコーディングとして送信する。
    """

    address: str = ""
    language: str = ""
    region: str = ""
    components: list[ComponentFilter] = field(default_factory=list)
    bounds: Optional[LatLngBounds] = None
    latlng: Optional[LatLng] = None
    result_type: list[str] = field(default_factory=list)
    location_type: list[LocationType] = field(default_factory=list)

    @property
    def is_reverse(self) -> bool:
        """逆ジオコーディングかどうか"""
        return self.latlng is not None

    def component_params(self) -> dict[str, list[str]]:
        """
        コンポーネントフィルタを {種別: [値, ...]} にまとめる

        同じ種別が複数回指定された場合も順序を保ったまま値を並べる
        """
        params: dict[str, list[str]] = {}
        for component in self.components:
            params.setdefault(component.kind.value, []).append(component.value)
        return params


@dataclass
class GeocodingResponse:
    """Geocoding APIのレスポンス（結果はAPIの返却値をそのまま保持）"""

    results: list[dict[str, Any]] = field(default_factory=list)
