"""コマンドラインのフラグ値をジオコーディングリクエストの各フィールドへ変換するパーサー

区切り文字:
- "|" : リストの要素（コンポーネント、結果種別、位置精度、バウンディングボックスの角）
- "," : 緯度・経度の組
- ":" : コンポーネントの種別と値

いずれの関数も入出力を行わず、失敗時は RequestParseError を送出する。
"""

from typing import Optional

from ..domain.enums import Component, LocationType
from ..domain.models import ComponentFilter, LatLng, LatLngBounds
from ....shared.exceptions.errors import RequestParseError


def parse_components(components: str) -> list[ComponentFilter]:
    """
    "種別:値|種別:値" 形式のコンポーネントフィルタを解析

    未知の種別は報告せずに読み捨てる

    Args:
        components: -components フラグの値

    Returns:
        list[ComponentFilter]: 指定順のコンポーネントフィルタ

    Raises:
        RequestParseError: ":" を含まない項目がある場合
    """
    if not components:
        return []

    filters = []
    for clause in components.split("|"):
        kind, sep, value = clause.partition(":")
        if not sep:
            raise RequestParseError(f"Couldn't parse components: {clause!r} is not kind:value")

        component = Component.lookup(kind)
        if component is None:
            continue
        filters.append(ComponentFilter(kind=component, value=value))

    return filters


def parse_bounds(bounds: str) -> Optional[LatLngBounds]:
    """
    "南西緯度,南西経度|北東緯度,北東経度" 形式のバウンディングボックスを解析

    Args:
        bounds: -bounds フラグの値

    Returns:
        Optional[LatLngBounds]: 空文字の場合はNone

    Raises:
        RequestParseError: 4つの数値のいずれかを解析できない場合
    """
    if not bounds:
        return None

    corners = bounds.split("|")
    if len(corners) != 2:
        raise RequestParseError(
            f"Couldn't parse bounds: expected southwest|northeast, got {bounds!r}"
        )

    southwest, northeast = (_parse_pair(corner, "bounds") for corner in corners)
    return LatLngBounds(southwest=southwest, northeast=northeast)


def parse_latlng(latlng: str) -> Optional[LatLng]:
    """
    "緯度,経度" 形式の座標を解析（逆ジオコーディング用）

    Args:
        latlng: -latlng フラグの値

    Returns:
        Optional[LatLng]: 空文字の場合はNone

    Raises:
        RequestParseError: 緯度・経度のいずれかを解析できない場合
    """
    if not latlng:
        return None

    return _parse_pair(latlng, "latlng")


def parse_result_type(result_type: str) -> list[str]:
    """"|" 区切りの結果種別をそのまま分割（検証・正規化・重複除去はしない）"""
    if not result_type:
        return []

    return result_type.split("|")


def parse_location_type(location_type: str) -> list[LocationType]:
    """
    "|" 区切りの位置精度を解析

    未知のタグは報告せずに読み捨てる

    Args:
        location_type: -location_type フラグの値

    Returns:
        list[LocationType]: 指定順の位置精度
    """
    if not location_type:
        return []

    location_types = []
    for tag in location_type.split("|"):
        parsed = LocationType.lookup(tag)
        if parsed is not None:
            location_types.append(parsed)

    return location_types


def _parse_pair(pair: str, flag: str) -> LatLng:
    """"緯度,経度" を LatLng に変換"""
    values = pair.split(",")
    if len(values) != 2:
        raise RequestParseError(f"Couldn't parse {flag}: expected lat,lng, got {pair!r}")

    lat, lng = (_parse_float(value, flag) for value in values)
    return LatLng(lat=lat, lng=lng)


def _parse_float(value: str, flag: str) -> float:
    # float() は前後の空白と "_" 区切りを許すが、どちらも不正な入力として扱う
    if value != value.strip() or "_" in value:
        raise RequestParseError(f"Couldn't parse {flag}: invalid number {value!r}")

    try:
        return float(value)
    except ValueError as e:
        raise RequestParseError(f"Couldn't parse {flag}: {e}") from e
