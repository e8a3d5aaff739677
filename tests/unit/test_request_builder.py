"""リクエスト組み立てサービスのテスト"""

import pytest

from geocode_cli.entrypoint import GeocodeOptions
from geocode_cli.features.geocoding.domain.enums import Component, LocationType
from geocode_cli.features.geocoding.domain.models import LatLng
from geocode_cli.features.geocoding.services.request_builder import (
    build_request,
    require_address_or_components,
)
from geocode_cli.shared.exceptions.errors import RequestParseError, UsageError


def test_build_request_populates_all_fields() -> None:
    options = GeocodeOptions(
        address="1600 Amphitheatre Parkway",
        components="locality:Mountain View|country:US",
        bounds="37.0,-122.0|38.0,-121.0",
        language="ja",
        region="us",
        latlng="37.42,-122.08",
        result_type="street_address|route",
        location_type="ROOFTOP|BOGUS",
    )

    request = build_request(options)

    assert request.address == "1600 Amphitheatre Parkway"
    assert request.language == "ja"
    assert request.region == "us"
    assert [c.kind for c in request.components] == [Component.LOCALITY, Component.COUNTRY]
    assert request.bounds.southwest == LatLng(lat=37.0, lng=-122.0)
    assert request.bounds.northeast == LatLng(lat=38.0, lng=-121.0)
    assert request.latlng == LatLng(lat=37.42, lng=-122.08)
    assert request.result_type == ["street_address", "route"]
    assert request.location_type == [LocationType.ROOFTOP]


def test_build_request_defaults() -> None:
    request = build_request(GeocodeOptions(address="Tokyo"))

    assert request.components == []
    assert request.bounds is None
    assert request.latlng is None
    assert request.result_type == []
    assert request.location_type == []


def test_build_request_is_idempotent() -> None:
    options = GeocodeOptions(components="route:Main", bounds="1,2|3,4")

    assert build_request(options) == build_request(options)


def test_build_request_propagates_parse_error() -> None:
    with pytest.raises(RequestParseError):
        build_request(GeocodeOptions(address="x", latlng="north,west"))


def test_require_address_or_components() -> None:
    require_address_or_components(GeocodeOptions(address="Tokyo"))
    require_address_or_components(GeocodeOptions(components="country:JP"))

    with pytest.raises(UsageError, match="Please specify an Address or Components"):
        require_address_or_components(GeocodeOptions(bounds="abc"))
