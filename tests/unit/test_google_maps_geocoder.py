"""GoogleMapsGeocoder のテスト（googlemaps.Client はモック）"""

from unittest.mock import MagicMock, patch

import googlemaps
import pytest

from geocode_cli.features.geocoding.domain.enums import Component, LocationType
from geocode_cli.features.geocoding.domain.models import (
    ComponentFilter,
    GeocodingRequest,
    LatLng,
    LatLngBounds,
)
from geocode_cli.features.geocoding.providers.google_maps_geocoder import GoogleMapsGeocoder
from geocode_cli.shared.exceptions.errors import GeocodingError

RESULT = {
    "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
    "geometry": {"location": {"lat": 37.4224764, "lng": -122.0842499}},
    "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
}


@pytest.fixture
def mock_client():
    with patch("googlemaps.Client") as client_cls:
        client = MagicMock()
        client_cls.return_value = client
        yield client_cls, client


def test_init_passes_transport_options(mock_client) -> None:
    client_cls, _ = mock_client
    session = MagicMock()

    GoogleMapsGeocoder("AIzaTest", timeout=5.0, session=session)

    client_cls.assert_called_once_with(
        key="AIzaTest",
        timeout=5.0,
        retry_over_query_limit=False,
        requests_session=session,
    )


def test_init_failure_raises_geocoding_error() -> None:
    with patch("googlemaps.Client", side_effect=ValueError("Invalid API key provided.")):
        with pytest.raises(GeocodingError, match="Failed to initialize"):
            GoogleMapsGeocoder("bad-key")


def test_submit_forward(mock_client) -> None:
    _, client = mock_client
    client.geocode.return_value = [RESULT]
    request = GeocodingRequest(
        address="1600 Amphitheatre Parkway",
        language="en",
        region="us",
        components=[
            ComponentFilter(kind=Component.COUNTRY, value="US"),
            ComponentFilter(kind=Component.POSTAL_CODE, value="94043"),
        ],
        bounds=LatLngBounds(
            southwest=LatLng(lat=37.0, lng=-122.0),
            northeast=LatLng(lat=38.0, lng=-121.0),
        ),
    )

    response = GoogleMapsGeocoder("AIzaTest").submit(request)

    assert response.results == [RESULT]
    client.geocode.assert_called_once_with(
        address="1600 Amphitheatre Parkway",
        components={"country": ["US"], "postal_code": ["94043"]},
        bounds={"southwest": (37.0, -122.0), "northeast": (38.0, -121.0)},
        region="us",
        language="en",
    )
    client.reverse_geocode.assert_not_called()


def test_submit_forward_passes_none_for_empty_fields(mock_client) -> None:
    _, client = mock_client
    client.geocode.return_value = []

    response = GoogleMapsGeocoder("AIzaTest").submit(
        GeocodingRequest(components=[ComponentFilter(kind=Component.COUNTRY, value="JP")])
    )

    assert response.results == []
    client.geocode.assert_called_once_with(
        address=None,
        components={"country": ["JP"]},
        bounds=None,
        region=None,
        language=None,
    )


def test_submit_reverse(mock_client) -> None:
    _, client = mock_client
    client.reverse_geocode.return_value = [RESULT]
    request = GeocodingRequest(
        address="ignored",
        latlng=LatLng(lat=40.714224, lng=-73.961452),
        result_type=["street_address"],
        location_type=[LocationType.ROOFTOP, LocationType.APPROXIMATE],
        language="ja",
    )

    response = GoogleMapsGeocoder("AIzaTest").submit(request)

    assert response.results == [RESULT]
    client.reverse_geocode.assert_called_once_with(
        (40.714224, -73.961452),
        result_type=["street_address"],
        location_type=["ROOFTOP", "APPROXIMATE"],
        language="ja",
    )
    client.geocode.assert_not_called()


@pytest.mark.parametrize(
    "error,message",
    [
        (googlemaps.exceptions.ApiError("REQUEST_DENIED", "bad key"), "API error"),
        (googlemaps.exceptions.TransportError("connection reset"), "transport error"),
        (googlemaps.exceptions.HTTPError(500), "transport error"),
        (googlemaps.exceptions.Timeout(), "timed out"),
        (RuntimeError("boom"), "Unexpected error"),
    ],
)
def test_submit_wraps_errors(mock_client, error: Exception, message: str) -> None:
    _, client = mock_client
    client.geocode.side_effect = error

    with pytest.raises(GeocodingError, match=message) as exc_info:
        GoogleMapsGeocoder("AIzaTest").submit(GeocodingRequest(address="Tokyo"))

    assert exc_info.value.__cause__ is error
