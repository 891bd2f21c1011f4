"""Tests del directorio remoto (HttpAtmDirectory) y de la conectividad."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from api.data.directory import LocalAtmDirectory
from api.models.atm import ATM, Coordinate
from api.utils.config import get_settings
from api.utils.errors import DirectoryError
from frontend.utils.api_client import HttpAtmDirectory, create_directory
from frontend.utils.connectivity import ConnectivityChecker


def make_session(payload=None, status_error=None, get_error=None):
    response = MagicMock()
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session = MagicMock()
    if get_error is not None:
        session.get.side_effect = get_error
    else:
        session.get.return_value = response
    return session


ATM_PAYLOAD = [
    {'id': 7, 'lat': -34.60, 'lng': -58.38, 'bank': 'Banco Ciudad', 'network': 'LINK',
     'address': 'Av. de Mayo 500'},
    {'id': '8', 'latitude': -34.61, 'longitude': -58.39, 'bank': 'BBVA', 'network': 'BANELCO'},
]


class TestHttpAtmDirectory:

    def test_get_atms_parses_payload(self, center):
        session = make_session(ATM_PAYLOAD)
        directory = HttpAtmDirectory("http://directorio/", timeout=5, session=session)

        atms = directory.get_atms(center, 500, network="LINK")

        assert atms == [
            ATM('7', Coordinate(-34.60, -58.38), 'Banco Ciudad', 'LINK', 'Av. de Mayo 500'),
            ATM('8', Coordinate(-34.61, -58.39), 'BBVA', 'BANELCO', ''),
        ]
        session.get.assert_called_once_with(
            "http://directorio/atms",
            params={'lat': center.latitude, 'lng': center.longitude, 'radius': 500, 'network': 'LINK'},
            timeout=5,
        )

    def test_get_atms_accepts_wrapped_list(self, center):
        directory = HttpAtmDirectory("http://directorio", session=make_session({'atms': []}))
        assert directory.get_atms(center, 100) == []

    def test_get_banks(self):
        session = make_session({'banks': ['Banco Ciudad', 'Banco Nación']})
        directory = HttpAtmDirectory("http://directorio", session=session)

        assert directory.get_banks("LINK") == ['Banco Ciudad', 'Banco Nación']
        assert session.get.call_args.kwargs['params'] == {'network': 'LINK'}

    def test_http_error_raises_directory_error(self, center):
        error = requests.HTTPError(response=MagicMock(status_code=503))
        directory = HttpAtmDirectory("http://directorio", session=make_session(status_error=error))

        with pytest.raises(DirectoryError) as excinfo:
            directory.get_atms(center, 100)
        assert excinfo.value.status_code == 503

    def test_timeout_raises_directory_error(self):
        session = make_session(get_error=requests.Timeout("timeout"))
        directory = HttpAtmDirectory("http://directorio", session=session)

        with pytest.raises(DirectoryError):
            directory.get_banks()

    def test_invalid_json_raises_directory_error(self, center):
        session = make_session()
        session.get.return_value.json.side_effect = ValueError("no es JSON")
        directory = HttpAtmDirectory("http://directorio", session=session)

        with pytest.raises(DirectoryError):
            directory.get_atms(center, 100)

    @pytest.mark.parametrize("payload", [{'foo': 1}, [{'id': 1}], "texto"])
    def test_malformed_payload_raises_directory_error(self, center, payload):
        directory = HttpAtmDirectory("http://directorio", session=make_session(payload))
        with pytest.raises(DirectoryError):
            directory.get_atms(center, 100)

    @pytest.mark.asyncio
    async def test_async_query_runs_request(self, center):
        directory = HttpAtmDirectory("http://directorio", session=make_session(ATM_PAYLOAD))
        atms = await directory.query_atms(center, 1000, "", "")
        assert [atm.id for atm in atms] == ['7', '8']


class TestCreateDirectory:

    def test_remote_directory_when_url_configured(self, monkeypatch):
        monkeypatch.setenv('ATM_DIRECTORY_URL', 'http://directorio/api/')
        monkeypatch.setenv('ATM_HTTP_TIMEOUT', '4')

        directory = create_directory(get_settings())

        assert isinstance(directory, HttpAtmDirectory)
        assert directory.base_url == 'http://directorio/api'
        assert directory.timeout == 4.0

    def test_local_directory_otherwise(self, monkeypatch):
        monkeypatch.setenv('ATM_DIRECTORY_URL', '')
        monkeypatch.setenv('DATABASE_URL', 'sqlite://')
        monkeypatch.setenv('SAMPLE_ATMS', '12')

        directory = create_directory(get_settings())

        assert isinstance(directory, LocalAtmDirectory)
        assert len(directory.atms_df) == 12


class TestConnectivityChecker:

    def test_connected(self):
        with patch('frontend.utils.connectivity.requests.head') as head:
            assert ConnectivityChecker("http://sonda", timeout=1).is_connected()
        head.assert_called_once_with("http://sonda", timeout=1, allow_redirects=True)

    def test_disconnected(self):
        with patch('frontend.utils.connectivity.requests.head',
                   side_effect=requests.ConnectionError("sin red")):
            assert not ConnectivityChecker("http://sonda").is_connected()
