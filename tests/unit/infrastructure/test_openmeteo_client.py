"""
Unit Tests: OpenMeteoClient
"""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from weather_cli.domain.exceptions import ApiError, NotFoundError
from weather_cli.infrastructure.adapters.output.providers.openmeteo.openmeteo_client import OpenMeteoClient

GEO_MADRID = {
    'results': [
        {'name': 'Madrid', 'latitude': 40.4168, 'longitude': -3.7038, 'country_code': 'ES'}
    ]
}


def forecast_payload(**current):
    values = {
        'temperature_2m': 20.0,
        'relative_humidity_2m': 40,
        'apparent_temperature': 19.0,
        'pressure_msl': 1015.2,
        'wind_speed_10m': 2.5,
        'wind_direction_10m': 90,
    }
    values.update(current)
    return {'latitude': 40.42, 'longitude': -3.70, 'utc_offset_seconds': 7200, 'current': values}


@pytest.fixture
def client(silent_logger):
    return OpenMeteoClient(logger=silent_logger)


class TestOpenMeteoClient:

    @pytest.mark.asyncio
    async def test_city_lookup_uses_stub_condition(self, client, make_session, make_http_response):
        session = make_session(
            make_http_response(payload=GEO_MADRID),
            make_http_response(payload=forecast_payload()),
        )

        with patch.object(client.session_manager, 'get_session', return_value=session):
            response = await client.get_current_weather_by_city_name('Madrid', 'es', 'metric')

        assert response.name == 'Madrid'
        assert response.sys.country == 'ES'
        assert response.main.temp == pytest.approx(293.15)
        assert response.main.feels_like == pytest.approx(292.15)
        assert response.weather[0].main == 'Clear'
        assert response.weather[0].description == 'Clear sky (Open-Meteo)'

        geo_params = session.get.call_args_list[0].kwargs['params']
        assert geo_params['countryCode'] == 'ES'
        assert geo_params['language'] == 'es'
        assert geo_params['count'] == 1

        forecast_params = session.get.call_args_list[1].kwargs['params']
        assert forecast_params['temperature_unit'] == 'celsius'
        assert forecast_params['wind_speed_unit'] == 'ms'
        assert 'weather_code' not in forecast_params['current']

    @pytest.mark.asyncio
    @pytest.mark.parametrize("units", ["metric", "imperial", "standard"])
    async def test_temperatures_are_always_kelvin(self, client, make_session, make_http_response, units):
        """REGRA: o formato canônico traz Kelvin qualquer que seja a unidade pedida"""
        session = make_session(make_http_response(payload=forecast_payload(temperature_2m=20.0)))

        with patch.object(client.session_manager, 'get_session', return_value=session):
            response = await client.get_current_weather_by_coordinates(40.4, -3.7, units)

        assert response.main.temp == pytest.approx(293.15)
        assert session.get.call_args.kwargs['params']['temperature_unit'] == 'celsius'

    @pytest.mark.asyncio
    async def test_imperial_only_changes_wind_unit(self, client, make_session, make_http_response):
        session = make_session(make_http_response(payload=forecast_payload(temperature_2m=20.0, wind_speed_10m=5.6)))

        with patch.object(client.session_manager, 'get_session', return_value=session):
            response = await client.get_current_weather_by_coordinates(40.4, -3.7, 'imperial')

        params = session.get.call_args.kwargs['params']
        assert params['temperature_unit'] == 'celsius'
        assert params['wind_speed_unit'] == 'mph'
        assert response.main.temp == pytest.approx(293.15)
        assert response.wind.speed == 5.6

    @pytest.mark.asyncio
    async def test_missing_values_get_defaults(self, client, make_session, make_http_response):
        payload = forecast_payload(pressure_msl=None, relative_humidity_2m=None, apparent_temperature=None)
        session = make_session(make_http_response(payload=payload))

        with patch.object(client.session_manager, 'get_session', return_value=session):
            response = await client.get_current_weather_by_coordinates(40.4, -3.7, 'metric')

        assert response.main.pressure == 1013
        assert response.main.humidity == 50
        assert response.main.feels_like == response.main.temp

    @pytest.mark.asyncio
    async def test_weather_code_mapping_when_enabled(self, silent_logger, make_session, make_http_response):
        client = OpenMeteoClient(map_weather_codes=True, logger=silent_logger)
        session = make_session(make_http_response(payload=forecast_payload(weather_code=61)))

        with patch.object(client.session_manager, 'get_session', return_value=session):
            response = await client.get_current_weather_by_coordinates(40.4, -3.7, 'metric')

        assert 'weather_code' in session.get.call_args.kwargs['params']['current']
        assert response.weather[0].main == 'Rain'
        assert response.weather[0].id == 61

    @pytest.mark.asyncio
    async def test_unknown_city(self, client, make_session, make_http_response):
        session = make_session(make_http_response(payload={'generationtime_ms': 0.3}))

        with patch.object(client.session_manager, 'get_session', return_value=session):
            with pytest.raises(NotFoundError):
                await client.get_current_weather_by_city_name('Atlantis')

    @pytest.mark.asyncio
    async def test_server_error_is_not_retried(self, client, make_session, make_http_response):
        session = make_session(make_http_response(status=500, payload={'reason': 'boom'}))

        with patch.object(client.session_manager, 'get_session', return_value=session):
            with pytest.raises(ApiError) as exc_info:
                await client.get_current_weather_by_coordinates(40.4, -3.7)

        assert exc_info.value.status_code == 500
        assert session.get.call_count == 1

    @pytest.mark.asyncio
    async def test_timeout_becomes_api_timeout(self, silent_logger, make_session):
        client = OpenMeteoClient(timeout_ms=1500, logger=silent_logger)
        session = make_session(asyncio.TimeoutError())

        with patch.object(client.session_manager, 'get_session', return_value=session):
            with pytest.raises(ApiError) as exc_info:
                await client.get_current_weather_by_coordinates(40.4, -3.7)

        assert exc_info.value.status_code == 408
        assert exc_info.value.timeout_ms == 1500
        assert session.get.call_count == 1

    @pytest.mark.asyncio
    async def test_no_country_search(self, client):
        assert await client.get_cities_by_country('ES') == []

    @pytest.mark.asyncio
    async def test_close_releases_session(self, client):
        with patch.object(client.session_manager, 'close', new=AsyncMock()) as close:
            await client.close()
        close.assert_awaited_once()
