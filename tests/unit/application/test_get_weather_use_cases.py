"""
Testes Unitários - use cases de clima (cidade, coordenadas, país)
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_cli.application.dtos.requests import (
    GetWeatherByCityRequest,
    GetWeatherByCoordinatesRequest,
    GetWeatherByCountryRequest,
)
from weather_cli.application.use_cases.get_weather_by_city import GetWeatherByCityUseCase
from weather_cli.application.use_cases.get_weather_by_coordinates import GetWeatherByCoordinatesUseCase
from weather_cli.application.use_cases.get_weather_by_country import GetWeatherByCountryUseCase
from weather_cli.domain.entities.search_history import SearchType
from weather_cli.domain.exceptions import ApiError, NotFoundError, ValidationError
from weather_cli.domain.value_objects.coordinates import Coordinates
from weather_cli.domain.value_objects.temperature import TemperatureUnit
from weather_cli.infrastructure.adapters.output.cache.memory_cache import MemoryCache


@pytest.fixture
def weather_repository():
    repo = MagicMock()
    repo.get_by_city = AsyncMock()
    repo.get_by_coordinates = AsyncMock()
    repo.get_by_country = AsyncMock()
    return repo


@pytest.fixture
def history_service():
    service = MagicMock()
    service.save = AsyncMock(return_value=True)
    return service


class TestGetWeatherByCity:

    @pytest.mark.asyncio
    async def test_madrid_in_celsius(self, weather_repository, history_service, make_query_result):
        """REGRA: 293.15K é exibido como 20.0°C"""
        weather_repository.get_by_city.return_value = make_query_result()
        use_case = GetWeatherByCityUseCase(weather_repository, history_service)

        response = await use_case.execute(GetWeatherByCityRequest(city='  Madrid ', country='es'))

        weather_repository.get_by_city.assert_awaited_once_with('Madrid', 'ES', TemperatureUnit.CELSIUS)
        assert response.temperature == "20.0°C"
        assert response.display == "Clima en Madrid"
        assert response.humidity == "65%"
        history_service.save.assert_awaited_once()
        assert history_service.save.call_args.args[2] is SearchType.CITY

    @pytest.mark.asyncio
    async def test_country_defaults_to_spain(self, weather_repository, make_query_result):
        weather_repository.get_by_city.return_value = make_query_result()
        use_case = GetWeatherByCityUseCase(weather_repository)

        await use_case.execute(GetWeatherByCityRequest(city='Madrid', units='fahrenheit'))

        weather_repository.get_by_city.assert_awaited_once_with('Madrid', 'ES', TemperatureUnit.FAHRENHEIT)

    @pytest.mark.asyncio
    async def test_no_history_when_disabled(self, weather_repository, history_service, make_query_result):
        weather_repository.get_by_city.return_value = make_query_result()
        use_case = GetWeatherByCityUseCase(weather_repository, history_service)

        await use_case.execute(GetWeatherByCityRequest(city='Madrid', save_history=False))

        history_service.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("city", ["", "   ", "M"])
    async def test_invalid_city(self, weather_repository, city):
        use_case = GetWeatherByCityUseCase(weather_repository)
        with pytest.raises(ValidationError):
            await use_case.execute(GetWeatherByCityRequest(city=city))
        weather_repository.get_by_city.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_country(self, weather_repository):
        use_case = GetWeatherByCityUseCase(weather_repository)
        with pytest.raises(ValidationError):
            await use_case.execute(GetWeatherByCityRequest(city='Madrid', country='ESP'))

    @pytest.mark.asyncio
    async def test_domain_errors_propagate(self, weather_repository):
        weather_repository.get_by_city.side_effect = NotFoundError('Ciudad', 'Atlantis, ES')
        use_case = GetWeatherByCityUseCase(weather_repository)
        with pytest.raises(NotFoundError):
            await use_case.execute(GetWeatherByCityRequest(city='Atlantis'))

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_non_operational_api_error(self, weather_repository):
        weather_repository.get_by_city.side_effect = KeyError('boom')
        use_case = GetWeatherByCityUseCase(weather_repository)
        with pytest.raises(ApiError) as exc_info:
            await use_case.execute(GetWeatherByCityRequest(city='Madrid'))
        assert exc_info.value.is_operational is False


class TestGetWeatherByCoordinates:

    @pytest.mark.asyncio
    async def test_valid_coordinates(self, weather_repository, history_service, make_query_result):
        weather_repository.get_by_coordinates.return_value = make_query_result()
        use_case = GetWeatherByCoordinatesUseCase(weather_repository, history_service)

        response = await use_case.execute(GetWeatherByCoordinatesRequest(40.4168, -3.7038, units='kelvin'))

        weather_repository.get_by_coordinates.assert_awaited_once_with(
            Coordinates(40.4168, -3.7038), TemperatureUnit.KELVIN
        )
        assert response.temperature == "293.1K"
        assert history_service.save.call_args.args[2] is SearchType.COORDINATES

    @pytest.mark.asyncio
    async def test_out_of_range(self, weather_repository):
        use_case = GetWeatherByCoordinatesUseCase(weather_repository)
        with pytest.raises(ValidationError):
            await use_case.execute(GetWeatherByCoordinatesRequest(91, 0))
        weather_repository.get_by_coordinates.assert_not_awaited()


class TestGetWeatherByCountry:

    @pytest.mark.asyncio
    async def test_builds_country_response(self, weather_repository, make_query_result):
        weather_repository.get_by_country.return_value = [
            make_query_result('Madrid'),
            make_query_result('Barcelona'),
        ]
        use_case = GetWeatherByCountryUseCase(weather_repository)

        response = await use_case.execute(GetWeatherByCountryRequest(country='es', limit=2))

        weather_repository.get_by_country.assert_awaited_once_with('ES', 2, TemperatureUnit.CELSIUS)
        assert response.country_name == 'España'
        assert response.total_cities == 2
        assert [c.city for c in response.cities] == ['Madrid', 'Barcelona']
        assert response.to_dict()['countryCode'] == 'ES'

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, 51, "abc"])
    async def test_rejects_invalid_limit(self, weather_repository, limit):
        use_case = GetWeatherByCountryUseCase(weather_repository)
        with pytest.raises(ValidationError):
            await use_case.execute(GetWeatherByCountryRequest(country='ES', limit=limit))

    @pytest.mark.asyncio
    async def test_requires_country(self, weather_repository):
        use_case = GetWeatherByCountryUseCase(weather_repository)
        with pytest.raises(ValidationError):
            await use_case.execute(GetWeatherByCountryRequest(country=''))

    @pytest.mark.asyncio
    async def test_second_call_is_served_from_cache(self, weather_repository, make_query_result, clock):
        weather_repository.get_by_country.return_value = [make_query_result()]
        use_case = GetWeatherByCountryUseCase(weather_repository, cache=MemoryCache(clock=clock))
        request = GetWeatherByCountryRequest(country='ES', limit=1)

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first is second
        assert weather_repository.get_by_country.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_result_is_not_cached(self, weather_repository, clock):
        weather_repository.get_by_country.return_value = []
        use_case = GetWeatherByCountryUseCase(weather_repository, cache=MemoryCache(clock=clock))
        request = GetWeatherByCountryRequest(country='ZZ')

        response = await use_case.execute(request)
        await use_case.execute(request)

        assert response.total_cities == 0
        assert weather_repository.get_by_country.await_count == 2
