"""
Use Case: Get Weather By Country
Clima das principais cidades de um país, com cache próprio por país/limite
"""
from typing import Optional

from weather_cli.application.dtos.requests import GetWeatherByCountryRequest
from weather_cli.application.dtos.responses import CountryWeatherResponseDTO, WeatherResponseDTO
from weather_cli.application.ports.output.cache_repository_port import ICacheRepository
from weather_cli.domain.repositories.weather_repository import IWeatherRepository
from weather_cli.domain.value_objects.temperature import TemperatureUnit
from weather_cli.shared.config.logger_config import get_logger
from weather_cli.shared.config.settings import MAX_COUNTRY_LIMIT
from weather_cli.shared.tracing import trace_operation
from weather_cli.shared.utils.validators import CountryValidator, GenericValidator

logger = get_logger(child=True)


class GetWeatherByCountryUseCase:

    def __init__(
        self,
        weather_repository: IWeatherRepository,
        cache: Optional[ICacheRepository] = None,
        cache_ttl_seconds: Optional[int] = None
    ):
        self.weather_repository = weather_repository
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds

    @staticmethod
    def build_cache_key(country_code: str, limit: int, units: TemperatureUnit) -> str:
        return f"weather:country:{country_code}:limit:{limit}:{units.value}"

    @trace_operation("use_case.get_weather_by_country")
    async def execute(self, request: GetWeatherByCountryRequest) -> CountryWeatherResponseDTO:
        """
        Raises:
            ValidationError: país ausente/inválido ou limite fora de 1..50
        """
        GenericValidator.validate_not_empty(request.country, 'country')
        country = CountryValidator.normalize(request.country)
        limit = GenericValidator.validate_int(request.limit, 'limit')
        GenericValidator.validate_range(limit, 1, MAX_COUNTRY_LIMIT, 'limit')
        units = TemperatureUnit.from_value(request.units)

        cache_key = self.build_cache_key(country, limit, units)
        if self.cache is not None:
            try:
                cached = await self.cache.get(cache_key)
            except Exception as e:
                logger.warning("Country cache read failed", key=cache_key, error=str(e))
                cached = None
            if cached is not None:
                return cached

        results = await self.weather_repository.get_by_country(country, limit, units)
        response = CountryWeatherResponseDTO(
            country_code=country,
            country_name=CountryValidator.get_country_name(country),
            total_cities=len(results),
            cities=[WeatherResponseDTO.from_result(result, units) for result in results]
        )

        # Lista vazia não é cacheada: pode ser falha transitória de todas as cidades
        if self.cache is not None and results:
            try:
                await self.cache.set(cache_key, response, self.cache_ttl_seconds)
            except Exception as e:
                logger.warning("Country cache write failed", key=cache_key, error=str(e))

        return response
