"""
Use Case: Get Weather By City
Valida a entrada, consulta o repositório e registra o histórico
"""
from typing import Optional

from weather_cli.application.dtos.requests import GetWeatherByCityRequest
from weather_cli.application.dtos.responses import WeatherResponseDTO
from weather_cli.application.services.history_service import HistoryService
from weather_cli.domain.exceptions import ApiError, DomainException
from weather_cli.domain.entities.search_history import SearchType
from weather_cli.domain.repositories.weather_repository import IWeatherRepository
from weather_cli.domain.value_objects.temperature import TemperatureUnit
from weather_cli.shared.config.logger_config import get_logger
from weather_cli.shared.config.settings import DEFAULT_COUNTRY
from weather_cli.shared.tracing import trace_operation
from weather_cli.shared.utils.validators import CityValidator, CountryValidator

logger = get_logger(child=True)


class GetWeatherByCityUseCase:
    """Use case: clima atual de uma cidade"""

    def __init__(
        self,
        weather_repository: IWeatherRepository,
        history_service: Optional[HistoryService] = None,
        default_country: str = DEFAULT_COUNTRY
    ):
        self.weather_repository = weather_repository
        self.history_service = history_service
        self.default_country = default_country

    @trace_operation("use_case.get_weather_by_city")
    async def execute(self, request: GetWeatherByCityRequest) -> WeatherResponseDTO:
        """
        Args:
            request: cidade, país opcional (padrão ES) e unidade

        Returns:
            WeatherResponseDTO

        Raises:
            ValidationError: entrada inválida
            NotFoundError / ConfigurationError / ApiError: falhas do repositório
        """
        city = CityValidator.validate(request.city)
        country = CountryValidator.normalize(request.country or self.default_country)
        units = TemperatureUnit.from_value(request.units)

        try:
            result = await self.weather_repository.get_by_city(city, country, units)
        except DomainException:
            raise
        except Exception as e:
            logger.error("Unexpected error fetching city weather", city=city, error=str(e))
            raise ApiError(f"Error inesperado: {e}", "WeatherRepository", is_operational=False) from e

        if request.save_history and self.history_service is not None:
            await self.history_service.save(f"{city}, {country}", result, SearchType.CITY)

        return WeatherResponseDTO.from_result(result, units)
