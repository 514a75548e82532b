"""Use Case: Get Weather By Coordinates"""
from typing import Optional

from weather_cli.application.dtos.requests import GetWeatherByCoordinatesRequest
from weather_cli.application.dtos.responses import WeatherResponseDTO
from weather_cli.application.services.history_service import HistoryService
from weather_cli.domain.entities.search_history import SearchType
from weather_cli.domain.repositories.weather_repository import IWeatherRepository
from weather_cli.domain.value_objects.coordinates import Coordinates
from weather_cli.domain.value_objects.temperature import TemperatureUnit
from weather_cli.shared.tracing import trace_operation


class GetWeatherByCoordinatesUseCase:

    def __init__(
        self,
        weather_repository: IWeatherRepository,
        history_service: Optional[HistoryService] = None
    ):
        self.weather_repository = weather_repository
        self.history_service = history_service

    @trace_operation("use_case.get_weather_by_coordinates")
    async def execute(self, request: GetWeatherByCoordinatesRequest) -> WeatherResponseDTO:
        coordinates = Coordinates(request.latitude, request.longitude)
        units = TemperatureUnit.from_value(request.units)

        result = await self.weather_repository.get_by_coordinates(coordinates, units)

        if request.save_history and self.history_service is not None:
            await self.history_service.save(str(coordinates), result, SearchType.COORDINATES)

        return WeatherResponseDTO.from_result(result, units)
