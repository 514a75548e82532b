"""
Container - montagem explícita das dependências no startup
Cada componente é construído uma vez e injetado por referência
"""
from dataclasses import dataclass
from typing import Optional

from weather_cli.application.ports.output.history_repository_port import IHistoryRepository
from weather_cli.application.services.history_service import HistoryService
from weather_cli.application.use_cases.favorites import (
    AddFavoriteUseCase,
    GetWeatherForFavoritesUseCase,
    ListFavoritesUseCase,
    RemoveFavoriteUseCase,
)
from weather_cli.application.use_cases.get_weather_by_city import GetWeatherByCityUseCase
from weather_cli.application.use_cases.get_weather_by_coordinates import GetWeatherByCoordinatesUseCase
from weather_cli.application.use_cases.get_weather_by_country import GetWeatherByCountryUseCase
from weather_cli.infrastructure.adapters.output.cache.memory_cache import MemoryCache
from weather_cli.infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from weather_cli.infrastructure.adapters.output.persistence.dynamodb_history_repository import (
    DynamoDBHistoryRepository,
)
from weather_cli.infrastructure.adapters.output.persistence.json_country_cities_repository import (
    JsonCountryCitiesRepository,
)
from weather_cli.infrastructure.adapters.output.persistence.json_favorite_repository import (
    JsonFavoriteRepository,
)
from weather_cli.infrastructure.adapters.output.persistence.json_history_repository import (
    JsonHistoryRepository,
)
from weather_cli.infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
)
from weather_cli.infrastructure.adapters.output.weather_repository import WeatherRepository
from weather_cli.shared.config.settings import HISTORY_MAX_ENTRIES, STORAGE_DYNAMODB, Settings


@dataclass
class Container:
    settings: Settings
    session_manager: AiohttpSessionManager
    history_repository: IHistoryRepository
    history_service: HistoryService
    get_weather_by_city: GetWeatherByCityUseCase
    get_weather_by_coordinates: GetWeatherByCoordinatesUseCase
    get_weather_by_country: GetWeatherByCountryUseCase
    add_favorite: AddFavoriteUseCase
    list_favorites: ListFavoritesUseCase
    remove_favorite: RemoveFavoriteUseCase
    get_weather_for_favorites: GetWeatherForFavoritesUseCase

    async def close(self) -> None:
        await self.session_manager.close()
        close_history = getattr(self.history_repository, 'close', None)
        if close_history is not None:
            await close_history()


def build_history_repository(settings: Settings) -> IHistoryRepository:
    if settings.storage == STORAGE_DYNAMODB:
        return DynamoDBHistoryRepository(
            table_name=settings.history_table_name,
            region_name=settings.aws_region,
            max_entries=HISTORY_MAX_ENTRIES
        )
    return JsonHistoryRepository(settings.history_file, max_entries=HISTORY_MAX_ENTRIES)


def build_container(settings: Settings, session_manager: Optional[AiohttpSessionManager] = None) -> Container:
    """
    Constrói o grafo de objetos a partir das configurações validadas

    Raises:
        ConfigurationError: provedor mal configurado
    """
    session_manager = session_manager or AiohttpSessionManager(total_timeout=settings.timeout_ms / 1000)
    api_client = WeatherProviderFactory(settings, session_manager=session_manager).create()

    cache = MemoryCache(
        default_ttl_seconds=settings.cache_ttl_seconds,
        max_entries=settings.cache_max_entries
    )
    weather_repository = WeatherRepository(
        api_client=api_client,
        cache=cache,
        country_cities_repository=JsonCountryCitiesRepository(settings.country_cities_file),
        cache_ttl_seconds=settings.cache_ttl_seconds,
        timeout_ms=settings.timeout_ms
    )

    history_repository = build_history_repository(settings)
    history_service = HistoryService(history_repository)
    favorite_repository = JsonFavoriteRepository(settings.favorites_file)

    get_weather_by_city = GetWeatherByCityUseCase(weather_repository, history_service)

    return Container(
        settings=settings,
        session_manager=session_manager,
        history_repository=history_repository,
        history_service=history_service,
        get_weather_by_city=get_weather_by_city,
        get_weather_by_coordinates=GetWeatherByCoordinatesUseCase(weather_repository, history_service),
        get_weather_by_country=GetWeatherByCountryUseCase(
            weather_repository, cache=cache, cache_ttl_seconds=settings.cache_ttl_seconds
        ),
        add_favorite=AddFavoriteUseCase(favorite_repository),
        list_favorites=ListFavoritesUseCase(favorite_repository),
        remove_favorite=RemoveFavoriteUseCase(favorite_repository),
        get_weather_for_favorites=GetWeatherForFavoritesUseCase(favorite_repository, get_weather_by_city),
    )
