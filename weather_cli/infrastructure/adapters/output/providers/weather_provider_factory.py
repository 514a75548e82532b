"""
Weather Provider Factory - escolhe o cliente do provedor uma única vez no startup
"""
from enum import Enum
from typing import Optional

from weather_cli.application.ports.output.weather_api_client_port import IWeatherAPIClient
from weather_cli.domain.exceptions import ConfigurationError
from weather_cli.infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from weather_cli.infrastructure.adapters.output.providers.openmeteo.openmeteo_client import OpenMeteoClient
from weather_cli.infrastructure.adapters.output.providers.openweather.openweather_client import OpenWeatherClient
from weather_cli.shared.config import settings as settings_module
from weather_cli.shared.config.settings import Settings


class ProviderKind(str, Enum):
    """Provedores suportados"""
    KEYED = settings_module.PROVIDER_OPENWEATHER
    KEYLESS = settings_module.PROVIDER_OPEN_METEO

    @classmethod
    def from_config(cls, value: str) -> 'ProviderKind':
        try:
            return cls((value or '').strip().lower())
        except ValueError:
            raise ConfigurationError('Config', 'WEATHER_PROVIDER')


class WeatherProviderFactory:
    """
    Factory do cliente de clima

    A decisão é tomada em `create()`; o restante da aplicação só vê
    IWeatherAPIClient e nunca consulta o tipo do provedor de novo.
    """

    def __init__(self, settings: Settings, session_manager: Optional[AiohttpSessionManager] = None, logger=None):
        self.settings = settings
        self.session_manager = session_manager or AiohttpSessionManager(
            total_timeout=settings.timeout_ms / 1000
        )
        self.logger = logger

    def create(self) -> IWeatherAPIClient:
        kind = ProviderKind.from_config(self.settings.provider)

        if kind is ProviderKind.KEYED:
            return OpenWeatherClient(
                api_key=self.settings.openweather_api_key,
                base_url=self.settings.openweather_base_url,
                timeout_ms=self.settings.timeout_ms,
                max_retries=self.settings.max_retries,
                retry_delay_ms=self.settings.retry_delay_ms,
                session_manager=self.session_manager,
                logger=self.logger
            )

        return OpenMeteoClient(
            timeout_ms=self.settings.timeout_ms,
            map_weather_codes=self.settings.openmeteo_map_weather_codes,
            session_manager=self.session_manager,
            logger=self.logger
        )
