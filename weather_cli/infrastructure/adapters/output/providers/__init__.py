"""Infrastructure Providers - clientes dos provedores climáticos"""

from weather_cli.infrastructure.adapters.output.providers.openmeteo.openmeteo_client import OpenMeteoClient
from weather_cli.infrastructure.adapters.output.providers.openweather.openweather_client import OpenWeatherClient
from weather_cli.infrastructure.adapters.output.providers.weather_provider_factory import (
    ProviderKind,
    WeatherProviderFactory,
)

__all__ = ['OpenMeteoClient', 'OpenWeatherClient', 'ProviderKind', 'WeatherProviderFactory']
