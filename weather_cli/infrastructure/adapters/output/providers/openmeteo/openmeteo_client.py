"""Open-Meteo Client - provedor gratuito, sem chave e sem retry"""

import time
from typing import Any, Dict, List, Optional

from weather_cli.application.dtos.wire_response import WeatherWireResponse, parse_weather_response
from weather_cli.domain.exceptions import NotFoundError
from weather_cli.infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from weather_cli.infrastructure.adapters.output.providers.base_client import BaseHTTPWeatherClient
from weather_cli.infrastructure.adapters.output.providers.openmeteo.weather_codes import describe_weather_code
from weather_cli.shared.config import settings
from weather_cli.shared.tracing import trace_operation

CURRENT_FIELDS = [
    'temperature_2m',
    'relative_humidity_2m',
    'apparent_temperature',
    'pressure_msl',
    'wind_speed_10m',
    'wind_direction_10m',
]

# Open-Meteo não aceita kelvin: pede-se sempre Celsius e converte localmente
TEMPERATURE_UNIT = 'celsius'
CELSIUS_TO_KELVIN = 273.15
WIND_SPEED_UNITS = {
    'metric': 'ms',
    'imperial': 'mph',
    'standard': 'ms',
}

DEFAULT_PRESSURE_HPA = 1013
DEFAULT_HUMIDITY = 50
DEFAULT_VISIBILITY_M = 10000
GEOCODING_LANGUAGE = 'es'
STUB_CONDITION = {
    'id': 0,
    'main': 'Clear',
    'description': 'Clear sky (Open-Meteo)',
    'icon': '01d',
}


class OpenMeteoClient(BaseHTTPWeatherClient):
    """
    Cliente para Open-Meteo

    - Geocodificação gratuita (nome + país opcional, idioma fixo "es")
    - Uma leitura consolidada do endpoint de condições atuais
    - Sem classificação de condição: rótulo fixo "Clear" anotado com a origem,
      a menos que `map_weather_codes` esteja habilitado
    - Sem retry e sem busca de várias cidades por país
    """

    def __init__(
        self,
        forecast_url: str = settings.OPENMETEO_FORECAST_URL,
        geocoding_url: str = settings.OPENMETEO_GEOCODING_URL,
        timeout_ms: int = settings.WEATHER_API_TIMEOUT,
        map_weather_codes: bool = False,
        session_manager: Optional[AiohttpSessionManager] = None,
        logger=None
    ):
        super().__init__(session_manager=session_manager, timeout_ms=timeout_ms, logger=logger)
        self.forecast_url = forecast_url
        self.geocoding_url = geocoding_url
        self.map_weather_codes = map_weather_codes

    @property
    def provider_name(self) -> str:
        return "Open-Meteo"

    async def _geocode(self, city_name: str, country_code: Optional[str]) -> Dict[str, Any]:
        params = {
            'name': city_name,
            'count': 1,
            'language': GEOCODING_LANGUAGE,
            'format': 'json',
        }
        if country_code:
            params['countryCode'] = country_code.upper()

        context = f"{city_name},{country_code}" if country_code else city_name
        payload = await self._get_json(self.geocoding_url, params, context)
        results = (payload or {}).get('results') or []
        if not results:
            raise NotFoundError('Ciudad', context)
        return results[0]

    @trace_operation("openmeteo.get_by_city_name")
    async def get_current_weather_by_city_name(
        self,
        city_name: str,
        country_code: Optional[str] = None,
        units: Optional[str] = None
    ) -> WeatherWireResponse:
        location = await self._geocode(city_name, country_code)
        self.logger.debug(
            "City geocoded",
            city=city_name,
            lat=location.get('latitude'),
            lon=location.get('longitude')
        )
        return await self._fetch_current(
            location['latitude'],
            location['longitude'],
            units,
            name=location.get('name', city_name),
            country=location.get('country_code')
        )

    @trace_operation("openmeteo.get_by_coordinates")
    async def get_current_weather_by_coordinates(
        self,
        latitude: float,
        longitude: float,
        units: Optional[str] = None
    ) -> WeatherWireResponse:
        return await self._fetch_current(latitude, longitude, units)

    async def get_cities_by_country(
        self,
        country_code: str,
        limit: int = 5,
        units: Optional[str] = None
    ) -> List[WeatherWireResponse]:
        """Sem suporte a várias cidades: o repositório compensa com o fallback"""
        return []

    async def _fetch_current(
        self,
        latitude: float,
        longitude: float,
        units: Optional[str],
        name: str = "",
        country: Optional[str] = None
    ) -> WeatherWireResponse:
        unit_system = units or 'standard'
        fields = list(CURRENT_FIELDS)
        if self.map_weather_codes:
            fields.append('weather_code')

        params = {
            'latitude': latitude,
            'longitude': longitude,
            'current': ",".join(fields),
            'temperature_unit': TEMPERATURE_UNIT,
            'wind_speed_unit': WIND_SPEED_UNITS.get(unit_system, 'ms'),
            'timezone': 'auto',
        }
        payload = await self._get_json(self.forecast_url, params, f"{latitude},{longitude}")
        return parse_weather_response(
            self._to_wire(payload or {}, latitude, longitude, name, country)
        )

    def _to_wire(
        self,
        payload: Dict[str, Any],
        latitude: float,
        longitude: float,
        name: str,
        country: Optional[str]
    ) -> Dict[str, Any]:
        """Adapta a resposta do Open-Meteo ao formato canônico (temperaturas em Kelvin)"""
        current = payload.get('current') or {}

        def temperature(value):
            return None if value is None else value + CELSIUS_TO_KELVIN

        temp = temperature(current.get('temperature_2m'))
        feels_like = temperature(current.get('apparent_temperature'))
        if feels_like is None:
            feels_like = temp

        condition = dict(STUB_CONDITION)
        if self.map_weather_codes and 'weather_code' in current:
            main, description = describe_weather_code(current['weather_code'])
            condition = {
                'id': int(current['weather_code']),
                'main': main,
                'description': f"{description} (Open-Meteo)",
                'icon': '',
            }

        pressure = current.get('pressure_msl')
        humidity = current.get('relative_humidity_2m')
        return {
            'coord': {
                'lat': payload.get('latitude', latitude),
                'lon': payload.get('longitude', longitude),
            },
            'weather': [condition],
            'base': 'open-meteo',
            'main': {
                'temp': temp,
                'feels_like': feels_like,
                'temp_min': temp,
                'temp_max': temp,
                'pressure': DEFAULT_PRESSURE_HPA if pressure is None else pressure,
                'humidity': DEFAULT_HUMIDITY if humidity is None else humidity,
            },
            'visibility': DEFAULT_VISIBILITY_M,
            'wind': {
                'speed': current.get('wind_speed_10m') or 0,
                'deg': current.get('wind_direction_10m') or 0,
            },
            'dt': int(time.time()),
            'sys': {'country': country} if country else {},
            'timezone': payload.get('utc_offset_seconds'),
            'name': name,
            'cod': 200,
        }
