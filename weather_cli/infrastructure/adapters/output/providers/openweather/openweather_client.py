"""OpenWeatherMap Client - provedor com chave, geocodificação separada e retry"""

import asyncio
from functools import partial
from typing import Any, Awaitable, Callable, Dict, List, Optional

from tenacity import AsyncRetrying, RetryCallState, RetryError, retry_if_exception, stop_after_attempt

from weather_cli.application.dtos.wire_response import WeatherWireResponse, parse_weather_response
from weather_cli.domain.exceptions import ApiError, ConfigurationError, MaxRetriesExceededError, NotFoundError
from weather_cli.infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from weather_cli.infrastructure.adapters.output.providers.base_client import BaseHTTPWeatherClient, is_retryable
from weather_cli.infrastructure.adapters.output.providers.openweather.capitals import CAPITALS
from weather_cli.shared.config import settings
from weather_cli.shared.result import Ok, capture
from weather_cli.shared.tracing import trace_operation

WIRE_UNITS = "standard"
IMPERIAL_UNITS = "imperial"
MPS_TO_MPH = 2.23694
MAX_GEOCODING_RESULTS = 5


class OpenWeatherClient(BaseHTTPWeatherClient):
    """
    Cliente para OpenWeatherMap

    Características:
    - Nome → coordenadas via Geocoding API (primeiro resultado)
    - `appid` anexado a todas as requisições
    - Sempre `units=standard` (Kelvin); o vento vira mph quando pedido imperial
    - Retry por requisição: rede, 5xx, 408 e 429; espera `retry_delay * tentativa`
      ou o Retry-After anunciado em respostas 429
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = settings.OPENWEATHER_BASE_URL,
        geo_url: str = settings.OPENWEATHER_GEO_URL,
        timeout_ms: int = settings.WEATHER_API_TIMEOUT,
        max_retries: int = settings.WEATHER_API_MAX_RETRIES,
        retry_delay_ms: int = settings.WEATHER_API_RETRY_DELAY,
        session_manager: Optional[AiohttpSessionManager] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger=None
    ):
        """
        Args:
            api_key: Chave da API (obrigatória)
            base_url: URL base da API de clima
            geo_url: Endpoint de geocodificação direta
            timeout_ms: Timeout por requisição
            max_retries: Número máximo de tentativas por requisição
            retry_delay_ms: Atraso base entre tentativas
            sleep: Função de espera (injetável em testes)

        Raises:
            ConfigurationError: chave ou URL ausentes
        """
        if not api_key:
            raise ConfigurationError(self.provider_name, 'OPENWEATHER_API_KEY')
        if not base_url:
            raise ConfigurationError(self.provider_name, 'OPENWEATHER_BASE_URL')

        super().__init__(session_manager=session_manager, timeout_ms=timeout_ms, logger=logger)
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.geo_url = geo_url
        self.max_attempts = max(1, max_retries)
        self.retry_delay_ms = retry_delay_ms
        self._sleep = sleep

    @property
    def provider_name(self) -> str:
        return "OpenWeatherMap"

    def _wait_seconds(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        retry_after = getattr(error, 'retry_after', None)
        if isinstance(error, ApiError) and error.status_code == 429 and retry_after:
            return float(retry_after)
        return self.retry_delay_ms * retry_state.attempt_number / 1000

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        self.logger.warning(
            "Retrying OpenWeatherMap request",
            attempt=retry_state.attempt_number,
            max_attempts=self.max_attempts,
            wait_seconds=retry_state.next_action.sleep if retry_state.next_action else None,
            error=str(error)
        )

    async def _request(self, url: str, params: Dict[str, Any], context: str) -> Any:
        """GET com appid e retry; só falhas transitórias são repetidas"""
        params = {**params, 'appid': self.api_key}
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self._wait_seconds,
            retry=retry_if_exception(is_retryable),
            before_sleep=self._log_retry,
            sleep=self._sleep
        )
        try:
            return await retrying(self._get_json, url, params, context)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            self.logger.error(
                "OpenWeatherMap retries exhausted",
                attempts=self.max_attempts,
                error=str(last_error)
            )
            raise MaxRetriesExceededError(self.provider_name, self.max_attempts, last_error) from last_error

    async def _geocode(self, query: str, limit: int = 1) -> List[Dict[str, Any]]:
        results = await self._request(self.geo_url, {'q': query, 'limit': limit}, query)
        return results if isinstance(results, list) else []

    @trace_operation("openweather.get_by_city_name")
    async def get_current_weather_by_city_name(
        self,
        city_name: str,
        country_code: Optional[str] = None,
        units: Optional[str] = None
    ) -> WeatherWireResponse:
        query = f"{city_name},{country_code}" if country_code else city_name
        locations = await self._geocode(query)
        if not locations:
            raise NotFoundError('Ciudad', query)

        location = locations[0]
        self.logger.debug(
            "City geocoded",
            query=query,
            lat=location.get('lat'),
            lon=location.get('lon')
        )
        response = await self.get_current_weather_by_coordinates(
            location['lat'], location['lon'], units
        )

        # Nome e país resolvidos pelo geocodificador prevalecem
        updates = {}
        if location.get('name'):
            updates['name'] = location['name']
        if location.get('country') and not response.sys.country:
            updates['sys'] = response.sys.model_copy(update={'country': location['country']})
        return response.model_copy(update=updates) if updates else response

    @trace_operation("openweather.get_by_coordinates")
    async def get_current_weather_by_coordinates(
        self,
        latitude: float,
        longitude: float,
        units: Optional[str] = None
    ) -> WeatherWireResponse:
        params = {
            'lat': latitude,
            'lon': longitude,
            'units': WIRE_UNITS,
            'mode': 'json',
        }
        payload = await self._request(f"{self.base_url}/weather", params, f"{latitude},{longitude}")
        return self._apply_wind_units(parse_weather_response(payload), units)

    @staticmethod
    def _apply_wind_units(response: WeatherWireResponse, units: Optional[str]) -> WeatherWireResponse:
        """Kelvin e m/s vêm do upstream; só o vento muda para mph em imperial"""
        if units != IMPERIAL_UNITS or response.wind is None:
            return response
        wind = response.wind.model_copy(update={'speed': round(response.wind.speed * MPS_TO_MPH, 2)})
        return response.model_copy(update={'wind': wind})

    @trace_operation("openweather.get_cities_by_country")
    async def get_cities_by_country(
        self,
        country_code: str,
        limit: int = 5,
        units: Optional[str] = None
    ) -> List[WeatherWireResponse]:
        """
        Busca dinâmica: geocodificação restrita ao país (limite máximo 5),
        com fallback para a capital quando não há resultados

        Raises:
            NotFoundError: país sem resultados e sem capital conhecida
        """
        code = country_code.upper()
        capped = max(1, min(limit, MAX_GEOCODING_RESULTS))

        geocoded = await capture(lambda: self._geocode(f",{code}", capped))
        if isinstance(geocoded, Ok) and geocoded.value:
            lookups = [
                partial(self._fetch_by_location, location, units)
                for location in geocoded.value
            ]
        else:
            if not isinstance(geocoded, Ok):
                self.logger.warning(
                    "Country geocoding failed",
                    country=code,
                    error=str(geocoded.error)
                )
            capital = CAPITALS.get(code)
            if capital is None:
                raise NotFoundError('País', code)
            self.logger.info("Using capital fallback", country=code, capital=capital)
            lookups = [partial(self.get_current_weather_by_city_name, capital, code, units)]

        responses: List[WeatherWireResponse] = []
        for lookup in lookups:
            result = await capture(lookup)
            if isinstance(result, Ok):
                responses.append(result.value)
            else:
                self.logger.warning(
                    "Skipping city in country search",
                    country=code,
                    error=str(result.error)
                )
        return responses

    async def _fetch_by_location(self, location: Dict[str, Any], units: Optional[str]) -> WeatherWireResponse:
        response = await self.get_current_weather_by_coordinates(location['lat'], location['lon'], units)
        name = location.get('name')
        return response.model_copy(update={'name': name}) if name else response
