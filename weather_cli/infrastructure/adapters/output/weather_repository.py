"""
Weather Repository - orquestra cache, provedor ativo e fallback por país

Fluxo de get_by_city:
    cache → provedor (geocodificação + clima) → mapper → cache → resultado

Fluxo de get_by_country (primeira lista não vazia vence):
    lista persistida → tabela estática → busca dinâmica no provedor
"""
from functools import partial
from typing import Awaitable, Callable, List, Optional

from weather_cli.application.ports.output.cache_repository_port import ICacheRepository
from weather_cli.application.ports.output.country_cities_repository_port import ICountryCitiesRepository
from weather_cli.application.ports.output.weather_api_client_port import IWeatherAPIClient
from weather_cli.domain.entities.weather_query_result import WeatherQueryResult
from weather_cli.domain.exceptions import (
    ApiError,
    ConfigurationError,
    DomainException,
    NotFoundError,
)
from weather_cli.domain.repositories.weather_repository import IWeatherRepository
from weather_cli.domain.value_objects.coordinates import Coordinates
from weather_cli.domain.value_objects.temperature import TemperatureUnit
from weather_cli.infrastructure.adapters.output.mappers.weather_mapper import map_to_query_result
from weather_cli.infrastructure.data.cities_by_country import get_cities_for_country
from weather_cli.shared.config.logger_config import get_logger
from weather_cli.shared.result import Ok, capture, first_success
from weather_cli.shared.tracing import trace_operation
from weather_cli.shared.utils.text import collapse_whitespace, normalize_city_name

DEFAULT_COUNTRY_LIMIT = 5
DEFAULT_TIMEOUT_MS = 5000

TRANSIENT_ERROR_PATTERNS = (
    'timeout',
    'rate limit',
    'too many requests',
    'network',
    'connection',
    'service unavailable',
)


class WeatherRepository(IWeatherRepository):
    """
    Implementação do repositório sobre um IWeatherAPIClient

    Args:
        api_client: Cliente do provedor ativo (resolvido no startup)
        cache: Cache compartilhado (obrigatório)
        country_cities_repository: Fonte persistida de cidades por país (opcional)
        cache_ttl_seconds: TTL das entradas (None usa o padrão do cache)
        static_cities_lookup: Consulta à tabela estática (injetável em testes)
    """

    def __init__(
        self,
        api_client: IWeatherAPIClient,
        cache: ICacheRepository,
        country_cities_repository: Optional[ICountryCitiesRepository] = None,
        cache_ttl_seconds: Optional[int] = None,
        static_cities_lookup: Callable[[str], List[str]] = get_cities_for_country,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        logger=None
    ):
        self.api_client = api_client
        self.cache = cache
        self.country_cities_repository = country_cities_repository
        self.cache_ttl_seconds = cache_ttl_seconds
        self.static_cities_lookup = static_cities_lookup
        self.timeout_ms = timeout_ms
        self.logger = logger or get_logger(child=True)

    @staticmethod
    def build_city_cache_key(city_name: str, country_code: Optional[str], units: TemperatureUnit) -> str:
        name = collapse_whitespace(city_name).lower()
        country = (country_code or '').upper()
        return f"weather:city:{name}:{country}:{units.value}"

    # ------------------------------------------------------------------
    # Consultas individuais
    # ------------------------------------------------------------------

    @trace_operation("repository.get_by_city")
    async def get_by_city(
        self,
        city_name: str,
        country_code: Optional[str] = None,
        units: TemperatureUnit = TemperatureUnit.CELSIUS
    ) -> WeatherQueryResult:
        cache_key = self.build_city_cache_key(city_name, country_code, units)

        cached = await self._cache_get(cache_key)
        if cached is not None:
            self.logger.debug("Cache hit", key=cache_key)
            return cached

        context = f"{city_name}, {country_code}" if country_code else city_name
        try:
            response = await self.api_client.get_current_weather_by_city_name(
                city_name, country_code, units.unit_system
            )
            result = map_to_query_result(response, city_name, country_code)
        except Exception as e:
            raise self.classify_error(e, context) from e

        await self._cache_set(cache_key, result)
        return result

    @trace_operation("repository.get_by_coordinates")
    async def get_by_coordinates(
        self,
        coordinates: Coordinates,
        units: TemperatureUnit = TemperatureUnit.CELSIUS
    ) -> WeatherQueryResult:
        try:
            response = await self.api_client.get_current_weather_by_coordinates(
                coordinates.latitude, coordinates.longitude, units.unit_system
            )
            return map_to_query_result(response)
        except Exception as e:
            raise self.classify_error(e, str(coordinates)) from e

    # ------------------------------------------------------------------
    # Consulta por país
    # ------------------------------------------------------------------

    @trace_operation("repository.get_by_country")
    async def get_by_country(
        self,
        country_code: str,
        limit: int = DEFAULT_COUNTRY_LIMIT,
        units: TemperatureUnit = TemperatureUnit.CELSIUS
    ) -> List[WeatherQueryResult]:
        code = country_code.upper()
        max_cities = limit if limit and limit > 0 else DEFAULT_COUNTRY_LIMIT

        self.logger.info("Fetching weather for country", country=code, max_cities=max_cities)

        cities, source = await self._resolve_country_cities(code)
        if cities:
            self.logger.debug("Country cities resolved", country=code, source=source, total=len(cities))
            return await self._get_weather_for_cities(cities[:max_cities], code, units)

        self.logger.info("No predefined cities, trying dynamic search", country=code)
        dynamic = await capture(
            lambda: self.api_client.get_cities_by_country(code, max_cities, units=units.unit_system)
        )
        if isinstance(dynamic, Ok):
            results = []
            for response in dynamic.value:
                mapped = await capture(partial(self._map_response, response, None, code))
                if isinstance(mapped, Ok):
                    results.append(mapped.value)
                else:
                    self.logger.warning("Skipping unmappable city", country=code, error=str(mapped.error))
            if results:
                return results
        else:
            self.logger.warning("Dynamic country search failed", country=code, error=str(dynamic.error))

        self.logger.warning("No cities found for country", country=code)
        return []

    async def _resolve_country_cities(self, code: str):
        """Primeira lista não vazia entre a fonte persistida e a tabela estática"""
        repository = self.country_cities_repository
        if repository is not None and repository.is_available():
            persisted = await capture(lambda: repository.get_cities(code))
            if isinstance(persisted, Ok) and persisted.value:
                return list(persisted.value), 'persisted'
            if not isinstance(persisted, Ok):
                self.logger.warning(
                    "Persisted country cities unavailable",
                    country=code,
                    error=str(persisted.error)
                )

        static = self.static_cities_lookup(code)
        if static:
            return static, 'static'
        return [], None

    async def _get_weather_for_cities(
        self,
        cities: List[str],
        country_code: str,
        units: TemperatureUnit
    ) -> List[WeatherQueryResult]:
        """Cidades consultadas em sequência; falhas individuais são puladas"""
        results = []
        for city_name in cities:
            outcome = await first_success(
                self._city_variant_attempts(city_name, country_code, units),
                on_failure=lambda index, error, name=city_name: self.logger.debug(
                    "City variant failed",
                    city=name,
                    variant=index,
                    error=str(error)
                )
            )
            if outcome.succeeded:
                results.append(outcome.result.value)
            else:
                self.logger.warning(
                    "Skipping city after all variants failed",
                    city=city_name,
                    country=country_code,
                    attempts=len(outcome.failures),
                    error=str(outcome.failures[-1]) if outcome.failures else None
                )
        return results

    def _city_variant_attempts(
        self,
        city_name: str,
        country_code: str,
        units: TemperatureUnit
    ) -> List[Callable[[], Awaitable[WeatherQueryResult]]]:
        """
        Ordem das variações: nome original antes do normalizado, e para cada
        nome, com o código do país antes de sem ele
        """
        names = [city_name]
        normalized = normalize_city_name(city_name)
        if normalized and normalized != city_name:
            names.append(normalized)

        return [
            partial(self.get_by_city, name, country, units)
            for name in names
            for country in (country_code, None)
        ]

    async def _map_response(self, response, fallback_name, fallback_country):
        return map_to_query_result(response, fallback_name, fallback_country)

    # ------------------------------------------------------------------
    # Cache (falhas nunca propagam)
    # ------------------------------------------------------------------

    async def _cache_get(self, key: str) -> Optional[WeatherQueryResult]:
        try:
            return await self.cache.get(key)
        except Exception as e:
            self.logger.warning("Cache read failed", key=key, error=str(e))
            return None

    async def _cache_set(self, key: str, result: WeatherQueryResult) -> None:
        try:
            await self.cache.set(key, result, self.cache_ttl_seconds)
        except Exception as e:
            self.logger.warning("Cache write failed", key=key, error=str(e))

    # ------------------------------------------------------------------
    # Classificação de erros
    # ------------------------------------------------------------------

    def classify_error(self, error: BaseException, context: str) -> DomainException:
        """
        Traduz falha do provedor em erro tipado

        Erros já tipados pelo cliente são preservados; os demais são
        classificados pelo conteúdo da mensagem.
        """
        if isinstance(error, DomainException) and type(error) is not DomainException:
            return error

        service = self.api_client.provider_name
        message = str(error)
        lowered = message.lower()

        if '404' in lowered or 'not found' in lowered:
            return NotFoundError('Ciudad', context)
        if '401' in lowered or 'invalid api key' in lowered:
            return ConfigurationError(service, 'API_KEY_INVALID')
        if '429' in lowered or 'rate limit' in lowered:
            return ApiError.rate_limit(service)
        if 'timeout' in lowered:
            return ApiError.timeout(service, self.timeout_ms)

        is_operational = any(pattern in lowered for pattern in TRANSIENT_ERROR_PATTERNS)
        self.logger.error(
            "Unclassified provider error",
            context=context,
            error=message,
            error_type=type(error).__name__,
            is_operational=is_operational
        )
        return ApiError(
            f"Error al consultar {service}: {message}",
            service,
            is_operational=is_operational
        )
