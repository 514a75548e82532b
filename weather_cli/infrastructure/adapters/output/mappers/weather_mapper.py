"""
Weather Mapper - conversão pura do formato canônico para entidades de domínio

O formato canônico traz temperaturas sempre em Kelvin; a unidade de exibição
é aplicada apenas nos DTOs de saída.
"""
from datetime import datetime, timezone
from typing import Optional

from weather_cli.application.dtos.wire_response import WeatherWireResponse
from weather_cli.domain.entities.city import City
from weather_cli.domain.entities.weather import Weather, WeatherCondition
from weather_cli.domain.entities.weather_query_result import WeatherQueryResult
from weather_cli.domain.exceptions import MappingError, ValidationError
from weather_cli.shared.utils.text import normalize_city_name

DEFAULT_VISIBILITY_M = 10000
UNKNOWN_CITY = 'Unknown'
UNKNOWN_COUNTRY = 'unknown'


def map_to_weather(response: WeatherWireResponse) -> Weather:
    """
    Converte resposta canônica em Weather (temperaturas em Kelvin)

    Raises:
        MappingError: lista de condições vazia
    """
    if not response.weather:
        raise MappingError(
            "Respuesta sin condiciones meteorológicas",
            details={'name': response.name}
        )

    primary = response.weather[0]
    main = response.main
    wind = response.wind

    return Weather(
        temperature=main.temp,
        feels_like=main.feels_like,
        temp_min=main.temp_min,
        temp_max=main.temp_max,
        pressure=main.pressure,
        humidity=main.humidity,
        # 0 m (neblina densa) é leitura válida
        visibility=DEFAULT_VISIBILITY_M if response.visibility is None else response.visibility,
        wind_speed=(wind.speed if wind else 0) or 0,
        wind_direction=(wind.deg if wind else 0) or 0,
        condition=WeatherCondition.from_label(primary.main),
        description=primary.description,
        timestamp=datetime.fromtimestamp(response.dt, tz=timezone.utc)
    )


def _build_city(name: str, country: str, latitude: float, longitude: float) -> Optional[City]:
    try:
        return City(name=name, country=country, latitude=latitude, longitude=longitude)
    except ValidationError:
        return None


def map_to_city(
    response: WeatherWireResponse,
    fallback_name: Optional[str] = None,
    fallback_country: Optional[str] = None
) -> City:
    """
    Converte resposta canônica em City

    Nomes com acentos ou pontuação fora da classe aceita são tentados sem
    acentos, depois com o nome consultado e por fim como 'Unknown'.
    """
    country = response.sys.country or fallback_country or UNKNOWN_COUNTRY
    lat, lon = response.coord.lat, response.coord.lon

    for candidate in (response.name, normalize_city_name(response.name), fallback_name,
                      normalize_city_name(fallback_name or '')):
        if not candidate:
            continue
        city = _build_city(candidate, country, lat, lon)
        if city is not None:
            return city

    return City(name=UNKNOWN_CITY, country=country, latitude=lat, longitude=lon)


def map_to_query_result(
    response: WeatherWireResponse,
    fallback_name: Optional[str] = None,
    fallback_country: Optional[str] = None
) -> WeatherQueryResult:
    return WeatherQueryResult(
        city=map_to_city(response, fallback_name, fallback_country),
        weather=map_to_weather(response)
    )
