"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from weather_cli.domain.entities.favorite import Favorite
from weather_cli.domain.entities.weather_query_result import WeatherQueryResult
from weather_cli.domain.value_objects.temperature import Temperature, TemperatureUnit

WIND_UNITS = {
    TemperatureUnit.CELSIUS: 'm/s',
    TemperatureUnit.KELVIN: 'm/s',
    TemperatureUnit.FAHRENHEIT: 'mph',
}


@dataclass(frozen=True)
class WeatherResponseDTO:
    """Clima de uma cidade pronto para exibição"""
    display: str
    city: str
    country: str
    temperature: str
    feels_like: str
    temp_min: str
    temp_max: str
    temperature_value: float
    humidity: str
    pressure: str
    wind: str
    visibility: str
    condition: str
    description: str
    is_cold: bool
    is_hot: bool
    latitude: Optional[float]
    longitude: Optional[float]
    observed_at: str
    queried_at: str

    @staticmethod
    def from_result(result: WeatherQueryResult, units: TemperatureUnit) -> 'WeatherResponseDTO':
        """
        Converte WeatherQueryResult em DTO formatado na unidade pedida

        Args:
            result: Resultado do repositório
            units: Unidade de exibição das temperaturas
        """
        weather = result.weather
        city = result.city

        def fmt(kelvin: float) -> str:
            return Temperature(kelvin).format(units)

        return WeatherResponseDTO(
            display=f"Clima en {city.name}",
            city=city.name,
            country=city.country,
            temperature=fmt(weather.temperature),
            feels_like=fmt(weather.feels_like),
            temp_min=fmt(weather.temp_min),
            temp_max=fmt(weather.temp_max),
            temperature_value=round(weather.get_temperature_in_unit(units), 2),
            humidity=f"{weather.humidity:.0f}%",
            pressure=f"{weather.pressure:.0f} hPa",
            wind=f"{weather.wind_speed:.1f} {WIND_UNITS[units]} ({weather.wind_direction:.0f}°)",
            visibility=f"{weather.visibility / 1000:.1f} km",
            condition=weather.condition.value,
            description=weather.description,
            is_cold=weather.is_cold,
            is_hot=weather.is_hot,
            latitude=city.latitude,
            longitude=city.longitude,
            observed_at=weather.timestamp.isoformat(),
            queried_at=result.queried_at.isoformat()
        )

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.__dict__)


@dataclass(frozen=True)
class CountryWeatherResponseDTO:
    country_code: str
    country_name: str
    total_cities: int
    cities: List[WeatherResponseDTO] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'countryCode': self.country_code,
            'country': self.country_name,
            'totalCities': self.total_cities,
            'cities': [city.to_dict() for city in self.cities],
        }


@dataclass(frozen=True)
class FavoriteResponseDTO:
    city: str
    country: str
    created_at: str

    @staticmethod
    def from_entity(favorite: Favorite) -> 'FavoriteResponseDTO':
        return FavoriteResponseDTO(
            city=favorite.city,
            country=favorite.country,
            created_at=favorite.created_at.isoformat()
        )


@dataclass(frozen=True)
class FavoriteWeatherDTO:
    """Resultado por favorito: clima ou mensagem de erro"""
    favorite: FavoriteResponseDTO
    weather: Optional[WeatherResponseDTO] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
