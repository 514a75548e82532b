"""
Domain Entity - Weather
Snapshot de condições atuais, temperaturas armazenadas em Kelvin
"""
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from weather_cli.domain.exceptions import ValidationError
from weather_cli.domain.value_objects.temperature import Temperature, TemperatureUnit

COLD_THRESHOLD_CELSIUS = 10.0
HOT_THRESHOLD_CELSIUS = 30.0


class WeatherCondition(str, Enum):
    """Enumeração fechada de condições"""
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    DRIZZLE = "Drizzle"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"
    MIST = "Mist"
    FOG = "Fog"
    HAZE = "Haze"

    @classmethod
    def from_label(cls, label: str) -> 'WeatherCondition':
        """Rótulos desconhecidos caem em CLEAR"""
        for condition in cls:
            if condition.value.lower() == (label or "").strip().lower():
                return condition
        return cls.CLEAR


@dataclass(frozen=True)
class Weather:
    """
    Condições meteorológicas atuais

    Invariantes (validadas na construção):
    - temperaturas >= zero absoluto
    - umidade em [0, 100]
    - pressão > 0
    - velocidade do vento >= 0
    """
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float
    humidity: float
    visibility: float
    wind_speed: float
    wind_direction: float
    condition: WeatherCondition
    description: str
    timestamp: datetime

    def __post_init__(self):
        for field_name in ('temperature', 'feels_like', 'temp_min', 'temp_max'):
            value = getattr(self, field_name)
            if not isinstance(value, (int, float)) or math.isnan(value) or value < 0:
                raise ValidationError(
                    f"Temperatura inválida em '{field_name}': {value!r}K",
                    field=field_name
                )
        if not (0 <= self.humidity <= 100):
            raise ValidationError(
                f"Umidade inválida: {self.humidity}. Deve estar entre 0 e 100.",
                field='humidity'
            )
        if self.pressure <= 0:
            raise ValidationError(
                f"Pressão inválida: {self.pressure}. Deve ser maior que 0.",
                field='pressure'
            )
        if self.wind_speed < 0:
            raise ValidationError(
                f"Velocidade do vento inválida: {self.wind_speed}",
                field='wind_speed'
            )
        if self.visibility < 0:
            raise ValidationError(f"Visibilidade inválida: {self.visibility}", field='visibility')

    def get_temperature_in_unit(self, unit: TemperatureUnit) -> float:
        return Temperature(self.temperature).in_unit(unit)

    def get_feels_like_in_unit(self, unit: TemperatureUnit) -> float:
        return Temperature(self.feels_like).in_unit(unit)

    def format_temperature(self, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> str:
        return Temperature(self.temperature).format(unit)

    @property
    def is_cold(self) -> bool:
        return Temperature(self.temperature).celsius < COLD_THRESHOLD_CELSIUS

    @property
    def is_hot(self) -> bool:
        return Temperature(self.temperature).celsius > HOT_THRESHOLD_CELSIUS

    def to_dict(self) -> dict:
        return {
            'temperature': self.temperature,
            'feelsLike': self.feels_like,
            'tempMin': self.temp_min,
            'tempMax': self.temp_max,
            'pressure': self.pressure,
            'humidity': self.humidity,
            'visibility': self.visibility,
            'windSpeed': self.wind_speed,
            'windDirection': self.wind_direction,
            'condition': self.condition.value,
            'description': self.description,
            'timestamp': self.timestamp.isoformat(),
        }
