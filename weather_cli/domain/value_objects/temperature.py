"""
Value Object para temperatura
Kelvin é a unidade canônica; Celsius/Fahrenheit são derivados sob demanda
"""
import math
from dataclasses import dataclass
from enum import Enum

from weather_cli.domain.exceptions import ValidationError

ABSOLUTE_ZERO_CELSIUS = -273.15


class TemperatureUnit(str, Enum):
    """Unidades de temperatura suportadas"""
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        return {
            TemperatureUnit.CELSIUS: "°C",
            TemperatureUnit.FAHRENHEIT: "°F",
            TemperatureUnit.KELVIN: "K",
        }[self]

    @property
    def unit_system(self) -> str:
        """Sistema de unidades pedido aos provedores para o vento (metric/imperial/standard)"""
        return {
            TemperatureUnit.CELSIUS: "metric",
            TemperatureUnit.FAHRENHEIT: "imperial",
            TemperatureUnit.KELVIN: "standard",
        }[self]

    @classmethod
    def from_value(cls, value) -> 'TemperatureUnit':
        """
        Converte string (ou a própria enum) em TemperatureUnit

        Raises:
            ValidationError: unidade não suportada
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(unit.value for unit in cls)
            raise ValidationError(
                f"Unidad no soportada: '{value}'. Valores válidos: {valid}",
                field='units'
            )


@dataclass(frozen=True)
class Temperature:
    """Temperatura armazenada em Kelvin"""
    kelvin: float

    def __post_init__(self):
        if not isinstance(self.kelvin, (int, float)) or math.isnan(self.kelvin):
            raise ValidationError(f"Temperatura inválida: {self.kelvin!r}", field='temperature')
        if self.kelvin < 0:
            raise ValidationError(
                f"Temperatura abaixo do zero absoluto: {self.kelvin}K",
                field='temperature'
            )

    @property
    def celsius(self) -> float:
        return self.kelvin + ABSOLUTE_ZERO_CELSIUS

    @property
    def fahrenheit(self) -> float:
        return self.celsius * 9 / 5 + 32

    def in_unit(self, unit: TemperatureUnit) -> float:
        if unit == TemperatureUnit.CELSIUS:
            return self.celsius
        if unit == TemperatureUnit.FAHRENHEIT:
            return self.fahrenheit
        return self.kelvin

    def format(self, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> str:
        """Ex.: 20.0°C, 68.0°F, 293.1K"""
        return f"{self.in_unit(unit):.1f}{unit.symbol}"

    @classmethod
    def from_celsius(cls, celsius: float) -> 'Temperature':
        return cls(kelvin=celsius - ABSOLUTE_ZERO_CELSIUS)

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> 'Temperature':
        return cls.from_celsius((fahrenheit - 32) * 5 / 9)

    @classmethod
    def from_unit(cls, value: float, unit: TemperatureUnit) -> 'Temperature':
        if unit == TemperatureUnit.CELSIUS:
            return cls.from_celsius(value)
        if unit == TemperatureUnit.FAHRENHEIT:
            return cls.from_fahrenheit(value)
        return cls(kelvin=value)
