"""
Testes para Temperature e TemperatureUnit
"""
import pytest

from weather_cli.domain.exceptions import ValidationError
from weather_cli.domain.value_objects.temperature import Temperature, TemperatureUnit


class TestTemperature:

    def test_kelvin_to_celsius_format(self):
        """REGRA: 293.15K é exibido como 20.0°C"""
        assert Temperature(293.15).format(TemperatureUnit.CELSIUS) == "20.0°C"

    def test_fahrenheit(self):
        assert Temperature.from_celsius(100).fahrenheit == pytest.approx(212)
        assert Temperature(293.15).format(TemperatureUnit.FAHRENHEIT) == "68.0°F"

    def test_from_fahrenheit(self):
        assert Temperature.from_fahrenheit(32).kelvin == pytest.approx(273.15)

    def test_from_unit_kelvin_is_identity(self):
        assert Temperature.from_unit(280.0, TemperatureUnit.KELVIN).kelvin == 280.0

    def test_rejects_below_absolute_zero(self):
        with pytest.raises(ValidationError):
            Temperature(-0.01)

    def test_rejects_nan(self):
        with pytest.raises(ValidationError):
            Temperature(float('nan'))


class TestTemperatureUnit:

    @pytest.mark.parametrize("unit,system", [
        (TemperatureUnit.CELSIUS, "metric"),
        (TemperatureUnit.FAHRENHEIT, "imperial"),
        (TemperatureUnit.KELVIN, "standard"),
    ])
    def test_unit_system(self, unit, system):
        assert unit.unit_system == system

    def test_from_value_is_case_insensitive(self):
        assert TemperatureUnit.from_value(" Fahrenheit ") is TemperatureUnit.FAHRENHEIT

    def test_from_value_rejects_unknown(self):
        with pytest.raises(ValidationError) as exc_info:
            TemperatureUnit.from_value("rankine")
        assert exc_info.value.field == 'units'
