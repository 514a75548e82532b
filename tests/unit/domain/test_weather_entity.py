"""
Testes para a entidade Weather
"""
import pytest

from weather_cli.domain.entities.weather import WeatherCondition
from weather_cli.domain.exceptions import ValidationError
from weather_cli.domain.value_objects.temperature import TemperatureUnit


class TestWeatherInvariants:

    @pytest.mark.parametrize("humidity", [-1, 100.5])
    def test_rejects_humidity_out_of_range(self, make_weather, humidity):
        with pytest.raises(ValidationError) as exc_info:
            make_weather(humidity=humidity)
        assert exc_info.value.field == 'humidity'

    def test_rejects_non_positive_pressure(self, make_weather):
        with pytest.raises(ValidationError):
            make_weather(pressure=0)

    def test_rejects_negative_wind(self, make_weather):
        with pytest.raises(ValidationError):
            make_weather(wind_speed=-0.1)

    def test_rejects_negative_kelvin(self, make_weather):
        with pytest.raises(ValidationError):
            make_weather(feels_like=-5)


class TestWeatherBehaviour:

    def test_temperature_in_units(self, make_weather):
        weather = make_weather(temperature=293.15)
        assert weather.get_temperature_in_unit(TemperatureUnit.CELSIUS) == pytest.approx(20.0)
        assert weather.get_temperature_in_unit(TemperatureUnit.FAHRENHEIT) == pytest.approx(68.0)
        assert weather.format_temperature() == "20.0°C"

    def test_cold_and_hot_thresholds(self, make_weather):
        assert make_weather(temperature=273.15).is_cold
        assert make_weather(temperature=310.15).is_hot
        mild = make_weather(temperature=293.15)
        assert not mild.is_cold and not mild.is_hot

    def test_unknown_condition_label_defaults_to_clear(self):
        assert WeatherCondition.from_label("Tornado") is WeatherCondition.CLEAR
        assert WeatherCondition.from_label("rain") is WeatherCondition.RAIN
