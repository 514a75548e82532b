"""
Configurações e fixtures compartilhadas para testes unitários
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_cli.application.dtos.wire_response import parse_weather_response
from weather_cli.domain.entities.city import City
from weather_cli.domain.entities.weather import Weather, WeatherCondition
from weather_cli.domain.entities.weather_query_result import WeatherQueryResult


class FakeClock:
    """Relógio manual para TTL sem espera real"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_wire_payload():
    """
    Factory fixture para payload no formato canônico

    Usage:
        def test_something(make_wire_payload):
            payload = make_wire_payload(name='Madrid', temp=293.15)
    """
    def _make(
        name: str = 'Madrid',
        country: str = 'ES',
        lat: float = 40.4168,
        lon: float = -3.7038,
        temp: float = 293.15,
        humidity: float = 65,
        pressure: float = 1013,
        condition: str = 'Clear',
        description: str = 'cielo claro',
        weather: list = None,
    ) -> dict:
        return {
            'coord': {'lat': lat, 'lon': lon},
            'weather': weather if weather is not None else [
                {'id': 800, 'main': condition, 'description': description, 'icon': '01d'}
            ],
            'base': 'stations',
            'main': {
                'temp': temp,
                'feels_like': temp,
                'temp_min': temp - 1,
                'temp_max': temp + 1,
                'pressure': pressure,
                'humidity': humidity,
            },
            'visibility': 10000,
            'wind': {'speed': 3.5, 'deg': 180},
            'clouds': {'all': 0},
            'dt': 1700000000,
            'sys': {'country': country},
            'timezone': 3600,
            'id': 3117735,
            'name': name,
            'cod': 200,
        }

    return _make


@pytest.fixture
def make_wire_response(make_wire_payload):
    def _make(**kwargs):
        return parse_weather_response(make_wire_payload(**kwargs))

    return _make


@pytest.fixture
def make_weather():
    def _make(temperature: float = 293.15, humidity: float = 65, **overrides) -> Weather:
        values = dict(
            temperature=temperature,
            feels_like=temperature,
            temp_min=temperature - 1,
            temp_max=temperature + 1,
            pressure=1013,
            humidity=humidity,
            visibility=10000,
            wind_speed=3.5,
            wind_direction=180,
            condition=WeatherCondition.CLEAR,
            description='cielo claro',
            timestamp=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        )
        values.update(overrides)
        return Weather(**values)

    return _make


@pytest.fixture
def make_query_result(make_weather):
    def _make(name: str = 'Madrid', country: str = 'ES', temperature: float = 293.15) -> WeatherQueryResult:
        return WeatherQueryResult(
            city=City(name=name, country=country, latitude=40.4168, longitude=-3.7038),
            weather=make_weather(temperature=temperature),
        )

    return _make


@pytest.fixture
def make_http_response():
    """Resposta aiohttp simulada para `async with session.get(...)`"""
    def _make(status: int = 200, payload=None, headers: dict = None):
        response = MagicMock()
        response.status = status
        response.headers = headers or {}
        response.json = AsyncMock(return_value=payload)
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=None)
        return response

    return _make


@pytest.fixture
def make_session():
    """Sessão simulada que devolve as respostas na ordem dada"""
    def _make(*responses):
        session = MagicMock()
        session.get = MagicMock(side_effect=list(responses))
        return session

    return _make


@pytest.fixture
def silent_logger():
    return MagicMock()
