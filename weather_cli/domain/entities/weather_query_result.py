"""Resultado de uma consulta: cidade + snapshot + instante da consulta"""
from dataclasses import dataclass, field
from datetime import datetime, timezone

from weather_cli.domain.entities.city import City
from weather_cli.domain.entities.weather import Weather


@dataclass(frozen=True)
class WeatherQueryResult:
    city: City
    weather: Weather
    queried_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
