"""Request DTOs - Contratos de entrada para use cases"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GetWeatherByCityRequest:
    """Request para buscar clima de uma cidade"""
    city: str
    country: Optional[str] = None
    units: str = 'celsius'
    save_history: bool = True


@dataclass(frozen=True)
class GetWeatherByCoordinatesRequest:
    latitude: float
    longitude: float
    units: str = 'celsius'
    save_history: bool = True


@dataclass(frozen=True)
class GetWeatherByCountryRequest:
    """Request para buscar clima das principais cidades de um país"""
    country: str
    limit: int = 5
    units: str = 'celsius'


@dataclass(frozen=True)
class FavoriteRequest:
    city: str
    country: str
