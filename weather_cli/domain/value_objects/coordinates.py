"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
import math
from dataclasses import dataclass
from typing import Tuple

from weather_cli.domain.exceptions import InvalidCoordinateError
from weather_cli.shared.utils.haversine import calculate_distance


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Comportamentos do domínio (distance_to, is_within_radius)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not _is_number(self.latitude):
            raise InvalidCoordinateError(
                f"Latitude inválida: {self.latitude!r}. Deve ser um número.",
                field='latitude'
            )
        if not _is_number(self.longitude):
            raise InvalidCoordinateError(
                f"Longitude inválida: {self.longitude!r}. Deve ser um número.",
                field='longitude'
            )
        if not (-90 <= self.latitude <= 90):
            raise InvalidCoordinateError(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre -90 e 90 graus.",
                field='latitude'
            )
        if not (-180 <= self.longitude <= 180):
            raise InvalidCoordinateError(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre -180 e 180 graus.",
                field='longitude'
            )

    def distance_to(self, other: 'Coordinates') -> float:
        """
        Calcula distância em km até outra coordenada usando Haversine

        Args:
            other: Coordenadas de destino

        Returns:
            Distância em quilômetros

        Example:
            >>> madrid = Coordinates(40.4168, -3.7038)
            >>> barcelona = Coordinates(41.3874, 2.1686)
            >>> round(madrid.distance_to(barcelona))
            505
        """
        return calculate_distance(
            self.latitude,
            self.longitude,
            other.latitude,
            other.longitude
        )

    def is_within_radius(self, other: 'Coordinates', radius_km: float) -> bool:
        return self.distance_to(other) <= radius_km

    def to_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"{self.latitude:.6f}, {self.longitude:.6f}"

    @classmethod
    def from_tuple(cls, coords: Tuple[float, float]) -> 'Coordinates':
        return cls(latitude=coords[0], longitude=coords[1])

    @classmethod
    def from_string(cls, value: str) -> 'Coordinates':
        """
        Factory method para criar a partir de "lat, lon"

        Raises:
            InvalidCoordinateError: formato inválido ou partes não numéricas
        """
        parts = [part.strip() for part in (value or "").split(",")]
        if len(parts) != 2 or not all(parts):
            raise InvalidCoordinateError(
                f"Formato de coordenadas inválido: '{value}'. Use 'lat, lon'.",
                field='coordinates'
            )
        try:
            latitude, longitude = float(parts[0]), float(parts[1])
        except ValueError:
            raise InvalidCoordinateError(
                f"Coordenadas não numéricas: '{value}'",
                field='coordinates'
            )
        return cls(latitude=latitude, longitude=longitude)
