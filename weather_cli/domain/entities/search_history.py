"""
Domain Entity - SearchHistoryEntry
Registro de uma consulta realizada (persistido fora do núcleo)
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from weather_cli.domain.value_objects.coordinates import Coordinates


class SearchType(str, Enum):
    CITY = "city"
    COUNTRY = "country"
    COORDINATES = "coordinates"


@dataclass(frozen=True)
class SearchHistoryEntry:
    search_query: str
    city_name: str
    country_code: str
    temperature: float
    feels_like: float
    humidity: float
    condition: str
    description: str
    search_type: SearchType = SearchType.CITY
    coordinates: Optional[Coordinates] = None
    searched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'searchQuery': self.search_query,
            'cityName': self.city_name,
            'countryCode': self.country_code,
            'temperature': self.temperature,
            'feelsLike': self.feels_like,
            'humidity': self.humidity,
            'condition': self.condition,
            'description': self.description,
            'coordinates': (
                {'lat': self.coordinates.latitude, 'lon': self.coordinates.longitude}
                if self.coordinates else None
            ),
            'searchedAt': self.searched_at.isoformat(),
            'searchType': self.search_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SearchHistoryEntry':
        coords = data.get('coordinates')
        return cls(
            id=data.get('id') or uuid.uuid4().hex,
            search_query=data.get('searchQuery', ''),
            city_name=data.get('cityName', ''),
            country_code=data.get('countryCode', ''),
            temperature=float(data.get('temperature', 0.0)),
            feels_like=float(data.get('feelsLike', 0.0)),
            humidity=float(data.get('humidity', 0.0)),
            condition=data.get('condition', ''),
            description=data.get('description', ''),
            coordinates=Coordinates(coords['lat'], coords['lon']) if coords else None,
            searched_at=datetime.fromisoformat(data['searchedAt']) if data.get('searchedAt') else datetime.now(timezone.utc),
            search_type=SearchType(data.get('searchType', SearchType.CITY.value)),
        )
