"""
Domain Entity - Favorite
Par cidade + país (ISO 3166-1 alpha-2) salvo pelo usuário
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone

from weather_cli.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Favorite:
    city: str
    country: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        city = (self.city or "").strip()
        country = (self.country or "").strip().upper()
        if not city:
            raise ValidationError("El nombre de la ciudad es obligatorio", field='city')
        if len(country) != 2 or not country.isalpha():
            raise ValidationError(
                f"Código de país inválido: '{self.country}'. Use ISO 3166-1 alpha-2.",
                field='country'
            )
        object.__setattr__(self, 'city', city)
        object.__setattr__(self, 'country', country)

    def matches(self, city: str, country: str) -> bool:
        """Unicidade: cidade case-insensitive, país em maiúsculas"""
        return (
            self.city.lower() == (city or "").strip().lower()
            and self.country == (country or "").strip().upper()
        )

    def to_dict(self) -> dict:
        return {
            'city': self.city,
            'country': self.country,
            'createdAt': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Favorite':
        created_at = data.get('createdAt')
        return cls(
            city=data['city'],
            country=data['country'],
            created_at=datetime.fromisoformat(created_at) if created_at else datetime.now(timezone.utc)
        )
