"""
Domain Entity - City
Identidade de uma cidade (nome + país) com coordenadas opcionais
"""
import re
from dataclasses import dataclass
from typing import Optional

from weather_cli.domain.exceptions import ValidationError
from weather_cli.domain.value_objects.coordinates import Coordinates

NAME_PATTERN = re.compile(r"^[a-zA-Z\s\-']+$")


@dataclass(frozen=True)
class City:
    """
    Cidade validada na construção

    - name: apenas letras, espaços, hífen e apóstrofo (mínimo 2 caracteres)
    - country: código de 2-3 letras ou nome livre com a mesma classe de caracteres
    """
    name: str
    country: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def __post_init__(self):
        name = (self.name or "").strip()
        if len(name) < 2:
            raise ValidationError(
                "El nombre de la ciudad debe tener al menos 2 caracteres",
                field='name'
            )
        if not NAME_PATTERN.match(name):
            raise ValidationError(
                f"Nombre de ciudad inválido: '{self.name}'",
                field='name'
            )

        country = (self.country or "").strip()
        if not country:
            raise ValidationError("El país es obligatorio", field='country')
        is_code = len(country) in (2, 3) and country.isalpha()
        if not is_code and not NAME_PATTERN.match(country):
            raise ValidationError(f"País inválido: '{self.country}'", field='country')

        # Coordenadas parciais não são representáveis
        if (self.latitude is None) != (self.longitude is None):
            raise ValidationError(
                "Latitude e longitude devem ser informadas juntas",
                field='coordinates'
            )
        if self.latitude is not None:
            Coordinates(self.latitude, self.longitude)

        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'country', country)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinates(self) -> Optional[Coordinates]:
        if not self.has_coordinates:
            return None
        return Coordinates(self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"{self.name}, {self.country}"

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'country': self.country,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }
