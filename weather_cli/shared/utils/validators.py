"""
Validators Utility
Validação de entrada com exceções de domínio
"""
import re
from typing import Optional

from weather_cli.domain.exceptions import ValidationError
from weather_cli.shared.utils.text import collapse_whitespace

COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(value: float, min_val: float, max_val: float, param_name: str) -> float:
        """
        Valida se valor numérico está dentro do range

        Raises:
            ValidationError: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            raise ValidationError(
                f"{param_name} debe estar entre {min_val} y {max_val}",
                field=param_name,
                details={param_name: value, 'min': min_val, 'max': max_val}
            )
        return value

    @staticmethod
    def validate_not_empty(value: Optional[str], param_name: str) -> str:
        """
        Valida se string não está vazia

        Returns:
            String validada e trimmed
        """
        if not value or not value.strip():
            raise ValidationError(f"{param_name} no puede estar vacío", field=param_name)
        return value.strip()

    @staticmethod
    def validate_int(value, param_name: str) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{param_name} debe ser un número entero", field=param_name)


class CountryValidator:
    """Validação de códigos ISO 3166-1 alpha-2"""

    COUNTRY_NAMES = {
        'ES': 'España',
        'US': 'Estados Unidos',
        'MX': 'México',
        'AR': 'Argentina',
        'CO': 'Colombia',
        'PE': 'Perú',
        'CL': 'Chile',
        'FR': 'Francia',
        'DE': 'Alemania',
        'IT': 'Italia',
        'GB': 'Reino Unido',
        'PT': 'Portugal',
        'BR': 'Brasil',
        'JP': 'Japón',
        'CN': 'China',
        'CA': 'Canadá',
        'AU': 'Australia',
    }

    @staticmethod
    def normalize(country_code: Optional[str]) -> str:
        """
        Normaliza e valida o código do país

        Raises:
            ValidationError: código ausente ou fora do formato XX
        """
        code = (country_code or "").strip().upper()
        if not COUNTRY_CODE_PATTERN.match(code):
            raise ValidationError(
                f"Código de país inválido: '{country_code}'. Debe tener 2 letras (ISO 3166-1).",
                field='country'
            )
        return code

    @classmethod
    def get_country_name(cls, country_code: str) -> str:
        return cls.COUNTRY_NAMES.get(country_code.upper(), country_code.upper())


class CityValidator:
    """Validação e normalização de nomes de cidades"""

    MIN_LENGTH = 2

    @staticmethod
    def normalize_city_name(name: Optional[str]) -> str:
        return collapse_whitespace(name or "")

    @classmethod
    def validate(cls, name: Optional[str]) -> str:
        """
        Returns:
            Nome normalizado

        Raises:
            ValidationError: nome vazio ou curto demais
        """
        normalized = cls.normalize_city_name(name)
        if not normalized:
            raise ValidationError("El nombre de la ciudad es obligatorio", field='city')
        if len(normalized) < cls.MIN_LENGTH:
            raise ValidationError(
                f"El nombre de la ciudad debe tener al menos {cls.MIN_LENGTH} caracteres",
                field='city'
            )
        return normalized
