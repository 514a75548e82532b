"""
Configurações centralizadas da aplicação

As constantes de módulo são os valores padrão. `load_settings()` lê o
ambiente e valida tudo uma única vez na inicialização, devolvendo um
`Settings` imutável que é injetado nos componentes.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from weather_cli.domain.exceptions import ConfigurationError
from weather_cli.domain.value_objects.temperature import TemperatureUnit

# Provedor
PROVIDER_OPEN_METEO = 'open-meteo'
PROVIDER_OPENWEATHER = 'openweather'

# OpenWeatherMap
OPENWEATHER_BASE_URL = 'https://api.openweathermap.org/data/2.5'
OPENWEATHER_GEO_URL = 'https://api.openweathermap.org/geo/1.0/direct'
MIN_API_KEY_LENGTH = 10

# Open-Meteo (sem chave)
OPENMETEO_FORECAST_URL = 'https://api.open-meteo.com/v1/forecast'
OPENMETEO_GEOCODING_URL = 'https://geocoding-api.open-meteo.com/v1/search'

# HTTP / retry (milissegundos)
WEATHER_API_TIMEOUT = 5000
WEATHER_API_MAX_RETRIES = 3
WEATHER_API_RETRY_DELAY = 1000
MAX_RETRIES_UPPER_BOUND = 5

# Cache em memória
CACHE_TTL_SECONDS = 600
CACHE_MAX_ENTRIES = 100

# CLI
DEFAULT_COUNTRY = 'ES'
DEFAULT_COUNTRY_LIMIT = 5
MAX_COUNTRY_LIMIT = 50
LOG_LEVEL = 'WARNING'

# Persistência
STORAGE_FILE = 'file'
STORAGE_DYNAMODB = 'dynamodb'
HISTORY_FILE = str(Path.home() / '.weather-cli-history.json')
FAVORITES_FILE = str(Path.home() / '.weather-cli-favorites.json')
HISTORY_MAX_ENTRIES = 100
HISTORY_TABLE_NAME = 'weather-cli-history'
AWS_REGION = 'eu-west-1'


@dataclass(frozen=True)
class Settings:
    """Configuração validada, construída uma vez no startup"""
    provider: str = PROVIDER_OPEN_METEO
    openweather_api_key: str = ''
    openweather_base_url: str = OPENWEATHER_BASE_URL
    timeout_ms: int = WEATHER_API_TIMEOUT
    max_retries: int = WEATHER_API_MAX_RETRIES
    retry_delay_ms: int = WEATHER_API_RETRY_DELAY
    openmeteo_map_weather_codes: bool = False
    default_units: TemperatureUnit = TemperatureUnit.CELSIUS
    cache_ttl_seconds: int = CACHE_TTL_SECONDS
    cache_max_entries: int = CACHE_MAX_ENTRIES
    log_level: str = LOG_LEVEL
    storage: str = STORAGE_FILE
    history_file: str = HISTORY_FILE
    favorites_file: str = FAVORITES_FILE
    country_cities_file: Optional[str] = None
    history_table_name: str = HISTORY_TABLE_NAME
    aws_region: str = AWS_REGION

    def masked(self) -> dict:
        """Representação segura para exibição (chave mascarada)"""
        key = self.openweather_api_key
        return {
            'provider': self.provider,
            'openweather_api_key': f"***{key[-4:]}" if key else '(não definida)',
            'openweather_base_url': self.openweather_base_url,
            'timeout_ms': self.timeout_ms,
            'max_retries': self.max_retries,
            'retry_delay_ms': self.retry_delay_ms,
            'openmeteo_map_weather_codes': self.openmeteo_map_weather_codes,
            'default_units': self.default_units.value,
            'cache_ttl_seconds': self.cache_ttl_seconds,
            'cache_max_entries': self.cache_max_entries,
            'log_level': self.log_level,
            'storage': self.storage,
            'history_file': self.history_file,
            'favorites_file': self.favorites_file,
            'country_cities_file': self.country_cities_file or '(não definido)',
        }


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError('Config', name)


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.lower() in ('true', '1', 'yes')


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Lê e valida a configuração do ambiente

    Args:
        environ: Mapeamento de variáveis (padrão: os.environ)

    Returns:
        Settings validado

    Raises:
        ConfigurationError: valor ausente ou fora do intervalo
    """
    env = os.environ if environ is None else environ

    provider = env.get('WEATHER_PROVIDER', PROVIDER_OPEN_METEO).strip().lower()
    if provider not in (PROVIDER_OPEN_METEO, PROVIDER_OPENWEATHER):
        raise ConfigurationError('Config', 'WEATHER_PROVIDER')

    api_key = env.get('OPENWEATHER_API_KEY', '').strip()
    if provider == PROVIDER_OPENWEATHER and len(api_key) < MIN_API_KEY_LENGTH:
        raise ConfigurationError('OpenWeatherMap', 'OPENWEATHER_API_KEY')

    base_url = env.get('OPENWEATHER_BASE_URL', OPENWEATHER_BASE_URL).strip()
    if not base_url.startswith(('http://', 'https://')):
        raise ConfigurationError('OpenWeatherMap', 'OPENWEATHER_BASE_URL')

    timeout_ms = _int(env, 'WEATHER_API_TIMEOUT', WEATHER_API_TIMEOUT)
    max_retries = _int(env, 'WEATHER_API_MAX_RETRIES', WEATHER_API_MAX_RETRIES)
    retry_delay_ms = _int(env, 'WEATHER_API_RETRY_DELAY', WEATHER_API_RETRY_DELAY)
    if timeout_ms <= 0:
        raise ConfigurationError('Config', 'WEATHER_API_TIMEOUT')
    if not (0 <= max_retries <= MAX_RETRIES_UPPER_BOUND):
        raise ConfigurationError('Config', 'WEATHER_API_MAX_RETRIES')
    if retry_delay_ms < 0:
        raise ConfigurationError('Config', 'WEATHER_API_RETRY_DELAY')

    cache_ttl = _int(env, 'CACHE_TTL_SECONDS', CACHE_TTL_SECONDS)
    cache_max = _int(env, 'CACHE_MAX_ENTRIES', CACHE_MAX_ENTRIES)
    if cache_ttl <= 0:
        raise ConfigurationError('Config', 'CACHE_TTL_SECONDS')
    if cache_max <= 0:
        raise ConfigurationError('Config', 'CACHE_MAX_ENTRIES')

    units_raw = env.get('WEATHER_CLI_DEFAULT_UNITS', TemperatureUnit.CELSIUS.value)
    try:
        default_units = TemperatureUnit(units_raw.strip().lower())
    except ValueError:
        raise ConfigurationError('Config', 'WEATHER_CLI_DEFAULT_UNITS')

    storage = env.get('WEATHER_CLI_STORAGE', STORAGE_FILE).strip().lower()
    if storage not in (STORAGE_FILE, STORAGE_DYNAMODB):
        raise ConfigurationError('Config', 'WEATHER_CLI_STORAGE')

    return Settings(
        provider=provider,
        openweather_api_key=api_key,
        openweather_base_url=base_url.rstrip('/'),
        timeout_ms=timeout_ms,
        max_retries=max_retries,
        retry_delay_ms=retry_delay_ms,
        openmeteo_map_weather_codes=_bool(env, 'OPENMETEO_MAP_WEATHER_CODES', False),
        default_units=default_units,
        cache_ttl_seconds=cache_ttl,
        cache_max_entries=cache_max,
        log_level=env.get('LOG_LEVEL', LOG_LEVEL).upper(),
        storage=storage,
        history_file=env.get('WEATHER_CLI_HISTORY_FILE') or HISTORY_FILE,
        favorites_file=env.get('WEATHER_CLI_FAVORITES_FILE') or FAVORITES_FILE,
        country_cities_file=env.get('WEATHER_CLI_COUNTRY_CITIES_FILE') or None,
        history_table_name=env.get('HISTORY_TABLE_NAME', HISTORY_TABLE_NAME),
        aws_region=env.get('AWS_REGION', AWS_REGION),
    )


def load_env_file(env_path: Path) -> dict:
    """
    Carrega variáveis do arquivo .env sem sobrescrever as já definidas

    Returns:
        Variáveis efetivamente aplicadas
    """
    applied = {}
    if not env_path.exists():
        return applied

    with open(env_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()

            # Ignorar comentários e linhas vazias
            if not line or line.startswith('#') or '=' not in line:
                continue

            key, value = line.split('=', 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value
                applied[key] = value

    return applied
