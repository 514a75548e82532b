"""
Wire Response - formato canônico das respostas dos provedores

Os dois provedores são adaptados para este formato antes de qualquer
mapeamento para entidades. A validação acontece aqui e somente aqui.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from weather_cli.domain.exceptions import InvalidApiResponseError


class WireCoord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


class WireCondition(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    main: str
    description: str
    icon: str


class WireMain(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float = Field(gt=0)
    humidity: float = Field(ge=0, le=100)


class WireWind(BaseModel):
    model_config = ConfigDict(extra="ignore")

    speed: float = Field(ge=0)
    deg: Optional[float] = None
    gust: Optional[float] = None


class WireClouds(BaseModel):
    model_config = ConfigDict(extra="ignore")

    all: Optional[float] = Field(default=None, ge=0, le=100)


class WireSys(BaseModel):
    model_config = ConfigDict(extra="ignore")

    country: Optional[str] = Field(default=None, min_length=2, max_length=2)
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class WeatherWireResponse(BaseModel):
    """Resposta de clima atual no formato canônico"""
    model_config = ConfigDict(extra="ignore")

    coord: WireCoord
    weather: List[WireCondition]
    base: Optional[str] = None
    main: WireMain
    visibility: Optional[float] = Field(default=None, ge=0, le=10000)
    wind: Optional[WireWind] = None
    clouds: Optional[WireClouds] = None
    dt: int
    sys: WireSys = Field(default_factory=WireSys)
    timezone: Optional[int] = None
    id: Optional[int] = None
    name: str = ""
    cod: Union[int, str] = 200


class APIErrorEnvelope(BaseModel):
    """Envelope de erro devolvido pelo upstream com HTTP 200 ou 4xx"""
    model_config = ConfigDict(extra="ignore")

    cod: Union[int, str]
    message: str


def is_api_error(payload: Any) -> bool:
    """
    Distingue envelope de erro de uma leitura válida

    Um payload de sucesso também pode carregar `cod`, por isso exige-se
    `message` e um código diferente de 200.
    """
    if not isinstance(payload, dict):
        return False
    try:
        envelope = APIErrorEnvelope.model_validate(payload)
    except PydanticValidationError:
        return False
    return str(envelope.cod) != "200"


def _format_issues(error: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {
            'path': ".".join(str(part) for part in issue.get('loc', ())),
            'message': issue.get('msg', ''),
        }
        for issue in error.errors()
    ]


def parse_weather_response(payload: Any) -> WeatherWireResponse:
    """
    Valida payload contra o schema canônico

    Raises:
        InvalidApiResponseError: payload fora do contrato (com diagnósticos)
    """
    try:
        return WeatherWireResponse.model_validate(payload)
    except PydanticValidationError as e:
        issues = _format_issues(e)
        summary = "; ".join(f"{i['path']}: {i['message']}" for i in issues)
        raise InvalidApiResponseError(f"Respuesta de API inválida: {summary}", issues)
