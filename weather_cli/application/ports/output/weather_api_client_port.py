"""Weather API Client Port - Contrato comum aos provedores climáticos"""
from abc import ABC, abstractmethod
from typing import List, Optional

from weather_cli.application.dtos.wire_response import WeatherWireResponse


class IWeatherAPIClient(ABC):
    """
    Interface para clientes de provedores climáticos

    Toda implementação devolve o mesmo formato canônico (WeatherWireResponse),
    já validado, para que o repositório não dependa do provedor ativo.
    Temperaturas no formato canônico estão sempre em Kelvin; `units` escolhe
    apenas a unidade da velocidade do vento (imperial → mph, demais → m/s).
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    async def get_current_weather_by_city_name(
        self,
        city_name: str,
        country_code: Optional[str] = None,
        units: Optional[str] = None
    ) -> WeatherWireResponse:
        """
        Busca clima atual por nome de cidade (geocodificação + clima)

        Args:
            city_name: Nome da cidade
            country_code: Código ISO do país (opcional)
            units: Sistema de unidades do vento (metric, imperial, standard)

        Raises:
            NotFoundError: geocodificador sem resultados
        """
        pass

    @abstractmethod
    async def get_current_weather_by_coordinates(
        self,
        latitude: float,
        longitude: float,
        units: Optional[str] = None
    ) -> WeatherWireResponse:
        pass

    @abstractmethod
    async def get_cities_by_country(
        self,
        country_code: str,
        limit: int = 5,
        units: Optional[str] = None
    ) -> List[WeatherWireResponse]:
        """Clima de várias cidades de um país (pode ser vazio)"""
        pass
