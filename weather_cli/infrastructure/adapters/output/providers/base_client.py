"""
Base HTTP Client - GET JSON e tradução de falhas HTTP em erros de domínio

Compartilhado pelos dois provedores; a política de retry fica em cada
cliente (só o provedor com chave faz retry).
"""
import asyncio
from typing import Any, Dict, Mapping, Optional

import aiohttp

from weather_cli.application.dtos.wire_response import APIErrorEnvelope, is_api_error
from weather_cli.application.ports.output.weather_api_client_port import IWeatherAPIClient
from weather_cli.domain.exceptions import ApiError, ConfigurationError, NotFoundError
from weather_cli.infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from weather_cli.shared.config.logger_config import get_logger

RETRYABLE_STATUS_CODES = (408, 429)


def parse_retry_after(headers: Optional[Mapping[str, str]]) -> Optional[float]:
    """Lê o header Retry-After (segundos); None se ausente ou não numérico"""
    if not headers:
        return None
    for name, value in headers.items():
        if name.lower() == 'retry-after':
            try:
                return float(value)
            except (TypeError, ValueError):
                return None
    return None


def is_retryable(error: BaseException) -> bool:
    """
    Falhas de rede, 5xx, 408 e 429 são transitórias; demais 4xx são terminais
    """
    if not isinstance(error, ApiError):
        return False
    if error.status_code is None:
        return True
    return error.status_code >= 500 or error.status_code in RETRYABLE_STATUS_CODES


class BaseHTTPWeatherClient(IWeatherAPIClient):
    """Infra HTTP comum aos clientes de provedores"""

    def __init__(
        self,
        session_manager: Optional[AiohttpSessionManager] = None,
        timeout_ms: int = 5000,
        logger=None
    ):
        self.timeout_ms = timeout_ms
        self.session_manager = session_manager or AiohttpSessionManager(total_timeout=timeout_ms / 1000)
        self.logger = logger or get_logger(child=True)

    async def _get_json(self, url: str, params: Dict[str, Any], context: str) -> Any:
        """
        GET que devolve o corpo JSON ou levanta erro de domínio

        Args:
            url: Endpoint
            params: Query string
            context: Identificador da consulta (para NotFoundError e logs)
        """
        session = await self.session_manager.get_session()
        try:
            async with session.get(url, params=params) as response:
                payload = await self._read_payload(response)
                if response.status >= 400:
                    raise self._error_from_status(response.status, payload, response.headers, context)
        except asyncio.TimeoutError:
            raise ApiError.timeout(self.provider_name, self.timeout_ms)
        except aiohttp.ClientError as e:
            raise ApiError(
                f"Error de red al conectar con {self.provider_name}: {e}",
                self.provider_name,
                status_code=None
            )

        if is_api_error(payload):
            envelope = APIErrorEnvelope.model_validate(payload)
            try:
                status = int(envelope.cod)
            except ValueError:
                status = 500
            raise self._error_from_status(status, payload, None, context)

        return payload

    @staticmethod
    async def _read_payload(response) -> Any:
        try:
            return await response.json(content_type=None)
        except ValueError:
            return None

    def _error_from_status(
        self,
        status: int,
        payload: Any,
        headers: Optional[Mapping[str, str]],
        context: str
    ) -> Exception:
        message = payload.get('message') if isinstance(payload, dict) else None
        message = message or f"HTTP {status}"

        if status == 401:
            return ConfigurationError(self.provider_name, 'API_KEY_INVALID')
        if status == 404:
            return NotFoundError('Ciudad', context)
        if status == 429:
            return ApiError.rate_limit(self.provider_name, parse_retry_after(headers))
        if status == 408:
            return ApiError.timeout(self.provider_name, self.timeout_ms)
        if status == 403:
            return ApiError(
                f"Acceso denegado por {self.provider_name}: {message}",
                self.provider_name,
                status_code=403,
                is_operational=False
            )
        return ApiError(
            f"Error de {self.provider_name} ({status}): {message}",
            self.provider_name,
            status_code=status,
            is_operational=status >= 500
        )

    async def close(self) -> None:
        await self.session_manager.close()
