"""
Domain Exceptions - Taxonomia de erros da aplicação
Clean Architecture: Domain layer exceptions

Todos os erros carregam `code`, `is_operational` e `http_code` para que a
camada de entrada decida como apresentar a falha sem inspecionar mensagens.
"""
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-level errors"""

    code = "DOMAIN_ERROR"
    http_code = 500
    is_operational = True

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': type(self).__name__,
            'message': self.message,
            'code': self.code,
            'httpCode': self.http_code,
            'isOperational': self.is_operational,
            'details': self.details,
        }


class ValidationError(DomainException):
    """Raised when the input of a query is malformed"""

    code = "VALIDATION_ERROR"
    http_code = 400

    def __init__(self, message: str, field: Optional[str] = None, details: dict = None):
        details = dict(details or {})
        if field:
            details.setdefault('field', field)
        super().__init__(message, details)
        self.field = field

    @classmethod
    def for_field(cls, field: str, reason: str) -> 'ValidationError':
        return cls(f"Campo '{field}' inválido: {reason}", field=field)


class InvalidCoordinateError(ValidationError):
    """Raised when latitude/longitude are out of bounds or not numbers"""

    code = "INVALID_COORDINATE"


class NotFoundError(DomainException):
    """Raised when the upstream confirms the entity does not exist"""

    code = "RESOURCE_NOT_FOUND"
    http_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} con identificador '{identifier}' no fue encontrado",
            details={'resource': resource, 'identifier': identifier}
        )
        self.resource = resource
        self.identifier = identifier


class ConfigurationError(DomainException):
    """Raised when credentials or endpoints are missing or rejected"""

    code = "CONFIGURATION_ERROR"
    http_code = 500
    is_operational = False

    def __init__(self, service: str, missing_field: str):
        super().__init__(
            f"Configuración inválida para {service}: {missing_field}",
            details={'service': service, 'field': missing_field}
        )
        self.service = service
        self.missing_field = missing_field


class ApiError(DomainException):
    """Raised when an upstream service fails (network, rate limit, timeout)"""

    code = "API_ERROR"
    http_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        status_code: Optional[int] = None,
        is_operational: bool = True,
        details: dict = None
    ):
        details = dict(details or {})
        details.setdefault('service', service)
        if status_code is not None:
            details.setdefault('status_code', status_code)
        super().__init__(message, details)
        self.service = service
        self.status_code = status_code
        self.is_operational = is_operational

    @classmethod
    def timeout(cls, service: str, timeout_ms: int) -> 'ApiError':
        error = cls(
            f"Timeout al conectar con {service} después de {timeout_ms}ms",
            service,
            status_code=408,
            details={'timeout_ms': timeout_ms}
        )
        error.timeout_ms = timeout_ms
        return error

    @classmethod
    def rate_limit(cls, service: str, retry_after: Optional[float] = None) -> 'ApiError':
        message = f"Límite de solicitudes excedido para {service}"
        if retry_after is not None:
            message += f". Reintentar en {retry_after} segundos"
        error = cls(message, service, status_code=429, details={'retry_after': retry_after})
        error.retry_after = retry_after
        return error


class InvalidApiResponseError(DomainException):
    """Raised when an upstream payload violates the canonical wire schema"""

    code = "INVALID_API_RESPONSE"
    http_code = 502
    is_operational = False

    def __init__(self, message: str, issues: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, details={'issues': issues or []})
        self.issues = issues or []


class MaxRetriesExceededError(DomainException):
    """Raised when every retry attempt of a provider call has failed"""

    code = "MAX_RETRIES_EXCEEDED"
    http_code = 503

    def __init__(self, service: str, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(
            f"Máximo de reintentos ({attempts}) alcanzado para {service}",
            details={
                'service': service,
                'attempts': attempts,
                'last_error': str(last_error) if last_error else None
            }
        )
        self.service = service
        self.attempts = attempts
        self.last_error = last_error


class MappingError(DomainException):
    """Raised when a validated wire response cannot be mapped to entities"""

    code = "MAPPING_ERROR"
    is_operational = False


class ApplicationError(DomainException):
    """Raised when an application rule is violated (e.g. duplicated favorite)"""

    http_code = 409

    def __init__(self, message: str, code: str, details: dict = None):
        super().__init__(message, details)
        self.code = code
