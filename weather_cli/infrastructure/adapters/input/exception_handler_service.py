"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
from dataclasses import dataclass, field
from typing import Any, Dict

from weather_cli.domain.exceptions import (
    ApiError,
    ApplicationError,
    ConfigurationError,
    DomainException,
    InvalidApiResponseError,
    MaxRetriesExceededError,
    NotFoundError,
    ValidationError,
)
from weather_cli.shared.config.logger_config import logger as app_logger

EXIT_UNEXPECTED = 1
EXIT_VALIDATION = 2
EXIT_NOT_FOUND = 3
EXIT_CONFIGURATION = 4
EXIT_UPSTREAM = 5
EXIT_APPLICATION = 6


@dataclass(frozen=True)
class ErrorResponse:
    """Mensagem para o usuário e código de saída do processo"""
    exit_code: int
    error: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        return f"Error: {self.message}"


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em mensagens e códigos de saída
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_validation_error(ex: ValidationError) -> ErrorResponse:
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex), details=ex.details)
        return ErrorResponse(EXIT_VALIDATION, "Validation error", ex.message, ex.details)

    @staticmethod
    def handle_not_found(ex: NotFoundError) -> ErrorResponse:
        ExceptionHandlerService.logger.warning("Resource not found", error=str(ex), details=ex.details)
        return ErrorResponse(EXIT_NOT_FOUND, "Not found", ex.message, ex.details)

    @staticmethod
    def handle_configuration_error(ex: ConfigurationError) -> ErrorResponse:
        ExceptionHandlerService.logger.error("Configuration error", error=str(ex), details=ex.details)
        message = ex.message
        if ex.missing_field in ('OPENWEATHER_API_KEY', 'API_KEY_INVALID'):
            message += ". Revise OPENWEATHER_API_KEY o use WEATHER_PROVIDER=open-meteo"
        return ErrorResponse(EXIT_CONFIGURATION, "Configuration error", message, ex.details)

    @staticmethod
    def handle_upstream_error(ex: DomainException) -> ErrorResponse:
        """ApiError, MaxRetriesExceededError e InvalidApiResponseError"""
        if ex.is_operational:
            ExceptionHandlerService.logger.warning("Upstream error", error=str(ex), details=ex.details)
        else:
            ExceptionHandlerService.logger.error(
                "Upstream error", error=str(ex), details=ex.details, exc_info=True
            )
        return ErrorResponse(EXIT_UPSTREAM, "Upstream error", ex.message, ex.details)

    @staticmethod
    def handle_application_error(ex: ApplicationError) -> ErrorResponse:
        ExceptionHandlerService.logger.info("Application rule violated", code=ex.code, details=ex.details)
        return ErrorResponse(EXIT_APPLICATION, ex.code, ex.message, ex.details)

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> ErrorResponse:
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return ErrorResponse(EXIT_UNEXPECTED, "Internal error", "Ocurrió un error inesperado")

    @classmethod
    def handle(cls, ex: Exception) -> ErrorResponse:
        """Despacha pela hierarquia de exceções (subclasses antes das bases)"""
        if isinstance(ex, ValidationError):
            return cls.handle_validation_error(ex)
        if isinstance(ex, NotFoundError):
            return cls.handle_not_found(ex)
        if isinstance(ex, ConfigurationError):
            return cls.handle_configuration_error(ex)
        if isinstance(ex, (ApiError, MaxRetriesExceededError, InvalidApiResponseError)):
            return cls.handle_upstream_error(ex)
        if isinstance(ex, ApplicationError):
            return cls.handle_application_error(ex)
        if isinstance(ex, DomainException):
            return cls.handle_upstream_error(ex)
        return cls.handle_unexpected_error(ex)
