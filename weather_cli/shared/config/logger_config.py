"""
Configuração centralizada de logging para a aplicação
Configura o logger AWS Lambda Powertools (JSON estruturado em stderr)
"""
import logging
import os
import sys

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'weather-cli'


def get_logger(service_name: str = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (se None, usa WEATHER_CLI_SERVICE do ambiente)
        child: Se True, cria um child logger que herda a configuração do principal

    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = os.environ.get('WEATHER_CLI_SERVICE', DEFAULT_SERVICE_NAME)

    if child:
        return Logger(service=service_name, child=True)

    # stdout é reservado para a saída do CLI
    return Logger(
        service=service_name,
        level=os.environ.get('LOG_LEVEL', 'WARNING').upper(),
        logger_handler=logging.StreamHandler(sys.stderr)
    )


def set_log_level(level: str) -> None:
    """Ajusta o nível do logger principal (ex.: --verbose no CLI)"""
    logger.setLevel(level.upper())


# Logger principal da aplicação
logger = get_logger()
