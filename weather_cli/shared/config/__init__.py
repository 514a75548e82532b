"""Shared configuration"""
from .logger_config import get_logger, logger
from .settings import Settings, load_settings

__all__ = ['get_logger', 'logger', 'Settings', 'load_settings']
