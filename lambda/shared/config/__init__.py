"""Shared configuration"""
from .settings import Settings, get_settings
from .logger_config import get_logger, logger

__all__ = ['Settings', 'get_settings', 'get_logger', 'logger']
