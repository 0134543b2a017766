"""
Logging Package
"""
import logging
from typing import Optional

from humm.logging.logger_config import (
    JSONFormatter,
    LoggerConfig,
    RequestContextFilter,
    SensitiveDataFilter,
)

__all__ = [
    'JSONFormatter',
    'LoggerConfig',
    'RequestContextFilter',
    'SensitiveDataFilter',
    'getLogger',
]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    logging.getLogger restricted to known names

    Module loggers (dotted names such as 'humm.view.resolver') and the
    channels of app.ALLOWED_LOGGING_HANDLERS are returned as asked. Any
    other bare name falls back to the root logger.

    Example:
        logger = getLogger(__name__)
        audit = getLogger('application')
    """
    if name and '.' not in name:
        from humm.defaults import DEFAULT_LOGGING_HANDLERS
        from humm.support import Config

        channels = Config.get('app.ALLOWED_LOGGING_HANDLERS', DEFAULT_LOGGING_HANDLERS)
        if name not in {channel.get('name') for channel in channels.values()}:
            name = None

    return logging.getLogger(name)
