"""
Logging Service Provider
Initializes application-wide structured logging
"""
import logging

from humm.defaults import DEFAULT_LOGGING_HANDLERS
from humm.logging.logger_config import LoggerConfig
from humm.service_provider import ServiceProvider
from humm.support import Config


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up structured logging"""

    def register(self):
        self.setup_application_logger()

    def setup_application_logger(self):
        """
        Setup each logger listed in app.ALLOWED_LOGGING_HANDLERS
        """
        allowed_handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', DEFAULT_LOGGING_HANDLERS)

        for handler_config in allowed_handlers.values():
            LoggerConfig.setup_logger(
                name=handler_config.get('name'),
                format_type=handler_config.get('format', 'json'),
                filter_sensitive=handler_config.get('filter_sensitive', True),
                file_name=handler_config.get('file_name')
            )

        # Keep Sanic's console output out of our handlers
        for logger_name in ('sanic.root', 'sanic.error', 'sanic.access', 'sanic.server'):
            logging.getLogger(logger_name).propagate = False
