"""
Framework Service Providers
"""
from humm.providers.logging_service_provider import LoggingServiceProvider
from humm.providers.plugins_service_provider import PluginsServiceProvider
from humm.providers.views_service_provider import ViewsServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'PluginsServiceProvider',
    'ViewsServiceProvider',
]
