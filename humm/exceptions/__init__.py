"""
Exceptions Package
Centralized error handling and reporting
"""
from humm.exceptions.error_handler import ErrorHandler
from humm.exceptions.custom import (
    FrameworkException,
    NotFoundException,
    ViewNotFoundException,
    ViewRenderException,
    RedirectException,
    PluginException,
)

__all__ = [
    # Error handling
    'ErrorHandler',

    # Custom exceptions
    'FrameworkException',
    'NotFoundException',
    'ViewNotFoundException',
    'ViewRenderException',
    'RedirectException',
    'PluginException',
]
