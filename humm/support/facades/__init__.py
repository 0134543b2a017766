"""
Facades Package
Laravel-style facades for static access to services
"""
from humm.support.facades.facade import Facade
from humm.support.facades.app import App
from humm.support.facades.http_request import HttpRequest

__all__ = [
    'Facade',
    'App',
    'HttpRequest',
]
