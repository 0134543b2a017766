"""
HTTP Package
"""
from humm.http.url_arguments import UrlArguments
from humm.http.user_client import UserClient

__all__ = [
    'UrlArguments',
    'UserClient',
]
