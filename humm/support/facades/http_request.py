"""
HttpRequest Facade
Read access to the request being served
"""
from typing import Optional
from humm.support.facades.facade import Facade


class HttpRequest(Facade):
    """
    HttpRequest Facade

    Works on any request object exposing `path` and `host`
    (a Sanic request, or a stand-in for console rendering).

    Example:
        segment = HttpRequest.path()  # '/about/team'
        host = HttpRequest.host()     # 'example.com'
    """

    @classmethod
    def request(cls):
        """Get current request or None"""
        return cls.get_current_request()

    @classmethod
    def path(cls) -> str:
        """Current request path, '/' outside a request"""
        request = cls.get_current_request()
        return getattr(request, 'path', None) or '/'

    @classmethod
    def host(cls) -> Optional[str]:
        """Current request host without the port, None outside a request"""
        request = cls.get_current_request()
        host = getattr(request, 'host', None)
        if not host:
            return None
        return host.split(':', 1)[0].lower()
