"""
URL Arguments
Positional access to the segments of a request path
"""
from typing import List, Optional
from urllib.parse import unquote

from humm.support.facades import HttpRequest


class UrlArguments:
    """
    Path segments of a request

    Example:
        args = UrlArguments('/about/team/')
        args.get(0)  # 'about'
        args.get(1)  # 'team'
        args.get(5)  # ''

        # Segments of the request being served
        UrlArguments.current().get(0)
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or '/'
        self._arguments = self.parse(self.path)

    @staticmethod
    def parse(path: str) -> List[str]:
        """Split a path into non-empty, unquoted segments (query string ignored)"""
        path = path.split('?', 1)[0]
        return [unquote(segment) for segment in path.split('/') if segment]

    @classmethod
    def current(cls) -> 'UrlArguments':
        """Arguments of the current request ('/' outside a request)"""
        return cls(HttpRequest.path())

    def get(self, index: int) -> str:
        """Segment at index, or an empty string"""
        if 0 <= index < len(self._arguments):
            return self._arguments[index]
        return ''

    def all(self) -> List[str]:
        return list(self._arguments)

    def count(self) -> int:
        return len(self._arguments)

    def __repr__(self):
        return f'UrlArguments({self.path!r})'
