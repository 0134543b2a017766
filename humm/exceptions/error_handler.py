"""
Centralized Error Handler
"""
from html import escape
import traceback
from typing import Dict, Any

from sanic import response
from sanic.exceptions import SanicException

from humm.logging import getLogger
from humm.exceptions.custom import RedirectException


class ErrorHandler:
    """
    Turns exceptions raised while dispatching into HTML responses and reports them
    """
    def __init__(self, debug: bool = False):
        """
        Args:
            debug: Show real error messages, the request path and the stack trace
        """
        self.debug = debug
        self.logger = getLogger('application')

    async def handle_error(self, request, error: Exception):
        """
        Handle error and return an HTML response
        """
        if isinstance(error, RedirectException):
            return response.redirect(error.location, status=error.status_code)

        status_code = self._get_status_code(error)
        self._log_error(error, request, status_code)

        data = self._build_error_response(error, request)
        return response.html(self._render_page(status_code, data), status=status_code)

    def _build_error_response(self, error: Exception, request) -> Dict[str, Any]:
        data = {
            'type': error.__class__.__name__,
            'message': self._get_error_message(error),
        }

        if self.debug:
            data['trace'] = ''.join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )

        if self.debug:
            data['path'] = getattr(request, 'path', '')

        return data

    def _render_page(self, status_code: int, data: Dict[str, Any]) -> str:
        parts = [
            '<!DOCTYPE html><html><head><meta charset="utf-8">',
            f'<title>{status_code} {escape(data["type"])}</title></head><body>',
            f'<h1>{status_code}</h1><p>{escape(data["message"])}</p>',
        ]
        if 'path' in data:
            parts.append(f'<p><code>{escape(data["path"])}</code></p>')
        if 'trace' in data:
            parts.append(f'<pre>{escape(data["trace"])}</pre>')
        parts.append('</body></html>')
        return ''.join(parts)

    def _get_error_message(self, error: Exception) -> str:
        if isinstance(error, SanicException):
            return str(error)

        if hasattr(error, 'message'):
            return error.message

        # Don't expose internals in production
        if not self.debug:
            return "An error occurred while processing your request"

        return str(error)

    def _get_status_code(self, error: Exception) -> int:
        if isinstance(error, SanicException):
            return error.status_code

        if hasattr(error, 'status_code'):
            return error.status_code

        return 500

    def _log_error(self, error: Exception, request, status_code: int):
        log_data = {
            'error_type': error.__class__.__name__,
            'error_message': str(error),
            'status_code': status_code,
            'path': getattr(request, 'path', None),
        }

        if status_code >= 500:
            self.logger.error(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data,
                exc_info=error
            )
        elif status_code >= 400:
            self.logger.warning(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data
            )
        else:
            self.logger.info(f"{status_code} Response", extra=log_data)
