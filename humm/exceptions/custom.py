"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class NotFoundException(FrameworkException):
    """
    Resource not found exception

    Example:
        raise NotFoundException("Page not found")
    """
    status_code = 404
    message = "Resource not found"


class ViewNotFoundException(NotFoundException):
    """
    Raised when a view or helper template cannot be located

    Example:
        raise ViewNotFoundException("Contact")
    """
    message = "View not found"

    def __init__(self, view_name: str, message: Optional[str] = None):
        self.view_name = view_name
        super().__init__(message or f"View not found: {view_name}")


class ViewRenderException(FrameworkException):
    """
    Raised when the template engine fails while producing a view's output
    """
    status_code = 500
    message = "Error rendering view"

    def __init__(self, view_name: str, message: Optional[str] = None):
        self.view_name = view_name
        super().__init__(message or f"Error rendering view: {view_name}")


class RedirectException(FrameworkException):
    """
    Interrupts the current render and sends the client elsewhere

    Example:
        raise RedirectException('/')
    """
    status_code = 302
    message = "Redirect"

    def __init__(self, location: str, status_code: Optional[int] = None):
        self.location = location
        super().__init__(f"Redirect to {location}", status_code)


class PluginException(FrameworkException):
    """
    Raised when a configured plugin cannot be loaded
    """
    status_code = 500
    message = "Invalid plugin"
