"""
Facade System
Static access to the application container and to the request being served
"""
from contextvars import ContextVar
from typing import Any, Optional

_app_instance: Optional[Any] = None

# One value per task or thread, set by the HTTP kernel around a dispatch
_current_request: ContextVar[Optional[Any]] = ContextVar('current_request', default=None)


class FacadeMeta(type):
    """Forwards unknown class attributes to the object behind the facade"""

    def __getattr__(cls, name: str) -> Any:
        return getattr(cls.get_facade_root(), name)


class Facade(metaclass=FacadeMeta):
    """
    Base Facade class

    A facade names a container binding in get_facade_accessor(); its class
    attributes are looked up on the bound object.

    Example:
        class Resolver(Facade):
            @classmethod
            def get_facade_accessor(cls):
                return 'views_resolver'

        Resolver.forget()  # app.make('views_resolver').forget()
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        raise NotImplementedError(f"Facade {cls.__name__} does not implement get_facade_accessor()")

    @classmethod
    def get_facade_root(cls) -> Any:
        """
        Raises:
            RuntimeError: If no application was bootstrapped
        """
        app = cls.get_app()
        if app is None:
            raise RuntimeError(
                f"Facade {cls.__name__} used before the application was created "
                "(see humm.bootstrap.create_application)"
            )
        return app.make(cls.get_facade_accessor())

    @classmethod
    def get_app(cls):
        return _app_instance

    @classmethod
    def set_app(cls, app):
        global _app_instance
        _app_instance = app

    @classmethod
    def get_current_request(cls):
        """Request being served, or None"""
        return _current_request.get()

    @classmethod
    def set_current_request(cls, request):
        """
        Publish the request being served

        Returns:
            Token for reset_current_request()
        """
        return _current_request.set(request)

    @classmethod
    def reset_current_request(cls, token):
        _current_request.reset(token)

    @classmethod
    def clear_current_request(cls):
        _current_request.set(None)
