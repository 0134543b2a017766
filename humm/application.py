"""
Humm Application
Sanic application plus the service container shared by providers
"""
import sys
import threading
from typing import Any, Callable, Dict, List

from sanic import Sanic

from humm.defaults import DEFAULT_APP_NAME, DEFAULT_HOST, DEFAULT_PORT
from humm.support import Config, Str


class Application:
    """
    Application container

    Bindings are either singletons (one instance for the process, such as
    the view resolver) or factories (a new object on every make(), such as
    the per-request dispatcher).

    Example:
        app = Application('/srv/mysite')
        app.singleton('views_resolver', lambda app: ViewResolver())
        app.bind('dispatcher', lambda app: Dispatcher(app.make('views_resolver')))
        dispatcher = app.make('dispatcher')
    """

    def __init__(self, base_path: str):
        self.base_path = base_path
        self.sanic_app = Sanic(Str.snake(Config.get('app.APP_NAME', DEFAULT_APP_NAME)) or 'humm')
        self.sanic_app.config.AUTO_EXTEND = False

        self.providers: List[Any] = []
        self.booted = False
        self._factories: Dict[str, Callable[['Application'], Any]] = {}
        self._shared: Dict[str, bool] = {}
        self._instances: Dict[str, Any] = {}
        self._lock = threading.RLock()

        # Site classes are imported as the `sites` package of the base path
        if self.base_path not in sys.path:
            sys.path.insert(0, self.base_path)

    def singleton(self, key: str, factory_or_instance):
        """
        Register a shared binding

        A callable is a factory called with the application on first make(),
        anything else is the instance itself.
        """
        with self._lock:
            self._instances.pop(key, None)
            self._shared[key] = True
            if callable(factory_or_instance) and not isinstance(factory_or_instance, type):
                self._factories[key] = factory_or_instance
            else:
                self._factories.pop(key, None)
                self._instances[key] = factory_or_instance

    def bind(self, key: str, factory: Callable[['Application'], Any]):
        """Register a factory called on every make()"""
        with self._lock:
            self._instances.pop(key, None)
            self._shared[key] = False
            self._factories[key] = factory

    def make(self, key: str) -> Any:
        """
        Resolve a binding

        Raises:
            KeyError: If nothing is bound to key
        """
        if key in self._instances:
            return self._instances[key]
        if key not in self._shared:
            raise KeyError(f"Binding '{key}' not found in container")
        if not self._shared[key]:
            return self._factories[key](self)

        with self._lock:
            if key not in self._instances:
                self._instances[key] = self._factories[key](self)
            return self._instances[key]

    def has(self, key: str) -> bool:
        return key in self._shared

    def register_provider(self, provider_class):
        """Instantiate a service provider and run its register()"""
        provider = provider_class(self)
        provider.register()
        self.providers.append(provider)
        return provider

    def boot(self):
        """Boot every registered provider, once"""
        if self.booted:
            return
        for provider in self.providers:
            provider.boot()
        self.booted = True

    def run(self, host=None, port=None, **kwargs):
        """Serve the sites with Sanic"""
        self.sanic_app.run(host=host or DEFAULT_HOST, port=port or DEFAULT_PORT, **kwargs)
