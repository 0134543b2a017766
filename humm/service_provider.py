"""
Service Provider Base Class
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from humm.application import Application


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Service providers register services in the container (register) and
    bootstrap them once every provider is registered (boot).
    """

    def __init__(self, app: 'Application'):
        self.app = app

    def register(self):
        """
        Register services in the container

        Example:
            self.app.singleton('plugins', PluginManager())
            self.app.bind('dispatcher', lambda app: Dispatcher(app.make('views_resolver')))
        """
        pass

    def boot(self):
        """Bootstrap services (after all providers are registered)"""
        pass
