"""
App Facade
"""
from humm.support.facades.facade import Facade


class App(Facade):
    """
    The application container

    Example:
        if App.get_app() is not None:
            resolver = App.make('views_resolver')
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'app'

    @classmethod
    def get_facade_root(cls):
        """The application itself rather than one of its bindings"""
        app = cls.get_app()
        if app is None:
            raise RuntimeError("No humm application was created")
        return app
