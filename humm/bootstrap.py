"""
Application Bootstrap
"""
from pathlib import Path
from typing import Optional, Union

from humm.application import Application
from humm.support import ClassLoader, Config, EnvHelper, Storage
from humm.support.facades import Facade

DEFAULT_PROVIDERS = [
    'humm.providers.LoggingServiceProvider',
    'humm.providers.PluginsServiceProvider',
    'humm.providers.ViewsServiceProvider',
]


def create_application(base_path: Optional[Union[str, Path]] = None) -> Application:
    """
    Create, register and boot the application

    Args:
        base_path: Application directory holding config/, sites/ and .env
                   (defaults to the current working directory)
    """
    Storage.initialize(base_path)
    EnvHelper.load(Storage.base('.env'))

    app = Application(str(Storage.base()))
    Facade.set_app(app)

    for provider_path in Config.get('app.PROVIDERS', DEFAULT_PROVIDERS):
        app.register_provider(ClassLoader.load(provider_path))

    app.boot()
    return app
