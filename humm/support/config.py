"""
Config Manager
Dot notation access to the config modules of the application
"""

import importlib
import threading
from types import ModuleType
from typing import Any, Dict, Optional


class Config:
    """
    Configuration manager with dot notation access

    The first key part names a module of the config package, the following
    parts walk its attributes and dict keys. Lookups ignore case.

    Usage:
        home = Config.get('views.SITE_HOME_VIEW', 'Home')
        hosts = Config.get('sites.site_hosts', {})

        # Runtime value, wins over the config modules
        Config.set('app.APP_DEBUG', True)

    Config modules of an application:
        config/
        ├── app.py
        ├── views.py
        ├── sites.py
        └── plugins.py
    """

    CONFIG_PACKAGE = 'config'

    _lock = threading.Lock()
    _modules: Dict[str, Optional[ModuleType]] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get a configuration value, or default when any part is missing

        Keys containing dots (host names) are read from their parent mapping:
            Config.get('sites.SITE_HOSTS', {}).get('example.com')
        """
        key = key.lower()
        if key in cls._runtime_overrides:
            return cls._runtime_overrides[key]

        file_name, *path = key.split('.')
        value = cls._module(file_name)
        if value is None:
            return default

        for part in path:
            found, value = cls._lookup(value, part)
            if not found:
                return default
        return value

    @staticmethod
    def _lookup(container: Any, part: str):
        """(found, value) of a case-insensitive key or attribute"""
        if isinstance(container, dict):
            names = container.keys()
            read = container.__getitem__
        elif isinstance(container, ModuleType) or hasattr(container, '__dict__'):
            names = [name for name in dir(container) if not name.startswith('__')]
            read = lambda name: getattr(container, name)
        else:
            return False, None

        for name in names:
            if str(name).lower() == part:
                return True, read(name)
        return False, None

    @classmethod
    def _module(cls, file_name: str) -> Optional[ModuleType]:
        """Import config/<file_name>.py once, None when it does not exist"""
        if file_name not in cls._modules:
            with cls._lock:
                if file_name not in cls._modules:
                    try:
                        cls._modules[file_name] = importlib.import_module(f'{cls.CONFIG_PACKAGE}.{file_name}')
                    except ModuleNotFoundError:
                        cls._modules[file_name] = None
        return cls._modules[file_name]

    @classmethod
    def set(cls, key: str, value: Any):
        """Set a runtime value (never written to the config modules)"""
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        return cls.get(key) is not None

    @classmethod
    def clear_runtime_overrides(cls):
        cls._runtime_overrides.clear()

    @classmethod
    def forget(cls):
        """Drop imported config modules and runtime values"""
        with cls._lock:
            cls._modules.clear()
        cls.clear_runtime_overrides()
