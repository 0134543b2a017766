"""
EnvHelper - .env file loading
Environment variable access backed by python-dotenv
"""

import os
import threading
from typing import Optional, Any
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable manager with .env file support

    Usage:
        value = EnvHelper.get('APP_NAME', 'Humm')
        debug = EnvHelper.get_bool('APP_DEBUG')
        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _env_path = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path=None):
        """
        Initialize EnvHelper

        Args:
            env_path: Path to .env file (defaults to .env in the application base path)
        """
        if env_path is None:
            from humm.support.storage import Storage
            env_path = Storage.base('.env')

        cls._env_path = env_path

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = env_path

            if cls._env_path is None:
                cls.initialize()

            cls._loaded = True
            if not cls._env_path.exists():
                return False

            load_dotenv(cls._env_path, override=override)
            return True

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """Get environment variable value"""
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            debug = EnvHelper.get_bool('APP_DEBUG', False)
        """
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')
