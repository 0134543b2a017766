"""
Framework Support Classes
"""

from humm.support.storage import Storage
from humm.support.env_helper import EnvHelper
from humm.support.config import Config
from humm.support.class_loader import ClassLoader
from humm.support.str import Str

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'ClassLoader',
    'Str',
]
