"""
Class Loader
Dynamic class loading utility for importing classes from dotted paths
"""
import importlib
import importlib.util
import inspect
from pathlib import Path
from typing import Optional, Type


class ClassLoader:
    """
    Utility for dynamically loading classes from string paths

    A class path is '<module path>.<ClassName>'. Its module path maps to a
    source file through the import system, e.g. 'sites.main.classes.home_view.HomeView'
    lives in 'sites/main/classes/home_view.py' under some sys.path entry.

    Example:
        cls = ClassLoader.load('humm.system.classes.system_home_view.SystemHomeView')

        if ClassLoader.is_subclass_of('sites.main.classes.home_view.HomeView', HummView):
            ...
    """

    @staticmethod
    def split(class_path: str):
        """Split a class path into (module path, class name)"""
        if '.' not in class_path:
            return '', class_path
        return tuple(class_path.rsplit('.', 1))

    @staticmethod
    def load(class_path: str) -> Type:
        """
        Load a class from a dotted path string

        Raises:
            ImportError: If module cannot be imported
            AttributeError: If class doesn't exist in module
        """
        module_path, class_name = ClassLoader.split(class_path)
        module = importlib.import_module(module_path)
        return getattr(module, class_name)

    @staticmethod
    def module_file(module_path: str) -> Optional[Path]:
        """
        Get the source file a module path maps to, without importing the module

        Parent packages are imported by the lookup. Returns None when the
        module (or one of its parents) cannot be found.
        """
        if not module_path:
            return None

        try:
            spec = importlib.util.find_spec(module_path)
        except (ImportError, ValueError):
            return None

        if spec is None or not spec.has_location or not spec.origin:
            return None

        return Path(spec.origin)

    @classmethod
    def class_exists(cls, class_path: str) -> bool:
        """
        Find if a class exists: its module file is on disk and the module defines it
        """
        module_path, class_name = cls.split(class_path)

        module_file = cls.module_file(module_path)
        if module_file is None or not module_file.is_file():
            return False

        module = importlib.import_module(module_path)
        return inspect.isclass(getattr(module, class_name, None))

    @classmethod
    def is_subclass_of(cls, class_path: str, base: Type) -> bool:
        """
        Find if an existing class derives from base (the base itself does not count)
        """
        if not cls.class_exists(class_path):
            return False

        loaded = cls.load(class_path)
        return loaded is not base and issubclass(loaded, base)
