"""
Plugin Manager
Filter hooks that let plugins transform dispatch payloads
"""
import itertools
import threading
from typing import Any, Callable, Dict, Iterable, List, Tuple

from humm.exceptions import PluginException
from humm.logging import getLogger
from humm.plugins.plugin import HummPlugin
from humm.support import ClassLoader

logger = getLogger(__name__)


class PluginManager:
    """
    Registry of filter callbacks keyed by filter id

    Callbacks run by ascending priority, then registration order. Each one
    receives the current payload; a non-None return value replaces it.

    Example:
        plugins = PluginManager()
        plugins.add_filter(PluginFilters.BUFFER_OUTPUT, str.upper)
        plugins.apply_simple_filter(PluginFilters.BUFFER_OUTPUT, 'hi')  # 'HI'
    """

    def __init__(self):
        self._filters: Dict[str, List[Tuple[int, int, Callable]]] = {}
        self._counter = itertools.count()
        self._lock = threading.Lock()
        self.plugins: List[HummPlugin] = []

    def add_filter(self, filter_id: str, callback: Callable, priority: int = 10):
        """Register a callback for a filter"""
        with self._lock:
            callbacks = self._filters.setdefault(filter_id, [])
            callbacks.append((priority, next(self._counter), callback))
            callbacks.sort(key=lambda entry: (entry[0], entry[1]))

    def remove_filter(self, filter_id: str, callback: Callable) -> bool:
        """Unregister a callback, returns True if it was registered"""
        with self._lock:
            callbacks = self._filters.get(filter_id, [])
            remaining = [entry for entry in callbacks if entry[2] != callback]
            self._filters[filter_id] = remaining
            return len(remaining) != len(callbacks)

    def has_filter(self, filter_id: str) -> bool:
        return bool(self._filters.get(filter_id))

    def apply_simple_filter(self, filter_id: str, payload: Any) -> Any:
        """
        Pass payload through every callback registered for filter_id
        """
        for _, _, callback in list(self._filters.get(filter_id, [])):
            result = callback(payload)
            if result is not None:
                payload = result
        return payload

    def register_plugin(self, plugin: HummPlugin):
        """Add a plugin instance and its filters"""
        plugin.register(self)
        self.plugins.append(plugin)
        logger.debug("Registered plugin %s", plugin.name or plugin.__class__.__name__)

    def load_plugins(self, class_paths: Iterable[str]):
        """
        Load and register plugins from dotted class paths

        Raises:
            PluginException: If a path cannot be loaded or is not a HummPlugin
        """
        for class_path in class_paths:
            try:
                plugin_cls = ClassLoader.load(class_path)
            except (ImportError, AttributeError, ValueError) as e:
                raise PluginException(f"Cannot load plugin '{class_path}': {e}") from e

            if not (isinstance(plugin_cls, type) and issubclass(plugin_cls, HummPlugin)):
                raise PluginException(f"Plugin '{class_path}' must derive from HummPlugin")

            self.register_plugin(plugin_cls())
