"""
Plugin Base Class
"""
from typing import Callable, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from humm.plugins.manager import PluginManager


class HummPlugin:
    """
    Base class for plugins

    A plugin declares the filters it handles by overriding filters().

    Example:
        class MinifyPlugin(HummPlugin):
            name = 'minify'

            def filters(self):
                return {PluginFilters.BUFFER_OUTPUT: self.minify}

            def minify(self, html):
                return html.strip()
    """

    name: str = ''
    priority: int = 10

    def filters(self) -> Dict[str, Callable]:
        """Map of filter id to callback"""
        return {}

    def register(self, manager: 'PluginManager'):
        """Register every filter of the plugin"""
        for filter_id, callback in self.filters().items():
            manager.add_filter(filter_id, callback, self.priority)
