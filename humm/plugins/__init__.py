"""
Plugins Package
Filter hooks applied while dispatching views
"""
from humm.plugins.filters import PluginFilters
from humm.plugins.plugin import HummPlugin
from humm.plugins.manager import PluginManager

__all__ = [
    'PluginFilters',
    'HummPlugin',
    'PluginManager',
]
