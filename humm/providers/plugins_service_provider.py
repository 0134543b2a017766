"""
Plugins Service Provider
"""
from humm.plugins import PluginManager
from humm.service_provider import ServiceProvider
from humm.support import Config


class PluginsServiceProvider(ServiceProvider):
    """Registers the plugin manager and loads configured plugins"""

    def register(self):
        self.app.singleton('plugins', PluginManager())

    def boot(self):
        plugins = self.app.make('plugins')
        plugins.load_plugins(Config.get('plugins.PLUGINS', []) or [])
