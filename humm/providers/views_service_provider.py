"""
Views Service Provider
Registers the view resolver, the per-request dispatcher and the HTTP routes
"""
from humm.exceptions import ErrorHandler
from humm.http.kernel import HttpKernel
from humm.service_provider import ServiceProvider
from humm.support import Config
from humm.view import Dispatcher, ViewResolver


class ViewsServiceProvider(ServiceProvider):
    """Views service provider"""

    def register(self):
        # One resolver per process: it owns the main views cache
        self.app.singleton('views_resolver', lambda app: ViewResolver())

        # One dispatcher per request
        self.app.bind(
            'dispatcher',
            lambda app: Dispatcher(app.make('views_resolver'), app.make('plugins'))
        )

    def boot(self):
        sanic_app = self.app.sanic_app
        kernel = HttpKernel(self.app)

        async def view_handler(request, path: str = ''):
            return await kernel.handle(request, path)

        # Only the first segment selects the view, the rest is
        # left to the view classes through url_arguments
        sanic_app.add_route(view_handler, '/', methods=['GET', 'HEAD'], name='humm_home')
        sanic_app.add_route(view_handler, '/<path:path>', methods=['GET', 'HEAD'], name='humm_view')

        error_handler = ErrorHandler(debug=bool(Config.get('app.APP_DEBUG', False)))

        @sanic_app.exception(Exception)
        async def handle_exception(request, exception):
            return await error_handler.handle_error(request, exception)
