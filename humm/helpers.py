"""
Helper Functions
"""
import io
from typing import Optional

from humm.http import UrlArguments
from humm.plugins import PluginManager
from humm.sites import UserSites
from humm.support.facades import App
from humm.view import Dispatcher, ViewResolver


def render_path(path: str = '/', host: Optional[str] = None) -> str:
    """
    Render the page a request for path on host would get

    Uses the application resolver and plugins when an application is
    bootstrapped, fresh ones otherwise.

    Example:
        html = render_path('/about', host='example.com')
    """
    if App.get_app() is not None:
        resolver = App.make('views_resolver')
        plugins = App.make('plugins')
    else:
        resolver = ViewResolver()
        plugins = PluginManager()

    output = io.StringIO()
    Dispatcher(
        resolver,
        plugins,
        output=output,
        url_arguments=UrlArguments(path),
        user_sites=UserSites(host),
    ).run()
    return output.getvalue()
