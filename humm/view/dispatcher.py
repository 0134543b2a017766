"""
Dispatcher
Runs the lifecycle of one request: capture output, prepare the template,
resolve the view and its class, let plugins act and render
"""
import sys
import threading
from typing import Optional, TextIO

from humm.http import UrlArguments
from humm.logging import getLogger
from humm.plugins import PluginFilters, PluginManager
from humm.sites import DirPaths, UserSites
from humm.view.html_template import HtmlTemplate
from humm.view.output_buffer import OutputBuffer
from humm.view.resolver import ViewResolver
from humm.view.template_paths import TemplatePaths
from humm.view.template_vars import TemplateVars

logger = getLogger(__name__)


class Dispatcher:
    """
    Displays the view requested by the first URL segment

    A dispatcher runs once: later calls to run() do nothing. Request data
    (path and host) default to the current request context.

    Example:
        output = io.StringIO()
        Dispatcher(resolver, plugins, output=output, url_arguments=UrlArguments('/about')).run()
        html = output.getvalue()
    """

    def __init__(
        self,
        resolver: ViewResolver,
        plugins: Optional[PluginManager] = None,
        output: Optional[TextIO] = None,
        url_arguments: Optional[UrlArguments] = None,
        user_sites: Optional[UserSites] = None,
    ):
        self.resolver = resolver
        self.plugins = plugins or PluginManager()
        self.output = output
        self.url_arguments = url_arguments
        self.user_sites = user_sites
        self.template: Optional[HtmlTemplate] = None
        self._dispatched = False
        self._lock = threading.Lock()

    @property
    def dispatched(self) -> bool:
        return self._dispatched

    def run(self):
        """
        Start the output buffer and display the requested view
        """
        with self._lock:
            if self._dispatched:
                logger.debug("Dispatcher already ran, ignoring")
                return
            self._dispatched = True

        sink = self.output if self.output is not None else sys.stdout
        with OutputBuffer(sink, self.filter_output) as buffer:
            self.display_view(buffer)

    def filter_output(self, contents: str) -> str:
        return self.plugins.apply_simple_filter(PluginFilters.BUFFER_OUTPUT, contents)

    def display_view(self, output: TextIO):
        """Display the requested view into output"""
        url_arguments = self.url_arguments or UrlArguments.current()
        user_sites = self.user_sites or UserSites.current()

        template = HtmlTemplate(output=output, extension=self.resolver.extension)
        self.template = template

        # Shared sites, site and system directories in which
        # the template can find views and helpers
        TemplatePaths.set_template_paths(template, DirPaths(user_sites))

        # Default view variables, available everywhere
        TemplateVars.set_default_site_vars(template, user_sites, url_arguments)
        TemplateVars.set_default_system_vars(template)

        # Optional site shared view, set before the view class is created
        # so both the view class and the plugins can use it
        template.shared_view = self.resolver.resolve_shared_view(template, user_sites)

        view_name = self.resolver.resolve_view_name(url_arguments.get(0), template, user_sites)
        template.view_name = view_name
        template.site_view = self.resolver.resolve_view_class(view_name, template, user_sites)

        logger.debug(
            "Dispatching view %s for site %s",
            view_name,
            user_sites.name(),
            extra={'site_view': type(template.site_view).__name__ if template.site_view else None},
        )

        # Allow plugins to add stuff into the template
        self.plugins.apply_simple_filter(PluginFilters.VIEW_TEMPLATE, template)

        template.display_view(view_name)
