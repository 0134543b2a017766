"""Tests for the Dispatcher request lifecycle."""
import io
import threading
from types import SimpleNamespace

import pytest

from humm.exceptions import RedirectException, ViewNotFoundException, ViewRenderException
from humm.http import UrlArguments
from humm.plugins import PluginFilters, PluginManager
from humm.sites import UserSites
from humm.support import Config
from humm.support.facades import Facade
from humm.view import Dispatcher, ViewResolver


@pytest.fixture
def resolver():
    return ViewResolver()


@pytest.fixture
def plugins():
    return PluginManager()


def make_dispatcher(resolver, plugins, path='/', host=None, output=None):
    return Dispatcher(
        resolver,
        plugins,
        output=output if output is not None else io.StringIO(),
        url_arguments=UrlArguments(path),
        user_sites=UserSites(host),
    )


class TestDispatcherRun:
    def test_renders_requested_view(self, sites, resolver, plugins):
        sites.view('main', 'Home')
        sites.view('main', 'About', '<p>{{ view_name }} of {{ site_name }}</p>')
        dispatcher = make_dispatcher(resolver, plugins, '/about/team')

        dispatcher.run()

        assert dispatcher.output.getvalue() == '<p>About of main</p>'
        assert dispatcher.template.view_name == 'About'
        assert dispatcher.template.url_arguments == ['about', 'team']

    def test_renders_home_for_root(self, sites, resolver, plugins):
        sites.view('main', 'Home', 'home page')
        dispatcher = make_dispatcher(resolver, plugins, '/')

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'home page'

    def test_falls_back_to_system_home(self, base_path, resolver, plugins):
        dispatcher = make_dispatcher(resolver, plugins, '/missing')

        dispatcher.run()

        html = dispatcher.output.getvalue()
        assert dispatcher.template.view_name == 'SystemHome'
        assert 'has no <code>Home</code> view' in html
        assert type(dispatcher.template.site_view).__name__ == 'SystemHomeView'

    def test_system_home_requested_directly_redirects(self, base_path, resolver, plugins):
        dispatcher = make_dispatcher(resolver, plugins, '/systemhome')

        with pytest.raises(RedirectException) as exc_info:
            dispatcher.run()

        assert exc_info.value.location == '/'

    def test_runs_only_once(self, sites, resolver, plugins):
        sites.view('main', 'Home', 'once')
        dispatcher = make_dispatcher(resolver, plugins)

        dispatcher.run()
        dispatcher.run()

        assert dispatcher.output.getvalue() == 'once'
        assert dispatcher.dispatched

    def test_concurrent_runs_render_once(self, sites, resolver, plugins):
        sites.view('main', 'Home', 'x')
        dispatcher = make_dispatcher(resolver, plugins)
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            dispatcher.run()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert dispatcher.output.getvalue() == 'x'

    def test_view_without_class_renders_with_none(self, sites, resolver, plugins):
        sites.view('main', 'Home', '{{ site_view is none }}')
        dispatcher = make_dispatcher(resolver, plugins)

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'True'

    def test_view_class_prepares_template(self, sites, resolver, plugins):
        sites.view('main', 'Contact', '{{ email }} {{ site_view.phone() }}')
        sites.view_class('main', 'ContactView', body='''
            def __init__(self, template):
                super().__init__(template)
                self.set('email', 'hello@example.com')

            def phone(self):
                return '555-0100'
        ''')
        dispatcher = make_dispatcher(resolver, plugins, '/contact')

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'hello@example.com 555-0100'

    def test_shared_view_is_set_before_view_class(self, sites, resolver, plugins):
        sites.view('main', 'Contact', '{{ saw_shared }} {{ shared_view.menu }}')
        sites.view_class('main', 'SiteSharedView', body='''
            menu = 'main-menu'
        ''')
        sites.view_class('main', 'ContactView', body='''
            def __init__(self, template):
                super().__init__(template)
                template.saw_shared = template.shared_view is not None
        ''')
        dispatcher = make_dispatcher(resolver, plugins, '/contact')

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'True main-menu'

    def test_helpers_are_rendered(self, sites, resolver, plugins):
        sites.helper('shared', 'Menu', '<nav>{{ view_name }}</nav>')
        sites.view('main', 'Home', '{{ helper("Menu") }}<main></main>')
        dispatcher = make_dispatcher(resolver, plugins)

        dispatcher.run()

        assert dispatcher.output.getvalue() == '<nav>Home</nav><main></main>'

    def test_site_chosen_by_host(self, sites, resolver, plugins):
        sites.view('main', 'Home', 'main site')
        sites.view('blog', 'Home', 'blog site')
        dispatcher = make_dispatcher(resolver, plugins, '/', host='blog')

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'blog site'

    def test_reads_current_request(self, sites, resolver, plugins):
        sites.view('main', 'Home')
        sites.view('main', 'About', 'about')
        output = io.StringIO()
        Facade.set_current_request(SimpleNamespace(path='/about', host='localhost:8000'))

        Dispatcher(resolver, plugins, output=output).run()

        assert output.getvalue() == 'about'


class TestDispatcherPlugins:
    def test_buffer_output_filter(self, sites, resolver, plugins):
        sites.view('main', 'Home', 'hello')
        plugins.add_filter(PluginFilters.BUFFER_OUTPUT, str.upper)
        dispatcher = make_dispatcher(resolver, plugins)

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'HELLO'

    def test_view_template_filter_sees_populated_template(self, sites, resolver, plugins):
        sites.view('main', 'Home', '{{ banner }}')
        seen = {}

        def add_banner(template):
            seen['view_name'] = template.view_name
            seen['has_site_view'] = template.has('site_view')
            template.banner = 'from plugin'

        plugins.add_filter(PluginFilters.VIEW_TEMPLATE, add_banner)
        dispatcher = make_dispatcher(resolver, plugins)

        dispatcher.run()

        assert seen == {'view_name': 'Home', 'has_site_view': True}
        assert dispatcher.output.getvalue() == 'from plugin'


class TestDispatcherFailures:
    def test_render_failure_propagates_after_flushing(self, sites, resolver, plugins):
        sites.view('main', 'Home', '{{ nothing.at_all }}')
        flushed = []
        plugins.add_filter(PluginFilters.BUFFER_OUTPUT, lambda contents: flushed.append(contents))
        dispatcher = make_dispatcher(resolver, plugins)

        with pytest.raises(ViewRenderException):
            dispatcher.run()

        assert flushed == ['']
        assert dispatcher.output.getvalue() == ''

    def test_missing_helper_propagates(self, sites, resolver, plugins):
        sites.view('main', 'Home', '{{ helper("Nope") }}')
        dispatcher = make_dispatcher(resolver, plugins)

        with pytest.raises(ViewNotFoundException) as exc_info:
            dispatcher.run()

        assert exc_info.value.view_name == 'Nope'

    def test_failed_dispatch_is_not_retried(self, sites, resolver, plugins):
        sites.view('main', 'Home', '{% if %}')
        dispatcher = make_dispatcher(resolver, plugins)

        with pytest.raises(ViewRenderException):
            dispatcher.run()
        dispatcher.run()

        assert dispatcher.output.getvalue() == ''


class TestDispatcherExtension:
    def test_custom_extension_renders_site_view(self, sites, plugins):
        sites.file('sites/main/views/Home.jinja', 'jinja home')
        sites.view('main', 'Home', 'html home')
        dispatcher = make_dispatcher(ViewResolver(extension='.jinja'), plugins, '/')

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'jinja home'
        assert dispatcher.template.extension == '.jinja'

    def test_custom_extension_from_config(self, sites, plugins):
        Config.set('views.VIEW_FILE_EXTENSION', '.tpl')
        sites.file('sites/main/views/Home.tpl', 'tpl home')
        sites.file('sites/main/views/About.tpl', 'tpl about')
        dispatcher = make_dispatcher(ViewResolver(), plugins, '/about')

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'tpl about'

    def test_lowercase_view_file_falls_back_to_home(self, sites, resolver, plugins):
        sites.view('main', 'Home', 'home')
        sites.view('main', 'about', 'lowercase about')
        dispatcher = make_dispatcher(resolver, plugins, '/about')

        dispatcher.run()

        assert dispatcher.output.getvalue() == 'home'
