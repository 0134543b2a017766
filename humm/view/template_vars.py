"""
Template Vars
Default variables available in every view
"""
from humm.defaults import (
    DEFAULT_APP_NAME,
    DEFAULT_APP_URL,
    DEFAULT_SITE_LANGUAGE,
    SYSTEM_HOME_VIEW,
    SYSTEM_VERSION,
)
from humm.http import UrlArguments
from humm.sites import UserSites
from humm.support import Config
from humm.view.html_template import HtmlTemplate


class TemplateVars:

    @staticmethod
    def set_default_site_vars(template: HtmlTemplate, user_sites: UserSites, url_arguments: UrlArguments):
        template.site_name = user_sites.name()
        template.site_title = Config.get('app.APP_NAME', DEFAULT_APP_NAME)
        template.site_url = str(Config.get('app.APP_URL', DEFAULT_APP_URL)).rstrip('/')
        template.site_language = Config.get('sites.SITE_LANGUAGE', DEFAULT_SITE_LANGUAGE)
        template.url_arguments = url_arguments.all()

    @staticmethod
    def set_default_system_vars(template: HtmlTemplate):
        template.system_name = DEFAULT_APP_NAME
        template.system_version = SYSTEM_VERSION
        template.system_debug = bool(Config.get('app.APP_DEBUG', False))
        template.system_home_view = SYSTEM_HOME_VIEW
