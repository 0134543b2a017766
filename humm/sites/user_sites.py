"""
User Sites
Site selection and naming policy for site view classes
"""
from pathlib import Path
from typing import Optional

from humm.defaults import (
    CLASSES_DIR_NAME,
    DEFAULT_SITE,
    SITE_SHARED_VIEW_CLASS,
    SITES_PACKAGE,
    SITES_SHARED_NAME,
    VIEW_CLASS_SUFFIX,
)
from humm.support import Config, Storage, Str
from humm.support.facades import HttpRequest


class UserSites:
    """
    The site serving a request

    The site is chosen from the request host:
    1. An explicit entry of the sites.SITE_HOSTS mapping
    2. A site directory named after the host (www.example.com -> sites/www_example_com)
    3. sites.DEFAULT_SITE

    Example:
        sites = UserSites('example.com')
        sites.name()                      # 'main'
        sites.view_class_name('Contact')  # 'sites.main.classes.contact_view.ContactView'
    """

    def __init__(self, host: Optional[str] = None):
        self.host = host.split(':', 1)[0].lower() if host else None
        self._name = None

    @classmethod
    def current(cls) -> 'UserSites':
        """Site of the current request"""
        return cls(HttpRequest.host())

    @staticmethod
    def class_path(namespace: str, class_name: str) -> str:
        """
        Build a dotted class path: one module per class, named after the class

        Example:
            UserSites.class_path('humm.system.classes', 'SystemHomeView')
            # 'humm.system.classes.system_home_view.SystemHomeView'
        """
        return f'{namespace}.{Str.snake(class_name)}.{class_name}'

    @staticmethod
    def view_class(view_name: str) -> str:
        """Class name associated to a view (Contact -> ContactView)"""
        return f'{view_name}{VIEW_CLASS_SUFFIX}'

    def name(self) -> str:
        if self._name is None:
            self._name = self._resolve_name()
        return self._name

    def _resolve_name(self) -> str:
        if self.host:
            site_hosts = Config.get('sites.SITE_HOSTS', {}) or {}
            if self.host in site_hosts:
                return site_hosts[self.host]

            candidate = Str.identifier(self.host)
            if candidate and candidate != SITES_SHARED_NAME and Storage.sites(candidate).is_dir():
                return candidate

        return Config.get('sites.DEFAULT_SITE', DEFAULT_SITE)

    def path(self, *paths: str) -> Path:
        """Directory of the site"""
        return Storage.sites(self.name(), *paths)

    def namespace(self) -> str:
        """Dotted package of the site classes"""
        return f'{SITES_PACKAGE}.{self.name()}.{CLASSES_DIR_NAME}'

    def view_class_name(self, view_name: str) -> str:
        """Dotted path of the site class associated to a view"""
        return self.class_path(self.namespace(), self.view_class(view_name))

    def shared_view_class_name(self) -> str:
        """Dotted path of the optional site shared view class"""
        return self.class_path(self.namespace(), SITE_SHARED_VIEW_CLASS)

    def __repr__(self):
        return f'UserSites(host={self.host!r}, name={self.name()!r})'
