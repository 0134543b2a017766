"""
View Resolver
Decides which view answers a request and finds its associated class

Views are resolved across three tiers, always in this order:
1. Shared sites (sites/shared)
2. Site specific (sites/<site>)
3. System (humm/system)
"""
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from humm.defaults import (
    SITE_HOME_VIEW,
    SITES_SHARED_CLASS_NAMESPACE,
    SYSTEM_CLASS_NAMESPACE,
    SYSTEM_HOME_VIEW,
    VIEW_FILE_EXTENSION,
)
from humm.logging import getLogger
from humm.sites import DirPaths, UserSites
from humm.support import ClassLoader, Config, Str
from humm.view.html_template import HtmlTemplate
from humm.view.humm_view import HummView

logger = getLogger(__name__)


class ViewResolver:
    """
    Long-lived resolver shared by every request of the process

    Main views are the templates found directly in the views directories.
    Only main views can be requested through the first URL segment; helpers
    are rendered from other templates.

    The list of main views is scanned once per set of views directories and
    kept for the process lifetime.

    Example:
        resolver = ViewResolver()
        sites = UserSites('example.com')
        name = resolver.resolve_view_name('about', template, sites)    # 'About'
        view = resolver.resolve_view_class(name, template, sites)      # AboutView or None
    """

    def __init__(self, extension: Optional[str] = None):
        self._extension = extension
        self._views_dirs: Dict[Tuple[Path, ...], List[str]] = {}
        self._lock = threading.Lock()

    @property
    def extension(self) -> str:
        return self._extension or Config.get('views.VIEW_FILE_EXTENSION', VIEW_FILE_EXTENSION)

    # ------------------------------------------------------------------
    # View names
    # ------------------------------------------------------------------

    def resolve_view_name(self, requested: str, template: HtmlTemplate, user_sites: UserSites) -> str:
        """
        View to display for a requested URL segment

        1. The requested view, if it is a main view with a template file
        2. The site home view, if it is a main view with a template file
        3. The system home view

        The name checked against the template files is the name returned.
        """
        home = Config.get('views.SITE_HOME_VIEW', SITE_HOME_VIEW)

        for candidate in (requested, home):
            view = self.main_view_name(candidate, user_sites)
            if view and template.view_file_exists(view):
                return view

        logger.debug("No view for '%s' nor site home, using %s", requested, SYSTEM_HOME_VIEW)
        return SYSTEM_HOME_VIEW

    def main_view_name(self, name: Optional[str], user_sites: UserSites) -> Optional[str]:
        """
        Registered main view matching name case-insensitively, or None
        """
        if not name:
            return None

        wanted = Str.ucfirst(name)
        views = self.get_main_views_dirs(user_sites)
        if wanted in views:
            return wanted

        wanted = wanted.lower()
        for view in views:
            if view.lower() == wanted:
                return view
        return None

    def is_main_view(self, name: Optional[str], user_sites: UserSites) -> bool:
        return self.main_view_name(name, user_sites) is not None

    def get_main_views_dirs(self, user_sites: UserSites) -> List[str]:
        """
        Names of every main view, shared sites first, then site, then system

        Duplicated names across tiers appear once. Scanned on first use
        for a given set of directories, then served from memory.
        """
        dirs = DirPaths(user_sites).views_dirs()

        views = self._views_dirs.get(dirs)
        if views is not None:
            return views

        with self._lock:
            views = self._views_dirs.get(dirs)
            if views is None:
                views = []
                for directory in dirs:
                    for name in self.get_directory_views(directory):
                        if name not in views:
                            views.append(name)
                logger.debug("Main views for site %s: %s", user_sites.name(), views)
                self._views_dirs[dirs] = views
        return views

    def get_directory_views(self, directory: Path) -> List[str]:
        """View names of the view files directly inside a directory"""
        views = []
        if directory.is_dir():
            for entry in sorted(directory.iterdir()):
                if self.is_main_view_file(entry):
                    views.append(entry.name[:-len(self.extension)])
        return views

    def is_main_view_file(self, path: Path) -> bool:
        """
        Only capitalized files with the view extension are views
        (not helpers, assets or lowercase files such as about.html)
        """
        extension = self.extension
        if not (path.is_file() and path.name.endswith(extension)):
            return False
        stem = path.name[:-len(extension)]
        return bool(stem) and Str.ucfirst(stem) == stem

    def forget(self):
        """Drop the main views cache"""
        with self._lock:
            self._views_dirs.clear()

    # ------------------------------------------------------------------
    # View classes
    # ------------------------------------------------------------------

    def view_class_candidates(self, view_name: str, user_sites: UserSites) -> List[str]:
        """Class paths that can be associated to a view, in precedence order"""
        class_name = UserSites.view_class(view_name)
        return [
            UserSites.class_path(SITES_SHARED_CLASS_NAMESPACE, class_name),
            user_sites.view_class_name(view_name),
            UserSites.class_path(SYSTEM_CLASS_NAMESPACE, class_name),
        ]

    def resolve_view_class(self, view_name: str, template: HtmlTemplate,
                           user_sites: UserSites) -> Optional[HummView]:
        """
        Instance of the first valid class associated to a view, or None

        View classes are optional. Candidates are checked one by one and
        only the first valid one is instantiated.
        """
        for class_path in self.view_class_candidates(view_name, user_sites):
            if self.is_valid_view_class(class_path):
                logger.debug("View %s uses class %s", view_name, class_path)
                return ClassLoader.load(class_path)(template)
        return None

    def resolve_shared_view(self, template: HtmlTemplate, user_sites: UserSites) -> Optional[HummView]:
        """Instance of the optional site shared view class, or None"""
        class_path = user_sites.shared_view_class_name()
        if self.is_valid_view_class(class_path):
            return ClassLoader.load(class_path)(template)
        return None

    @staticmethod
    def is_valid_view_class(class_path: str) -> bool:
        """
        A view class is valid when its module file exists, the module
        defines it and it derives from HummView
        """
        return ClassLoader.is_subclass_of(class_path, HummView)
