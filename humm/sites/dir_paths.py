"""
Directory Paths
Views and helpers directories of the three tiers: shared sites, site, system
"""
from pathlib import Path
from typing import Tuple

from humm.defaults import HELPERS_DIR_NAME, SITES_SHARED_NAME, VIEWS_DIR_NAME
from humm.sites.user_sites import UserSites
from humm.support import Storage


class DirPaths:
    """
    Tier directories for a site

    Order matters everywhere these are listed:
    1. Shared sites
    2. Site specific
    3. System
    """

    def __init__(self, user_sites: UserSites):
        self.user_sites = user_sites

    def sites_shared_views(self) -> Path:
        return Storage.sites(SITES_SHARED_NAME, VIEWS_DIR_NAME)

    def site_views(self) -> Path:
        return self.user_sites.path(VIEWS_DIR_NAME)

    def system_views(self) -> Path:
        return Storage.system(VIEWS_DIR_NAME)

    def sites_shared_helpers(self) -> Path:
        return Storage.sites(SITES_SHARED_NAME, HELPERS_DIR_NAME)

    def site_helpers(self) -> Path:
        return self.user_sites.path(HELPERS_DIR_NAME)

    def system_helpers(self) -> Path:
        return Storage.system(HELPERS_DIR_NAME)

    def views_dirs(self) -> Tuple[Path, Path, Path]:
        return (self.sites_shared_views(), self.site_views(), self.system_views())

    def helpers_dirs(self) -> Tuple[Path, Path, Path]:
        return (self.sites_shared_helpers(), self.site_helpers(), self.system_helpers())
