"""
Sites Package
"""
from humm.sites.user_sites import UserSites
from humm.sites.dir_paths import DirPaths

__all__ = [
    'UserSites',
    'DirPaths',
]
