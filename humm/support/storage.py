"""
Storage
Paths of the application, of its sites and of the installed framework
"""

import os
from pathlib import Path
from typing import Optional, Union


class Storage:
    """
    Path helpers rooted at the application base path

    Application layout:
    /
    ├── config/             # Configuration modules
    ├── console/            # Application commands
    ├── sites/
    │   ├── shared/         # Views, helpers and classes shared by every site
    │   │   ├── classes/
    │   │   ├── helpers/
    │   │   └── views/
    │   └── main/           # One directory per site, same layout
    ├── storage/
    │   └── logs/
    └── .env

    The system tier (views, helpers and classes used when a site provides
    none) ships inside the humm package: Storage.system().
    """

    _base_path: Optional[Path] = None

    # Installed humm package
    _framework_path: Path = Path(__file__).resolve().parent.parent

    @classmethod
    def initialize(cls, base_path: Union[str, Path, None] = None):
        """Set the application base path (current working directory by default)"""
        cls._base_path = Path(base_path if base_path is not None else os.getcwd()).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Example:
            Storage.base('sites', 'main')  # /project/sites/main
        """
        if cls._base_path is None:
            cls.initialize()
        return cls._base_path.joinpath(*(part.lstrip('/') for part in paths))

    @classmethod
    def framework(cls, *paths: str) -> Path:
        return cls._framework_path.joinpath(*paths)

    @classmethod
    def sites(cls, *paths: str) -> Path:
        from humm.defaults import SITES_PACKAGE
        return cls.base(SITES_PACKAGE, *paths)

    @classmethod
    def system(cls, *paths: str) -> Path:
        return cls.framework('system', *paths)

    @classmethod
    def storage(cls, *paths: str) -> Path:
        return cls.base('storage', *paths)

    @classmethod
    def logs(cls, *paths: str) -> Path:
        return cls.storage('logs', *paths)

    @staticmethod
    def ensure_directory(path: Union[str, Path]) -> Path:
        """Create a directory and its parents when missing"""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path
