"""Shared fixtures: isolated config, storage paths and temporary site trees."""
import importlib
import logging
import sys
import textwrap
import uuid
from pathlib import Path

import pytest

from humm.support import Config, Storage, Str
from humm.support.facades import Facade


def purge_sites_modules():
    for name in list(sys.modules):
        if name == 'sites' or name.startswith('sites.'):
            del sys.modules[name]
    importlib.invalidate_caches()


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Fresh config, no application and no request context for every test."""
    # Applications add their base path to sys.path
    monkeypatch.setattr(sys, 'path', list(sys.path))
    Config.forget()
    # Sanic app names are process-wide, keep them unique per test
    Config.set('app.APP_NAME', f'humm_{uuid.uuid4().hex[:8]}')
    Facade.set_app(None)
    Facade.clear_current_request()
    yield
    Config.forget()
    Facade.set_app(None)
    Facade.clear_current_request()
    purge_sites_modules()
    application_logger = logging.getLogger('application')
    for handler in list(application_logger.handlers):
        handler.close()
        application_logger.removeHandler(handler)


class SiteTree:
    """Writes views, helpers and classes under <base>/sites/<tier>/."""

    def __init__(self, base: Path):
        self.base = base

    def _write(self, path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip('\n'), encoding='utf-8')
        return path

    def view(self, tier: str, name: str, content: str = None) -> Path:
        if content is None:
            content = f'<p>{name}</p>'
        return self._write(self.base / 'sites' / tier / 'views' / f'{name}.html', content)

    def helper(self, tier: str, name: str, content: str) -> Path:
        return self._write(self.base / 'sites' / tier / 'helpers' / f'{name}.html', content)

    def file(self, relative: str, content: str = '') -> Path:
        return self._write(self.base / relative, content)

    def view_class(self, tier: str, class_name: str, body: str = None, base: str = 'HummView') -> Path:
        """
        Write sites/<tier>/classes/<snake_name>.py defining class_name.

        By default the class records its tier in template.instantiated.
        """
        for package in ('sites', f'sites/{tier}', f'sites/{tier}/classes'):
            init = self.base / package / '__init__.py'
            if not init.exists():
                self._write(init, '')

        if body is None:
            body = f'''
                def __init__(self, template):
                    super().__init__(template)
                    template.instantiated = template.get('instantiated', []) + ['{tier}']
            '''
        parent = f'({base})' if base else ''
        source = (
            'from humm.view import HummView\n\n\n'
            f'class {class_name}{parent}:\n'
            + textwrap.indent(textwrap.dedent(body).strip('\n'), '    ')
            + '\n'
        )
        path = self.base / 'sites' / tier / 'classes' / f'{Str.snake(class_name)}.py'
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding='utf-8')
        importlib.invalidate_caches()
        return path


@pytest.fixture
def base_path(tmp_path, monkeypatch):
    """Application base path on a temporary directory, importable as sys.path entry."""
    Storage.initialize(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    purge_sites_modules()
    yield tmp_path
    Storage.initialize()


@pytest.fixture
def sites(base_path):
    return SiteTree(base_path)
