"""
HTML Template
Render context and Jinja2 rendering of main views and helpers
"""
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    PrefixLoader,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)
from markupsafe import Markup

from humm.defaults import HELPERS_TEMPLATE_PREFIX, VIEW_FILE_EXTENSION, VIEWS_TEMPLATE_PREFIX
from humm.exceptions import ViewNotFoundException, ViewRenderException
from humm.support import Config


class HtmlTemplate:
    """
    Per-request render context

    Public attributes are template variables: anything assigned on the
    object is available in the rendered views and helpers.

    Example:
        template = HtmlTemplate(output=buffer)
        template.add_views_dir(Path('sites/main/views'))
        template.view_name = 'Home'
        template.display_view('Home')   # renders views/Home.html into buffer

    Inside templates:
        {{ view_name }}, {{ site_view.title }}, {{ helper('Menu') }}
        {% extends "helpers/Layout.html" %}
    """

    def __init__(self, output: Optional[TextIO] = None, extension: Optional[str] = None):
        self._vars: Dict[str, Any] = {}
        self._views_dirs: List[Path] = []
        self._helpers_dirs: List[Path] = []
        self._output = output
        self._extension = extension or Config.get('views.VIEW_FILE_EXTENSION', VIEW_FILE_EXTENSION)
        self._environment: Optional[Environment] = None

    # ------------------------------------------------------------------
    # Variables
    # ------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any):
        if name.startswith('_'):
            object.__setattr__(self, name, value)
        else:
            self._vars[name] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._vars[name]
        except KeyError:
            raise AttributeError(f"Template variable '{name}' is not set") from None

    def __delattr__(self, name: str):
        if name.startswith('_'):
            object.__delattr__(self, name)
        else:
            self._vars.pop(name, None)

    def get(self, name: str, default: Any = None) -> Any:
        return self._vars.get(name, default)

    def has(self, name: str) -> bool:
        return name in self._vars

    def vars(self) -> Dict[str, Any]:
        """Copy of the template variables"""
        return dict(self._vars)

    def context(self) -> Dict[str, Any]:
        """Variables handed to Jinja2 (the template object itself included)"""
        context = dict(self._vars)
        context['template'] = self
        return context

    # ------------------------------------------------------------------
    # Search paths
    # ------------------------------------------------------------------

    @property
    def extension(self) -> str:
        return self._extension

    @property
    def views_dirs(self) -> List[Path]:
        return list(self._views_dirs)

    @property
    def helpers_dirs(self) -> List[Path]:
        return list(self._helpers_dirs)

    def add_views_dir(self, path: Union[str, Path]):
        path = Path(path)
        if path not in self._views_dirs:
            self._views_dirs.append(path)
            self._environment = None

    def add_helpers_dir(self, path: Union[str, Path]):
        path = Path(path)
        if path not in self._helpers_dirs:
            self._helpers_dirs.append(path)
            self._environment = None

    def _file_name(self, name: str) -> str:
        return f'{name}{self._extension}'

    def view_file_exists(self, name: str) -> bool:
        """Find if a main view template exists in any views directory"""
        if not name:
            return False
        return any((directory / self._file_name(name)).is_file() for directory in self._views_dirs)

    def helper_file_exists(self, name: str) -> bool:
        """Find if a helper template exists in any helpers directory"""
        if not name:
            return False
        return any((directory / self._file_name(name)).is_file() for directory in self._helpers_dirs)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_environment(self) -> Environment:
        """Jinja2 environment over the current search paths (rebuilt when they change)"""
        if self._environment is None:
            loader = PrefixLoader({
                VIEWS_TEMPLATE_PREFIX: FileSystemLoader([str(d) for d in self._views_dirs]),
                HELPERS_TEMPLATE_PREFIX: FileSystemLoader([str(d) for d in self._helpers_dirs]),
            })
            environment = Environment(
                loader=loader,
                autoescape=select_autoescape(['html', 'htm', 'xml']),
            )
            environment.globals['helper'] = self.helper
            self._environment = environment
        return self._environment

    def _render(self, template_name: str, name: str) -> str:
        environment = self.get_environment()
        try:
            return environment.get_template(template_name).render(self.context())
        except TemplateNotFound as e:
            if e.name == template_name:
                raise ViewNotFoundException(name) from e
            raise ViewNotFoundException(e.name, f"Template not found while rendering {name}: {e.name}") from e
        except TemplateError as e:
            raise ViewRenderException(name, f"Error rendering {name}: {e}") from e

    def render_view(self, name: str) -> str:
        """Render a main view to a string"""
        return self._render(f'{VIEWS_TEMPLATE_PREFIX}/{self._file_name(name)}', name)

    def helper(self, name: str) -> Markup:
        """Render a helper view; exposed to templates as helper(name)"""
        return Markup(self._render(f'{HELPERS_TEMPLATE_PREFIX}/{self._file_name(name)}', name))

    def display_view(self, name: str):
        """Render a main view into the template output"""
        output = self._output if self._output is not None else sys.stdout
        output.write(self.render_view(name))
