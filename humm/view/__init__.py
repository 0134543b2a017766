"""
View Package
Convention-based view resolution and dispatching
"""
from humm.view.humm_view import HummView
from humm.view.html_template import HtmlTemplate
from humm.view.output_buffer import OutputBuffer
from humm.view.template_paths import TemplatePaths
from humm.view.template_vars import TemplateVars
from humm.view.resolver import ViewResolver
from humm.view.dispatcher import Dispatcher

__all__ = [
    # Core
    'ViewResolver',
    'Dispatcher',

    # Collaborators
    'HummView',
    'HtmlTemplate',
    'OutputBuffer',
    'TemplatePaths',
    'TemplateVars',
]
