"""
Humm View
Base class of every view associated class
"""
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from humm.view.html_template import HtmlTemplate


class HummView:
    """
    Base class for views associated classes

    A view named Contact can have a ContactView class placed in the shared
    sites, site or system classes package. It is instantiated with the
    request template before the view renders, and it is available in the
    view as `site_view`.

    Example (sites/main/classes/contact_view.py):
        class ContactView(HummView):
            def __init__(self, template):
                super().__init__(template)
                template.email = 'hello@example.com'

            def phones(self):
                return ['555-0100']
    """

    def __init__(self, template: 'HtmlTemplate'):
        self.template = template

    def set(self, name: str, value: Any):
        """Shortcut to assign a template variable"""
        setattr(self.template, name, value)
