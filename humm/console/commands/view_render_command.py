"""
View Render Command
"""
from humm.bootstrap import create_application
from humm.console.command import Command
from humm.exceptions import FrameworkException, RedirectException
from humm.helpers import render_path


class ViewRenderCommand(Command):
    """Render the page of a path to stdout"""

    name = "view:render"
    description = "Render the view answering a path"
    signature = "view:render <path> [--host=]"

    def handle(self, path='/', host=None, **kwargs):
        create_application()
        try:
            self.line(render_path(path, host=host))
        except RedirectException as e:
            self.warning(f"Redirected to {e.location}")
            return 1
        except FrameworkException as e:
            self.error(f"{e.status_code} {e.message}")
            return 1
        return 0
