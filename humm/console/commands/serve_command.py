"""
Serve Command
"""
from humm.bootstrap import create_application
from humm.console.command import Command


class ServeCommand(Command):
    """Start the HTTP server"""

    name = "serve"
    description = "Serve the sites over HTTP"
    signature = "serve [--host=] [--port=] [--debug]"

    def handle(self, host=None, port=None, debug=False, **kwargs):
        app = create_application()
        self.info(f"Serving sites from {app.base_path}")
        app.run(host=host, port=port, debug=bool(debug), single_process=True)
        return 0
