"""
HTTP Kernel
Bridges Sanic requests to the view dispatcher
"""
import io

from sanic import response

from humm.support.facades import Facade


class HttpKernel:
    """
    Handles every view request

    The request is published in the request context for the time of the
    dispatch, so the dispatcher reads its path and host from there.
    """

    def __init__(self, app):
        self.app = app

    def dispatch(self, request) -> str:
        """Render the view for a request and return the emitted page"""
        token = Facade.set_current_request(request)
        try:
            output = io.StringIO()
            dispatcher = self.app.make('dispatcher')
            dispatcher.output = output
            dispatcher.run()
            return output.getvalue()
        finally:
            Facade.reset_current_request(token)

    async def handle(self, request, path: str = ''):
        return response.html(self.dispatch(request))
