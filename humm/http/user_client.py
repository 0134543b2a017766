"""
User Client
Helpers acting on the client that made the request
"""
from humm.exceptions import RedirectException


class UserClient:
    """Client side actions"""

    @staticmethod
    def redirect(location: str, status_code: int = 302):
        """
        Stop the current dispatch and redirect the client

        Raises:
            RedirectException: always
        """
        raise RedirectException(location, status_code)

    @staticmethod
    def redirect_to_home():
        """Redirect the client to the site home"""
        UserClient.redirect('/')
