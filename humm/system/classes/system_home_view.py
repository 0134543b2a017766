"""
System Home View
Class of the view displayed when a site has no home view
"""
from humm.defaults import SITE_HOME_VIEW, SYSTEM_HOME_VIEW, VIEW_FILE_EXTENSION
from humm.http import UserClient
from humm.support import Config, Storage
from humm.view import HummView


class SystemHomeView(HummView):
    """
    Provides the system home template with the information needed to
    create the missing site home view
    """

    def __init__(self, template):
        super().__init__(template)

        # Disallow direct user requests to this view URL
        arguments = template.get('url_arguments') or []
        if arguments and arguments[0].lower() == SYSTEM_HOME_VIEW.lower():
            UserClient.redirect_to_home()

        home_view = Config.get('views.SITE_HOME_VIEW', SITE_HOME_VIEW)
        extension = Config.get('views.VIEW_FILE_EXTENSION', VIEW_FILE_EXTENSION)
        template.site_home_view = home_view
        template.site_home_file = str(Storage.sites(template.get('site_name', ''), 'views', f'{home_view}{extension}'))
