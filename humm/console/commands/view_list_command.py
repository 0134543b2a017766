"""
View List Command
"""
from humm.bootstrap import create_application
from humm.console.command import Command
from humm.sites import UserSites


class ViewListCommand(Command):
    """List the main views of a site and the class each one would use"""

    name = "view:list"
    description = "List main views and their associated classes"
    signature = "view:list [--host=]"

    def handle(self, host=None, **kwargs):
        app = create_application()
        resolver = app.make('views_resolver')
        user_sites = UserSites(host)

        views = resolver.get_main_views_dirs(user_sites)
        if not views:
            self.warning(f"No main views found for site '{user_sites.name()}'")
            return 0

        rows = []
        for view_name in views:
            view_class = next(
                (path for path in resolver.view_class_candidates(view_name, user_sites)
                 if resolver.is_valid_view_class(path)),
                '-'
            )
            rows.append([view_name, view_class])

        self.line(f"Site: {user_sites.name()}")
        self.table(['View', 'Class'], rows)
        return 0
