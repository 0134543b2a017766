"""
Template Paths
"""
from humm.sites import DirPaths
from humm.view.html_template import HtmlTemplate


class TemplatePaths:
    """Registers the directories an HtmlTemplate searches"""

    @staticmethod
    def set_template_paths(template: HtmlTemplate, dir_paths: DirPaths):
        """
        Add views and helpers directories, in tier order:
        shared sites, site, system
        """
        for directory in dir_paths.views_dirs():
            template.add_views_dir(directory)

        for directory in dir_paths.helpers_dirs():
            template.add_helpers_dir(directory)
