"""
Plugin Filters
Identifiers of the filters applied while dispatching a view
"""


class PluginFilters:
    """
    Known filter identifiers

    BUFFER_OUTPUT: applied to the whole rendered page (str) before it is emitted
    VIEW_TEMPLATE: applied to the fully populated HtmlTemplate before rendering
    """
    BUFFER_OUTPUT = 'buffer_output'
    VIEW_TEMPLATE = 'view_template'
