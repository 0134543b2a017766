"""
String Helper Functions
Laravel-style string manipulation utilities
"""
import re


class Str:
    """
    String manipulation helper class

    Provides static methods for the naming conventions of views:
    - ucfirst for view names (about -> About)
    - snake_case for view class modules (ContactView -> contact_view)
    - StudlyCase for site identifiers
    """

    @staticmethod
    def ucfirst(value: str) -> str:
        """
        Uppercase the first character, leaving the rest untouched

        Example:
            Str.ucfirst('about')       # 'About'
            Str.ucfirst('systemHome')  # 'SystemHome'
        """
        if not value:
            return value
        return value[0].upper() + value[1:]

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake_case

        Example:
            Str.snake('SystemHomeView')  # 'system_home_view'
            Str.snake('Framework App')   # 'framework_app'
        """
        if not value:
            return value

        value = value.replace(' ', delimiter)

        # Insert delimiter before uppercase letters
        value = re.sub('(.)([A-Z][a-z]+)', r'\1' + delimiter + r'\2', value)
        value = re.sub('([a-z0-9])([A-Z])', r'\1' + delimiter + r'\2', value)

        value = value.lower()
        value = re.sub(f'{delimiter}+', delimiter, value)

        return value.strip(delimiter)

    @staticmethod
    def identifier(value: str) -> str:
        """
        Turn an arbitrary string into a valid Python identifier

        Example:
            Str.identifier('www.example.com')  # 'www_example_com'
            Str.identifier('8080-site')        # '_8080_site'
        """
        value = re.sub(r'\W+', '_', value.strip().lower()).strip('_')
        if value and value[0].isdigit():
            value = '_' + value
        return value
