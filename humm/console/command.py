"""
Base Command Class
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


class Command(ABC):
    """
    A humm console command

    Subclasses set name, description and signature, and implement handle().
    Positional arguments and --options of the command line are passed to
    handle() as arguments and keyword arguments.

    Example:
        class HelloCommand(Command):
            name = 'hello'
            signature = 'hello [who]'

            def handle(self, who='world', **kwargs):
                self.line(f'hello {who}')
    """

    name: str = ""
    description: str = ""

    # Usage shown by `humm help` (defaults to the name)
    signature: Optional[str] = None

    def __init__(self):
        self.signature = self.signature or self.name

    @abstractmethod
    def handle(self, *args, **kwargs) -> Optional[int]:
        """Run the command, returns the exit code (None means 0)"""

    def line(self, message: str = ""):
        print(message)

    def info(self, message: str):
        self.line(f"ℹ {message}")

    def warning(self, message: str):
        self.line(f"⚠ {message}")

    def error(self, message: str):
        self.line(f"❌ {message}")

    def table(self, headers: Sequence[str], rows: List[Sequence]):
        """Print rows as aligned columns"""
        cells = [[str(cell) for cell in row] for row in [headers, *rows]]
        widths = [max(len(column) for column in columns) for columns in zip(*cells)]

        formatted = [" | ".join(cell.ljust(width) for cell, width in zip(row, widths)) for row in cells]
        self.line(formatted[0])
        self.line("-" * len(formatted[0]))
        for row in formatted[1:]:
            self.line(row)
