"""
Console Package
"""
from humm.console.command import Command
from humm.console.artisan import Artisan

__all__ = [
    'Command',
    'Artisan',
]
