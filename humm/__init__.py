"""
Humm
Convention-based views for Sanic: the first URL segment picks the view
"""
from humm.helpers import render_path

__version__ = '1.0.0'

__all__ = [
    'render_path',
]
