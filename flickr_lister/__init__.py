"""
Flickr Lister - list albums, photos, tags and comments from Flickr as text tables.

This package authenticates with Flickr through flickrapi, fetches records,
filters them by exact field value or regular expression and prints an
aligned table.
"""

__version__ = "1.0.0"
__author__ = "Flickr Lister Contributors"

from .config import config
from .main import main

__all__ = ['main', 'config']
