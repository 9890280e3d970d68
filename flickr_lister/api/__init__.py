"""Flickr API access: client wrapper and record conversion."""

from .client import FlickrAPIClient
from .records import FIELDS, DEFAULT_COLUMNS

__all__ = ['FlickrAPIClient', 'FIELDS', 'DEFAULT_COLUMNS']
