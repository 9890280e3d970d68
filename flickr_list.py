#!/usr/bin/env python3
"""
Entry point for the Flickr lister.
"""

import sys
import os

# Add current directory to path for importing the package
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from flickr_lister.main import FlickrListerApp

if __name__ == "__main__":
    app = FlickrListerApp()
    sys.exit(app.run())
