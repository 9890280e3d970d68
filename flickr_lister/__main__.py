"""Allow running as ``python -m flickr_lister``."""

from .main import main

main()
