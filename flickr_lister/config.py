"""
Configuration module for Flickr Lister.
Centralizes all configuration settings and environment variables.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Configuration settings for the Flickr lister."""

    # Flickr API credentials
    API_KEY = os.getenv("API_KEY")
    API_SECRET = os.getenv("API_SECRET")

    # Directory settings
    CACHE_DIR = os.getenv("CACHE_DIR", "./cache")
    TOKEN_CACHE_DIR = os.getenv("TOKEN_CACHE_DIR")

    @property
    def log_file(self):
        return os.path.join(self.CACHE_DIR, "flickr_lister.log")

    # Performance settings
    API_CALL_DELAY = float(os.getenv("API_CALL_DELAY", 1.1))
    PER_PAGE = int(os.getenv("PER_PAGE", 500))

    # Retry/backoff settings
    MAX_RETRIES = int(os.getenv("MAX_RETRIES", 5))
    INITIAL_BACKOFF = 2  # seconds
    MAX_BACKOFF = 60     # max wait time between retries

    def validate(self):
        """Validate that required configuration is present."""
        if not self.API_KEY or not self.API_SECRET:
            raise ValueError("API_KEY and API_SECRET must be set in environment variables or .env file")

        if self.MAX_RETRIES < 1:
            raise ValueError("MAX_RETRIES must be at least 1")

        if self.API_CALL_DELAY < 0:
            raise ValueError("API_CALL_DELAY must be non-negative")

        if not 1 <= self.PER_PAGE <= 500:
            raise ValueError("PER_PAGE must be between 1 and 500")


# Global configuration instance
config = Config()
