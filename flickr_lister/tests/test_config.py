"""Tests for flickr_lister.config module."""

import os

import pytest

from flickr_lister.config import config


class TestValidate:
    def test_valid_settings(self):
        config.validate()

    @pytest.mark.parametrize("name, value, message", [
        ("API_KEY", None, "API_KEY and API_SECRET"),
        ("API_SECRET", "", "API_KEY and API_SECRET"),
        ("MAX_RETRIES", 0, "MAX_RETRIES"),
        ("API_CALL_DELAY", -0.5, "API_CALL_DELAY"),
        ("PER_PAGE", 0, "PER_PAGE"),
        ("PER_PAGE", 501, "PER_PAGE"),
    ])
    def test_rejected(self, monkeypatch, name, value, message):
        monkeypatch.setattr(config, name, value)

        with pytest.raises(ValueError, match=message):
            config.validate()

    @pytest.mark.parametrize("per_page", [1, 500])
    def test_per_page_bounds_accepted(self, monkeypatch, per_page):
        monkeypatch.setattr(config, "PER_PAGE", per_page)

        config.validate()

    def test_zero_delay_accepted(self, monkeypatch):
        monkeypatch.setattr(config, "API_CALL_DELAY", 0)

        config.validate()


def test_log_file_in_cache_dir():
    assert config.log_file == os.path.join(config.CACHE_DIR, "flickr_lister.log")
