"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from flickr_lister.config import config
from flickr_lister.utils import ui


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the log file at a temp dir and remove API delays."""
    monkeypatch.setattr(config, "CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.setattr(config, "API_KEY", "key")
    monkeypatch.setattr(config, "API_SECRET", "secret")
    monkeypatch.setattr(config, "TOKEN_CACHE_DIR", None)
    monkeypatch.setattr(config, "API_CALL_DELAY", 0)
    monkeypatch.setattr(config, "INITIAL_BACKOFF", 0)
    monkeypatch.setattr(config, "MAX_RETRIES", 3)
    monkeypatch.setattr(config, "PER_PAGE", 500)
    monkeypatch.setattr(ui, "_logger", None)
    monkeypatch.setattr(ui, "_console_level", "INFO")
    yield


@pytest.fixture
def flickr():
    """A stand-in for flickrapi.FlickrAPI in parsed-json mode."""
    api = MagicMock()
    api.token_valid.return_value = True
    api.test.login.return_value = {"user": {"id": "111@N00", "username": {"_content": "me"}}}
    return api


@pytest.fixture
def raw_album():
    return {
        "id": "72157600000000001",
        "owner": "111@N00",
        "title": {"_content": "Holidays"},
        "description": {"_content": "Summer trip"},
        "photos": 12,
        "videos": "1",
        "count_views": "40",
        "date_create": "1609459200",
        "date_update": "1612137600",
    }


@pytest.fixture
def raw_photo():
    return {
        "id": "5300000001",
        "owner": "111@N00",
        "title": "IMG_0001",
        "ispublic": 1,
        "description": {"_content": "Beach"},
        "datetaken": "2021-01-01 10:30:00",
        "dateupload": "1609500000",
        "tags": "beach sea",
        "views": "7",
        "media": "photo",
    }


@pytest.fixture
def raw_comment():
    return {
        "id": "6065-5300000001-72157",
        "author": "222@N00",
        "authorname": "ann",
        "realname": "Ann Example",
        "datecreate": "1609459200",
        "permalink": "https://www.flickr.com/photos/me/5300000001/#comment72157",
        "_content": "Nice!\nReally nice.",
    }
