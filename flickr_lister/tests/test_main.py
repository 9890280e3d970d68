"""Tests for flickr_lister.main module."""

from unittest.mock import MagicMock

import pytest
from flickrapi.exceptions import FlickrError
from requests.exceptions import ConnectionError

from flickr_lister.config import config
from flickr_lister.main import FlickrListerApp, main


@pytest.fixture
def client():
    api_client = MagicMock()
    api_client.authenticate.return_value = "111@N00"
    api_client.resolve_user.return_value = "333@N00"
    api_client.iter_albums.return_value = iter([
        {"id": "1", "title": "Holidays", "photos": 12, "videos": 0, "created": "2021-01-01 00:00"},
        {"id": "2", "title": "Work", "photos": 3, "videos": 1, "created": "2021-02-01 00:00"},
    ])
    return api_client


class TestRun:
    def test_lists_albums(self, client, capsys):
        status = FlickrListerApp(client).run(["albums", "--fields", "id,title,photos"])

        assert status == 0
        assert capsys.readouterr().out.split("\n") == [
            "ID  TITLE     PHOTOS",
            "--  --------  ------",
            " 1  Holidays      12",
            " 2  Work           3",
            "",
        ]
        client.iter_albums.assert_called_once_with("111@N00")

    def test_filters_and_limit(self, client, capsys):
        status = FlickrListerApp(client).run(["albums", "-r", "title=o", "-n", "1", "-f", "title", "--no-header"])

        assert status == 0
        assert capsys.readouterr().out == "Holidays\n"

    def test_resolves_other_user(self, client):
        FlickrListerApp(client).run(["albums", "--user", "bob"])

        client.resolve_user.assert_called_once_with("bob")
        client.iter_albums.assert_called_once_with("333@N00")

    @pytest.mark.parametrize("argv, method, arg", [
        (["photos"], "iter_photos", "111@N00"),
        (["photos", "--album", "721"], "iter_album_photos", "721"),
        (["tags"], "iter_user_tags", "111@N00"),
        (["tags", "--photo", "9"], "iter_photo_tags", "9"),
        (["comments", "--photo", "9"], "iter_comments", "9"),
    ])
    def test_selects_listing(self, client, argv, method, arg):
        getattr(client, method).return_value = iter([])

        assert FlickrListerApp(client).run(argv) == 0
        getattr(client, method).assert_called_once_with(arg)

    def test_popular_tags(self, client):
        client.iter_popular_tags.return_value = iter([{"tag": "sea", "count": 4}])

        FlickrListerApp(client).run(["tags", "--popular", "5"])

        client.iter_popular_tags.assert_called_once_with("111@N00", 5)

    def test_missing_credentials(self, client, monkeypatch, capsys):
        monkeypatch.setattr(config, "API_KEY", None)

        assert FlickrListerApp(client).run(["albums"]) == 1
        assert "API_KEY" in capsys.readouterr().err
        client.authenticate.assert_not_called()

    def test_api_error(self, client, capsys):
        client.iter_albums.side_effect = FlickrError("User not found", code=1)

        assert FlickrListerApp(client).run(["albums"]) == 1
        captured = capsys.readouterr()
        assert "User not found" in captured.err
        assert captured.out == ""

    def test_retries_exhausted(self, client):
        client.authenticate.side_effect = RuntimeError("API call failed after 5 retries.")

        assert FlickrListerApp(client).run(["albums"]) == 1

    def test_writes_log_file(self, client):
        FlickrListerApp(client).run(["albums", "--user", "bob", "-v"])

        with open(config.log_file, encoding="utf-8") as f:
            assert "Listing albums of bob" in f.read()


def test_main_exits_with_status(monkeypatch):
    monkeypatch.setattr(config, "API_SECRET", "")

    with pytest.raises(SystemExit) as exc_info:
        main(["albums"])
    assert exc_info.value.code == 1


class TestFailures:
    def test_config_error_is_logged(self, client, monkeypatch):
        monkeypatch.setattr(config, "MAX_RETRIES", 0)

        assert FlickrListerApp(client).run(["albums"]) == 1

        with open(config.log_file, encoding="utf-8") as f:
            log = f.read()
        assert "ERROR" in log
        assert "MAX_RETRIES must be at least 1" in log

    def test_network_error_during_authorization(self, client, capsys):
        client.authenticate.side_effect = ConnectionError("network down")

        assert FlickrListerApp(client).run(["albums"]) == 1
        assert "network down" in capsys.readouterr().err

    def test_no_verification_code(self, client, capsys):
        client.authenticate.side_effect = EOFError()

        assert FlickrListerApp(client).run(["albums"]) == 1
        assert "verification code" in capsys.readouterr().err

    def test_interrupted(self, client):
        client.iter_albums.side_effect = KeyboardInterrupt

        assert FlickrListerApp(client).run(["albums"]) == 130


class TestConsoleLevel:
    def test_status_shown_by_default(self, client, capsys):
        FlickrListerApp(client).run(["albums"])

        assert "Fetching albums" in capsys.readouterr().err

    def test_quiet_hides_status(self, client, capsys):
        FlickrListerApp(client).run(["albums", "--quiet"])

        captured = capsys.readouterr()
        assert captured.err == ""
        assert "Holidays" in captured.out

    def test_quiet_still_shows_errors(self, client, capsys):
        client.iter_albums.side_effect = FlickrError("User not found", code=1)

        FlickrListerApp(client).run(["albums", "-q"])

        assert "User not found" in capsys.readouterr().err

    def test_quiet_still_logs_to_file(self, client):
        FlickrListerApp(client).run(["albums", "-q"])

        with open(config.log_file, encoding="utf-8") as f:
            assert "Fetching albums" in f.read()


class TestDisplayedFilters:
    def test_match_boolean_as_displayed(self, client, capsys):
        client.iter_photos.return_value = iter([
            {"id": "1", "public": True},
            {"id": "2", "public": False},
        ])

        status = FlickrListerApp(client).run(["photos", "-f", "id,public", "--no-header", "-m", "public=yes"])

        assert status == 0
        assert capsys.readouterr().out == "1  yes\n"


def test_empty_album_does_not_list_all_photos(client):
    with pytest.raises(SystemExit):
        FlickrListerApp(client).run(["photos", "--album", ""])

    client.iter_photos.assert_not_called()
