import io
from unittest.mock import MagicMock, patch

import httpx
import pytest

from chordsheet.exceptions import FetchError
from chordsheet.sources import fetch, is_url, load_text

TEST_URL = "https://songs.example.com/amazing-grace.cho"


def _response(status_code=200, text="[G]Amazing grace") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


def test_is_url():
    assert is_url(TEST_URL)
    assert is_url("http://example.com/x")
    assert not is_url("songs/amazing-grace.cho")


def test_fetch_returns_body():
    with patch("chordsheet.sources.httpx.get", return_value=_response()) as get:
        assert fetch(TEST_URL) == "[G]Amazing grace"
    get.assert_called_once_with(TEST_URL, follow_redirects=True, timeout=15)


def test_fetch_http_error():
    with patch("chordsheet.sources.httpx.get", return_value=_response(404)):
        with pytest.raises(FetchError) as exc_info:
            fetch(TEST_URL)
    assert exc_info.value.status_code == 404
    assert exc_info.value.url == TEST_URL


def test_fetch_transport_error():
    error = httpx.ConnectError("connection refused")
    with patch("chordsheet.sources.httpx.get", side_effect=error):
        with pytest.raises(FetchError) as exc_info:
            fetch(TEST_URL)
    assert exc_info.value.status_code == 0


def test_load_text_from_path(tmp_path):
    path = tmp_path / "song.cho"
    path.write_text("{title: X}", encoding="utf-8")
    assert load_text(str(path)) == "{title: X}"


def test_load_text_from_url():
    with patch("chordsheet.sources.httpx.get", return_value=_response(text="[C]la")):
        assert load_text(TEST_URL) == "[C]la"


def test_load_text_from_stdin():
    with patch("sys.stdin", io.StringIO("[D]la")):
        assert load_text("-") == "[D]la"


def test_load_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_text(str(tmp_path / "missing.cho"))
