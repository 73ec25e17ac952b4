import sys
from pathlib import Path

import httpx
import pytest

from xeus_cling_setup.docs import TagFetcher
from xeus_cling_setup.errors import SetupError, TagFetchError


def test_fetch_writes_content(tmp_path: Path, make_fetcher):
    fetcher = make_fetcher({"https://a.org/docs/a.tag": b"<tagfile/>"})
    destination = fetcher.fetch("https://a.org/docs/a.tag", tmp_path / "sub" / "a.tag")
    assert destination.read_bytes() == b"<tagfile/>"
    assert fetcher.requested == ["https://a.org/docs/a.tag"]


def test_error_status(tmp_path: Path, make_fetcher):
    fetcher = make_fetcher({})
    with pytest.raises(TagFetchError) as exc_info:
        fetcher.fetch("https://a.org/missing.tag", tmp_path / "missing.tag")
    assert isinstance(exc_info.value, SetupError)
    assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)
    assert exc_info.value.__cause__ is exc_info.value.cause
    assert "https://a.org/missing.tag" in str(exc_info.value)
    assert not (tmp_path / "missing.tag").exists()


def test_transport_error_is_not_retried(tmp_path: Path):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = TagFetcher(httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(TagFetchError, match="connection refused"):
        fetcher.fetch("https://a.org/a.tag", tmp_path / "a.tag")
    assert len(calls) == 1
    fetcher.close()


def test_context_manager_closes_client(make_fetcher):
    with make_fetcher({}) as fetcher:
        assert not fetcher.client.is_closed
    assert fetcher.client.is_closed


if __name__ == "__main__":
    pytest.main(sys.argv)
