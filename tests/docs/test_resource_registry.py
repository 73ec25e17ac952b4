import json
import sys
from pathlib import Path

import pytest

from xeus_cling_setup.data import SessionContext, SessionRequest
from xeus_cling_setup.docs import ResourceRegistry, normalize_url
from xeus_cling_setup.errors import TagFetchError


def _request(urls, tagfiles) -> SessionRequest:
    return SessionRequest(doxygen_urls=tuple(urls), doxygen_tagfiles=tuple(tagfiles))


def test_normalize_url():
    assert normalize_url("https://a.org/docs") == "https://a.org/docs/"
    assert normalize_url("https://a.org/docs/") == "https://a.org/docs/"


def test_absolute_tagfile(context: SessionContext, tmp_path: Path, make_fetcher):
    tagfile = tmp_path / "abs.tag"
    tagfile.write_text("<abs/>")
    fetcher = make_fetcher({})
    registry = ResourceRegistry(context, fetcher)

    tag = registry.resolve("https://a.org", str(tagfile), tmp_path / "staging")
    assert tag.source == tag.destination == tagfile
    assert not tag.fetched
    assert tag.name == "abs.tag"
    assert tag.manifest().url == "https://a.org/"
    assert fetcher.requested == []


def test_relative_tagfile(context: SessionContext, tmp_path: Path, make_fetcher):
    (context.source_dir / "docs").mkdir()
    (context.source_dir / "docs" / "rel.tag").write_text("<rel/>")
    registry = ResourceRegistry(context, make_fetcher({}))

    tag = registry.resolve("https://a.org/", "docs/rel.tag", tmp_path / "staging")
    assert tag.source == context.source_dir / "docs" / "rel.tag"
    assert tag.name == "rel.tag"
    assert tag.manifest().tagfile == "rel.tag"


def test_register(context: SessionContext, make_fetcher):
    (context.source_dir / "local.tag").write_text("<local/>")
    fetcher = make_fetcher({"https://b.org/remote.tag": b"<remote/>"})
    registry = ResourceRegistry(context, fetcher)

    bundle = registry.register(
        _request(["https://a.org/", "https://b.org"], ["local.tag", "remote.tag"])
    )
    assert bundle.fragments == (
        context.binary_dir / "local.tag.json",
        context.binary_dir / "remote.tag.json",
    )
    assert bundle.tagfiles == (context.source_dir / "local.tag", context.binary_dir / "remote.tag")
    assert json.loads(bundle.fragments[1].read_text()) == {
        "url": "https://b.org/",
        "tagfile": "remote.tag",
    }
    assert (context.binary_dir / "remote.tag").read_bytes() == b"<remote/>"


def test_failed_download_leaves_nothing_behind(context: SessionContext, make_fetcher):
    fetcher = make_fetcher({"https://a.org/first.tag": b"<first/>"})
    registry = ResourceRegistry(context, fetcher)

    with pytest.raises(TagFetchError):
        registry.register(
            _request(["https://a.org/", "https://a.org/"], ["first.tag", "second.tag"])
        )
    assert fetcher.requested == ["https://a.org/first.tag", "https://a.org/second.tag"]
    assert not context.binary_dir.exists()


def test_no_documentation(context: SessionContext):
    bundle = ResourceRegistry(context).register(SessionRequest())
    assert bundle.fragments == ()
    assert bundle.tagfiles == ()


def test_owned_fetcher_is_closed(context: SessionContext):
    with ResourceRegistry(context) as registry:
        client = registry.fetcher.client
        assert not client.is_closed
    assert client.is_closed


def test_injected_fetcher_stays_open(context: SessionContext, make_fetcher):
    fetcher = make_fetcher({})
    with ResourceRegistry(context, fetcher) as registry:
        assert registry.fetcher is fetcher
    assert not fetcher.client.is_closed

    ResourceRegistry(context, fetcher).register(SessionRequest())
    assert not fetcher.client.is_closed


if __name__ == "__main__":
    pytest.main(sys.argv)
