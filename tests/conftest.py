from pathlib import Path
from typing import Callable, Dict, List

import httpx
import pytest

import xeus_cling_setup.logging as xeus_logging
from xeus_cling_setup.data import SessionContext
from xeus_cling_setup.docs import TagFetcher
from xeus_cling_setup.graph import StaticBuildGraph
from xeus_cling_setup.logging import get_logger
from xeus_cling_setup.session import SessionSetup
from xeus_cling_setup.toolchain import Toolchain


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides of the developer machine out of the tests."""
    for name in (
        "XEUS_CLING_XCPP",
        "XEUS_CLING_JUPYTER",
        "XEUS_CLING_PREFIX",
        "XEUS_CLING_SETUP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch: pytest.MonkeyPatch):
    """Undo what configure_logging did to the package logger."""
    logger = get_logger()
    level, handlers = logger.level, list(logger.handlers)
    monkeypatch.setattr(xeus_logging, "_handler", None)
    yield
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.fixture
def context(tmp_path: Path) -> SessionContext:
    source_dir = tmp_path / "src"
    source_dir.mkdir()
    return SessionContext(project_name="demo", source_dir=source_dir, binary_dir=tmp_path / "build")


@pytest.fixture
def prefix(tmp_path: Path) -> Path:
    """A fake xeus-cling installation prefix holding ``bin/xcpp``."""
    prefix = tmp_path / "prefix"
    (prefix / "bin").mkdir(parents=True)
    (prefix / "bin" / "xcpp").write_text("#!/bin/sh\n")
    return prefix


@pytest.fixture
def toolchain(prefix: Path) -> Toolchain:
    return Toolchain(interpreter=prefix / "bin" / "xcpp")


@pytest.fixture
def graph(context: SessionContext) -> StaticBuildGraph:
    return StaticBuildGraph.from_dicts(
        [
            {
                "name": "foo",
                "cxx_standard": 11,
                "include_directories": ["/opt/foo/include"],
                "compile_definitions": ["FOO_SHARED"],
                "link_libraries": ["bar"],
            },
            {"name": "bar", "include_directories": ["/opt/bar/include"], "compile_flags": ["-O2"]},
            {"name": "modern", "cxx_standard": 17},
            {"name": "empty"},
            {"name": "archive", "kind": "STATIC_LIBRARY"},
            {"name": "tool", "kind": "EXECUTABLE"},
        ],
        context.binary_dir,
    )


@pytest.fixture
def session_setup(
    graph: StaticBuildGraph, context: SessionContext, toolchain: Toolchain
) -> SessionSetup:
    return SessionSetup(graph, context, toolchain)


@pytest.fixture
def make_fetcher() -> Callable[[Dict[str, bytes]], TagFetcher]:
    """Build a fetcher serving the given URL contents; every other URL answers 404.

    The fetcher records requested URLs in its ``requested`` attribute.
    """

    def factory(contents: Dict[str, bytes]) -> TagFetcher:
        requested: List[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            if str(request.url) in contents:
                return httpx.Response(200, content=contents[str(request.url)])
            return httpx.Response(404)

        fetcher = TagFetcher(httpx.Client(transport=httpx.MockTransport(handler)))
        fetcher.requested = requested
        return fetcher

    return factory

