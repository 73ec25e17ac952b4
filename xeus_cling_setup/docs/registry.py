"""Reconciliation of documentation URLs with Doxygen tag files."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

from xeus_cling_setup.data import (
    SessionContext,
    SessionRequest,
    TagManifest,
    to_json,
    write_text_if_changed,
)
from xeus_cling_setup.data.utils import FrozenModel

from .fetch import TagFetcher

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    """Make sure a documentation URL ends with a slash, as xeus-cling requires."""
    return url if url.endswith("/") else url + "/"


class ResolvedTag(FrozenModel):
    """A documentation pair whose tag file has been located."""

    url: str
    """The normalized documentation URL."""
    tagfile: str
    """The tag file identifier as given."""
    source: Path
    """Where the tag file is right now (possibly a staged download)."""
    destination: Path
    """Where the tag file lives once the documentation step is committed."""

    @property
    def name(self) -> str:
        """File name of the tag file, used inside the xeus-cling tag file directory."""
        return Path(self.tagfile).name

    @property
    def fetched(self) -> bool:
        return self.source != self.destination

    def manifest(self) -> TagManifest:
        return TagManifest(url=self.url, tagfile=self.name)


class DocumentationBundle(FrozenModel):
    """The files to install for inline documentation, in pair order."""

    fragments: Tuple[Path, ...] = ()
    """The generated ``<tagfile>.json`` manifest fragments."""
    tagfiles: Tuple[Path, ...] = ()
    """The resolved tag files."""


class ResourceRegistry:
    """Resolves (URL, tag file) pairs and emits one manifest fragment per pair.

    Tag files are resolved in this order:

    1. an absolute path is used as given;
    2. a path that exists relative to the declaring source directory is used from there;
    3. otherwise the file is downloaded from ``URL + tagfile`` into the build output
       directory.

    A fetcher passed in stays open. One the registry creates itself is closed when the registry
    is closed, so use the registry as a context manager.

    Downloads go to a staging directory first. Nothing reaches the build output directory
    before every pair has been resolved, so a failed fetch leaves no partial state behind.
    """

    def __init__(self, context: SessionContext, fetcher: Optional[TagFetcher] = None) -> None:
        self._context = context
        self._fetcher = fetcher
        self._owns_fetcher = False

    @property
    def fetcher(self) -> TagFetcher:
        if self._fetcher is None:
            self._fetcher = TagFetcher()
            self._owns_fetcher = True
        return self._fetcher

    def close(self) -> None:
        """Close the fetcher if the registry created it."""
        if self._owns_fetcher:
            self._fetcher.close()
            self._fetcher = None
            self._owns_fetcher = False

    def __enter__(self) -> "ResourceRegistry":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def resolve(self, url: str, tagfile: str, staging_dir: Path) -> ResolvedTag:
        """Locate the tag file of one pair, downloading it into ``staging_dir`` if needed.

        Raises
        ------
        TagFetchError
            If the tag file has to be downloaded and the download fails.
        """
        url = normalize_url(url)
        tag_path = Path(tagfile)
        if tag_path.is_absolute():
            return ResolvedTag(url=url, tagfile=tagfile, source=tag_path, destination=tag_path)

        local = self._context.source_dir / tag_path
        if local.exists():
            return ResolvedTag(url=url, tagfile=tagfile, source=local, destination=local)

        staged = self.fetcher.fetch(url + tagfile, staging_dir / tag_path)
        return ResolvedTag(
            url=url,
            tagfile=tagfile,
            source=staged,
            destination=self._context.binary_dir / tag_path,
        )

    def prepare(self, request: SessionRequest, staging_dir: Path) -> List[ResolvedTag]:
        """Resolve all documentation pairs of a validated request."""
        return [
            self.resolve(url, tagfile, staging_dir)
            for url, tagfile in request.documentation_pairs()
        ]

    def commit(self, resolved: List[ResolvedTag]) -> DocumentationBundle:
        """Move staged downloads into place and write the manifest fragments."""
        fragments: List[Path] = []
        tagfiles: List[Path] = []
        for tag in resolved:
            if tag.fetched:
                tag.destination.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(tag.source, tag.destination)
            fragment = self._context.binary_dir / f"{tag.name}.json"
            write_text_if_changed(fragment, to_json(tag.manifest()))
            fragments.append(fragment)
            tagfiles.append(tag.destination)
        logger.debug("Prepared documentation for %d tag files", len(resolved))
        return DocumentationBundle(fragments=tuple(fragments), tagfiles=tuple(tagfiles))

    def register(self, request: SessionRequest) -> DocumentationBundle:
        """Resolve and commit all documentation pairs in one step, then close the registry."""
        with self, tempfile.TemporaryDirectory(prefix="xeus_cling_tags_") as staging:
            return self.commit(self.prepare(request, Path(staging)))
