"""Download of Doxygen tag files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from xeus_cling_setup.errors import TagFetchError

logger = logging.getLogger(__name__)


class TagFetcher:
    """Fetches tag files over HTTP(S).

    A fetch is a single attempt with httpx's default timeout; there is no retry and no
    integrity check of the downloaded content.

    Parameters
    ----------
    client : Optional[httpx.Client]
        The client to use. A redirect-following client is created when omitted.
    """

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self._client = client if client is not None else httpx.Client(follow_redirects=True)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def __enter__(self) -> "TagFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch(self, url: str, destination: Path) -> Path:
        """Download ``url`` into ``destination``.

        Parameters
        ----------
        url : str
            The full URL of the tag file.
        destination : Path
            Where to store the file. Parent directories are created.

        Returns
        -------
        Path
            ``destination``.

        Raises
        ------
        TagFetchError
            If the request fails or the server answers with an error status.
        """
        logger.info("Attempting to fetch tag file from %s", url)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TagFetchError(url, e) from e

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(response.content)
        return destination

    def close(self) -> None:
        self._client.close()
