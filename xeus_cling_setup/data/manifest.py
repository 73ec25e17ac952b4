"""JSON documents emitted for the kernel and its documentation."""

import json
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel

from .utils import FrozenModel, NonEmptyString


class KernelManifest(FrozenModel):
    """The Jupyter kernel specification (``kernel.json``)."""

    display_name: NonEmptyString
    """The name shown in the Jupyter kernel selection."""
    argv: List[str]
    """Command line launching the interpreter. ``{connection_file}`` is filled in by Jupyter."""
    language: NonEmptyString
    """Language tag, e.g. ``C++17``."""


class TagManifest(FrozenModel):
    """A xeus-cling documentation fragment (``tags.d/<tagfile>.json``)."""

    url: NonEmptyString
    """Base URL of the Doxygen documentation, ending with a slash."""
    tagfile: NonEmptyString
    """Base name of the configured tag file.

    The tag file is installed into the xeus-cling tag file directory under this name, whatever
    directory it was configured or downloaded from.
    """


def to_json(model: BaseModel) -> str:
    """Serialize a model into stable, indented JSON text ending with a newline."""
    return json.dumps(model.model_dump(mode="json"), indent=2) + "\n"


def write_text_if_changed(path: Union[str, Path], content: str) -> bool:
    """Write ``content`` to ``path`` unless the file already holds exactly that text.

    Leaving unchanged files alone keeps their modification times stable across re-runs.

    Returns
    -------
    bool
        True if the file was written, False if it was already up to date.
    """
    path = Path(path)
    if path.is_file() and path.read_text() == content:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return True
