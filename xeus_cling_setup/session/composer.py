"""Composition of the bootstrap header and the kernel manifest."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import List

from xeus_cling_setup.data import SessionContext, SessionRequest
from xeus_cling_setup.data.utils import FrozenModel

from .artifact import (
    DeferredManifest,
    DeferredText,
    EachFragment,
    Fragment,
    GeneratedArtifact,
    TextFragment,
)

HEADER_FILE_NAME = "xeus_cling.hh"
"""File name of the generated bootstrap header."""

MANIFEST_FILE_NAME = "kernel.json"
"""File name of the generated kernel manifest."""

CONNECTION_FILE_PLACEHOLDER = "{connection_file}"
"""Placeholder Jupyter replaces with the connection file when launching the kernel."""

KERNEL_ID_NAMESPACE = uuid.UUID(int=0)
"""Namespace of the name-based kernel identifiers."""


def kernel_id(display_name: str) -> str:
    """Derive the stable kernel identifier from the display name (UUIDv5, SHA-1)."""
    return str(uuid.uuid5(KERNEL_ID_NAMESPACE, display_name))


class SessionArtifacts(FrozenModel):
    """The composed, not yet rendered, artifacts of a session."""

    display_name: str
    """The kernel display name."""
    kernel_id: str
    """The kernel identifier used when registering with Jupyter."""
    header: GeneratedArtifact
    """The bootstrap header."""
    manifest: GeneratedArtifact
    """The kernel manifest."""


class ArtifactComposer:
    """Turns a validated request into the two deferred session artifacts.

    Parameters
    ----------
    context : SessionContext
        Project name and directories of the session.
    interpreter : str
        Path of the interpreter binary, the first manifest argument.
    """

    def __init__(self, context: SessionContext, interpreter: str) -> None:
        self._context = context
        self._interpreter = interpreter

    @property
    def header_path(self) -> Path:
        return self._context.binary_dir / HEADER_FILE_NAME

    @property
    def manifest_path(self) -> Path:
        return self._context.binary_dir / MANIFEST_FILE_NAME

    def compose(self, request: SessionRequest) -> SessionArtifacts:
        display_name = request.display_name(self._context.project_name)
        return SessionArtifacts(
            display_name=display_name,
            kernel_id=kernel_id(display_name),
            header=self.compose_header(request),
            manifest=self.compose_manifest(request),
        )

    def compose_header(self, request: SessionRequest) -> GeneratedArtifact:
        """Compose the bootstrap header.

        Directives appear in this order: include paths, library paths, library loads and
        finally the user supplied start-up headers.
        """
        fragments: List[Fragment] = []
        for inc in request.include_directories:
            fragments.append(
                EachFragment(value=inc, template='#pragma cling add_include_path("{item}")\n')
            )
        for directory in request.library_directories:
            fragments.append(
                EachFragment(value=directory, template='#pragma cling add_library_path("{item}")\n')
            )
        for lib in request.link_libraries:
            fragments.append(EachFragment(value=lib, template='#pragma cling load("{item}")\n'))
        for header in request.setup_headers:
            fragments.append(TextFragment(text=f"#include<{header}>\n"))

        return GeneratedArtifact(
            path=self.header_path, content=DeferredText(fragments=tuple(fragments))
        )

    def compose_manifest(self, request: SessionRequest) -> GeneratedArtifact:
        standard = request.cxx_standard
        argv: List[Fragment] = [
            TextFragment(text=self._interpreter),
            TextFragment(text="-f"),
            TextFragment(text=CONNECTION_FILE_PLACEHOLDER),
            TextFragment(text=standard.flag),
        ]
        argv.extend(EachFragment(value=flag, template="{item}") for flag in request.compile_flags)
        argv.extend(
            EachFragment(value=definition, template="-D{item}")
            for definition in request.compile_definitions
        )
        argv.append(TextFragment(text="-include"))
        argv.append(TextFragment(text=str(self.header_path)))

        manifest = DeferredManifest(
            display_name=request.display_name(self._context.project_name),
            argv=tuple(argv),
            language=standard.language,
        )
        return GeneratedArtifact(path=self.manifest_path, content=manifest)
