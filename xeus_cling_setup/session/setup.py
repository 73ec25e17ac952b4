"""The generation pass of one interpreter session."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from xeus_cling_setup.data import SessionContext, SessionOptions, SessionRequest
from xeus_cling_setup.docs import ResourceRegistry, ResolvedTag, TagFetcher
from xeus_cling_setup.errors import PrerequisiteMissingError
from xeus_cling_setup.graph import BuildGraph
from xeus_cling_setup.toolchain import Toolchain, locate_toolchain

from .artifact import render_all
from .collector import PropertyCollector
from .composer import ArtifactComposer
from .result import SessionResult
from .validator import ConstraintValidator

logger = logging.getLogger(__name__)


class SessionSetup:
    """Runs the generation pipeline for one session definition.

    Aggregation, validation, composition and documentation resolution all complete before
    the first file is written. Any failure up to that point leaves the build output
    directory untouched.

    Parameters
    ----------
    graph : BuildGraph
        The host build graph.
    context : SessionContext
        Project name and directories of the session.
    toolchain : Optional[Toolchain]
        The external programs. Located on ``PATH`` when omitted.
    fetcher : Optional[TagFetcher]
        Used to download tag files. A default httpx based fetcher is created on demand.
    """

    def __init__(
        self,
        graph: BuildGraph,
        context: SessionContext,
        toolchain: Optional[Toolchain] = None,
        fetcher: Optional[TagFetcher] = None,
    ) -> None:
        self._graph = graph
        self._context = context
        self._toolchain = toolchain
        self._fetcher = fetcher
        self._validator = ConstraintValidator()
        self._collector = PropertyCollector(graph)

    @property
    def toolchain(self) -> Toolchain:
        if self._toolchain is None:
            self._toolchain = locate_toolchain()
        return self._toolchain

    def generate(
        self, options: Union[SessionOptions, Mapping[str, Any]]
    ) -> Optional[SessionResult]:
        """Generate the bootstrap header, the kernel manifest and the documentation files.

        Parameters
        ----------
        options : Union[SessionOptions, Mapping[str, Any]]
            The session options, parsed or as a mapping of upper-case option names.

        Returns
        -------
        Optional[SessionResult]
            The generated files, or None if the interpreter is not installed and the session
            is not required.

        Raises
        ------
        PrerequisiteMissingError
            If the interpreter is missing and the session is required.
        SetupError
            If any validation fails or a tag file cannot be fetched.
        """
        if not isinstance(options, SessionOptions):
            options = SessionOptions.from_mapping(options)

        interpreter = self.toolchain.interpreter
        if interpreter is None:
            if options.required:
                raise PrerequisiteMissingError(
                    "xeus-cling set up was marked as required, but the interpreter was not found!"
                )
            logger.info("xeus-cling interpreter not found, skipping session setup")
            return None

        request = SessionRequest.from_options(options)
        self._validator.check_standard(request)
        request = self._collector.collect(request)
        self._validator.validate(request)

        artifacts = ArtifactComposer(self._context, str(interpreter)).compose(request)
        rendered = render_all([artifacts.header, artifacts.manifest], self._graph.evaluate)
        logos = self._logo_sources(request)

        registry = ResourceRegistry(self._context, self._fetcher)
        with registry, tempfile.TemporaryDirectory(prefix="xeus_cling_tags_") as staging:
            resolved: List[ResolvedTag] = registry.prepare(request, Path(staging))

            self._context.binary_dir.mkdir(parents=True, exist_ok=True)
            logo_paths = [self._copy_logo(logo) for logo in logos]
            for artifact in rendered:
                if artifact.write():
                    logger.debug("Wrote %s", artifact.path)
            documentation = registry.commit(resolved) if request.has_documentation() else None

        logger.info(
            "Generated kernel '%s' (%s) in %s",
            artifacts.display_name,
            artifacts.kernel_id,
            self._context.binary_dir,
        )
        return SessionResult(
            display_name=artifacts.display_name,
            kernel_id=artifacts.kernel_id,
            output_dir=self._context.binary_dir,
            header_path=artifacts.header.path,
            manifest_path=artifacts.manifest.path,
            logo_paths=tuple(logo_paths),
            documentation=documentation,
            no_install=request.no_install,
        )

    def _logo_sources(self, request: SessionRequest) -> List[Path]:
        sources = []
        for filename in request.kernel_logo_files:
            path = Path(filename)
            if not path.is_absolute():
                path = self._context.source_dir / path
            if not path.is_file():
                raise FileNotFoundError(f"Kernel logo file {path} does not exist")
            sources.append(path)
        return sources

    def _copy_logo(self, source: Path) -> Path:
        destination = self._context.binary_dir / source.name
        if source.resolve() != destination.resolve():
            shutil.copyfile(source, destination)
        return destination
