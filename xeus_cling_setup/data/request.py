"""The aggregated, immutable configuration of one interpreter session."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import field_validator

from .options import SessionOptions
from .property import ResolvedProperty, parse_property
from .standard import DEFAULT_STANDARD, CxxStandard
from .target import TargetInfo, TargetRef
from .utils import FrozenModel, NonEmptyString


class SessionContext(FrozenModel):
    """Where a session is declared and where its artifacts are generated."""

    project_name: NonEmptyString
    """Name of the enclosing project, used in the default display name."""
    source_dir: Path
    """The declaring source directory. Relative tag and logo files are looked up here."""
    binary_dir: Path
    """The build output directory that receives all generated files.

    Both directories are stored as absolute paths: the kernel manifest refers to them from
    whatever working directory Jupyter starts the kernel in."""

    @field_validator("source_dir", "binary_dir", mode="after")
    @classmethod
    def _absolute(cls, value: Path) -> Path:
        return value.resolve()


class SessionRequest(FrozenModel):
    """Aggregated session configuration threaded through the generation stages.

    Each stage returns an updated copy. Lists keep their order and duplicates, because later
    directives may shadow earlier ones inside the interpreter.
    """

    target_names: Tuple[TargetRef, ...] = ()
    """The requested targets, in order."""
    targets: Tuple[TargetInfo, ...] = ()
    """The targets whose properties have been collected."""
    include_directories: Tuple[ResolvedProperty, ...] = ()
    library_directories: Tuple[ResolvedProperty, ...] = ()
    link_libraries: Tuple[ResolvedProperty, ...] = ()
    compile_flags: Tuple[ResolvedProperty, ...] = ()
    compile_definitions: Tuple[ResolvedProperty, ...] = ()
    setup_headers: Tuple[str, ...] = ()
    kernel_name: Optional[str] = None
    """Explicit display name, if any."""
    cxx_standard: CxxStandard = DEFAULT_STANDARD
    required: bool = False
    no_install: bool = False
    kernel_logo_files: Tuple[str, ...] = ()
    doxygen_urls: Tuple[str, ...] = ()
    doxygen_tagfiles: Tuple[str, ...] = ()
    """Tag file identifiers, paired index by index with ``doxygen_urls``."""

    @classmethod
    def from_options(cls, options: SessionOptions) -> "SessionRequest":
        """Build the initial request from the manually supplied options.

        Raises
        ------
        UnsupportedStandardError
            If ``options.cxx_standard`` does not name a known C++ standard.
        """

        def props(values: List[str]) -> Tuple[ResolvedProperty, ...]:
            return tuple(parse_property(value) for value in values)

        return cls(
            target_names=tuple(options.targets),
            include_directories=props(options.include_directories),
            library_directories=props(options.library_directories),
            link_libraries=props(options.link_libraries),
            compile_flags=props(options.compile_flags),
            compile_definitions=props(options.compile_definitions),
            setup_headers=tuple(options.setup_headers),
            kernel_name=options.kernel_name or None,
            cxx_standard=CxxStandard.parse(options.cxx_standard),
            required=options.required,
            no_install=options.no_install,
            kernel_logo_files=tuple(options.kernel_logo_files),
            doxygen_urls=tuple(options.doxygen_urls),
            doxygen_tagfiles=tuple(options.doxygen_tagfiles),
        )

    def display_name(self, project_name: str) -> str:
        """The kernel display name, defaulting to ``C++<N> (<project>)``."""
        if self.kernel_name:
            return self.kernel_name
        return f"{self.cxx_standard.language} ({project_name})"

    def has_documentation(self) -> bool:
        return bool(self.doxygen_urls)

    def documentation_pairs(self) -> List[Tuple[str, str]]:
        """The (URL, tag file) pairs. Only meaningful once the lengths have been validated."""
        return list(zip(self.doxygen_urls, self.doxygen_tagfiles))

