"""The configuration surface of a session definition."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from .standard import DEFAULT_STANDARD
from .utils import BaseModelWithDocstrings

logger = logging.getLogger(__name__)


class SessionOptions(BaseModelWithDocstrings):
    """Options of one interpreter session, keyed by their upper-case names.

    Python callers may use the snake_case field names, configuration files use the
    upper-case aliases (``TARGETS``, ``CXX_STANDARD``, ...). List options accept a single
    string as a one-element list.
    """

    model_config = ConfigDict(alias_generator=str.upper, populate_by_name=True, extra="ignore")

    targets: List[str] = Field(default_factory=list)
    """Shared library targets the kernel links against."""
    include_directories: List[str] = Field(default_factory=list)
    """Include directories added to the session. May contain generator expressions."""
    link_libraries: List[str] = Field(default_factory=list)
    """Shared library locations loaded into the session. May contain generator expressions."""
    library_directories: List[str] = Field(default_factory=list)
    """Directories searched for shared libraries."""
    compile_flags: List[str] = Field(default_factory=list)
    """Compiler flags passed to the interpreter."""
    compile_definitions: List[str] = Field(default_factory=list)
    """Preprocessor definitions passed to the interpreter, without the ``-D`` prefix."""
    setup_headers: List[str] = Field(default_factory=list)
    """Headers included with angle brackets at kernel start-up."""
    doxygen_urls: List[str] = Field(default_factory=list)
    """https:// URLs of Doxygen documentation, paired index by index with the tag files."""
    doxygen_tagfiles: List[str] = Field(default_factory=list)
    """Doxygen tag files: absolute paths, paths relative to the source directory, or names
    to fetch from the paired URL."""
    kernel_logo_files: List[str] = Field(default_factory=list)
    """Kernel logo images named logo-32x32.png or logo-64x64.png."""
    kernel_name: Optional[str] = None
    """Display name of the kernel. Defaults to 'C++<standard> (<project>)'."""
    cxx_standard: Union[int, str] = DEFAULT_STANDARD.value
    """The C++ standard of the session: 11, 14 or 17."""
    required: bool = False
    """Fail if the interpreter binary is not found instead of skipping the session."""
    no_install: bool = False
    """Do not register the kernel with Jupyter on install."""

    @field_validator(
        "targets",
        "include_directories",
        "link_libraries",
        "library_directories",
        "compile_flags",
        "compile_definitions",
        "setup_headers",
        "doxygen_urls",
        "doxygen_tagfiles",
        "kernel_logo_files",
        mode="before",
    )
    @classmethod
    def _wrap_scalar(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @classmethod
    def known_keys(cls) -> List[str]:
        """The upper-case option names understood by this model."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SessionOptions":
        """Parse options from a configuration mapping.

        Unknown keys are reported with a warning and otherwise ignored, so that a typo in a
        configuration file does not break the build.

        Parameters
        ----------
        mapping : Mapping[str, Any]
            Option names (upper-case aliases or field names) to values.

        Returns
        -------
        SessionOptions
            The parsed options.

        Raises
        ------
        pydantic.ValidationError
            If a known option has a value of the wrong type.
        """
        known = set(cls.known_keys()) | set(cls.model_fields)
        unknown = [key for key in mapping if key not in known]
        if unknown:
            logger.warning(
                "Unparsed arguments in session options: %s. This often indicates typos!",
                ", ".join(unknown),
            )
        return cls.model_validate(dict(mapping))
