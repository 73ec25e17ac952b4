"""The JSON project file read by the command line interface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from xeus_cling_setup.data import SessionContext
from xeus_cling_setup.data.utils import BaseModelWithDocstrings, NonEmptyString
from xeus_cling_setup.graph import StaticBuildGraph, TargetDescription


class ProjectConfig(BaseModelWithDocstrings):
    """A project with its build targets and one session definition.

    Relative directories are interpreted relative to the directory holding the project file.
    """

    project: NonEmptyString
    """The project name, used in the default kernel display name."""
    source_dir: Path = Path(".")
    """The declaring source directory."""
    binary_dir: Path = Path("build")
    """The build output directory receiving the generated files."""
    targets: List[TargetDescription] = Field(default_factory=list)
    """Description of the build targets the session may link against."""
    session: Dict[str, Any] = Field(default_factory=dict)
    """Session options keyed by their upper-case names, e.g. ``TARGETS``."""

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        source_dir: Optional[Path] = None,
        binary_dir: Optional[Path] = None,
    ) -> "ProjectConfig":
        """Load a project file, optionally overriding its directories.

        Raises
        ------
        FileNotFoundError
            If the project file does not exist.
        pydantic.ValidationError
            If the file content does not describe a project.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            config = cls.model_validate(json.load(f))

        base = path.resolve().parent
        src = source_dir if source_dir is not None else config.source_dir
        out = binary_dir if binary_dir is not None else config.binary_dir
        return config.model_copy(
            update={"source_dir": base / src, "binary_dir": base / out}
        )

    def context(self) -> SessionContext:
        return SessionContext(
            project_name=self.project, source_dir=self.source_dir, binary_dir=self.binary_dir
        )

    def graph(self) -> StaticBuildGraph:
        return StaticBuildGraph(self.targets, self.binary_dir)
