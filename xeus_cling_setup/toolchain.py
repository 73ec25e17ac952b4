"""Discovery of the external programs a session depends on."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from xeus_cling_setup.data.utils import FrozenModel
from xeus_cling_setup.env import (
    get_interpreter_override,
    get_jupyter_override,
    get_prefix_override,
)

INTERPRETER_PROGRAM = "xcpp"
JUPYTER_PROGRAM = "jupyter"


class Toolchain(FrozenModel):
    """Locations of the xeus-cling interpreter and the jupyter executable."""

    interpreter: Optional[Path] = None
    """The xcpp binary, or None if it was not found."""
    jupyter: Optional[Path] = None
    """The jupyter executable, or None if it was not found."""
    prefix_override: Optional[Path] = None
    """Explicit xeus-cling installation prefix."""

    @property
    def prefix(self) -> Optional[Path]:
        """The xeus-cling installation prefix.

        Defaults to the directory above the one holding the interpreter binary
        (``<prefix>/bin/xcpp``).
        """
        if self.prefix_override is not None:
            return self.prefix_override
        if self.interpreter is None:
            return None
        return self.interpreter.resolve().parent.parent


def _find(program: str, override: Optional[Path]) -> Optional[Path]:
    if override is not None:
        return override if override.exists() else None
    found = shutil.which(program)
    return Path(found) if found else None


def locate_toolchain() -> Toolchain:
    """Search ``PATH`` (or the environment overrides) for xcpp and jupyter."""
    return Toolchain(
        interpreter=_find(INTERPRETER_PROGRAM, get_interpreter_override()),
        jupyter=_find(JUPYTER_PROGRAM, get_jupyter_override()),
        prefix_override=get_prefix_override(),
    )
